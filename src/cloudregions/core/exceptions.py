# src/cloudregions/core/exceptions.py


class CloudRegionsError(Exception):
    """Base exception for cloudregions."""

    pass


class LookupNotFoundError(CloudRegionsError):
    """Raised when an identifier does not resolve to a catalog record."""

    kind = "record"

    def __init__(self, identifier: str):
        self.identifier = identifier
        super().__init__(f"{self.kind.capitalize()} not found: {identifier}")


class RegionNotFoundError(LookupNotFoundError):
    kind = "region"


class ProviderNotFoundError(LookupNotFoundError):
    kind = "provider"


class DatasetLoadError(CloudRegionsError):
    """Raised when the remote dataset cannot be fetched or parsed."""

    pass
