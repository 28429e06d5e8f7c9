# tests/conftest.py

import pytest

from cloudregions.core.store import DatasetSnapshot, RegionStore
from cloudregions.loaders import remote
from cloudregions.models.provider import DatasetMetadata, Provider
from cloudregions.models.region import Region


def _region(
    id,
    provider,
    city,
    country,
    country_code,
    latitude,
    longitude,
    continent,
    display_name=None,
    region_code=None,
    **extra,
) -> Region:
    return Region(
        id=id,
        provider=provider,
        region_code=region_code or id.split("-", 1)[1],
        display_name=display_name or city,
        location={
            "country": country,
            "country_code": country_code,
            "city": city,
            "latitude": latitude,
            "longitude": longitude,
            "continent": continent,
        },
        **extra,
    )


@pytest.fixture
def make_region():
    """Factory building a Region from its location and any extra fields."""
    return _region


@pytest.fixture
def sample_regions():
    """
    A small catalog covering every filter criterion.

    Order matters: several tests assert on dataset order.
    """
    return [
        _region(
            "aws-eu-central-1", "aws", "Frankfurt", "Germany", "DE", 50.1109, 8.6821, "europe",
            display_name="Europe (Frankfurt)",
            availability_zones=3,
            compliance=["SOC2", "HIPAA", "PCI-DSS", "GDPR"],
            sustainability={"carbon_neutral": True, "renewable_energy_percent": 100},
            services={"compute": True, "gpu": True, "gpu_types": ["NVIDIA A100", "NVIDIA H100"]},
        ),
        _region(
            "gcp-europe-west9", "gcp", "Paris", "France", "FR", 48.8566, 2.3522, "europe",
            display_name="Paris",
            availability_zones=3,
            compliance=["HIPAA"],
            sustainability={"carbon_neutral": True},
            services={"gpu": True, "gpu_types": ["NVIDIA A100"]},
        ),
        _region(
            "aws-us-east-1", "aws", "Ashburn", "United States", "US", 39.0438, -77.4874, "north-america",
            display_name="US East (N. Virginia)",
            availability_zones=6,
            compliance=["HIPAA", "SOC2"],
            sustainability={"carbon_neutral": True},
            services={"gpu": False},
        ),
        _region(
            "azure-eastus", "azure", "Boydton", "United States", "US", 36.6676, -78.3875, "north-america",
            display_name="East US",
            compliance=["SOC2"],
            sustainability={"carbon_neutral": False},
        ),
        _region(
            "aws-us-gov-west-1", "aws", "Portland", "United States", "US", 45.5152, -122.6784, "north-america",
            display_name="AWS GovCloud (US-West)",
            region_type="government",
            availability_zones=3,
            compliance=["FedRAMP-High", "HIPAA"],
            sovereignty={"data_residency": "US", "government_classification": "IL5"},
        ),
        _region(
            "hetzner-fsn1", "hetzner", "Falkenstein", "Germany", "DE", 50.4779, 12.3713, "europe",
            status="preview",
            services={"gpu": True, "gpu_types": ["NVIDIA RTX 4000 Ada"]},
        ),
        _region(
            "mystery-tyo1", "mystery", "Tokyo", "Japan", "JP", 35.6762, 139.6503, "asia",
            display_name="Tokyo 1",
        ),
    ]


@pytest.fixture
def sample_providers():
    return [
        Provider(id="aws", name="Amazon Web Services", tier="hyperscaler", website="https://aws.amazon.com"),
        Provider(id="gcp", name="Google Cloud Platform", tier="hyperscaler", website="https://cloud.google.com"),
        Provider(id="azure", name="Microsoft Azure", tier="hyperscaler", website="https://azure.microsoft.com"),
        Provider(id="hetzner", name="Hetzner", tier="regional", website="https://www.hetzner.com"),
    ]


@pytest.fixture
def sample_metadata():
    return DatasetMetadata(
        last_updated="2026-01-21",
        version="0.1.0",
        total_regions=0,
        total_providers=0,
        sources={"aws": "https://aws.amazon.com/about-aws/global-infrastructure/regions_az/"},
    )


@pytest.fixture
def snapshot(sample_regions, sample_providers, sample_metadata):
    """An immutable snapshot over the sample catalog."""
    return DatasetSnapshot(
        regions=sample_regions,
        providers=sample_providers,
        metadata=sample_metadata,
        source="bundled",
    )


@pytest.fixture
def store(snapshot):
    return RegionStore(snapshot)


@pytest.fixture(autouse=True)
def isolated_loader(monkeypatch):
    """
    Keeps every test off the network by default and starts each test with
    an empty remote cache. Tests of the remote loader unset the offline flag.
    """
    monkeypatch.setenv("CLOUDREGIONS_OFFLINE", "1")
    monkeypatch.setenv("CLOUDREGIONS_CACHE_TTL", "3600")
    monkeypatch.setenv("CLOUDREGIONS_FETCH_TIMEOUT", "5")
    remote.clear_cache()
    yield
    remote.clear_cache()
