# src/cloudregions/models/provider.py

from enum import Enum
from typing import Dict, Optional, Tuple

from pydantic import Field

from .region import CatalogModel


class ProviderTier(str, Enum):
    """Coarse market-position classification of a provider."""

    HYPERSCALER = "hyperscaler"
    MAJOR = "major"
    SPECIALIZED = "specialized"
    REGIONAL = "regional"


class Provider(CatalogModel):
    """
    Metadata about a cloud operator.

    Attributes:
        id: Provider identifier (e.g., "aws", "hetzner")
        name: Display name
        tier: Tier classification
        website: Provider website
        region_docs_url: Region documentation page
        status_page_url: Public status page
        description: Short description
        specialization: Focus tags (e.g., "gpu", "ai")
    """

    id: str = Field(..., description="Provider identifier")
    name: str = Field(..., description="Display name")
    tier: ProviderTier = Field(..., description="Tier classification")
    website: str = Field(..., description="Provider website")
    region_docs_url: Optional[str] = Field(None, description="Region documentation URL")
    status_page_url: Optional[str] = Field(None, description="Status page URL")
    description: str = Field("", description="Brief description")
    specialization: Optional[Tuple[str, ...]] = Field(None, description="Specialization tags")


class DatasetMetadata(CatalogModel):
    """Freshness and provenance information for a dataset."""

    last_updated: str = Field(..., description="Date the catalog was last reviewed")
    version: str = Field(..., description="Catalog version")
    total_regions: int = Field(0, description="Number of regions")
    total_providers: int = Field(0, description="Number of providers")
    sources: Dict[str, str] = Field(default_factory=dict, description="Provider id -> source URL")
    exported_at: Optional[str] = Field(None, description="Export timestamp of a published dataset")
