# src/cloudregions/models/query.py
"""
Filter criteria and result records produced by the query engine.
These are the values the API, CLI and MCP layers pass into and receive from
`cloudregions.core.query`.
"""

from typing import Dict, List, Optional

from pydantic import Field

from .provider import ProviderTier
from .region import CatalogModel, Continent, Region, RegionStatus, RegionType


class RegionFilter(CatalogModel):
    """
    Declarative filter over regions. Every criterion is optional; the
    criteria that are set are combined with AND. Empty lists count as unset.
    """

    providers: Optional[List[str]] = Field(None, description="Provider ids (any of)")
    tiers: Optional[List[ProviderTier]] = Field(None, description="Provider tiers (any of)")
    region_types: Optional[List[RegionType]] = Field(None, description="Region types (any of)")
    country_codes: Optional[List[str]] = Field(None, description="ISO country codes (any of)")
    continents: Optional[List[Continent]] = Field(None, description="Continents (any of)")
    compliance: Optional[List[str]] = Field(None, description="Certifications (all required)")
    carbon_neutral: Optional[bool] = Field(None, description="Only carbon neutral regions when true")
    has_gpu: Optional[bool] = Field(None, description="Only GPU-capable regions when true")
    status: Optional[List[RegionStatus]] = Field(None, description="Lifecycle statuses (any of)")
    min_availability_zones: Optional[int] = Field(None, description="Minimum availability zone count")
    data_residency: Optional[str] = Field(None, description="Exact data residency jurisdiction")


class NearbySearch(CatalogModel):
    """Nearest-region search around a coordinate."""

    latitude: float = Field(..., description="Target latitude")
    longitude: float = Field(..., description="Target longitude")
    max_distance_km: Optional[float] = Field(None, description="Inclusive distance bound in kilometers")
    limit: Optional[int] = Field(None, description="Maximum number of results")
    filter: Optional[RegionFilter] = None


class RegionWithDistance(Region):
    """A region annotated with its rounded great-circle distance from a search point."""

    distance_km: int = Field(..., description="Distance from the search point in kilometers")


class CountrySummary(CatalogModel):
    country_code: str
    country: str
    region_count: int


class CitySummary(CatalogModel):
    city: str
    country: str
    providers: List[str] = Field(default_factory=list)
    region_count: int


class RegionStatistics(CatalogModel):
    """Catalog-wide counts."""

    total_regions: int
    total_providers: int
    by_provider: Dict[str, int] = Field(default_factory=dict)
    by_country: Dict[str, int] = Field(default_factory=dict)
    by_continent: Dict[str, int] = Field(default_factory=dict)
    by_region_type: Dict[str, int] = Field(default_factory=dict)
    gpu_regions: int = 0
    carbon_neutral_regions: int = 0
