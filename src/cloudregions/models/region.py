# src/cloudregions/models/region.py
"""
Pydantic models describing a single cloud region and its optional
sub-records. Field names are snake_case in Python and camelCase on the wire
(the published regions.json format), both spellings are accepted on input.
"""

from enum import Enum
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CatalogModel(BaseModel):
    """Base for immutable catalog records."""

    model_config = ConfigDict(
        frozen=True,
        extra="ignore",
        alias_generator=to_camel,
        populate_by_name=True,
        use_enum_values=True,
    )


class Continent(str, Enum):
    NORTH_AMERICA = "north-america"
    SOUTH_AMERICA = "south-america"
    EUROPE = "europe"
    ASIA = "asia"
    AFRICA = "africa"
    OCEANIA = "oceania"
    MIDDLE_EAST = "middle-east"


class RegionType(str, Enum):
    """Region classification."""

    COMMERCIAL = "commercial"
    GOVERNMENT = "government"
    SOVEREIGN = "sovereign"
    CHINA = "china"
    MULTICLOUD = "multicloud"


class RegionStatus(str, Enum):
    GA = "ga"
    PREVIEW = "preview"
    LIMITED = "limited"
    DEPRECATED = "deprecated"


class GeoLocation(CatalogModel):
    """
    Geographic location of a region.

    Attributes:
        country: Country name (e.g., "Germany")
        country_code: ISO 3166-1 alpha-2 code (e.g., "DE")
        city: City or metropolitan area
        latitude: Latitude in decimal degrees
        longitude: Longitude in decimal degrees
        continent: Continent bucket
    """

    country: str = Field(..., description="Country name")
    country_code: str = Field(..., description="ISO 3166-1 alpha-2 country code")
    city: str = Field(..., description="City or metropolitan area")
    latitude: float = Field(..., ge=-90, le=90, description="Latitude")
    longitude: float = Field(..., ge=-180, le=180, description="Longitude")
    continent: Continent = Field(..., description="Continent")


class Sustainability(CatalogModel):
    renewable_energy_percent: Optional[float] = Field(None, description="Renewable energy share (0-100)")
    carbon_neutral: Optional[bool] = Field(None, description="Whether the region is carbon neutral")
    pue_rating: Optional[float] = Field(None, description="Power Usage Effectiveness")
    notes: Optional[str] = None


class NetworkConnectivity(CatalogModel):
    direct_connect: Optional[bool] = Field(None, description="Dedicated interconnect available")
    direct_connect_name: Optional[str] = Field(None, description="Name of the dedicated interconnect service")
    internet_exchanges: Optional[Tuple[str, ...]] = None
    cloud_interconnect: Optional[Tuple[str, ...]] = None


class ServiceAvailability(CatalogModel):
    compute: Optional[bool] = None
    kubernetes: Optional[bool] = None
    serverless: Optional[bool] = None
    block_storage: Optional[bool] = None
    object_storage: Optional[bool] = None
    databases: Optional[bool] = None
    gpu: Optional[bool] = Field(None, description="GPU instances available")
    gpu_types: Optional[Tuple[str, ...]] = Field(None, description="GPU models offered (e.g., 'NVIDIA H100')")
    ai_ml: Optional[bool] = None
    additional_services: Optional[Tuple[str, ...]] = None


class SovereigntyInfo(CatalogModel):
    """Operational details for government, sovereign, china and multicloud regions."""

    operator: Optional[str] = Field(None, description="Operating entity if different from the provider")
    data_residency: Optional[str] = Field(None, description="Residency jurisdiction (e.g., 'EU', 'Germany')")
    data_residency_guarantee: Optional[bool] = None
    government_classification: Optional[str] = Field(None, description="e.g., 'IL5', 'Secret'")
    access_restrictions: Optional[str] = None
    certification_body: Optional[str] = None
    host_provider: Optional[str] = Field(None, description="Host provider for multicloud offerings")
    notes: Optional[str] = None


class Region(CatalogModel):
    """
    A single data-center location operated by one provider.

    Attributes:
        id: Unique identifier, provider + region code (e.g., "aws-us-east-1")
        provider: Provider identifier (e.g., "aws")
        region_code: Provider-local code (e.g., "us-east-1")
        display_name: Human-readable name
        region_type: Region classification
        location: Geographic location
        availability_zones: Number of availability zones, if published
        launched_date: Launch date (ISO string), if known
        status: Lifecycle status
        compliance: Compliance certification tags
        sustainability: Sustainability metrics
        network: Network connectivity flags
        services: Service availability flags
        sovereignty: Sovereignty metadata
    """

    id: str = Field(..., description="Unique region identifier")
    provider: str = Field(..., description="Provider identifier")
    region_code: str = Field(..., description="Provider region code")
    display_name: str = Field(..., description="Display name")
    region_type: RegionType = Field(RegionType.COMMERCIAL.value, description="Region classification")
    location: GeoLocation
    availability_zones: Optional[int] = Field(None, description="Number of availability zones")
    launched_date: Optional[str] = Field(None, description="Launch date")
    status: RegionStatus = Field(RegionStatus.GA.value, description="Lifecycle status")
    compliance: Optional[Tuple[str, ...]] = Field(None, description="Compliance certifications")
    sustainability: Optional[Sustainability] = None
    network: Optional[NetworkConnectivity] = None
    services: Optional[ServiceAvailability] = None
    sovereignty: Optional[SovereigntyInfo] = None
    notes: Optional[str] = None
