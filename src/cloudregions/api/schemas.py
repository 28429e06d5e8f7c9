# src/cloudregions/api/schemas.py
"""
Pydantic response schemas for the API.
Keeps API-specific response shapes separate from the catalog models.
"""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str = Field(..., description="Health status of the API.")
    version: str = Field(..., description="Current application version.")
    source: str = Field(..., description="Origin of the dataset being served ('remote' or 'bundled').")
    total_regions: int = Field(0, description="Number of regions in the dataset being served.")


class VersionResponse(BaseModel):
    """Response schema for the version endpoint."""

    version: str = Field(..., description="Current application version.")


class ConfigResponse(BaseModel):
    """Non-sensitive configuration values."""

    log_level: str
    remote_url: str
    fetch_timeout: float
    cache_ttl: float
    offline: bool
    api_host: str
    api_port: int


class RefreshResponse(BaseModel):
    """Outcome of a dataset refresh."""

    source: str = Field(..., description="Origin of the dataset now being served.")
    total_regions: int = Field(..., description="Number of regions now being served.")
    total_providers: int = Field(..., description="Number of providers now being served.")
