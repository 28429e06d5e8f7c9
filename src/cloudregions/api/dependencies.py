# src/cloudregions/api/dependencies.py
"""
FastAPI dependency injection functions.

Route handlers receive the region store, the snapshot to answer from and
the parsed region filter through FastAPI's Depends() mechanism.
"""

import logging
from typing import List, Optional

from fastapi import Depends, Query, Request

from cloudregions.core.store import DatasetSnapshot, RegionStore
from cloudregions.models.provider import ProviderTier
from cloudregions.models.query import RegionFilter
from cloudregions.models.region import Continent, RegionStatus, RegionType

logger = logging.getLogger(__name__)


async def get_store(request: Request) -> RegionStore:
    """Provides the RegionStore attached to the application."""
    return request.app.state.store


async def get_snapshot(store: RegionStore = Depends(get_store)) -> DatasetSnapshot:
    """The snapshot in effect when the request arrived."""
    return store.snapshot


async def get_region_filter(
    provider: Optional[List[str]] = Query(None, description="Provider ids"),
    tier: Optional[List[ProviderTier]] = Query(None, description="Provider tiers"),
    region_type: Optional[List[RegionType]] = Query(None, description="Region types"),
    country: Optional[List[str]] = Query(None, description="ISO country codes"),
    continent: Optional[List[Continent]] = Query(None, description="Continents"),
    compliance: Optional[List[str]] = Query(None, description="Required certifications (all of)"),
    carbon_neutral: Optional[bool] = Query(None, description="Only carbon neutral regions"),
    has_gpu: Optional[bool] = Query(None, description="Only GPU-capable regions"),
    status: Optional[List[RegionStatus]] = Query(None, description="Lifecycle statuses"),
    min_availability_zones: Optional[int] = Query(None, ge=0, description="Minimum availability zones"),
    data_residency: Optional[str] = Query(None, description="Data residency jurisdiction"),
) -> RegionFilter:
    """Builds a RegionFilter from repeated query parameters."""
    return RegionFilter(
        providers=provider,
        tiers=tier,
        region_types=region_type,
        country_codes=country,
        continents=continent,
        compliance=compliance,
        carbon_neutral=carbon_neutral,
        has_gpu=has_gpu,
        status=status,
        min_availability_zones=min_availability_zones,
        data_residency=data_residency,
    )
