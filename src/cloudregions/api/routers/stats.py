# src/cloudregions/api/routers/stats.py
"""
API routes for catalog-wide aggregates.
"""

import logging
from typing import Dict, List, Optional

from fastapi import APIRouter, Depends, Query

from cloudregions.api.dependencies import get_snapshot
from cloudregions.core import aggregator, query
from cloudregions.core.store import DatasetSnapshot
from cloudregions.models.provider import DatasetMetadata
from cloudregions.models.query import CitySummary, CountrySummary, RegionStatistics
from cloudregions.models.region import Continent

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/stats", response_model=RegionStatistics)
async def get_statistics(snapshot: DatasetSnapshot = Depends(get_snapshot)):
    """Return region counts by provider, country, continent and region type."""
    return aggregator.compute_statistics(snapshot)


@router.get("/stats/coverage", response_model=Dict[str, int])
async def compare_provider_coverage(
    country: Optional[str] = Query(None, description="ISO country code"),
    continent: Optional[Continent] = Query(None, description="Continent"),
    snapshot: DatasetSnapshot = Depends(get_snapshot),
):
    """Return the number of regions each provider operates in a country and/or continent."""
    return query.compare_provider_coverage(snapshot, country, continent.value if continent else None)


@router.get("/stats/countries", response_model=List[CountrySummary])
async def list_countries(snapshot: DatasetSnapshot = Depends(get_snapshot)):
    return aggregator.list_countries(snapshot.regions)


@router.get("/stats/cities", response_model=List[CitySummary])
async def list_cities(snapshot: DatasetSnapshot = Depends(get_snapshot)):
    return aggregator.list_cities(snapshot.regions)


@router.get("/metadata", response_model=DatasetMetadata, response_model_exclude_none=True)
async def get_metadata(snapshot: DatasetSnapshot = Depends(get_snapshot)):
    """Return dataset metadata with totals computed from the data being served."""
    return query.get_metadata(snapshot)
