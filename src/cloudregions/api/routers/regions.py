# src/cloudregions/api/routers/regions.py
"""
API routes for listing, searching and ranking regions.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from cloudregions.api.dependencies import get_region_filter, get_snapshot
from cloudregions.core import query
from cloudregions.core.exceptions import RegionNotFoundError
from cloudregions.core.store import DatasetSnapshot
from cloudregions.models.query import NearbySearch, RegionFilter, RegionWithDistance
from cloudregions.models.region import Region

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/regions", response_model=List[Region], response_model_exclude_none=True)
async def list_regions(
    criteria: RegionFilter = Depends(get_region_filter),
    snapshot: DatasetSnapshot = Depends(get_snapshot),
):
    """Return every region matching all of the supplied filters."""
    return query.list_regions(snapshot, criteria)


@router.get("/regions/search", response_model=List[Region], response_model_exclude_none=True)
async def search_regions(
    q: str = Query(..., min_length=1, description="Text to look for in name, code, city, country or provider"),
    criteria: RegionFilter = Depends(get_region_filter),
    snapshot: DatasetSnapshot = Depends(get_snapshot),
):
    return query.search_regions(snapshot, q, criteria)


@router.get("/regions/nearby", response_model=List[RegionWithDistance], response_model_exclude_none=True)
async def find_nearby_regions(
    lat: float = Query(..., ge=-90, le=90, description="Target latitude"),
    lon: float = Query(..., ge=-180, le=180, description="Target longitude"),
    max_distance_km: Optional[float] = Query(None, ge=0, description="Inclusive distance bound in kilometers"),
    limit: Optional[int] = Query(None, ge=1, description="Maximum number of results"),
    criteria: RegionFilter = Depends(get_region_filter),
    snapshot: DatasetSnapshot = Depends(get_snapshot),
):
    """Return regions ordered by distance from the given coordinate."""
    search = NearbySearch(
        latitude=lat,
        longitude=lon,
        max_distance_km=max_distance_km,
        limit=limit,
        filter=criteria,
    )
    return query.find_nearby_regions(snapshot, search)


@router.get("/regions/compliant", response_model=List[Region], response_model_exclude_none=True)
async def find_compliant_regions(
    certifications: List[str] = Query(..., description="Certifications the region must hold (all of)"),
    criteria: RegionFilter = Depends(get_region_filter),
    snapshot: DatasetSnapshot = Depends(get_snapshot),
):
    return query.find_compliant_regions(snapshot, certifications, criteria)


@router.get("/regions/sustainable", response_model=List[Region], response_model_exclude_none=True)
async def find_sustainable_regions(
    criteria: RegionFilter = Depends(get_region_filter),
    snapshot: DatasetSnapshot = Depends(get_snapshot),
):
    """Return carbon neutral regions."""
    return query.find_sustainable_regions(snapshot, criteria)


@router.get("/regions/gpu", response_model=List[Region], response_model_exclude_none=True)
async def find_gpu_regions(
    gpu_type: Optional[str] = Query(None, description="GPU model substring, e.g. 'H100' or 'TPU'"),
    criteria: RegionFilter = Depends(get_region_filter),
    snapshot: DatasetSnapshot = Depends(get_snapshot),
):
    return query.find_gpu_regions(snapshot, gpu_type, criteria)


@router.get("/regions/{region_id}", response_model=Region, response_model_exclude_none=True)
async def get_region(region_id: str, snapshot: DatasetSnapshot = Depends(get_snapshot)):
    try:
        return query.get_region(snapshot, region_id)
    except RegionNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
