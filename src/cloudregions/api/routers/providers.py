# src/cloudregions/api/routers/providers.py
"""
API routes for cloud providers.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query

from cloudregions.api.dependencies import get_snapshot
from cloudregions.core import query
from cloudregions.core.exceptions import ProviderNotFoundError
from cloudregions.core.store import DatasetSnapshot
from cloudregions.models.provider import Provider, ProviderTier
from cloudregions.models.region import Region

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/providers", response_model=List[Provider], response_model_exclude_none=True)
async def list_providers(
    tier: Optional[ProviderTier] = Query(None, description="Only providers of this tier"),
    snapshot: DatasetSnapshot = Depends(get_snapshot),
):
    return query.list_providers(snapshot, tier.value if tier else None)


@router.get("/providers/{provider_id}", response_model=Provider, response_model_exclude_none=True)
async def get_provider(provider_id: str, snapshot: DatasetSnapshot = Depends(get_snapshot)):
    try:
        return query.get_provider(snapshot, provider_id)
    except ProviderNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))


@router.get("/providers/{provider_id}/regions", response_model=List[Region], response_model_exclude_none=True)
async def get_provider_regions(provider_id: str, snapshot: DatasetSnapshot = Depends(get_snapshot)):
    """Return all regions of one provider. Unknown providers yield an empty list."""
    return query.get_provider_regions(snapshot, provider_id)
