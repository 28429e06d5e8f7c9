# src/cloudregions/api/routers/config.py
"""
API routes for health, version, non-sensitive configuration and dataset refresh.
"""

import logging

from fastapi import APIRouter, Depends

from cloudregions import __version__
from cloudregions.api.dependencies import get_store
from cloudregions.api.schemas import ConfigResponse, HealthResponse, RefreshResponse, VersionResponse
from cloudregions.core.config import config
from cloudregions.core.store import RegionStore

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
async def health(store: RegionStore = Depends(get_store)):
    """Health check endpoint."""
    snapshot = store.snapshot
    return HealthResponse(
        status="ok",
        version=__version__,
        source=snapshot.source,
        total_regions=len(snapshot.regions),
    )


@router.get("/version", response_model=VersionResponse)
async def version():
    """Return the current application version."""
    return VersionResponse(version=__version__)


@router.get("/config", response_model=ConfigResponse)
async def get_config():
    """Return non-sensitive configuration values."""
    return ConfigResponse(
        log_level=config.LOG_LEVEL,
        remote_url=config.REMOTE_URL,
        fetch_timeout=config.FETCH_TIMEOUT,
        cache_ttl=config.CACHE_TTL,
        offline=config.OFFLINE,
        api_host=config.API_HOST,
        api_port=config.API_PORT,
    )


@router.post("/refresh", response_model=RefreshResponse)
async def refresh(store: RegionStore = Depends(get_store)):
    """Reload the dataset (remote, cached or bundled) and swap it in."""
    snapshot = await store.refresh()
    logger.info(f"Dataset refreshed via API ({snapshot.source}).")
    return RefreshResponse(
        source=snapshot.source,
        total_regions=len(snapshot.regions),
        total_providers=len(snapshot.providers),
    )
