# src/cloudregions/api/app.py
"""
FastAPI application factory for the cloudregions API.

Uses the factory pattern so the app can be created with or without
lifespan management (e.g., tests skip the remote dataset refresh and
inject their own store).
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from cloudregions import __version__
from cloudregions.api.routers import config as config_router
from cloudregions.api.routers import providers, regions, stats
from cloudregions.core.config import config
from cloudregions.core.store import RegionStore

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load the published dataset on startup."""
    logger.info("Starting cloudregions API...")
    snapshot = await app.state.store.refresh()
    logger.info(f"Serving {len(snapshot.regions)} regions ({snapshot.source} data).")
    yield
    logger.info("Shutting down cloudregions API...")


def create_app(store: Optional[RegionStore] = None, use_lifespan: bool = False) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        store: The region store to serve. Defaults to a store holding the bundled dataset.
        use_lifespan: If True, refresh the store from the remote dataset on
                      startup. Set to False for testing.

    Returns:
        A configured FastAPI application instance.
    """
    app = FastAPI(
        title="Cloud Regions API",
        description="Query cloud provider regions by provider, compliance, sustainability, GPU capability and location.",
        version=__version__,
        docs_url="/api/v1/docs",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan if use_lifespan else None,
    )
    app.state.store = store if store is not None else RegionStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register API routers
    app.include_router(regions.router, prefix="/api/v1", tags=["Regions"])
    app.include_router(providers.router, prefix="/api/v1", tags=["Providers"])
    app.include_router(stats.router, prefix="/api/v1", tags=["Statistics"])
    app.include_router(config_router.router, prefix="/api/v1", tags=["Config"])

    return app


def main():
    """Entry point for the cloudregions-api console script."""
    logging.basicConfig(
        level=config.LOG_LEVEL.upper(),
        format="%(asctime)s - %(levelname)s - %(message)s",
    )
    app = create_app(use_lifespan=True)
    uvicorn.run(app, host=config.API_HOST, port=config.API_PORT)
