# src/cloudregions/mcp/server.py
"""
MCP server exposing the region query engine as tools.

Tools:
 - list_regions, get_region, list_providers, get_provider_regions
 - find_nearby_regions, search_regions, get_statistics
 - find_compliant_regions, find_sustainable_regions, find_gpu_regions
 - compare_provider_coverage, list_countries, list_cities
"""

from __future__ import annotations

import asyncio
import logging
import sys
from typing import Any, Dict, List, Optional

from mcp.server.fastmcp import FastMCP

from ..core import aggregator
from ..core import query as region_query
from ..core.config import config
from ..core.exceptions import LookupNotFoundError
from ..core.store import RegionStore
from ..models.query import NearbySearch, RegionFilter

_SERVER = FastMCP("mcp-server-cloud-regions")
_STORE = RegionStore()

# Configure logging for MCP server
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    handlers=[
        logging.StreamHandler(sys.stderr)  # MCP uses stdout for protocol
    ],
)
logger = logging.getLogger(__name__)


def _dump(items) -> List[Dict[str, Any]]:
    return [item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in items]


def _regions_payload(regions) -> Dict[str, Any]:
    return {"count": len(regions), "source": _STORE.snapshot.source, "regions": _dump(regions)}


def _filter(**criteria) -> Optional[RegionFilter]:
    """RegionFilter from the criteria actually supplied, or None when none were."""
    present = {k: v for k, v in criteria.items() if v is not None}
    return RegionFilter(**present) if present else None


# -------------------------
# MARK: Region Tools
# -------------------------


@_SERVER.tool(
    "list_regions",
    title="List regions",
    description=(
        "List all cloud regions across all providers. Supports filtering by provider, tier, country, "
        "continent, compliance, sustainability, GPU availability, and more. "
        "governmentCloud=true restricts to government regions."
    ),
)
async def list_regions(
    providers: Optional[List[str]] = None,
    tiers: Optional[List[str]] = None,
    countryCodes: Optional[List[str]] = None,
    continents: Optional[List[str]] = None,
    compliance: Optional[List[str]] = None,
    carbonNeutral: Optional[bool] = None,
    hasGpu: Optional[bool] = None,
    governmentCloud: Optional[bool] = None,
    minAvailabilityZones: Optional[int] = None,
) -> Dict[str, Any]:
    try:
        criteria = _filter(
            providers=providers,
            tiers=tiers,
            country_codes=countryCodes,
            continents=continents,
            compliance=compliance,
            carbon_neutral=carbonNeutral,
            has_gpu=hasGpu,
            region_types=["government"] if governmentCloud else None,
            min_availability_zones=minAvailabilityZones,
        )
        return _regions_payload(region_query.list_regions(_STORE.snapshot, criteria))
    except Exception as e:
        logger.error("Error in list_regions: %s", e)
        return {"error": str(e)}


@_SERVER.tool(
    "get_region",
    title="Get region",
    description='Get detailed information about a specific cloud region by its ID (e.g. "aws-us-east-1").',
)
async def get_region(id: str) -> Dict[str, Any]:
    try:
        region = region_query.get_region(_STORE.snapshot, id)
        return region.model_dump(mode="json", by_alias=True, exclude_none=True)
    except LookupNotFoundError as e:
        return {"error": str(e), "id": id}


@_SERVER.tool(
    "list_providers",
    title="List providers",
    description="List all cloud providers with their metadata, optionally for one tier.",
)
async def list_providers(tier: Optional[str] = None) -> Dict[str, Any]:
    providers = region_query.list_providers(_STORE.snapshot, tier)
    return {"count": len(providers), "providers": _dump(providers)}


@_SERVER.tool(
    "get_provider_regions",
    title="Get provider regions",
    description='Get all regions for a specific cloud provider (e.g. "aws", "gcp", "crusoe").',
)
async def get_provider_regions(provider: str) -> Dict[str, Any]:
    snapshot = _STORE.snapshot
    try:
        region_query.get_provider(snapshot, provider)
    except LookupNotFoundError as e:
        return {"error": str(e), "provider": provider}
    return _regions_payload(region_query.get_provider_regions(snapshot, provider))


@_SERVER.tool(
    "find_nearby_regions",
    title="Find nearby regions",
    description=(
        "Find cloud regions nearest to a geographic location. Useful for latency optimization "
        "and data residency planning. Distances are great-circle kilometers."
    ),
)
async def find_nearby_regions(
    latitude: float,
    longitude: float,
    maxDistanceKm: Optional[float] = None,
    limit: Optional[int] = None,
    providers: Optional[List[str]] = None,
    hasGpu: Optional[bool] = None,
) -> Dict[str, Any]:
    try:
        search = NearbySearch(
            latitude=latitude,
            longitude=longitude,
            max_distance_km=maxDistanceKm,
            limit=limit,
            filter=_filter(providers=providers, has_gpu=True if hasGpu else None),
        )
        return _regions_payload(region_query.find_nearby_regions(_STORE.snapshot, search))
    except Exception as e:
        logger.error("Error in find_nearby_regions: %s", e)
        return {"error": str(e)}


@_SERVER.tool(
    "search_regions",
    title="Search regions",
    description="Search regions by text query. Searches display name, region code, city, country, and provider.",
)
async def search_regions(query: str, providers: Optional[List[str]] = None) -> Dict[str, Any]:
    regions = region_query.search_regions(_STORE.snapshot, query, _filter(providers=providers))
    return _regions_payload(regions)


@_SERVER.tool(
    "find_compliant_regions",
    title="Find compliant regions",
    description=(
        "Find regions that have specific compliance certifications (e.g., HIPAA, FedRAMP, GDPR, SOC2). "
        "Regions must have ALL specified certifications."
    ),
)
async def find_compliant_regions(
    certifications: List[str],
    providers: Optional[List[str]] = None,
    countryCodes: Optional[List[str]] = None,
) -> Dict[str, Any]:
    criteria = _filter(providers=providers, country_codes=countryCodes)
    return _regions_payload(region_query.find_compliant_regions(_STORE.snapshot, certifications, criteria))


@_SERVER.tool(
    "find_sustainable_regions",
    title="Find sustainable regions",
    description="Find carbon neutral and sustainable cloud regions.",
)
async def find_sustainable_regions(
    providers: Optional[List[str]] = None,
    continents: Optional[List[str]] = None,
) -> Dict[str, Any]:
    try:
        criteria = _filter(providers=providers, continents=continents)
        return _regions_payload(region_query.find_sustainable_regions(_STORE.snapshot, criteria))
    except Exception as e:
        logger.error("Error in find_sustainable_regions: %s", e)
        return {"error": str(e)}


@_SERVER.tool(
    "find_gpu_regions",
    title="Find GPU regions",
    description='Find regions with GPU availability, optionally filtering by GPU type (e.g., "A100", "H100", "TPU").',
)
async def find_gpu_regions(
    gpuType: Optional[str] = None,
    providers: Optional[List[str]] = None,
    continents: Optional[List[str]] = None,
) -> Dict[str, Any]:
    try:
        criteria = _filter(providers=providers, continents=continents)
        return _regions_payload(region_query.find_gpu_regions(_STORE.snapshot, gpuType, criteria))
    except Exception as e:
        logger.error("Error in find_gpu_regions: %s", e)
        return {"error": str(e)}


# -------------------------
# MARK: Aggregate Tools
# -------------------------


@_SERVER.tool(
    "get_statistics",
    title="Get statistics",
    description=(
        "Get summary statistics about all cloud regions, including counts by provider, country, "
        "continent, and special capabilities."
    ),
)
async def get_statistics() -> Dict[str, Any]:
    stats = aggregator.compute_statistics(_STORE.snapshot)
    return stats.model_dump(mode="json", by_alias=True)


@_SERVER.tool(
    "compare_provider_coverage",
    title="Compare provider coverage",
    description="Compare how many regions each provider has in a specific country or continent.",
)
async def compare_provider_coverage(
    countryCode: Optional[str] = None,
    continent: Optional[str] = None,
) -> Dict[str, Any]:
    coverage = region_query.compare_provider_coverage(_STORE.snapshot, countryCode, continent)
    return {"countryCode": countryCode, "continent": continent, "coverage": coverage}


@_SERVER.tool(
    "list_countries",
    title="List countries",
    description="List all countries that have cloud regions, with count of regions in each.",
)
async def list_countries() -> Dict[str, Any]:
    countries = aggregator.list_countries(_STORE.snapshot.regions)
    return {"count": len(countries), "countries": _dump(countries)}


@_SERVER.tool(
    "list_cities",
    title="List cities",
    description="List all cities that have cloud regions, with the providers present in each.",
)
async def list_cities() -> Dict[str, Any]:
    cities = aggregator.list_cities(_STORE.snapshot.regions)
    return {"count": len(cities), "cities": _dump(cities)}


def run(refresh: bool = True) -> None:
    """Run MCP server over stdio."""
    if refresh:
        snapshot = asyncio.run(_STORE.refresh())
        logger.info("Loaded %d regions from %s data", len(snapshot.regions), snapshot.source)
    else:
        logger.info("Serving bundled data (%d regions)", len(_STORE.snapshot.regions))

    asyncio.run(_SERVER.run_stdio_async())
