# src/cloudregions/loaders/remote.py
"""
Fetches the published region catalog, falling back to the bundled copy.

The fetch is a single attempt bounded by `config.FETCH_TIMEOUT`. A
successful payload is kept in-process for `config.CACHE_TTL` seconds.
Any failure (timeout, transport error, non-2xx status, undecodable or
structurally invalid payload) yields the bundled dataset instead.
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Any, List, Optional

import httpx

from ..core.config import config
from ..core.exceptions import DatasetLoadError
from ..data.bundled import load_bundled_dataset, parse_providers, parse_regions
from ..models.provider import DatasetMetadata, Provider
from ..models.region import Region
from ..utils.http_client import get_async_http_client

logger = logging.getLogger(__name__)

SOURCE_REMOTE = "remote"
SOURCE_BUNDLED = "bundled"


@dataclass(frozen=True)
class LoadResult:
    regions: List[Region]
    providers: List[Provider]
    metadata: DatasetMetadata
    source: str


@dataclass
class _CacheEntry:
    result: LoadResult
    fetched_at: float


_cache: Optional[_CacheEntry] = None


def clear_cache():
    """Forgets any cached remote payload."""
    global _cache
    _cache = None


def get_bundled_data() -> LoadResult:
    """The dataset shipped with the package; never touches the network."""
    regions, providers, metadata = load_bundled_dataset()
    return LoadResult(regions=regions, providers=providers, metadata=metadata, source=SOURCE_BUNDLED)


def parse_payload(payload: Any) -> LoadResult:
    """
    Validates a published `regions.json` document.

    Raises:
        DatasetLoadError: If the document has no `regions` list or none of its rows are valid.
    """
    if not isinstance(payload, dict) or not isinstance(payload.get("regions"), list):
        raise DatasetLoadError("Invalid remote data structure: missing 'regions' list")

    regions = parse_regions(payload["regions"])
    if payload["regions"] and not regions:
        raise DatasetLoadError("Remote data contained no valid regions")

    _, bundled_providers, bundled_metadata = load_bundled_dataset()

    raw_providers = payload.get("providers")
    providers = parse_providers(raw_providers) if isinstance(raw_providers, list) else bundled_providers

    raw_metadata = payload.get("metadata")
    if isinstance(raw_metadata, dict):
        try:
            metadata = DatasetMetadata.model_validate(raw_metadata)
        except Exception as e:
            raise DatasetLoadError(f"Invalid remote metadata: {e}") from e
    else:
        metadata = bundled_metadata

    return LoadResult(regions=regions, providers=providers, metadata=metadata, source=SOURCE_REMOTE)


async def _download(client: httpx.AsyncClient) -> LoadResult:
    """Single GET of the published document, bounded as a whole by FETCH_TIMEOUT."""
    try:
        response = await asyncio.wait_for(
            client.get(config.REMOTE_URL, headers={"Accept": "application/json"}),
            timeout=config.FETCH_TIMEOUT,
        )
        response.raise_for_status()
        payload = response.json()
    except asyncio.TimeoutError as e:
        raise DatasetLoadError(f"No complete response within {config.FETCH_TIMEOUT}s") from e
    except httpx.HTTPError as e:
        raise DatasetLoadError(f"{type(e).__name__}: {e}") from e
    except ValueError as e:
        raise DatasetLoadError(f"Response is not valid JSON: {e}") from e
    return parse_payload(payload)


async def fetch_region_data(client: Optional[httpx.AsyncClient] = None) -> LoadResult:
    """
    Returns the remote dataset (possibly from cache) or the bundled one.

    Args:
        client: Optional client to use instead of a freshly built one.
    """
    global _cache

    if config.OFFLINE:
        logger.info("Offline mode enabled, using bundled region data")
        return get_bundled_data()

    if _cache is not None and time.monotonic() - _cache.fetched_at < config.CACHE_TTL:
        logger.debug("Using cached remote region data")
        return _cache.result

    logger.info(f"Fetching region data from {config.REMOTE_URL}")
    try:
        if client is not None:
            result = await _download(client)
        else:
            async with get_async_http_client(
                connect_timeout=config.FETCH_TIMEOUT, read_timeout=config.FETCH_TIMEOUT
            ) as own_client:
                result = await _download(own_client)
    except DatasetLoadError as e:
        logger.warning(f"Failed to fetch remote data, using bundled data: {e}")
        return get_bundled_data()

    _cache = _CacheEntry(result=result, fetched_at=time.monotonic())
    logger.info(f"Loaded {len(result.regions)} regions from remote source")
    return result
