# src/cloudregions/utils/http_client.py

import logging
from typing import Dict, Optional

import httpx

from ..core.config import config

logger = logging.getLogger(__name__)


def build_headers(extra: Optional[Dict[str, str]] = None) -> Dict[str, str]:
    """The project User-Agent, overridden or extended by `extra`."""
    headers = {"User-Agent": config.USER_AGENT}
    headers.update(extra or {})
    return headers


def get_async_http_client(
    connect_timeout: Optional[float] = None,
    read_timeout: Optional[float] = None,
    headers: Optional[Dict[str, str]] = None,
    verify: bool = True,
) -> httpx.AsyncClient:
    """
    Async client shared by the dataset loader and the freshness checker.

    Timeouts default to DEFAULT_TIMEOUT_CONNECT / DEFAULT_TIMEOUT_READ.
    Redirects are followed.
    """
    connect = config.DEFAULT_TIMEOUT_CONNECT if connect_timeout is None else connect_timeout
    read = config.DEFAULT_TIMEOUT_READ if read_timeout is None else read_timeout

    logger.debug(f"Creating HTTP client (connect={connect}s, read={read}s)")
    return httpx.AsyncClient(
        timeout=httpx.Timeout(read, connect=connect),
        headers=build_headers(headers),
        verify=verify,
        follow_redirects=True,
    )
