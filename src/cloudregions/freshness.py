# src/cloudregions/freshness.py
"""
Detects when a provider's public region page has changed since the last
check, as a hint that the bundled catalog may need updating.

Each page is fetched, stripped of <script>/<style> blocks and whitespace
noise, and reduced to a short SHA-256 fingerprint. Fingerprints are kept in
a JSON file keyed by provider id.
"""

import hashlib
import json
import logging
import os
import re
from datetime import datetime, timezone
from enum import Enum
from typing import Dict, List, Optional

import aiofiles
import httpx
from pydantic import Field

from .models.region import CatalogModel
from .utils.http_client import get_async_http_client

logger = logging.getLogger(__name__)

SOURCES: Dict[str, str] = {
    "aws": "https://aws.amazon.com/about-aws/global-infrastructure/regions_az/",
    "azure": "https://learn.microsoft.com/en-us/azure/reliability/regions-list",
    "gcp": "https://cloud.google.com/about/locations",
    "oci": "https://www.oracle.com/cloud/public-cloud-regions/",
    "digitalocean": "https://docs.digitalocean.com/platform/regional-availability/",
}

CHECKER_USER_AGENT = "Mozilla/5.0 (compatible; mcp-cloud-regions-checker/1.0)"
CHECK_TIMEOUT = 30.0

_SCRIPT_RE = re.compile(r"<script[^>]*>.*?</script>", re.IGNORECASE | re.DOTALL)
_STYLE_RE = re.compile(r"<style[^>]*>.*?</style>", re.IGNORECASE | re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


class CheckStatus(str, Enum):
    NEW = "new"
    CHANGED = "changed"
    UNCHANGED = "unchanged"
    FAILED = "failed"


class SourceHash(CatalogModel):
    """Stored fingerprint of one provider page."""

    hash: str = Field(..., description="First 16 hex characters of the page's SHA-256")
    checked_at: str = Field(..., description="ISO timestamp of the check")
    url: str


class SourceCheck(CatalogModel):
    """Outcome of checking one provider page."""

    provider: str
    url: str
    status: CheckStatus
    current_hash: Optional[str] = None
    previous_hash: Optional[str] = None
    previous_check: Optional[str] = None
    error: Optional[str] = None


def hash_content(content: str) -> str:
    """Fingerprint of a page with scripts, styles and whitespace differences removed."""
    cleaned = _SCRIPT_RE.sub("", content)
    cleaned = _STYLE_RE.sub("", cleaned)
    cleaned = _WHITESPACE_RE.sub(" ", cleaned).strip()
    return hashlib.sha256(cleaned.encode("utf-8")).hexdigest()[:16]


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


async def load_hashes(path: str) -> Dict[str, SourceHash]:
    """Reads stored fingerprints; a missing or unreadable file yields an empty mapping."""
    if not os.path.exists(path):
        return {}
    try:
        async with aiofiles.open(path, "r", encoding="utf-8") as fh:
            raw = json.loads(await fh.read())
        return {provider: SourceHash.model_validate(entry) for provider, entry in raw.items()}
    except Exception as e:
        logger.warning(f"Ignoring unreadable hash file {path}: {e}")
        return {}


async def save_hashes(path: str, hashes: Dict[str, SourceHash]) -> str:
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    document = {provider: h.model_dump(mode="json", by_alias=True) for provider, h in hashes.items()}
    async with aiofiles.open(path, "w", encoding="utf-8") as fh:
        await fh.write(json.dumps(document, indent=2))
    return path


async def _fetch_page(client: httpx.AsyncClient, url: str) -> str:
    response = await client.get(url, headers={"Accept": "text/html"})
    response.raise_for_status()
    return response.text


async def check_for_updates(
    previous: Dict[str, SourceHash],
    client: Optional[httpx.AsyncClient] = None,
    sources: Optional[Dict[str, str]] = None,
) -> List[SourceCheck]:
    """
    Fetches every source page and compares its fingerprint with `previous`.

    Pages are fetched one after another. A page that cannot be fetched is
    reported as FAILED and does not abort the remaining checks.
    """
    sources = sources if sources is not None else SOURCES
    own_client = client is None
    if own_client:
        client = get_async_http_client(
            connect_timeout=CHECK_TIMEOUT,
            read_timeout=CHECK_TIMEOUT,
            headers={"User-Agent": CHECKER_USER_AGENT},
        )

    results: List[SourceCheck] = []
    try:
        for provider, url in sources.items():
            logger.info(f"Checking {provider} ({url})...")
            try:
                content = await _fetch_page(client, url)
            except httpx.HTTPError as e:
                logger.error(f"Failed to fetch {url}: {e}")
                results.append(SourceCheck(provider=provider, url=url, status=CheckStatus.FAILED, error=str(e)))
                continue

            current = hash_content(content)
            prior = previous.get(provider)
            if prior is None:
                status = CheckStatus.NEW
            elif prior.hash != current:
                status = CheckStatus.CHANGED
            else:
                status = CheckStatus.UNCHANGED

            results.append(
                SourceCheck(
                    provider=provider,
                    url=url,
                    status=status,
                    current_hash=current,
                    previous_hash=prior.hash if prior else None,
                    previous_check=prior.checked_at if prior else None,
                )
            )
    finally:
        if own_client:
            await client.aclose()

    return results


def merge_hashes(previous: Dict[str, SourceHash], checks: List[SourceCheck]) -> Dict[str, SourceHash]:
    """
    New fingerprint table after a run. Providers whose page could not be
    fetched keep their previous entry.
    """
    checked_at = _now_iso()
    merged = dict(previous)
    for check in checks:
        if check.status == CheckStatus.FAILED:
            continue
        merged[check.provider] = SourceHash(hash=check.current_hash, checked_at=checked_at, url=check.url)
    return merged


def changed_sources(checks: List[SourceCheck]) -> List[SourceCheck]:
    return [c for c in checks if c.status == CheckStatus.CHANGED]
