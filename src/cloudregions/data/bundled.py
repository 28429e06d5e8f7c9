# src/cloudregions/data/bundled.py

"""
Loads the catalog that ships inside the package: the provider and metadata
tables from Python modules and the region table from `regions.json`.
Rows are validated with the pydantic models; invalid rows are skipped.
"""

import json
import logging
from pathlib import Path
from typing import Any, Iterable, List, Tuple

from cloudregions.data.metadata import DATA_METADATA
from cloudregions.data.providers import PROVIDERS
from cloudregions.models.provider import DatasetMetadata, Provider
from cloudregions.models.region import Region

logger = logging.getLogger(__name__)

REGIONS_FILE = Path(__file__).parent / "regions.json"


def parse_regions(rows: Iterable[Any]) -> List[Region]:
    """Validates raw region rows, dropping those that fail validation."""
    regions = []
    for row in rows:
        try:
            regions.append(Region.model_validate(row))
        except Exception as e:
            logger.warning(f"Skipping invalid region row: {row!r:.120} - Error: {e}")
    return regions


def parse_providers(rows: Iterable[Any]) -> List[Provider]:
    providers = []
    for row in rows:
        try:
            providers.append(Provider.model_validate(row))
        except Exception as e:
            logger.warning(f"Skipping invalid provider row: {row!r:.120} - Error: {e}")
    return providers


def load_bundled_regions() -> List[Region]:
    """
    Load the bundled region table from `regions.json`.

    Returns an empty list when the file is missing or unreadable.
    """
    try:
        with open(REGIONS_FILE, "r", encoding="utf-8") as f:
            rows = json.load(f)
    except FileNotFoundError:
        logger.error(f"Bundled region file not found at {REGIONS_FILE}")
        return []
    except json.JSONDecodeError as e:
        logger.error(f"Bundled region file {REGIONS_FILE} is not valid JSON: {e}")
        return []

    # Accept both a bare list and an exported document with a "regions" key.
    if isinstance(rows, dict):
        rows = rows.get("regions", [])

    regions = parse_regions(rows)
    logger.debug(f"Loaded {len(regions)} bundled regions")
    return regions


def load_bundled_dataset() -> Tuple[List[Region], List[Provider], DatasetMetadata]:
    """Returns (regions, providers, metadata) from the bundled tables."""
    regions = load_bundled_regions()
    providers = parse_providers(PROVIDERS)
    metadata = DatasetMetadata.model_validate(DATA_METADATA)
    return regions, providers, metadata
