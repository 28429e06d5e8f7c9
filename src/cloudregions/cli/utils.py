# src/cloudregions/cli/utils.py
import asyncio
import json
import logging
from typing import Iterable, List, Optional

import typer
from pydantic import BaseModel

from ..core.store import DatasetSnapshot
from ..loaders.remote import fetch_region_data
from ..models.query import RegionFilter

logger = logging.getLogger(__name__)


def is_offline(ctx: typer.Context) -> bool:
    """True when the global --offline flag was given."""
    root = ctx.find_root()
    return bool(root.obj and root.obj.get("offline"))


def load_snapshot(offline: bool = False) -> DatasetSnapshot:
    """Loads the dataset for a single CLI invocation."""
    if offline:
        return DatasetSnapshot.bundled()
    result = asyncio.run(fetch_region_data())
    logger.debug(f"Using {result.source} data ({len(result.regions)} regions)")
    return DatasetSnapshot.from_load_result(result)


def build_filter(
    providers: Optional[List[str]] = None,
    tiers: Optional[List[str]] = None,
    region_types: Optional[List[str]] = None,
    countries: Optional[List[str]] = None,
    continents: Optional[List[str]] = None,
    compliance: Optional[List[str]] = None,
    carbon_neutral: bool = False,
    has_gpu: bool = False,
    status: Optional[List[str]] = None,
    min_availability_zones: Optional[int] = None,
    data_residency: Optional[str] = None,
) -> RegionFilter:
    """
    Builds a RegionFilter from CLI options. Boolean flags only constrain
    when set; country codes are upper-cased.
    """
    try:
        return RegionFilter(
            providers=providers or None,
            tiers=tiers or None,
            region_types=region_types or None,
            country_codes=[c.upper() for c in countries] if countries else None,
            continents=continents or None,
            compliance=compliance or None,
            carbon_neutral=True if carbon_neutral else None,
            has_gpu=True if has_gpu else None,
            status=status or None,
            min_availability_zones=min_availability_zones,
            data_residency=data_residency,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e))


def echo_json(items: Iterable[BaseModel]):
    """Prints models as a camelCase JSON array."""
    payload = [item.model_dump(mode="json", by_alias=True, exclude_none=True) for item in items]
    typer.echo(json.dumps(payload, indent=2, ensure_ascii=False))
