import csv
import io
import os
from typing import Any, Dict, List

import aiofiles

from ..core.store import DatasetSnapshot
from ..models.region import Region
from .base_exporter import BaseExporter

FIELDNAMES = [
    "id",
    "provider",
    "regionCode",
    "displayName",
    "regionType",
    "status",
    "country",
    "countryCode",
    "city",
    "continent",
    "latitude",
    "longitude",
    "availabilityZones",
    "launchedDate",
    "compliance",
    "carbonNeutral",
    "renewableEnergyPercent",
    "pueRating",
    "gpu",
    "gpuTypes",
    "dataResidency",
]


def _join(values) -> str:
    return ";".join(values) if values else ""


def region_to_row(region: Region) -> Dict[str, Any]:
    """Flattens a region into one CSV row. Multi-valued fields are joined with ';'."""
    sustainability = region.sustainability
    services = region.services
    sovereignty = region.sovereignty
    return {
        "id": region.id,
        "provider": region.provider,
        "regionCode": region.region_code,
        "displayName": region.display_name,
        "regionType": region.region_type,
        "status": region.status,
        "country": region.location.country,
        "countryCode": region.location.country_code,
        "city": region.location.city,
        "continent": region.location.continent,
        "latitude": region.location.latitude,
        "longitude": region.location.longitude,
        "availabilityZones": region.availability_zones,
        "launchedDate": region.launched_date,
        "compliance": _join(region.compliance),
        "carbonNeutral": sustainability.carbon_neutral if sustainability else None,
        "renewableEnergyPercent": sustainability.renewable_energy_percent if sustainability else None,
        "pueRating": sustainability.pue_rating if sustainability else None,
        "gpu": services.gpu if services else None,
        "gpuTypes": _join(services.gpu_types) if services else "",
        "dataResidency": sovereignty.data_residency if sovereignty else None,
    }


class CSVExporter(BaseExporter):
    DEFAULT_FILENAME = "regions.csv"

    async def export(self, snapshot: DatasetSnapshot, path: str | None = None) -> str:
        """Export one row per region to a CSV file. Returns path written.

        The header row is always written, even for an empty dataset.
        """
        out_path = path or self.DEFAULT_FILENAME
        rows: List[Dict[str, Any]] = [region_to_row(r) for r in snapshot.regions]

        # Ensure parent directory exists
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        # csv.DictWriter needs a synchronous file object; render to a buffer first.
        output = io.StringIO()
        writer = csv.DictWriter(output, fieldnames=FIELDNAMES)
        writer.writeheader()
        for r in rows:
            writer.writerow({k: self._sanitize_cell(v) for k, v in r.items()})

        async with aiofiles.open(out_path, "w", encoding="utf-8", newline="") as fh:
            await fh.write(output.getvalue())

        return out_path

    def _sanitize_cell(self, value: Any) -> Any:
        """
        Sanitize value to prevent CSV formula injection.
        If the value is a string starting with =, +, -, or @, prefix it with a single quote.
        """
        if isinstance(value, str) and value.startswith(("=", "+", "-", "@")):
            return f"'{value}"
        return value
