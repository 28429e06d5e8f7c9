from __future__ import annotations

import json
import os
from datetime import datetime, timezone
from typing import Any, Dict

import aiofiles

from ..core.query import get_metadata
from ..core.store import DatasetSnapshot
from .base_exporter import BaseExporter


def build_document(snapshot: DatasetSnapshot, exported_at: datetime | None = None) -> Dict[str, Any]:
    """The dataset in the published regions.json layout (camelCase keys)."""
    stamp = (exported_at or datetime.now(timezone.utc)).isoformat().replace("+00:00", "Z")
    metadata = get_metadata(snapshot).model_copy(update={"exported_at": stamp})
    return {
        "metadata": metadata.model_dump(mode="json", by_alias=True, exclude_none=True),
        "providers": [p.model_dump(mode="json", by_alias=True, exclude_none=True) for p in snapshot.providers],
        "regions": [r.model_dump(mode="json", by_alias=True, exclude_none=True) for r in snapshot.regions],
    }


class JSONExporter(BaseExporter):
    DEFAULT_FILENAME = "regions.json"

    async def export(self, snapshot: DatasetSnapshot, path: str | None = None) -> str:
        out_path = path or self.DEFAULT_FILENAME
        document = build_document(snapshot)
        # Ensure parent directory exists
        os.makedirs(os.path.dirname(out_path) or ".", exist_ok=True)

        async with aiofiles.open(out_path, "w", encoding="utf-8") as fh:
            content = json.dumps(document, ensure_ascii=False, indent=2)
            await fh.write(content)
        return out_path
