# tests/exporters/test_json_exporter.py
import json
from datetime import datetime, timezone

import pytest

from cloudregions.data.bundled import parse_regions
from cloudregions.exporters.json_exporter import JSONExporter, build_document


def test_build_document_layout(snapshot):
    stamp = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
    document = build_document(snapshot, exported_at=stamp)

    assert set(document) == {"metadata", "providers", "regions"}
    assert document["metadata"]["exportedAt"] == "2026-03-01T12:00:00Z"
    assert document["metadata"]["totalRegions"] == 7
    assert document["metadata"]["totalProviders"] == 4
    assert document["regions"][0]["regionCode"] == "eu-central-1"
    assert "sovereignty" not in document["regions"][0]


def test_exported_regions_load_back(snapshot):
    document = build_document(snapshot)
    assert parse_regions(document["regions"]) == list(snapshot.regions)


@pytest.mark.asyncio
async def test_json_export_writes_file(tmp_path, snapshot):
    out = tmp_path / "out" / "regions.json"
    path = await JSONExporter().export(snapshot, str(out))

    assert path == str(out)
    data = json.loads(out.read_text(encoding="utf-8"))
    assert len(data["regions"]) == 7
    assert [p["id"] for p in data["providers"]] == ["aws", "gcp", "azure", "hetzner"]
