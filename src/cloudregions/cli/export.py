# src/cloudregions/cli/export.py
"""
Implements the `export` command: writes the dataset to a JSON or CSV file.
"""

import asyncio
import logging
import sys
from enum import Enum
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..exporters.csv_exporter import CSVExporter
from ..exporters.json_exporter import JSONExporter
from .utils import is_offline, load_snapshot

logger = logging.getLogger(__name__)


class ExportFormat(str, Enum):
    JSON = "json"
    CSV = "csv"


def export(
    ctx: typer.Context,
    output_format: Annotated[
        ExportFormat, typer.Option("--format", "-f", help="File format.", case_sensitive=False)
    ] = ExportFormat.JSON,
    output: Annotated[
        Optional[Path],
        typer.Option(
            "--output",
            "-o",
            help="Output file. Default: './data/regions.<format>'",
            dir_okay=False,
            writable=True,
        ),
    ] = None,
):
    """
    Export the full dataset. JSON uses the published regions.json layout.
    """
    exporter = CSVExporter() if output_format == ExportFormat.CSV else JSONExporter()
    output_path = output or Path.cwd() / "data" / exporter.DEFAULT_FILENAME

    snapshot = load_snapshot(is_offline(ctx))
    try:
        written_path = asyncio.run(exporter.export(snapshot, str(output_path)))
    except OSError as e:
        logger.error(f"Failed to export dataset to {output_path}: {e}")
        raise typer.Exit(code=1)

    logger.info(f"Exported {len(snapshot.regions)} regions to {written_path}")
    print(f"Exported {len(snapshot.regions)} regions to: {written_path}", file=sys.stderr)
