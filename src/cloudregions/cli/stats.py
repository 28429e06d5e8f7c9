# src/cloudregions/cli/stats.py
"""
Implements the `stats` command group.
"""

import json
import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core import aggregator, query
from ..models.region import Continent
from ..reporters.console_reporter import ConsoleReporter
from .utils import echo_json, is_offline, load_snapshot

logger = logging.getLogger(__name__)

app = typer.Typer(help="Catalog statistics.", add_completion=False)

JsonOpt = Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")]


@app.command("summary")
def summary(ctx: typer.Context, as_json: JsonOpt = False):
    """
    Region counts by provider, country, continent and type.
    """
    snapshot = load_snapshot(is_offline(ctx))
    stats = aggregator.compute_statistics(snapshot)
    if as_json:
        typer.echo(json.dumps(stats.model_dump(mode="json", by_alias=True), indent=2))
    else:
        ConsoleReporter().report_statistics(stats)


@app.command("countries")
def countries(ctx: typer.Context, as_json: JsonOpt = False):
    """
    Countries with regions, most regions first.
    """
    snapshot = load_snapshot(is_offline(ctx))
    result = aggregator.list_countries(snapshot.regions)
    if as_json:
        echo_json(result)
    else:
        ConsoleReporter().report_countries(result)


@app.command("cities")
def cities(ctx: typer.Context, as_json: JsonOpt = False):
    """
    Cities with regions and the providers present in each.
    """
    snapshot = load_snapshot(is_offline(ctx))
    result = aggregator.list_cities(snapshot.regions)
    if as_json:
        echo_json(result)
    else:
        ConsoleReporter().report_cities(result)


@app.command("coverage")
def coverage(
    ctx: typer.Context,
    country: Annotated[Optional[str], typer.Option("--country", "-c", help="ISO country code.")] = None,
    continent: Annotated[Optional[Continent], typer.Option("--continent", help="Continent.")] = None,
    as_json: JsonOpt = False,
):
    """
    Number of regions each provider operates in a country and/or continent.
    """
    snapshot = load_snapshot(is_offline(ctx))
    result = query.compare_provider_coverage(
        snapshot,
        country_code=country.upper() if country else None,
        continent=continent.value if continent else None,
    )
    if as_json:
        typer.echo(json.dumps(result, indent=2))
    else:
        scope = " / ".join(s for s in (country and country.upper(), continent and continent.value) if s) or "worldwide"
        ConsoleReporter().report_counts(result, f"Provider Coverage ({scope})", "Provider")
