# src/cloudregions/cli/regions.py
"""
Implements the `regions` command group: listing, lookup, text search,
nearest-region ranking and the GPU, compliance and sustainability queries.
"""

import logging
from typing import List, Optional

import typer
from typing_extensions import Annotated

from ..core import query
from ..core.exceptions import RegionNotFoundError
from ..models.provider import ProviderTier
from ..models.query import NearbySearch
from ..models.region import Continent, RegionStatus, RegionType
from ..reporters.console_reporter import ConsoleReporter
from .utils import build_filter, echo_json, is_offline, load_snapshot

logger = logging.getLogger(__name__)

app = typer.Typer(help="Query cloud regions.", add_completion=False)

ProviderOpt = Annotated[Optional[List[str]], typer.Option("--provider", "-p", help="Provider id (repeatable).")]
CountryOpt = Annotated[Optional[List[str]], typer.Option("--country", "-c", help="ISO country code (repeatable).")]
ContinentOpt = Annotated[Optional[List[Continent]], typer.Option("--continent", help="Continent (repeatable).")]
JsonOpt = Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")]


def _show(regions, as_json: bool, title: str):
    if as_json:
        echo_json(regions)
    else:
        ConsoleReporter().report_regions(regions, title=title)


@app.command("list")
def list_regions(
    ctx: typer.Context,
    provider: ProviderOpt = None,
    tier: Annotated[Optional[List[ProviderTier]], typer.Option("--tier", help="Provider tier (repeatable).")] = None,
    region_type: Annotated[Optional[List[RegionType]], typer.Option("--type", help="Region type (repeatable).")] = None,
    country: CountryOpt = None,
    continent: ContinentOpt = None,
    compliance: Annotated[
        Optional[List[str]], typer.Option("--compliance", help="Required certification (repeatable, all required).")
    ] = None,
    carbon_neutral: Annotated[bool, typer.Option("--carbon-neutral", help="Only carbon neutral regions.")] = False,
    gpu: Annotated[bool, typer.Option("--gpu", help="Only GPU-capable regions.")] = False,
    status: Annotated[Optional[List[RegionStatus]], typer.Option("--status", help="Lifecycle status (repeatable).")] = None,
    min_az: Annotated[Optional[int], typer.Option("--min-az", min=0, help="Minimum availability zones.")] = None,
    residency: Annotated[Optional[str], typer.Option("--residency", help="Data residency jurisdiction.")] = None,
    as_json: JsonOpt = False,
):
    """
    List regions, optionally filtered. All given filters must match.
    """
    criteria = build_filter(
        providers=provider,
        tiers=tier,
        region_types=region_type,
        countries=country,
        continents=continent,
        compliance=compliance,
        carbon_neutral=carbon_neutral,
        has_gpu=gpu,
        status=status,
        min_availability_zones=min_az,
        data_residency=residency,
    )
    snapshot = load_snapshot(is_offline(ctx))
    _show(query.list_regions(snapshot, criteria), as_json, "Cloud Regions")


@app.command("show")
def show_region(
    ctx: typer.Context,
    region_id: Annotated[str, typer.Argument(help="Region id, e.g. 'aws-us-east-1'.")],
    as_json: JsonOpt = False,
):
    """
    Show every known detail of one region.
    """
    snapshot = load_snapshot(is_offline(ctx))
    try:
        region = query.get_region(snapshot, region_id)
    except RegionNotFoundError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    if as_json:
        echo_json([region])
    else:
        ConsoleReporter().report_region_detail(region)


@app.command("search")
def search(
    ctx: typer.Context,
    text: Annotated[str, typer.Argument(help="Text to look for in name, code, city, country or provider.")],
    provider: ProviderOpt = None,
    as_json: JsonOpt = False,
):
    """
    Case-insensitive text search over regions.
    """
    snapshot = load_snapshot(is_offline(ctx))
    results = query.search_regions(snapshot, text, build_filter(providers=provider))
    _show(results, as_json, f"Regions matching '{text}'")


@app.command("nearby")
def nearby(
    ctx: typer.Context,
    lat: Annotated[float, typer.Option("--lat", min=-90, max=90, help="Latitude of the point of interest.")],
    lon: Annotated[float, typer.Option("--lon", min=-180, max=180, help="Longitude of the point of interest.")],
    max_distance: Annotated[
        Optional[float], typer.Option("--max-distance", min=0, help="Only regions within this many kilometers.")
    ] = None,
    limit: Annotated[Optional[int], typer.Option("--limit", "-n", min=1, help="Maximum number of regions.")] = 10,
    provider: ProviderOpt = None,
    gpu: Annotated[bool, typer.Option("--gpu", help="Only GPU-capable regions.")] = False,
    as_json: JsonOpt = False,
):
    """
    Rank regions by distance from a coordinate.
    """
    nearby_search = NearbySearch(
        latitude=lat,
        longitude=lon,
        max_distance_km=max_distance,
        limit=limit,
        filter=build_filter(providers=provider, has_gpu=gpu),
    )
    snapshot = load_snapshot(is_offline(ctx))
    _show(query.find_nearby_regions(snapshot, nearby_search), as_json, f"Regions near ({lat}, {lon})")


@app.command("gpu")
def gpu_regions(
    ctx: typer.Context,
    gpu_type: Annotated[Optional[str], typer.Option("--type", "-t", help="GPU model substring, e.g. 'H100'.")] = None,
    provider: ProviderOpt = None,
    continent: ContinentOpt = None,
    as_json: JsonOpt = False,
):
    """
    List regions offering GPUs, optionally of a given model.
    """
    snapshot = load_snapshot(is_offline(ctx))
    results = query.find_gpu_regions(snapshot, gpu_type, build_filter(providers=provider, continents=continent))
    _show(results, as_json, f"GPU Regions{f' ({gpu_type})' if gpu_type else ''}")


@app.command("compliant")
def compliant_regions(
    ctx: typer.Context,
    certifications: Annotated[List[str], typer.Argument(help="Certifications the region must all hold.")],
    provider: ProviderOpt = None,
    country: CountryOpt = None,
    as_json: JsonOpt = False,
):
    """
    List regions holding every given certification.
    """
    snapshot = load_snapshot(is_offline(ctx))
    results = query.find_compliant_regions(
        snapshot, certifications, build_filter(providers=provider, countries=country)
    )
    _show(results, as_json, f"Regions with {', '.join(certifications)}")


@app.command("sustainable")
def sustainable_regions(
    ctx: typer.Context,
    provider: ProviderOpt = None,
    continent: ContinentOpt = None,
    as_json: JsonOpt = False,
):
    """
    List carbon neutral regions.
    """
    snapshot = load_snapshot(is_offline(ctx))
    results = query.find_sustainable_regions(snapshot, build_filter(providers=provider, continents=continent))
    _show(results, as_json, "Carbon Neutral Regions")
