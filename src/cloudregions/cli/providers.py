# src/cloudregions/cli/providers.py
"""
Implements the `providers` command group.
"""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core import query
from ..core.exceptions import ProviderNotFoundError
from ..models.provider import ProviderTier
from ..reporters.console_reporter import ConsoleReporter
from .utils import echo_json, is_offline, load_snapshot

logger = logging.getLogger(__name__)

app = typer.Typer(help="Query cloud providers.", add_completion=False)


@app.command("list")
def list_providers(
    ctx: typer.Context,
    tier: Annotated[Optional[ProviderTier], typer.Option("--tier", help="Only providers of this tier.")] = None,
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")] = False,
):
    """
    List providers, optionally of one tier.
    """
    snapshot = load_snapshot(is_offline(ctx))
    providers = query.list_providers(snapshot, tier.value if tier else None)
    if as_json:
        echo_json(providers)
    else:
        ConsoleReporter().report_providers(providers)


@app.command("regions")
def provider_regions(
    ctx: typer.Context,
    provider_id: Annotated[str, typer.Argument(help="Provider id, e.g. 'aws'.")],
    as_json: Annotated[bool, typer.Option("--json", help="Print JSON instead of a table.")] = False,
):
    """
    List every region of one provider.
    """
    snapshot = load_snapshot(is_offline(ctx))
    try:
        provider = query.get_provider(snapshot, provider_id)
    except ProviderNotFoundError as e:
        typer.secho(str(e), fg=typer.colors.RED, err=True)
        raise typer.Exit(code=1)

    regions = query.get_provider_regions(snapshot, provider.id)
    if as_json:
        echo_json(regions)
    else:
        ConsoleReporter().report_regions(regions, title=provider.name)
