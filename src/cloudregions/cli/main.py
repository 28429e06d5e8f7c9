# src/cloudregions/cli/main.py
"""
This module is the main entry point for the cloudregions CLI.

It aggregates all commands from the submodules (regions, providers, stats, ...).
"""

import logging

import typer
from typing_extensions import Annotated

from ..core.config import config
from . import check_updates, export, providers, regions, serve, stats

# --- Setup Logger ---
logging.basicConfig(
    level=config.LOG_LEVEL.upper(),
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


app = typer.Typer(
    name="cloudregions",
    help="Query cloud provider regions by provider, compliance, sustainability, GPU capability and location.",
    add_completion=False,
)


def _echo_version():
    from .. import __version__

    typer.echo(f"cloudregions version: {__version__}")


def version_callback(value: bool):
    if value:
        _echo_version()
        raise typer.Exit()


@app.command()
def version():
    """
    Show the installed cloudregions version.
    """
    _echo_version()


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        callback=version_callback,
        is_eager=True,
        help="Show the version and exit.",
    ),
    offline: Annotated[
        bool, typer.Option("--offline", help="Use the bundled dataset only, without fetching the published one.")
    ] = False,
):
    """
    cloudregions CLI main entry point.
    """
    ctx.obj = {"offline": offline}


# Register command sub-apps
app.add_typer(regions.app, name="regions")
app.add_typer(providers.app, name="providers")
app.add_typer(stats.app, name="stats")

app.command("export")(export.export)
app.command("check-updates")(check_updates.check_updates)
app.command("serve-api")(serve.serve_api)
app.command("serve-mcp")(serve.serve_mcp)


if __name__ == "__main__":
    app()
