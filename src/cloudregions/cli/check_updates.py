# src/cloudregions/cli/check_updates.py
"""
Implements the `check-updates` command.

Exit codes: 0 when no provider page changed, 1 when at least one changed,
2 when the check itself could not run.
"""

import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from ..freshness import CheckStatus, changed_sources, check_for_updates, load_hashes, merge_hashes, save_hashes

logger = logging.getLogger(__name__)

_STATUS_STYLE = {
    CheckStatus.NEW: typer.colors.CYAN,
    CheckStatus.CHANGED: typer.colors.YELLOW,
    CheckStatus.UNCHANGED: typer.colors.GREEN,
    CheckStatus.FAILED: typer.colors.RED,
}


async def _run(hash_file: str):
    previous = await load_hashes(hash_file)
    checks = await check_for_updates(previous)
    await save_hashes(hash_file, merge_hashes(previous, checks))
    return checks


def check_updates(
    hash_file: Annotated[
        Optional[Path],
        typer.Option("--hash-file", help="Where page fingerprints are stored between runs.", dir_okay=False),
    ] = None,
):
    """
    Check provider region pages for changes since the last run.
    """
    path = str(hash_file or config.FRESHNESS_HASH_FILE)
    try:
        checks = asyncio.run(_run(path))
    except Exception as e:
        logger.error(f"Update check failed: {e}")
        raise typer.Exit(code=2)

    for check in checks:
        status = CheckStatus(check.status)
        line = f"{check.provider}: {status.value.upper()}"
        if status == CheckStatus.CHANGED:
            line += f" (was: {check.previous_hash}, now: {check.current_hash})"
        elif status == CheckStatus.NEW:
            line += f" (hash: {check.current_hash})"
        elif status == CheckStatus.FAILED:
            line += f" ({check.error})"
        typer.secho(line, fg=_STATUS_STYLE[status])

    changes = changed_sources(checks)
    if changes:
        typer.echo(f"\nChanges detected in {len(changes)} provider(s):")
        for change in changes:
            typer.echo(f"  {change.provider.upper()}")
            typer.echo(f"    URL: {change.url}")
            typer.echo(f"    Previous check: {change.previous_check}")
        typer.echo("Please verify these sources and update region data if needed.")
        raise typer.Exit(code=1)

    typer.echo("\nNo changes detected in provider pages.")
