# src/cloudregions/cli/serve.py
"""
Implements the `serve-api` and `serve-mcp` commands.

With the global --offline flag both servers keep serving the bundled
dataset and skip the startup refresh.
"""

import logging
from typing import Optional

import typer
from typing_extensions import Annotated

from ..core.config import config
from .utils import is_offline

logger = logging.getLogger(__name__)


def serve_api(
    ctx: typer.Context,
    host: Annotated[Optional[str], typer.Option("--host", help="Interface to bind.")] = None,
    port: Annotated[Optional[int], typer.Option("--port", help="Port to listen on.")] = None,
):
    """
    Run the HTTP API with uvicorn.
    """
    import uvicorn

    from ..api.app import create_app

    app = create_app(use_lifespan=not is_offline(ctx))
    uvicorn.run(app, host=host or config.API_HOST, port=port or config.API_PORT)


def serve_mcp(ctx: typer.Context):
    """
    Run the MCP tool server over stdio.
    """
    from ..mcp.server import run

    run(refresh=not is_offline(ctx))
