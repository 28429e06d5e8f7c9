# src/cloudregions/cli/__init__.py
"""
cloudregions CLI Package

This package exposes the top-level Typer `app` so tests and the console
entrypoint can import `cloudregions.cli.app`.
"""

from .main import app

__all__ = ["app"]
