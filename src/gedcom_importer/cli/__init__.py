"""
CLI package for gedcom_importer.

Provides the Typer application entrypoint and shared CLI utilities.
"""

from gedcom_importer.cli.app import app, main

__all__ = [
    "app",
    "main",
]
