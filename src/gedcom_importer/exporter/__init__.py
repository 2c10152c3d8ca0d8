"""
Exporter package.

Re-exports the GEDCOM export entry points used by the CLI.
"""

from __future__ import annotations

from .gedcom_exporter import export_gedcom, write_gedcom

__all__ = ["export_gedcom", "write_gedcom"]
