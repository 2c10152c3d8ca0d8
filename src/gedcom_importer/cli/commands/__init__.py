"""
CLI command modules for gedcom_importer.

Each command module defines a single Typer-compatible command function.
"""

from gedcom_importer.cli.commands.export import export_command
from gedcom_importer.cli.commands.import_ import import_command
from gedcom_importer.cli.commands.sosa import sosa_command
from gedcom_importer.cli.commands.stats import stats_command

__all__ = [
    "export_command",
    "import_command",
    "sosa_command",
    "stats_command",
]
