from __future__ import annotations

from pathlib import Path

import typer

from gedcom_importer.cli.utils import console, counts_table
from gedcom_importer.core.exceptions import ImportFileError
from gedcom_importer.loader import load_file, parse_gedcom


def stats_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file to inspect"),
):
    """
    Show record counts for a GEDCOM file without importing it.
    """
    try:
        text = load_file(gedcom)
    except ImportFileError as exc:
        console.print(f"[red]{exc}[/red]")
        raise typer.Exit(code=1)

    document = parse_gedcom(text)
    console.print(counts_table("GEDCOM Statistics", document.counts().items(), label="Record"))
