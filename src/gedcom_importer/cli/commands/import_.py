from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_importer.cli.utils import console, counts_table, get_or_create_tree, store_session
from gedcom_importer.core.exceptions import PipelineError
from gedcom_importer.importers import GedcomImportService
from gedcom_importer.sosa import SosaCalculator


def import_command(
    gedcom: Path = typer.Argument(..., help="GEDCOM file to import"),
    tree: Optional[str] = typer.Option(
        None,
        "--tree",
        "-t",
        help="Tree name (created if missing; defaults to the file name)",
    ),
    db: Optional[str] = typer.Option(
        None,
        "--db",
        help="Database URL (defaults to database.url from config)",
    ),
    sosa: bool = typer.Option(
        True,
        "--sosa/--no-sosa",
        help="Recompute Sosa numbers after the import",
    ),
):
    """
    Import a GEDCOM file into a tree.
    """
    tree_name = tree or gedcom.stem

    with store_session(db) as store:
        target = get_or_create_tree(store, tree_name)
        tree_id = target.id

        try:
            result = GedcomImportService(store).import_file(gedcom, tree_id)
        except PipelineError as exc:
            console.print(f"[red]Import failed:[/red] {exc}")
            raise typer.Exit(code=1)

        if not result.ok:
            for error in result.errors:
                console.print(f"[red]{error}[/red]")
            raise typer.Exit(code=1)

        console.print(counts_table(f"Imported into '{tree_name}'", result.counts.items()))

        if sosa:
            try:
                SosaCalculator(store).calculate(tree_id)
            except PipelineError as exc:
                console.print(f"[red]Sosa numbering failed:[/red] {exc}")
                raise typer.Exit(code=1)
            console.print(f"Sosa numbers assigned: {len(store.sosa_numbers(tree_id))}")
