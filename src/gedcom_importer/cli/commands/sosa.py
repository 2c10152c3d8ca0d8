from __future__ import annotations

from typing import Optional

import typer

from gedcom_importer.cli.utils import console, require_tree, store_session
from gedcom_importer.core.exceptions import PipelineError
from gedcom_importer.sosa import SosaCalculator


def sosa_command(
    tree: str = typer.Argument(..., help="Tree name"),
    db: Optional[str] = typer.Option(None, "--db", help="Database URL"),
):
    """
    Recompute Sosa-Stradonitz numbers for a tree.
    """
    with store_session(db) as store:
        target = require_tree(store, tree)
        tree_id = target.id

        try:
            SosaCalculator(store).calculate(tree_id)
        except PipelineError as exc:
            console.print(f"[red]Sosa numbering failed:[/red] {exc}")
            raise typer.Exit(code=1)

        console.print(f"Sosa numbers assigned: {len(store.sosa_numbers(tree_id))}")
