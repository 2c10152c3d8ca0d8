from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer

from gedcom_importer.cli.utils import console, require_tree, store_session
from gedcom_importer.exporter import export_gedcom, write_gedcom


def export_command(
    tree: str = typer.Argument(..., help="Tree name"),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to file instead of stdout",
    ),
    db: Optional[str] = typer.Option(None, "--db", help="Database URL"),
):
    """
    Export a tree as a minimal GEDCOM file (stdout by default).
    """
    with store_session(db) as store:
        target = require_tree(store, tree)

        if out:
            write_gedcom(store, target.id, out)
            console.print(f"Wrote {out}")
        else:
            typer.echo(export_gedcom(store, target.id), nl=False)
