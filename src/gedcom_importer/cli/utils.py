from __future__ import annotations

from contextlib import contextmanager
from typing import Iterable, Iterator, Optional, Tuple

import typer
from rich.console import Console
from rich.table import Table

from gedcom_importer.storage import GenealogyStore, Tree, get_engine, init_db, open_store

console = Console()


@contextmanager
def store_session(db_url: Optional[str]) -> Iterator[GenealogyStore]:
    """
    Open the database (creating tables on first use) and yield a store.
    """
    engine = get_engine(db_url)
    init_db(engine)
    try:
        with open_store(engine) as store:
            yield store
    finally:
        engine.dispose()


def get_or_create_tree(store: GenealogyStore, name: str) -> Tree:
    tree = store.find_tree_by_name(name)
    if tree is None:
        tree = store.create_tree(name)
        console.log(f"Created tree [bold]{name}[/bold]")
    return tree


def require_tree(store: GenealogyStore, name: str) -> Tree:
    tree = store.find_tree_by_name(name)
    if tree is None:
        console.print(f"[red]Unknown tree:[/red] {name}")
        raise typer.Exit(code=1)
    return tree


def counts_table(title: str, rows: Iterable[Tuple[str, int]], label: str = "Entity") -> Table:
    table = Table(title=title)
    table.add_column(label, style="bold")
    table.add_column("Count", justify="right")
    for name, count in rows:
        table.add_row(name, str(count))
    return table
