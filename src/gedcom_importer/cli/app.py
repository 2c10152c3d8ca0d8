from __future__ import annotations

import logging

import typer

from gedcom_importer.cli.commands.export import export_command
from gedcom_importer.cli.commands.import_ import import_command
from gedcom_importer.cli.commands.sosa import sosa_command
from gedcom_importer.cli.commands.stats import stats_command
from gedcom_importer.logging import set_console_level

app = typer.Typer(
    name="gedcom",
    help="GEDCOM importer and Sosa-Stradonitz numbering",
    add_completion=False,
)


@app.callback()
def _global_options(
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show progress logs on the console",
    ),
):
    if verbose:
        set_console_level(logging.INFO)


app.command("import")(import_command)
app.command("sosa")(sosa_command)
app.command("stats")(stats_command)
app.command("export")(export_command)


def main():
    app()


if __name__ == "__main__":
    main()
