from __future__ import annotations

import typer

from json2ged.cli.commands.convert import convert_command
from json2ged.cli.commands.stats import stats_command

app = typer.Typer(
    name="json2ged",
    help="Convert JSON genealogy data to GEDCOM 5.5.1",
    add_completion=False,
)

app.command("convert")(convert_command)
app.command("stats")(stats_command)


def main():
    app()


if __name__ == "__main__":
    main()
