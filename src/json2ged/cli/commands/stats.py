from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape
from rich.table import Table

from json2ged.cli.utils import console, err_console, make_context
from json2ged.core.exceptions import ConversionError
from json2ged.core.pipeline import Pipeline


def stats_command(
    json_file: Optional[Path] = typer.Argument(
        None,
        help="JSON input (default: bundled sample from config)",
    ),
):
    """
    Show what a conversion would produce, without writing a file.
    """
    ctx = make_context(json_file)

    try:
        Pipeline(ctx).build()
    except ConversionError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1)

    table = Table(title="JSON → GEDCOM")
    table.add_column("Entity", style="bold")
    table.add_column("Count", justify="right")

    table.add_row("Individuals", str(ctx.stats["individuals"]))
    table.add_row("Skipped individuals", str(ctx.stats["skipped"]))
    table.add_row("Families", str(ctx.stats["families"]))
    table.add_row("GEDCOM lines", str(ctx.stats["lines"]))

    console.print(table)
