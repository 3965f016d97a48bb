from __future__ import annotations

from pathlib import Path
from typing import Optional

import typer
from rich.markup import escape

from json2ged.cli.utils import console, err_console, make_context, timed_run
from json2ged.core.exceptions import ConversionError
from json2ged.core.pipeline import Pipeline
from json2ged.logging import set_debug


def convert_command(
    json_file: Optional[Path] = typer.Argument(
        None,
        help="JSON input (default: bundled sample from config)",
    ),
    out: Optional[Path] = typer.Option(
        None,
        "--out",
        "-o",
        help="GEDCOM output path (default: familie.ged)",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable debug logging",
    ),
):
    """
    Convert a JSON genealogy document to a GEDCOM 5.5.1 file.
    """
    ctx = make_context(json_file, out, verbose=verbose)
    if ctx.debug:
        set_debug(True)

    try:
        written = timed_run(Pipeline(ctx), verbose=verbose)
    except ConversionError as exc:
        err_console.print(f"[red]Error:[/red] {escape(str(exc))}", soft_wrap=True)
        raise typer.Exit(code=1)

    if ctx.skipped:
        err_console.print(
            f"[yellow]Skipped {len(ctx.skipped)} individual(s) without 'id'[/yellow]"
        )

    console.print(
        f"GEDCOM written to {written}", markup=False, highlight=False, soft_wrap=True
    )
