from __future__ import annotations

import time
from pathlib import Path
from typing import Optional

from rich.console import Console

from json2ged.config import get_config
from json2ged.core.context import ConvertContext
from json2ged.core.pipeline import Pipeline
from json2ged.logging import get_logger

console = Console()
err_console = Console(stderr=True)

log = get_logger("cli")


def make_context(
    input_path: Optional[Path],
    output_path: Optional[Path] = None,
    *,
    verbose: bool = False,
) -> ConvertContext:
    """
    Build a ConvertContext, filling unset paths from configuration.
    """
    cfg = get_config()
    return ConvertContext(
        config=cfg,
        logger=log,
        input_path=input_path or cfg.input_path,
        output_path=output_path or cfg.output_path,
        debug=verbose or cfg.debug,
    )


def timed_run(pipeline: Pipeline, *, verbose: bool = False) -> Path:
    """
    Run a full conversion, optionally reporting elapsed time.
    """
    t0 = time.perf_counter()
    written = pipeline.run()
    elapsed = time.perf_counter() - t0

    if verbose:
        console.log(f"Converted JSON in {elapsed:.2f}s")

    return written
