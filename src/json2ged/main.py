"""
Main entry for json2ged.

This module is intentionally thin:
- argument parsing
- configuration setup
- pipeline orchestration

No conversion logic lives here.
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from json2ged.config import get_config
from json2ged.logging import get_logger, set_debug

from json2ged.core.context import ConvertContext
from json2ged.core.exceptions import ConversionError
from json2ged.core.pipeline import Pipeline

log = get_logger("main")


# ---------------------------------------------------------
# CLI Argument Parsing
# ---------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Convert a JSON genealogy document to GEDCOM 5.5.1"
    )
    parser.add_argument(
        "-i",
        "--input",
        default=None,
        help="Path to JSON input file (default: bundled sample)",
    )
    parser.add_argument(
        "-o",
        "--output",
        default=None,
        help="GEDCOM output path (default: familie.ged)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Enable debug output",
    )
    return parser


# ---------------------------------------------------------
# Pipeline Runner
# ---------------------------------------------------------
def run(
    input_path: Optional[str] = None,
    output_path: Optional[str] = None,
    debug_flag: bool = False,
) -> Path:
    """
    Prepare context and execute the conversion pipeline.
    """

    cfg = get_config()
    debug = bool(debug_flag) or cfg.debug
    if debug:
        set_debug(True)

    ctx = ConvertContext(
        config=cfg,
        logger=log,
        input_path=Path(input_path) if input_path else cfg.input_path,
        output_path=Path(output_path) if output_path else cfg.output_path,
        debug=debug,
    )

    log.info(f"Loading JSON: {ctx.input_path}")

    written = Pipeline(ctx).run()
    print(f"GEDCOM written to {written}")
    return written


# ---------------------------------------------------------
# Program Entry Point
# ---------------------------------------------------------
def main(argv: Optional[List[str]] = None) -> int:
    ap = build_arg_parser()
    args = ap.parse_args(argv)

    try:
        run(
            input_path=args.input,
            output_path=args.output,
            debug_flag=args.debug,
        )
    except ConversionError:
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
