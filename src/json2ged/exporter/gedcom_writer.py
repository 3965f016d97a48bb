"""
gedcom_writer.py
Writes a finished GEDCOM text to disk.

The text is fully built before this is called; the file is produced by a
single write, so it either reflects a whole conversion or does not exist.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

from json2ged.core.exceptions import OutputWriteError
from json2ged.gedcom import render
from json2ged.logging import get_logger

log = get_logger(__name__)


def write_gedcom(lines: List[str], output_path: str | Path) -> Path:
    output_path = Path(output_path)
    text = render(lines)
    log.info("Writing GEDCOM to: %s (lines=%d)", output_path, len(lines))

    try:
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(text, encoding="utf-8", newline="\n")
    except OSError as exc:
        raise OutputWriteError(f"Cannot write GEDCOM to {output_path}: {exc}") from exc

    size_bytes = output_path.stat().st_size
    log.info("GEDCOM export complete. size=%d bytes", size_bytes)
    return output_path
