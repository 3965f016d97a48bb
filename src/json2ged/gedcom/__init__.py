"""
GEDCOM line building.

Re-exports the pure JSON-records → GEDCOM-lines mapping.
"""

from __future__ import annotations

from .builder import (
    HEADER_LINES,
    TRAILER_LINE,
    build_lines,
    family_lines,
    individual_lines,
    render,
)
from .names import format_name, split_name

__all__ = [
    "HEADER_LINES",
    "TRAILER_LINE",
    "build_lines",
    "family_lines",
    "individual_lines",
    "render",
    "format_name",
    "split_name",
]
