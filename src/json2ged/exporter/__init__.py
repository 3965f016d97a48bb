"""
Exporter package.

Re-exports the GEDCOM file writer used by the pipeline.
"""

from __future__ import annotations

from .gedcom_writer import write_gedcom

__all__ = ["write_gedcom"]
