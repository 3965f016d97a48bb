from __future__ import annotations

from pathlib import Path
from typing import List, Tuple

from json2ged.core.context import ConvertContext
from json2ged.core.exceptions import ConversionError
from json2ged.exporter import write_gedcom
from json2ged.gedcom import build_lines
from json2ged.loader import load_dataset
from json2ged.models import Dataset


class Pipeline:
    """
    Orchestrates the conversion: parse input -> build lines -> write output.
    No business logic lives here.
    """

    def __init__(self, context: ConvertContext):
        self.ctx = context
        self.log = context.logger

    def build(self) -> Tuple[Dataset, List[str]]:
        """Parse and build without touching the output path."""
        dataset = load_dataset(self.ctx.input_path)
        lines = build_lines(dataset)

        self.ctx.skipped = list(dataset.skipped)
        self.ctx.stats = {
            "individuals": len(dataset.individuals),
            "families": len(dataset.families),
            "skipped": len(dataset.skipped),
            "lines": len(lines),
        }
        return dataset, lines

    def run(self) -> Path:
        self.log.info("Conversion starting")

        try:
            _, lines = self.build()
            written = write_gedcom(lines, self.ctx.output_path)
        except ConversionError as exc:
            self.log.error("Conversion failed: %s", exc)
            raise

        self.log.info("Conversion completed successfully")
        return written
