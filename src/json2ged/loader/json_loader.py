from __future__ import annotations

import json
import os
from typing import Any

from json2ged.core.exceptions import InputFormatError
from json2ged.logging import get_logger
from json2ged.models import Dataset

from .file_locator import resolve_input_path

log = get_logger(__name__)


def _reject_constant(name: str) -> Any:
    # NaN, Infinity and -Infinity are not JSON.
    raise ValueError(f"Invalid JSON literal: {name}")


def read_json(path: str | os.PathLike) -> Any:
    """Read and parse the whole JSON document into memory."""
    abs_path = resolve_input_path(path)

    with open(abs_path, "r", encoding="utf-8") as f:
        try:
            data = json.load(f, parse_constant=_reject_constant)
        except ValueError as exc:
            raise InputFormatError(f"Invalid JSON in {abs_path}: {exc}") from exc

    log.info(f"Loaded JSON input: {abs_path}")
    return data


def load_dataset(path: str | os.PathLike) -> Dataset:
    """Read the input file and map it onto typed records."""
    return Dataset.from_json(read_json(path))
