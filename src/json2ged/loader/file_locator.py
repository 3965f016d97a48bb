"""
File Locator

Resolves absolute, validated paths to JSON input files.
"""

from __future__ import annotations

import os

from json2ged.core.exceptions import InputNotFoundError
from json2ged.logging import get_logger

log = get_logger(__name__)


def resolve_input_path(path: str | os.PathLike) -> str:
    """
    Convert a user-provided path into an absolute validated file path.

    Raises:
        InputNotFoundError: the path does not exist or is not a regular file.
    """
    abs_path = os.path.abspath(path)
    log.debug(f"Resolving input file: {abs_path}")

    if not os.path.exists(abs_path):
        raise InputNotFoundError(f"Input file not found: {abs_path}")

    if not os.path.isfile(abs_path):
        raise InputNotFoundError(f"Input path is not a file: {abs_path}")

    log.debug(f"Validated input file: {abs_path}")
    return abs_path
