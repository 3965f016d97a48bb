"""
Loader package.

Reads the JSON input and maps it onto the typed records in ``json2ged.models``:

    read_json(path)     -> parsed JSON tree
    load_dataset(path)  -> Dataset
"""

from .file_locator import resolve_input_path
from .json_loader import load_dataset, read_json

__all__ = [
    "resolve_input_path",
    "read_json",
    "load_dataset",
]
