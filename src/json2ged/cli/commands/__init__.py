"""
CLI command modules for json2ged.

Each command module defines a single Typer-compatible command function.
"""

from json2ged.cli.commands.convert import convert_command
from json2ged.cli.commands.stats import stats_command

__all__ = [
    "convert_command",
    "stats_command",
]
