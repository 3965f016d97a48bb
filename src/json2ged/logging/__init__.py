"""
Logging package for ``json2ged``.

Use ``get_logger(__name__)`` in modules to inherit the shared handlers.
"""

from .logger import (
    get_logger,
    list_active_loggers,
    set_debug,
)

__all__ = [
    "get_logger",
    "list_active_loggers",
    "set_debug",
]
