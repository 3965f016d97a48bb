"""
Centralized logging configuration for json2ged.

Key behaviors
-------------
* Single entry point via ``get_logger`` to keep handlers/formatters consistent.
* Console logging on stderr, which doubles as the diagnostic channel for
  skipped records and fatal conversion errors.
* Optional master log file (``logging.file`` in ``config/json2ged.yml``),
  rotated when ``logging.rotate`` is set.
"""

from __future__ import annotations

import logging
import sys
from logging import Logger, StreamHandler
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Dict, List

from json2ged.config import PROJECT_ROOT, get_config

# -----------------------------------------------------------------------------
# Paths and configuration
# -----------------------------------------------------------------------------

BASE_LOGGER_NAME = "json2ged"
LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_logger_cache: Dict[str, Logger] = {}
_base_configured: bool = False
_effective_level: int = logging.INFO


class _StderrHandler(StreamHandler):
    """Console handler bound to the current ``sys.stderr`` at emit time."""

    def __init__(self, level: int = logging.NOTSET):
        logging.Handler.__init__(self, level)

    @property
    def stream(self):
        return sys.stderr


# -----------------------------------------------------------------------------
# Internal helpers
# -----------------------------------------------------------------------------

def _ensure_log_dir() -> Path:
    """Resolve and create the log directory from configuration."""
    cfg = get_config()

    log_dir = Path(cfg.logging.get("dir") or "logs")
    if not log_dir.is_absolute():
        log_dir = PROJECT_ROOT / log_dir

    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _build_file_handler(path: Path, level: int, rotate: bool) -> logging.Handler:
    """Create a file handler with optional rotation."""
    if rotate:
        handler = RotatingFileHandler(
            path,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
    else:
        handler = logging.FileHandler(path, encoding="utf-8")

    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    return handler


def _configure_base_logger() -> Logger:
    """Configure the shared base logger once."""
    global _base_configured, _effective_level

    base_logger = logging.getLogger(BASE_LOGGER_NAME)
    if _base_configured:
        return base_logger

    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    base_level = getattr(logging, level_name, logging.INFO)

    _effective_level = logging.DEBUG if cfg.debug else base_level

    base_logger.setLevel(_effective_level)
    base_logger.propagate = False

    master_name = cfg.logging.get("file")
    if master_name:
        master_path = _ensure_log_dir() / master_name
        base_logger.addHandler(
            _build_file_handler(
                master_path,
                _effective_level,
                bool(cfg.logging.get("rotate", False)),
            )
        )

    console = _StderrHandler()
    console.setLevel(_effective_level)
    console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    base_logger.addHandler(console)

    _base_configured = True
    return base_logger


# -----------------------------------------------------------------------------
# Public API
# -----------------------------------------------------------------------------

def get_logger(name: str | None = None) -> Logger:
    """Return a logger configured with project-wide handlers.

    Names are placed under the ``json2ged`` namespace so every module logger
    inherits the base console + master log handlers.
    """

    base_logger = _configure_base_logger()
    logger_name = name or BASE_LOGGER_NAME
    if logger_name != BASE_LOGGER_NAME and not logger_name.startswith(BASE_LOGGER_NAME + "."):
        logger_name = f"{BASE_LOGGER_NAME}.{logger_name}"

    logger = logging.getLogger(logger_name)
    if logger is not base_logger:
        logger.setLevel(_effective_level)
        logger.propagate = True

    _logger_cache[logger_name] = logger
    return logger


def set_debug(enabled: bool) -> None:
    """Switch every json2ged logger (and its handlers) to DEBUG or back."""
    global _effective_level

    base_logger = _configure_base_logger()
    cfg = get_config()
    level_name = str(cfg.logging.get("level", "INFO")).upper()
    _effective_level = logging.DEBUG if enabled else getattr(logging, level_name, logging.INFO)

    base_logger.setLevel(_effective_level)
    for handler in base_logger.handlers:
        handler.setLevel(_effective_level)
    for logger in _logger_cache.values():
        logger.setLevel(_effective_level)


def list_active_loggers() -> List[str]:
    """Helper for debugging configuration issues in tests."""
    return list(_logger_cache.keys())
