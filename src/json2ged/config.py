import os
from pathlib import Path

import yaml

PROJECT_ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = PROJECT_ROOT / "config" / "json2ged.yml"
CONFIG_ENV_VAR = "JSON2GED_CONFIG"

DEFAULTS = {
    "paths": {
        "input": "mock_files/familie.json",
        "output": "familie.ged",
    },
    "logging": {
        "level": "INFO",
        "dir": "logs",
        "file": None,
        "rotate": False,
    },
    "debug": False,
}


class J2GConfig:
    def __init__(self, data):
        self.paths = {**DEFAULTS["paths"], **(data.get("paths") or {})}
        self.logging = {**DEFAULTS["logging"], **(data.get("logging") or {})}
        self.debug = bool(data.get("debug", False))

    @property
    def input_path(self) -> Path:
        """Default input; relative paths resolve against the project root."""
        path = Path(self.paths["input"])
        return path if path.is_absolute() else PROJECT_ROOT / path

    @property
    def output_path(self) -> Path:
        return Path(self.paths["output"])


def load_config(path=None) -> 'J2GConfig':
    explicit = path or os.environ.get(CONFIG_ENV_VAR)

    if explicit:
        config_path = Path(explicit)
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")
    else:
        config_path = CONFIG_PATH
        if not config_path.exists():
            return J2GConfig({})

    with open(config_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return J2GConfig(data)

_config_cache = None

def get_config() -> 'J2GConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    global _config_cache
    _config_cache = None
