# src/progress_lib/config.py
"""Configuration loader with caching and basic validation."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Dict, List

import yaml

ROOT = Path(__file__).resolve().parents[2]
CONFIG_PATH = ROOT / "config" / "config.yaml"

DEFAULT_CONFIG: Dict = {
    "paths": {
        "tracking_csv": "docs/matrix/react-source-mapping.csv",
        "todo_doc": "docs/matrix/react-translation-todo.md",
    },
    "report": {"title": "ReactCPP Translation Progress Report"},
    "advisor": {"max_new_modules": 3},
    "logging": {"level": "WARNING"},
}

# Required config structure for minimal operation
REQUIRED_KEYS: Dict[str, List[str]] = {
    "paths": ["tracking_csv", "todo_doc"],
}


class ConfigError(ValueError):
    """Raised when required configuration values are missing."""


def load_config_from_yaml(path: Path) -> Dict:
    """Load a config file and merge it over :data:`DEFAULT_CONFIG`.

    Parameters
    ----------
    path: Path
        YAML file to read.

    Returns
    -------
    Dict
        Section name to settings mapping. Sections absent from the file keep
        their defaults.

    Raises
    ------
    ConfigError
        If the file is not a mapping or lacks a required section or key.
    """

    cfg = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    if not isinstance(cfg, dict):
        raise ConfigError(f"Expected a mapping at the top of {path}")
    for section, keys in REQUIRED_KEYS.items():
        if section not in cfg:
            raise ConfigError(f"Missing required section '{section}' in {path}")
        missing = [k for k in keys if k not in (cfg.get(section) or {})]
        if missing:
            raise ConfigError(
                f"Missing required key(s) {missing} in section '{section}' of {path}"
            )

    merged: Dict = {}
    for section, defaults in DEFAULT_CONFIG.items():
        values = cfg.get(section) or {}
        if not isinstance(values, dict):
            raise ConfigError(f"Section '{section}' of {path} must be a mapping")
        merged[section] = {**defaults, **values}
    return merged


@lru_cache(maxsize=1)
def load_config() -> Dict:
    """Load and cache config/config.yaml, falling back to defaults when absent."""
    if not CONFIG_PATH.exists():
        return {section: dict(values) for section, values in DEFAULT_CONFIG.items()}
    return load_config_from_yaml(CONFIG_PATH)


def resolve_path(value: str | Path) -> Path:
    """Resolve a configured path against the repository root."""
    p = Path(value)
    return p if p.is_absolute() else ROOT / p
