"""YAML/dict config loader for trash-cleaner.

Supports loading from a YAML file or a plain dict (for embedding in a
larger tool config).

Example YAML:

    trash_cleaner:
      forbidden_patterns:
        - .ru
        - russian
        - yandex
      file: src/bang.ts
      backup: true
      dry_run: false
"""

from __future__ import annotations
from dataclasses import replace
from pathlib import Path
from typing import Any

from .cleaner import CleanerConfig


class ConfigError(ValueError):
    """Raised for an unreadable or malformed config file."""


def split_patterns(raw: str) -> tuple[str, ...]:
    """Parse a comma-separated pattern list, dropping empty entries."""
    return tuple(p.strip() for p in raw.split(",") if p.strip())


def load_config(data: dict[str, Any]) -> dict[str, Any]:
    """Normalize a config dict (from YAML or inline).

    Only keys that are present end up in the result, so the dict can be
    layered over defaults.
    """
    # Support nested under "trash_cleaner" key or flat
    if isinstance(data, dict) and "trash_cleaner" in data:
        data = data["trash_cleaner"] or {}
    if not isinstance(data, dict):
        raise ConfigError(f"expected a mapping, got {type(data).__name__}")

    cfg: dict[str, Any] = {}
    if "forbidden_patterns" in data:
        patterns = data["forbidden_patterns"]
        if isinstance(patterns, str):
            cfg["forbidden_patterns"] = split_patterns(patterns)
        elif isinstance(patterns, list):
            cfg["forbidden_patterns"] = tuple(str(p).strip() for p in patterns if str(p).strip())
        else:
            raise ConfigError("forbidden_patterns must be a list or a comma-separated string")
    if "file" in data:
        cfg["file_path"] = str(data["file"])
    if "backup" in data:
        cfg["create_backup"] = bool(data["backup"])
    if "dry_run" in data:
        cfg["dry_run"] = bool(data["dry_run"])
    return cfg


def load_from_yaml(path: str | Path) -> dict[str, Any]:
    """Load config from a YAML file."""
    import yaml

    try:
        with open(path, encoding="utf-8") as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise ConfigError(f"cannot read config {path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigError(f"invalid YAML in {path}: {e}") from e
    return load_config(raw or {})


def build_config(
    base: CleanerConfig | None = None,
    overrides: dict[str, Any] | None = None,
) -> CleanerConfig:
    """Layer normalized overrides on top of a config (defaults if None)."""
    return replace(base or CleanerConfig(), **(overrides or {}))
