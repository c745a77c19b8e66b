"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import BrowserConfiguration


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> BrowserConfiguration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    base_path = path.resolve().parent
    static_root = _resolve_path(
        base_path, _require_non_empty_string(parsed.get("static_root"), "static_root")
    )
    if not static_root.is_dir():
        raise ConfigurationError(f"static_root directory not found: {static_root}")

    catalog_path = _require_existing_file(base_path, parsed.get("catalog"), "catalog")
    releases_path = _require_existing_file(base_path, parsed.get("releases"), "releases")

    return BrowserConfiguration(
        path=path,
        static_root=static_root,
        catalog_path=catalog_path,
        releases_path=releases_path,
    )


def _require_existing_file(base_path: Path, value: Any, field_name: str) -> Path:
    candidate = _resolve_path(base_path, _require_non_empty_string(value, field_name))
    if not candidate.is_file():
        raise ConfigurationError(f"{field_name} file not found: {candidate}")
    return candidate


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped
