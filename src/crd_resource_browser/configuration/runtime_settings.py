"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class BrowserConfiguration:
    """Locations of the static documents the browser reads."""

    path: Path
    static_root: Path
    catalog_path: Path
    releases_path: Path
