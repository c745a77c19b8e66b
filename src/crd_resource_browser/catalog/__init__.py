"""Catalog domain exports."""

from .catalog_models import CrdCatalog, CrdResource, CrdVersion, EdaRelease, ReleasesConfig
from .loader import (
    CatalogError,
    load_catalog,
    load_releases,
    parse_catalog,
    parse_manifest,
    parse_releases,
)

__all__ = [
    "CatalogError",
    "CrdCatalog",
    "CrdResource",
    "CrdVersion",
    "EdaRelease",
    "ReleasesConfig",
    "load_catalog",
    "load_releases",
    "parse_catalog",
    "parse_manifest",
    "parse_releases",
]
