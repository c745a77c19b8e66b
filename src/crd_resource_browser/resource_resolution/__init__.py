"""Resource resolution domain exports."""

from .resolution_contracts import (
    DEFAULT_RELEASE_FOLDER,
    RedirectTarget,
    ResolutionRequest,
    ResolvedResource,
    ResourceNotFound,
    SelectedRelease,
)
from .resource_lookups import CatalogLookup, ManifestLookup, catalog_key, find_first
from .resource_version_resolver import ResourceVersionResolver

__all__ = [
    "DEFAULT_RELEASE_FOLDER",
    "CatalogLookup",
    "ManifestLookup",
    "RedirectTarget",
    "ResolutionRequest",
    "ResolvedResource",
    "ResourceNotFound",
    "ResourceVersionResolver",
    "SelectedRelease",
    "catalog_key",
    "find_first",
]
