"""Lookup strategies used to find a resource entry by name."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from crd_resource_browser.catalog.catalog_models import CrdCatalog, CrdResource


class ResourceLookup(Protocol):
    """One source of resource entries."""

    def find(self, name: str) -> CrdResource | None:  # pragma: no cover - protocol
        ...


def catalog_key(name: str) -> str:
    """Return the group suffix after the first dot, used as catalog key."""
    return name[name.find(".") + 1 :]


class CatalogLookup:
    """Search the bundled catalog under the resource name's group suffix."""

    def __init__(self, catalog: CrdCatalog) -> None:
        self._catalog = catalog

    def find(self, name: str) -> CrdResource | None:
        matches = [
            resource
            for resource in self._catalog.resources_for(catalog_key(name))
            if resource.name == name
        ]
        return matches[0] if len(matches) == 1 else None


class ManifestLookup:
    """Search a release manifest."""

    def __init__(self, entries: Sequence[CrdResource]) -> None:
        self._entries = tuple(entries)

    def find(self, name: str) -> CrdResource | None:
        for entry in self._entries:
            if entry.name == name:
                return entry
        return None


def find_first(lookups: Sequence[ResourceLookup], name: str) -> CrdResource | None:
    """Return the entry from the first lookup that knows `name`."""
    for lookup in lookups:
        found = lookup.find(name)
        if found is not None:
            return found
    return None
