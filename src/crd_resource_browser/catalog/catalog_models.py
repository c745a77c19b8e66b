"""Resource catalog and release entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass


@dataclass(frozen=True)
class CrdVersion:
    """One declared version of a catalogued resource."""

    name: str
    deprecated: bool = False
    app_version: str | None = None
    eda_release: str | None = None


@dataclass(frozen=True)
class CrdResource:
    """Catalog entry describing a resource and its versions."""

    name: str
    group: str
    kind: str
    versions: tuple[CrdVersion, ...]
    eda_release: str | None = None

    def find_version(self, version_name: str) -> CrdVersion | None:
        for version in self.versions:
            if version.name == version_name:
                return version
        return None

    @property
    def version_names(self) -> tuple[str, ...]:
        return tuple(version.name for version in self.versions)


@dataclass(frozen=True)
class CrdCatalog:
    """Resource catalog keyed by group suffix of the resource name."""

    groups: Mapping[str, tuple[CrdResource, ...]]

    def resources_for(self, group_key: str) -> tuple[CrdResource, ...]:
        return self.groups.get(group_key, ())

    def all_resources(self) -> tuple[CrdResource, ...]:
        return tuple(resource for resources in self.groups.values() for resource in resources)


@dataclass(frozen=True)
class EdaRelease:
    """A named snapshot of the catalog with its own document folder."""

    name: str
    label: str
    folder: str
    default: bool = False


@dataclass(frozen=True)
class ReleasesConfig:
    """Ordered release declarations."""

    releases: tuple[EdaRelease, ...]

    def find(self, name: str) -> EdaRelease | None:
        for release in self.releases:
            if release.name == name:
                return release
        return None

    @property
    def default_release(self) -> EdaRelease | None:
        """Release flagged default, else the first declared one."""
        for release in self.releases:
            if release.default:
                return release
        return self.releases[0] if self.releases else None
