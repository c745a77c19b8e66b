"""Catalog, release and manifest loaders."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .catalog_models import CrdCatalog, CrdResource, CrdVersion, EdaRelease, ReleasesConfig

_LOGGER = logging.getLogger(__name__)


class CatalogError(Exception):
    """Raised when a catalog, release or manifest document is invalid."""


def load_catalog(catalog_path: Path | str) -> CrdCatalog:
    """Load the resource catalog from a YAML or JSON file."""
    parsed = _read_document(Path(catalog_path), "Resource catalog")
    return parse_catalog(parsed)


def parse_catalog(parsed: Any) -> CrdCatalog:
    """Build a catalog from a decoded `group -> [resource, ...]` mapping."""
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise CatalogError("Resource catalog root must be a mapping of groups.")

    groups: dict[str, tuple[CrdResource, ...]] = {}
    for group_key, entries in parsed.items():
        if not isinstance(entries, Sequence) or isinstance(entries, str):
            raise CatalogError(f"Catalog group '{group_key}' must be a list of resources.")
        resources = tuple(
            _parse_resource(entry, f"catalog group '{group_key}'") for entry in entries
        )
        _reject_duplicates(resources, f"catalog group '{group_key}'")
        groups[str(group_key)] = resources
    _LOGGER.debug("Loaded resource catalog with %d groups", len(groups))
    return CrdCatalog(groups=groups)


def load_releases(releases_path: Path | str) -> ReleasesConfig:
    """Load the release configuration from a YAML or JSON file."""
    parsed = _read_document(Path(releases_path), "Release configuration")
    return parse_releases(parsed)


def parse_releases(parsed: Any) -> ReleasesConfig:
    """Build the release configuration from a decoded `{releases: [...]}` mapping."""
    if parsed is None:
        parsed = {}
    if not isinstance(parsed, Mapping):
        raise CatalogError("Release configuration root must be a mapping.")
    entries = parsed.get("releases") or []
    if not isinstance(entries, Sequence) or isinstance(entries, str):
        raise CatalogError("releases must be a list.")

    releases: list[EdaRelease] = []
    seen: set[str] = set()
    for entry in entries:
        if not isinstance(entry, Mapping):
            raise CatalogError("Release entries must be mappings.")
        name = _require_text(entry.get("name"), "release name")
        if name in seen:
            raise CatalogError(f"Duplicate release name: {name}")
        seen.add(name)
        releases.append(
            EdaRelease(
                name=name,
                label=_optional_text(entry.get("label"), "release label") or "",
                folder=_require_text(entry.get("folder"), f"release '{name}' folder").strip("/"),
                default=bool(entry.get("default", False)),
            )
        )

    defaults = [release.name for release in releases if release.default]
    if len(defaults) > 1:
        _LOGGER.warning("Multiple default releases declared, using %s", defaults[0])
    return ReleasesConfig(releases=tuple(releases))


def parse_manifest(parsed: Any) -> tuple[CrdResource, ...]:
    """Build the resource list of a release manifest.

    The first entry wins when a name is listed more than once.
    """
    if not isinstance(parsed, Sequence) or isinstance(parsed, str):
        raise CatalogError("Release manifest must be a list of resources.")
    resources: list[CrdResource] = []
    seen: set[str] = set()
    for entry in parsed:
        resource = _parse_resource(entry, "release manifest")
        if resource.name in seen:
            _LOGGER.warning("Ignoring duplicate resource '%s' in release manifest", resource.name)
            continue
        seen.add(resource.name)
        resources.append(resource)
    return tuple(resources)


def _read_document(path: Path, label: str) -> Any:
    if not path.exists():
        raise CatalogError(f"{label} file not found: {path}")
    try:
        return yaml.safe_load(path.read_text(encoding="utf-8"))
    except yaml.YAMLError as exc:
        raise CatalogError(f"Failed to parse {label.lower()} file {path}: {exc}") from exc


def _parse_resource(entry: Any, context: str) -> CrdResource:
    if not isinstance(entry, Mapping):
        raise CatalogError(f"Entries in {context} must be mappings.")
    name = _require_text(entry.get("name"), f"resource name in {context}")
    raw_versions = entry.get("versions") or []
    if not isinstance(raw_versions, Sequence) or isinstance(raw_versions, str):
        raise CatalogError(f"Resource '{name}' versions must be a list.")

    versions: list[CrdVersion] = []
    for raw_version in raw_versions:
        if isinstance(raw_version, str):
            versions.append(CrdVersion(name=raw_version))
            continue
        if not isinstance(raw_version, Mapping):
            raise CatalogError(f"Resource '{name}' versions must be mappings.")
        versions.append(
            CrdVersion(
                name=_require_text(raw_version.get("name"), f"version name of '{name}'"),
                deprecated=bool(raw_version.get("deprecated", False)),
                app_version=_optional_text(raw_version.get("appVersion"), "appVersion"),
                eda_release=_optional_text(raw_version.get("edaRelease"), "edaRelease"),
            )
        )

    return CrdResource(
        name=name,
        group=_optional_text(entry.get("group"), f"group of '{name}'") or "",
        kind=_optional_text(entry.get("kind"), f"kind of '{name}'") or "",
        versions=tuple(versions),
        eda_release=_optional_text(entry.get("edaRelease"), "edaRelease"),
    )


def _reject_duplicates(resources: Sequence[CrdResource], context: str) -> None:
    seen: set[str] = set()
    for resource in resources:
        if resource.name in seen:
            raise CatalogError(f"Duplicate resource '{resource.name}' in {context}.")
        seen.add(resource.name)


def _require_text(value: Any, field_name: str) -> str:
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise CatalogError(f"{field_name} must be a string.")
    text = str(value).strip()
    if not text:
        raise CatalogError(f"{field_name} must not be empty.")
    return text


def _optional_text(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, (str, int, float)) or isinstance(value, bool):
        raise CatalogError(f"{field_name} must be a string.")
    return str(value).strip() or None
