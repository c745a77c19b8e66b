"""Resource and version resolution service."""

from __future__ import annotations

import json
import logging
from urllib.parse import urlencode

from crd_resource_browser.catalog.catalog_models import CrdCatalog, CrdResource, ReleasesConfig
from crd_resource_browser.catalog.loader import CatalogError, parse_manifest
from crd_resource_browser.document_sources.static_document_source import (
    DocumentFetchError,
    DocumentSource,
)
from crd_resource_browser.schema_management.schema_models import OpenAPISchema
from crd_resource_browser.schema_management.schema_projection import (
    SchemaError,
    load_schema_document,
)

from .resolution_contracts import (
    DEFAULT_RELEASE_FOLDER,
    RedirectTarget,
    ResolutionRequest,
    ResolvedResource,
    ResourceNotFound,
    SelectedRelease,
)
from .resource_lookups import CatalogLookup, ManifestLookup, ResourceLookup, find_first

_LOGGER = logging.getLogger(__name__)

INVALID_RESOURCE_NAME = "Invalid resource name"
INVALID_VERSION = "Invalid version for the resource name"
FETCH_FAILED = "Error fetching resource"


class ResourceVersionResolver:
    """Validate name/version pairs against the catalog and load their schemas."""

    def __init__(
        self,
        catalog: CrdCatalog,
        releases: ReleasesConfig,
        document_source: DocumentSource,
    ) -> None:
        self._catalog = catalog
        self._releases = releases
        self._source = document_source

    @property
    def releases(self) -> ReleasesConfig:
        return self._releases

    def select_release(self, requested: str | None = None) -> SelectedRelease:
        """Pick the requested release, else the default one, else the first."""
        release = self._releases.find(requested) if requested else None
        if requested and release is None:
            _LOGGER.debug("Unknown release %r requested, using default", requested)
        if release is None:
            release = self._releases.default_release
        if release is None:
            return SelectedRelease(folder=DEFAULT_RELEASE_FOLDER, label="")
        return SelectedRelease(
            folder=release.folder,
            label=release.label or release.name,
            release=release,
        )

    def load_manifest(self, folder: str) -> tuple[CrdResource, ...]:
        """Return the manifest entries of a release folder, empty when unavailable."""
        try:
            parsed = json.loads(self._source.fetch_text(f"{folder}/manifest.json"))
            return parse_manifest(parsed)
        except (DocumentFetchError, json.JSONDecodeError, CatalogError) as exc:
            _LOGGER.warning("Could not load manifest for %s, using fallback: %s", folder, exc)
            return ()

    def list_resources(self, release: str | None = None) -> tuple[CrdResource, ...]:
        """Catalog entries followed by release-only manifest entries."""
        selected = self.select_release(release)
        resources = list(self._catalog.all_resources())
        known = {resource.name for resource in resources}
        for entry in self.load_manifest(selected.folder):
            if entry.name not in known:
                resources.append(entry)
                known.add(entry.name)
        return tuple(resources)

    def resolve_redirect(self, request: ResolutionRequest) -> RedirectTarget:
        """Resolve a bare resource name to its first declared version."""
        selected = self.select_release(request.release)
        resource = self._find_resource(request.name, self.load_manifest(selected.folder))
        if not resource.versions:
            raise ResourceNotFound(INVALID_VERSION)
        version = resource.versions[0].name
        url = f"/{request.name}/{version}"
        if request.release:
            url = f"{url}?{urlencode({'release': request.release})}"
        return RedirectTarget(name=request.name, version=version, url=url)

    def resolve(self, request: ResolutionRequest) -> ResolvedResource:
        """Validate the request and load the schema document it points to."""
        if request.version is None:
            raise ValueError("resolve() requires a version; use resolve_redirect() for bare names.")

        selected = self.select_release(request.release)
        manifest = self.load_manifest(selected.folder)
        resource = self._find_resource(request.name, manifest)

        version = resource.find_version(request.version)
        if version is None:
            raise ResourceNotFound(INVALID_VERSION)

        document = self._fetch_document(selected.folder, request.name, request.version)

        manifest_entry = ManifestLookup(manifest).find(request.name)
        valid_versions = (
            manifest_entry.version_names
            if manifest_entry is not None and manifest_entry.versions
            else resource.version_names
        )
        return ResolvedResource(
            name=request.name,
            version_on_focus=request.version,
            group=resource.group,
            kind=resource.kind,
            deprecated=version.deprecated,
            app_version=version.app_version or "",
            valid_versions=valid_versions,
            spec=document.spec,
            status=document.status,
            release_label=selected.label,
            release_folder=selected.folder,
            available_releases=self._releases.releases,
        )

    def _find_resource(self, name: str, manifest: tuple[CrdResource, ...]) -> CrdResource:
        lookups: tuple[ResourceLookup, ...] = (
            CatalogLookup(self._catalog),
            ManifestLookup(manifest),
        )
        resource = find_first(lookups, name)
        if resource is None:
            raise ResourceNotFound(INVALID_RESOURCE_NAME)
        return resource

    def _fetch_document(self, folder: str, name: str, version: str) -> OpenAPISchema:
        candidates = [f"{folder}/{name}/{version}.yaml"]
        fallback = f"{DEFAULT_RELEASE_FOLDER}/{name}/{version}.yaml"
        if fallback not in candidates:
            candidates.append(fallback)

        failures: list[str] = []
        for path in candidates:
            try:
                text = self._source.fetch_text(path)
            except DocumentFetchError as exc:
                failures.append(str(exc))
                continue
            try:
                return load_schema_document(text)
            except SchemaError as exc:
                raise ResourceNotFound(f"{FETCH_FAILED}: {exc}") from exc
        raise ResourceNotFound(f"{FETCH_FAILED}: {'; '.join(failures)}")
