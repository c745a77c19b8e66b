"""Resource resolution entities."""

from __future__ import annotations

from dataclasses import dataclass

from crd_resource_browser.catalog.catalog_models import EdaRelease
from crd_resource_browser.schema_management.schema_models import Schema

DEFAULT_RELEASE_FOLDER = "resources"


class ResourceNotFound(Exception):
    """Raised when a name/version pair cannot be resolved to a document."""

    status_code = 404

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


@dataclass(frozen=True)
class ResolutionRequest:
    """Input contract for resolving one resource page."""

    name: str
    version: str | None = None
    release: str | None = None


@dataclass(frozen=True)
class SelectedRelease:
    """Release a request is scoped to."""

    folder: str
    label: str
    release: EdaRelease | None = None


@dataclass(frozen=True)
class RedirectTarget:
    """Versioned location a bare resource name resolves to."""

    name: str
    version: str
    url: str


@dataclass(frozen=True)
class ResolvedResource:  # pylint: disable=too-many-instance-attributes
    """Display data for one resource version."""

    name: str
    version_on_focus: str
    group: str
    kind: str
    deprecated: bool
    app_version: str
    valid_versions: tuple[str, ...]
    spec: Schema
    status: Schema
    release_label: str
    release_folder: str
    available_releases: tuple[EdaRelease, ...] = ()
