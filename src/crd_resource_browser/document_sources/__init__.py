"""Document source exports."""

from .static_document_source import (
    DocumentFetchError,
    DocumentSource,
    ExpectedMissFilter,
    StaticDirectorySource,
)

__all__ = [
    "DocumentFetchError",
    "DocumentSource",
    "ExpectedMissFilter",
    "StaticDirectorySource",
]
