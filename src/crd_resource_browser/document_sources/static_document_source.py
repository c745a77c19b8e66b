"""Static document source backed by a directory tree."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Protocol

_LOGGER = logging.getLogger(__name__)

EXPECTED_MISS_ATTRIBUTE = "expected_miss"


class DocumentFetchError(Exception):
    """Raised when a static document is unavailable."""


class DocumentSource(Protocol):
    """Anything able to return the text of a document by relative path."""

    def fetch_text(self, path: str) -> str:  # pragma: no cover - protocol
        ...


class StaticDirectorySource:
    """Serve documents from files below `root`, the way a static asset host does."""

    def __init__(self, root: Path | str) -> None:
        self._root = Path(root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def fetch_text(self, path: str) -> str:
        target = self._resolve(path)
        if target is None or not target.is_file():
            _LOGGER.info("Not found: /%s", path.lstrip("/"), extra={EXPECTED_MISS_ATTRIBUTE: True})
            raise DocumentFetchError(f"Not found: /{path.lstrip('/')}")
        try:
            return target.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise DocumentFetchError(f"Unable to read /{path.lstrip('/')}: {exc}") from exc

    def _resolve(self, path: str) -> Path | None:
        candidate = (self._root / path.lstrip("/")).resolve()
        if not candidate.is_relative_to(self._root):
            return None
        return candidate


class ExpectedMissFilter(logging.Filter):
    """Drop log records for documents whose absence is part of normal fallback."""

    def filter(self, record: logging.LogRecord) -> bool:
        return not getattr(record, EXPECTED_MISS_ATTRIBUTE, False)
