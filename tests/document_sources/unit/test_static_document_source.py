"""Static document source tests."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest
from crd_resource_browser.document_sources import (
    DocumentFetchError,
    ExpectedMissFilter,
    StaticDirectorySource,
)


def test_fetches_document_relative_to_root(tmp_path: Path) -> None:
    (tmp_path / "resources").mkdir()
    (tmp_path / "resources" / "manifest.json").write_text("[]", encoding="utf-8")
    source = StaticDirectorySource(tmp_path)

    assert source.fetch_text("resources/manifest.json") == "[]"
    assert source.fetch_text("/resources/manifest.json") == "[]"


def test_missing_document_raises_fetch_error(tmp_path: Path) -> None:
    source = StaticDirectorySource(tmp_path)

    with pytest.raises(DocumentFetchError, match="Not found: /resources/a/v1.yaml"):
        source.fetch_text("resources/a/v1.yaml")


def test_directories_are_not_documents(tmp_path: Path) -> None:
    (tmp_path / "resources").mkdir()

    with pytest.raises(DocumentFetchError):
        StaticDirectorySource(tmp_path).fetch_text("resources")


def test_paths_outside_root_are_unavailable(tmp_path: Path) -> None:
    static_root = tmp_path / "static"
    static_root.mkdir()
    (tmp_path / "secret.yaml").write_text("token: x", encoding="utf-8")

    with pytest.raises(DocumentFetchError):
        StaticDirectorySource(static_root).fetch_text("../secret.yaml")


def test_misses_are_logged_as_expected_and_filtered(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    source = StaticDirectorySource(tmp_path)

    with caplog.at_level(logging.INFO, logger="crd_resource_browser"):
        with pytest.raises(DocumentFetchError):
            source.fetch_text("resources/a/v1.yaml")

    (record,) = [r for r in caplog.records if "Not found" in r.getMessage()]
    assert ExpectedMissFilter().filter(record) is False


def test_filter_keeps_ordinary_records() -> None:
    record = logging.LogRecord("x", logging.WARNING, __file__, 1, "manifest missing", None, None)

    assert ExpectedMissFilter().filter(record) is True
