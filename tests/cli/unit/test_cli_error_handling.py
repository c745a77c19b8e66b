"""CLI error-handling tests."""

from __future__ import annotations

from pathlib import Path

from crd_resource_browser.cli import main


def test_missing_required_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["show", "widgets.example.com", "v1"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "Missing option" in captured.err
    assert "--config" in captured.err
    assert "Traceback" not in captured.err


def test_unknown_option_returns_clean_click_error(capsys) -> None:
    exit_code = main(["show", "--bogus"])
    captured = capsys.readouterr()

    assert exit_code == 2
    assert "No such option" in captured.err
    assert "--bogus" in captured.err
    assert "Traceback" not in captured.err


def test_missing_configuration_returns_one_line_error(capsys, tmp_path: Path) -> None:
    exit_code = main(["releases", "--config", str(tmp_path / "missing.yaml")])
    captured = capsys.readouterr()

    assert exit_code == 1
    assert "Configuration file not found" in captured.err
    assert "Traceback" not in captured.err
