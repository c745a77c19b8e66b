"""CLI smoke tests."""

from click.testing import CliRunner
from crd_resource_browser.cli import cli


def test_cli_displays_help() -> None:
    runner = CliRunner()
    result = runner.invoke(cli, ["--help"])

    assert result.exit_code == 0
    for command in ("generate-config", "releases", "resources", "show", "export", "inspect"):
        assert command in result.output
