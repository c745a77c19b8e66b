"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "crd-browser.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Browser configuration for crd-resource-browser.
# Relative paths resolve against the directory holding this file.

# Directory served as static assets. Each release folder (for example
# "resources" or "resources/24.11") lives below it and holds
# manifest.json plus <resource-name>/<version>.yaml documents.
static_root: "static"

# Resource catalog: mapping of group suffix to a list of resources with
# name, group, kind and versions.
catalog: "resources.yaml"

# Release configuration: a "releases" list of name, label, folder and an
# optional default flag. Quote release names such as "24.10".
releases: "releases.yaml"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML browser configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the placeholder browser configuration to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
