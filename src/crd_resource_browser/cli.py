"""Command line interface entry point."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from crd_resource_browser.catalog import CatalogError, load_catalog, load_releases
from crd_resource_browser.configuration import (
    DEFAULT_CONFIG_FILENAME,
    ConfigurationError,
    load_configuration,
    write_placeholder_configuration,
)
from crd_resource_browser.document_sources import ExpectedMissFilter, StaticDirectorySource
from crd_resource_browser.documentation_rendering import (
    render_resource_text,
    render_schema_text,
    write_field_reference_workbook,
)
from crd_resource_browser.resource_resolution import (
    ResolutionRequest,
    ResourceNotFound,
    ResourceVersionResolver,
)
from crd_resource_browser.resource_resolution.resource_version_resolver import INVALID_VERSION
from crd_resource_browser.schema_management import SchemaError, load_crd_definition

_LOG_HANDLER_NAME = "crd-browser-cli"
_PACKAGE_LOGGER = "crd_resource_browser"


class CliError(Exception):
    """Custom CLI error."""


def _configure_logging(verbose: bool) -> logging.Handler:
    package_logger = logging.getLogger(_PACKAGE_LOGGER)
    for handler in list(package_logger.handlers):
        if handler.get_name() == _LOG_HANDLER_NAME:
            package_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.set_name(_LOG_HANDLER_NAME)
    handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    if not verbose:
        handler.addFilter(ExpectedMissFilter())
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    return handler


def _build_resolver(config_path: str) -> ResourceVersionResolver:
    try:
        configuration = load_configuration(config_path)
        catalog = load_catalog(configuration.catalog_path)
        releases = load_releases(configuration.releases_path)
    except (ConfigurationError, CatalogError, OSError) as exc:
        raise CliError(str(exc)) from exc
    return ResourceVersionResolver(
        catalog=catalog,
        releases=releases,
        document_source=StaticDirectorySource(configuration.static_root),
    )


_config_option = click.option(
    "--config",
    "config_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the YAML/JSON browser configuration file",
)
_release_option = click.option(
    "--release",
    "release",
    required=False,
    default=None,
    help="Release name; defaults to the release flagged default",
)


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="crd-resource-browser")
@click.option("--verbose", is_flag=True, default=False, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """Browse CRD spec/status schemas as field documentation."""
    handler = _configure_logging(verbose)
    ctx.call_on_close(lambda: logging.getLogger(_PACKAGE_LOGGER).removeHandler(handler))


@cli.command(name="generate-config")
@click.option(
    "--output",
    "output_path",
    required=False,
    default=DEFAULT_CONFIG_FILENAME,
    show_default=True,
    type=click.Path(path_type=str),
    help="Path to the YAML browser configuration to write",
)
def generate_config(output_path: str) -> None:
    """Generate a browser configuration with guidance comments."""
    try:
        resolved_output = write_placeholder_configuration(output_path)
    except (FileExistsError, OSError) as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(resolved_output))


@cli.command(name="releases")
@_config_option
def list_releases(config_path: str) -> None:
    """List configured releases."""
    resolver = _build_resolver(config_path)
    default = resolver.releases.default_release
    for release in resolver.releases.releases:
        marker = "\t(default)" if release == default else ""
        click.echo(f"{release.name}\t{release.label}\t{release.folder}{marker}")


@cli.command(name="resources")
@_config_option
@_release_option
def list_resources(config_path: str, release: str | None) -> None:
    """List resources known to the catalog and the release manifest."""
    resolver = _build_resolver(config_path)
    for resource in resolver.list_resources(release):
        click.echo(f"{resource.name}\t{resource.kind}\t{','.join(resource.version_names)}")


@cli.command(name="show")
@click.argument("name")
@click.argument("version", required=False)
@_config_option
@_release_option
@click.option(
    "--hash",
    "hash_fragment",
    default="",
    help="URL fragment; fields whose anchor it references are marked expanded",
)
def show(
    name: str, version: str | None, config_path: str, release: str | None, hash_fragment: str
) -> None:
    """Render the spec/status field reference of a resource version."""
    resolver = _build_resolver(config_path)
    try:
        if version is None:
            redirect = resolver.resolve_redirect(ResolutionRequest(name=name, release=release))
            click.echo(f"Redirecting to {redirect.url}", err=True)
            version = redirect.version
        resolved = resolver.resolve(ResolutionRequest(name=name, version=version, release=release))
    except ResourceNotFound as exc:
        raise CliError(f"Not found: {exc.message}") from exc
    click.echo(render_resource_text(resolved, hash_fragment), nl=False)


@cli.command(name="export")
@click.argument("name")
@click.argument("version")
@_config_option
@_release_option
@click.option(
    "--output",
    "output_path",
    required=True,
    type=click.Path(path_type=str),
    help="Path to the field reference workbook to write",
)
def export(
    name: str, version: str, config_path: str, release: str | None, output_path: str
) -> None:
    """Export the field reference of a resource version to a workbook."""
    resolver = _build_resolver(config_path)
    try:
        resolved = resolver.resolve(ResolutionRequest(name=name, version=version, release=release))
        written = write_field_reference_workbook(resolved, output_path)
    except ResourceNotFound as exc:
        raise CliError(f"Not found: {exc.message}") from exc
    except OSError as exc:
        raise CliError(str(exc)) from exc
    click.echo(str(written))


@cli.command(name="inspect")
@click.argument("crd_file", type=click.Path(path_type=str))
@click.option("--version", "version", default=None, help="Version to render; defaults to the first")
@click.option("--hash", "hash_fragment", default="", help="URL fragment to mark expanded fields")
def inspect(crd_file: str, version: str | None, hash_fragment: str) -> None:
    """Render a local CustomResourceDefinition file."""
    try:
        definition = load_crd_definition(Path(crd_file).read_text(encoding="utf-8"))
    except (SchemaError, OSError) as exc:
        raise CliError(str(exc)) from exc
    if not definition.versions:
        raise CliError(f"Not found: {INVALID_VERSION}")
    version = version or next(iter(definition.versions))
    if version not in definition.versions:
        raise CliError(f"Not found: {INVALID_VERSION}")
    schema = definition.versions[version]
    title = f"{definition.kind} ({definition.group}/{version})"
    if schema.deprecated:
        title += " [deprecated]"
    click.echo(render_schema_text(title, schema.spec, schema.status, hash_fragment), nl=False)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for console_scripts wiring."""
    argv = argv if argv is not None else sys.argv[1:]
    try:
        cli.main(args=list(argv), standalone_mode=False)
    except CliError as exc:
        click.echo(str(exc), err=True)
        return 1
    except click.ClickException as exc:
        exc.show()
        return exc.exit_code
    except click.Abort:
        click.echo("Aborted.", err=True)
        return 1
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
