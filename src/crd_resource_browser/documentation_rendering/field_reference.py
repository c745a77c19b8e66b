"""Field reference rows and plain-text rendering."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

from crd_resource_browser.resource_resolution.resolution_contracts import ResolvedResource
from crd_resource_browser.schema_management.field_display import (
    hash_contains_id,
    resolve_default,
    resolve_description,
    resolve_enum,
    resolve_scope,
)
from crd_resource_browser.schema_management.schema_models import (
    ArraySchema,
    ObjectSchema,
    Schema,
)

INDENT = "  "


@dataclass(frozen=True)
class FieldRow:  # pylint: disable=too-many-instance-attributes
    """Display data for one schema property."""

    anchor_id: str
    path: str
    depth: int
    type: str
    description: str
    default: str
    enum: str
    required: bool
    expanded: bool


def build_field_rows(root_id: str, schema: Schema, hash_fragment: str = "") -> list[FieldRow]:
    """Flatten the properties below `schema` in declaration order."""
    return list(_walk(root_id, "", schema, 0, hash_fragment))


def _walk(
    parent_id: str, parent_path: str, schema: Schema, depth: int, hash_fragment: str
) -> Iterator[FieldRow]:
    scope = resolve_scope(schema)
    if not isinstance(scope, ObjectSchema):
        return
    for key, child in scope.properties.items():
        anchor_id = f"{parent_id}.{key}"
        path = key if not parent_path else f"{parent_path}.{key}"
        yield FieldRow(
            anchor_id=anchor_id,
            path=path,
            depth=depth,
            type=_type_label(child),
            description=resolve_description(child),
            default=resolve_default(child),
            enum=resolve_enum(child),
            required=key in scope.required,
            expanded=hash_contains_id(hash_fragment, anchor_id),
        )
        yield from _walk(anchor_id, path, child, depth + 1, hash_fragment)


def _type_label(node: Schema) -> str:
    if isinstance(node, ArraySchema):
        item_type = node.items.type or "any"
        return f"array[{item_type}]"
    return node.type or "any"


def render_resource_text(resolved: ResolvedResource, hash_fragment: str = "") -> str:
    """Render a resource version as a plain-text documentation page."""
    lines = [
        f"{resolved.kind} ({resolved.group}/{resolved.version_on_focus})",
        f"Resource: {resolved.name}",
    ]
    if resolved.release_label:
        lines.append(f"Release: {resolved.release_label}")
    if resolved.app_version:
        lines.append(f"App version: {resolved.app_version}")
    if resolved.deprecated:
        lines.append("Deprecated: yes")
    lines.append(f"Versions: {', '.join(resolved.valid_versions)}")
    lines.extend(_schema_sections(resolved.spec, resolved.status, hash_fragment))
    return "\n".join(lines) + "\n"


def render_schema_text(title: str, spec: Schema, status: Schema, hash_fragment: str = "") -> str:
    """Render a bare spec/status pair, used for local CRD files."""
    lines = [title, *_schema_sections(spec, status, hash_fragment)]
    return "\n".join(lines) + "\n"


def _schema_sections(spec: Schema, status: Schema, hash_fragment: str) -> list[str]:
    lines: list[str] = []
    for root_id, schema in (("spec", spec), ("status", status)):
        lines.append("")
        lines.append(root_id)
        rows = build_field_rows(root_id, schema, hash_fragment)
        if not rows:
            lines.append(f"{INDENT}(no fields)")
        lines.extend(_render_row(row) for row in rows)
    return lines


def _render_row(row: FieldRow) -> str:
    marker = ">" if row.expanded else "-"
    name = row.path.rsplit(".", 1)[-1] + ("*" if row.required else "")
    parts = [f"{INDENT * (row.depth + 1)}{marker} {name}: {row.type}"]
    if row.description:
        parts.append(row.description.splitlines()[0])
    if row.default:
        parts.append(f"default={row.default}")
    if row.enum:
        parts.append(f"enum={row.enum}")
    return " | ".join(parts)
