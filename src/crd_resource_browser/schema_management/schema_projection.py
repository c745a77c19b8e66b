"""Schema loading and parsing service."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import yaml

from .schema_models import (
    NO_DEFAULT,
    ArraySchema,
    CrdDefinition,
    ObjectSchema,
    OpenAPISchema,
    PrimitiveSchema,
    Schema,
)

_LOGGER = logging.getLogger(__name__)


class SchemaError(Exception):
    """Raised when a CRD document cannot be decoded."""


def parse_schema(node: Any) -> Schema:
    """Build a schema tree from a decoded OpenAPI v3 node.

    Parsing is lenient: unknown keys are ignored and malformed values are
    dropped rather than rejected.
    """
    if not isinstance(node, Mapping):
        return PrimitiveSchema()

    node_type = node.get("type")
    common = {
        "description": _optional_text(node.get("description")) or "",
        "default": node["default"] if "default" in node else NO_DEFAULT,
        "format": _optional_text(node.get("format")),
        "enum": _enum_values(node.get("enum")),
        "minimum": _optional_number(node.get("minimum")),
        "maximum": _optional_number(node.get("maximum")),
    }

    if node_type == "object" or (node_type is None and "properties" in node):
        properties = node.get("properties")
        parsed_properties: dict[str, Schema] = {}
        if isinstance(properties, Mapping):
            for key, child in properties.items():
                parsed_properties[str(key)] = parse_schema(child)
        required = node.get("required")
        required_names = (
            frozenset(str(item) for item in required)
            if isinstance(required, Sequence) and not isinstance(required, str)
            else frozenset()
        )
        return ObjectSchema(properties=parsed_properties, required=required_names, **common)

    if node_type == "array" or (node_type is None and "items" in node):
        return ArraySchema(
            items=parse_schema(node.get("items")),
            min_items=_optional_int(node.get("minItems")),
            max_items=_optional_int(node.get("maxItems")),
            **common,
        )

    return PrimitiveSchema(type=node_type if isinstance(node_type, str) else "", **common)


def load_schema_document(text: str) -> OpenAPISchema:
    """Parse one CRD version document into its `spec` and `status` schemas."""
    root = _load_mapping(text)
    properties = _openapi_properties(root)
    return OpenAPISchema(
        name=str(root.get("name") or ""),
        deprecated=bool(root.get("deprecated", False)),
        spec=_property_schema(properties, "spec"),
        status=_property_schema(properties, "status"),
    )


def load_crd_definition(text: str) -> CrdDefinition:
    """Parse a full CustomResourceDefinition with all of its versions."""
    root = _load_mapping(text)
    spec = root.get("spec")
    if not isinstance(spec, Mapping):
        raise SchemaError("CRD document requires a spec mapping.")
    names = spec.get("names")
    kind = names.get("kind") if isinstance(names, Mapping) else None
    group = spec.get("group")
    if not isinstance(group, str) or not isinstance(kind, str):
        raise SchemaError("CRD document requires spec.group and spec.names.kind.")

    raw_versions = spec.get("versions")
    if not isinstance(raw_versions, Sequence) or isinstance(raw_versions, str):
        raise SchemaError("CRD document requires a list of spec.versions.")

    versions: dict[str, OpenAPISchema] = {}
    for entry in raw_versions:
        if not isinstance(entry, Mapping) or not entry.get("name"):
            raise SchemaError("CRD versions must be mappings with a name.")
        properties = _openapi_properties(entry)
        version_name = str(entry["name"])
        versions[version_name] = OpenAPISchema(
            name=version_name,
            deprecated=bool(entry.get("deprecated", False)),
            spec=_property_schema(properties, "spec"),
            status=_property_schema(properties, "status"),
        )
    _LOGGER.debug("Loaded CRD %s/%s with versions %s", group, kind, list(versions))
    return CrdDefinition(group=group, kind=kind, versions=versions)


def _load_mapping(text: str) -> Mapping[str, Any]:
    try:
        root = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise SchemaError(f"Invalid CRD document: {exc}") from exc
    if not isinstance(root, Mapping):
        raise SchemaError("CRD document root must be a mapping.")
    return root


def _openapi_properties(root: Mapping[str, Any]) -> Mapping[str, Any]:
    schema = root.get("schema")
    openapi = schema.get("openAPIV3Schema") if isinstance(schema, Mapping) else None
    if not isinstance(openapi, Mapping):
        raise SchemaError("CRD document is missing schema.openAPIV3Schema.")
    properties = openapi.get("properties")
    return properties if isinstance(properties, Mapping) else {}


def _property_schema(properties: Mapping[str, Any], key: str) -> Schema:
    if key not in properties:
        return ObjectSchema()
    return parse_schema(properties[key])


def _optional_text(value: Any) -> str | None:
    return value if isinstance(value, str) else None


def _optional_number(value: Any) -> float | None:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value


def _optional_int(value: Any) -> int | None:
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value


def _enum_values(value: Any) -> tuple[Any, ...]:
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return tuple(value)
    return ()
