"""Schema parsing and CRD document loading tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from crd_resource_browser.schema_management import (
    NO_DEFAULT,
    ArraySchema,
    ObjectSchema,
    PrimitiveSchema,
    SchemaError,
    load_crd_definition,
    load_schema_document,
    parse_schema,
)


def _samples_root() -> Path:
    return Path(__file__).resolve().parents[3] / "samples"


def test_parse_schema_builds_tagged_variants() -> None:
    schema = parse_schema(
        {
            "type": "object",
            "required": ["size"],
            "properties": {
                "size": {"type": "integer", "minimum": 1, "maximum": 10},
                "tags": {"type": "array", "minItems": 1, "items": {"type": "string"}},
            },
        }
    )

    assert isinstance(schema, ObjectSchema)
    assert list(schema.properties) == ["size", "tags"]
    assert schema.required == frozenset({"size"})
    size = schema.properties["size"]
    assert isinstance(size, PrimitiveSchema)
    assert (size.type, size.minimum, size.maximum) == ("integer", 1, 10)
    tags = schema.properties["tags"]
    assert isinstance(tags, ArraySchema)
    assert tags.min_items == 1
    assert tags.items.type == "string"


def test_parse_schema_infers_variant_from_structure_when_type_is_missing() -> None:
    assert isinstance(parse_schema({"properties": {}}), ObjectSchema)
    assert isinstance(parse_schema({"items": {"type": "string"}}), ArraySchema)
    assert parse_schema({"x-kubernetes-int-or-string": True}).type == ""


def test_parse_schema_distinguishes_absent_default_from_null() -> None:
    assert parse_schema({"type": "string"}).default is NO_DEFAULT
    assert parse_schema({"type": "string", "default": None}).has_default is True


def test_parse_schema_tolerates_malformed_nodes() -> None:
    array_without_items = parse_schema({"type": "array"})

    assert isinstance(array_without_items, ArraySchema)
    assert isinstance(array_without_items.items, PrimitiveSchema)
    assert parse_schema("not-a-mapping") == PrimitiveSchema()
    assert parse_schema({"type": "object", "properties": "oops"}).properties == {}


def test_load_schema_document_extracts_spec_and_status() -> None:
    text = (
        _samples_root() / "static" / "resources" / "widgets.example.com" / "v1.yaml"
    ).read_text(encoding="utf-8")

    document = load_schema_document(text)

    assert document.name == "v1"
    assert document.deprecated is False
    assert isinstance(document.spec, ObjectSchema)
    assert list(document.spec.properties)[:2] == ["size", "mode"]
    assert isinstance(document.status, ObjectSchema)
    assert "ready" in document.status.properties


def test_load_schema_document_accepts_json_text() -> None:
    text = json.dumps(
        {
            "name": "v2",
            "schema": {"openAPIV3Schema": {"properties": {"spec": {"type": "object"}}}},
        }
    )

    document = load_schema_document(text)

    assert document.name == "v2"
    assert document.status == ObjectSchema()


@pytest.mark.parametrize(
    ("text", "message"),
    [
        ("{not: [valid", "Invalid CRD document"),
        ("- just\n- a list\n", "root must be a mapping"),
        ("name: v1\n", "missing schema.openAPIV3Schema"),
    ],
)
def test_load_schema_document_rejects_undecodable_documents(text: str, message: str) -> None:
    with pytest.raises(SchemaError, match=message):
        load_schema_document(text)


def test_load_crd_definition_reads_every_version() -> None:
    text = (_samples_root() / "crds" / "widget-crd.yaml").read_text(encoding="utf-8")

    definition = load_crd_definition(text)

    assert definition.group == "example.com"
    assert definition.kind == "Widget"
    assert list(definition.versions) == ["v1", "v1alpha1"]
    assert definition.versions["v1alpha1"].deprecated is True
    assert isinstance(definition.versions["v1alpha1"].status, ObjectSchema)


def test_load_crd_definition_requires_group_and_kind() -> None:
    with pytest.raises(SchemaError, match="spec.group and spec.names.kind"):
        load_crd_definition("spec:\n  group: example.com\n  versions: []\n")
