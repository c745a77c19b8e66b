"""Field display resolver tests."""

from __future__ import annotations

import pytest
from crd_resource_browser.schema_management import (
    ArraySchema,
    ObjectSchema,
    PrimitiveSchema,
    hash_contains_id,
    parse_schema,
    resolve_default,
    resolve_description,
    resolve_enum,
    resolve_scope,
)


@pytest.mark.parametrize("schema_type", ["string", "integer", "number", "boolean"])
def test_scope_of_primitive_is_the_node_itself(schema_type: str) -> None:
    node = PrimitiveSchema(type=schema_type)

    assert resolve_scope(node) is node


def test_scope_of_array_is_its_item_schema() -> None:
    items = ObjectSchema(properties={"port": PrimitiveSchema(type="integer")})
    node = ArraySchema(items=items)

    assert resolve_scope(node) is items


def test_description_prefers_own_text_regardless_of_type() -> None:
    assert resolve_description(PrimitiveSchema(type="string", description="X")) == "X"
    assert resolve_description(ArraySchema(description="X", items=PrimitiveSchema())) == "X"
    assert resolve_description(ObjectSchema(description="X")) == "X"


def test_description_of_array_falls_back_to_item_type() -> None:
    node = ArraySchema(items=PrimitiveSchema(type="string"))

    assert resolve_description(node) == "string"


def test_description_is_empty_when_nothing_is_declared() -> None:
    assert resolve_description(PrimitiveSchema(type="integer")) == ""
    assert resolve_description(ArraySchema(items=PrimitiveSchema())) == ""


@pytest.mark.parametrize(
    ("raw_default", "expected"),
    [
        (42, "42"),
        ("active", "active"),
        (True, "true"),
        (False, "false"),
        (1.5, "1.5"),
        (2.0, "2"),
        (None, "null"),
        ({"a": 1}, '{"a":1}'),
        ([1, "two"], '[1,"two"]'),
    ],
)
def test_default_is_rendered_as_display_text(raw_default: object, expected: str) -> None:
    node = parse_schema({"type": "string", "default": raw_default})

    assert resolve_default(node) == expected


@pytest.mark.parametrize(
    ("raw_default", "expected"),
    [
        (1e-7, "1e-7"),
        (-1.5e-7, "-1.5e-7"),
        (1e-5, "0.00001"),
        (0.1, "0.1"),
        (-0.0, "0"),
        (1e20, "100000000000000000000"),
        (1e21, "1e+21"),
        (2.5e22, "2.5e+22"),
        (float("inf"), "Infinity"),
    ],
)
def test_float_default_uses_shortest_number_text(raw_default: float, expected: str) -> None:
    node = parse_schema({"type": "number", "default": raw_default})

    assert resolve_default(node) == expected


def test_default_of_array_falls_back_to_item_default() -> None:
    node = parse_schema({"type": "array", "items": {"type": "string", "default": "TCP"}})

    assert resolve_default(node) == "TCP"


def test_own_array_default_wins_over_item_default() -> None:
    node = parse_schema(
        {"type": "array", "default": ["a"], "items": {"type": "string", "default": "b"}}
    )

    assert resolve_default(node) == '["a"]'


def test_default_is_empty_when_absent_everywhere() -> None:
    assert resolve_default(parse_schema({"type": "integer"})) == ""
    assert resolve_default(parse_schema({"type": "array", "items": {"type": "string"}})) == ""


def test_enum_is_rendered_in_declared_order() -> None:
    node = parse_schema({"type": "string", "enum": ["a", "b", "c"]})

    assert resolve_enum(node) == "[a, b, c]"


def test_enum_of_array_falls_back_to_item_enum() -> None:
    node = parse_schema({"type": "array", "items": {"type": "string", "enum": ["TCP", "UDP"]}})

    assert resolve_enum(node) == "[TCP, UDP]"


def test_enum_renders_non_string_members() -> None:
    node = parse_schema({"type": "integer", "enum": [1, 2, True]})

    assert resolve_enum(node) == "[1, 2, true]"


def test_enum_flattens_nested_list_members() -> None:
    node = parse_schema({"type": "string", "enum": [["a", "b"], "c", None, 1e-7]})

    assert resolve_enum(node) == "[a,b, c, , 1e-7]"


@pytest.mark.parametrize(
    "raw",
    [
        {"type": "string"},
        {"type": "string", "enum": []},
        {"type": "array", "items": {"type": "string", "enum": []}},
        {"type": "string", "enum": "not-a-list"},
    ],
)
def test_enum_is_empty_when_unrestricted(raw: dict) -> None:
    assert resolve_enum(parse_schema(raw)) == ""


def test_resolvers_never_fail_on_unexpected_input() -> None:
    for value in (None, "text", 3, {"type": "object"}):
        assert resolve_description(value) == ""  # type: ignore[arg-type]
        assert resolve_default(value) == ""  # type: ignore[arg-type]
        assert resolve_enum(value) == ""  # type: ignore[arg-type]


def test_hash_contains_id_matches_nested_field_reference() -> None:
    assert hash_contains_id("#/properties/foo/bar", "foo") is True
    assert hash_contains_id("#/properties/baz", "foo") is False


def test_hash_contains_id_is_plain_substring_containment() -> None:
    assert hash_contains_id("#xabcid", "abc") is True
    assert hash_contains_id("", "spec") is False
    assert hash_contains_id(None, "spec") is False  # type: ignore[arg-type]
