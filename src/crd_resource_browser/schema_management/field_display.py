"""Display values derived from a single schema node.

Every function here is total: missing or malformed fields degrade to an empty
string (or ``False``) so that rendering a partially specified schema never
fails.
"""

from __future__ import annotations

import json
import math
from collections.abc import Mapping, Sequence
from decimal import Decimal
from typing import Any

from .schema_models import ArraySchema, BaseSchema, Schema


def resolve_scope(node: Schema) -> Schema:
    """Return the schema that carries display data for `node`.

    Arrays wrap a single item schema, so their items are returned instead.
    """
    if isinstance(node, ArraySchema):
        return node.items
    return node


def resolve_description(node: Schema) -> str:
    """Return the node description, or the array item type as a hint."""
    if not isinstance(node, BaseSchema):
        return ""
    if isinstance(node.description, str) and node.description:
        return node.description
    if isinstance(node, ArraySchema) and isinstance(node.items, BaseSchema):
        item_type = node.items.type
        return item_type if isinstance(item_type, str) else ""
    return ""


def resolve_default(node: Schema) -> str:
    """Return the default value as display text, empty when there is none."""
    if not isinstance(node, BaseSchema):
        return ""
    if node.has_default:
        return _display_value(node.default)
    if isinstance(node, ArraySchema) and isinstance(node.items, BaseSchema):
        if node.items.has_default:
            return _display_value(node.items.default)
    return ""


def resolve_enum(node: Schema) -> str:
    """Return allowed values rendered as ``[a, b, c]``, empty when unrestricted."""
    if not isinstance(node, BaseSchema):
        return ""
    values: Sequence[Any] = ()
    if _is_value_list(node.enum) and node.enum:
        values = node.enum
    elif isinstance(node, ArraySchema) and isinstance(node.items, BaseSchema):
        if _is_value_list(node.items.enum):
            values = node.items.enum
    if not values:
        return ""
    return "[" + ", ".join(_enum_member(value) for value in values) + "]"


def hash_contains_id(hash_fragment: str, current_id: str) -> bool:
    """Return whether `current_id` occurs anywhere in the URL fragment."""
    if not isinstance(hash_fragment, str) or not isinstance(current_id, str):
        return False
    return current_id in hash_fragment


def _is_value_list(value: Any) -> bool:
    return isinstance(value, Sequence) and not isinstance(value, (str, bytes))


def _display_value(value: Any) -> str:
    if isinstance(value, (Mapping, list, tuple)):
        try:
            return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)
        except (TypeError, ValueError):
            return str(value)
    return _scalar_text(value)


def _enum_member(value: Any) -> str:
    # Nested lists flatten with bare commas and null members are blank.
    if value is None:
        return ""
    if isinstance(value, (list, tuple)):
        return ",".join(_enum_member(item) for item in value)
    return _display_value(value)


def _scalar_text(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _number_text(value)
    return str(value)


def _number_text(value: float) -> str:
    """Shortest round-trip digits, plain between 1e-6 and 1e21, exponent outside."""
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"
    magnitude = abs(value)
    if 1e-6 <= magnitude < 1e21:
        if value.is_integer():
            return str(int(value))
        return format(Decimal(repr(value)), "f")
    mantissa, _, exponent = repr(value).partition("e")
    if mantissa.endswith(".0"):
        mantissa = mantissa[:-2]
    power = int(exponent) if exponent else 0
    return f"{mantissa}e{'+' if power >= 0 else '-'}{abs(power)}"
