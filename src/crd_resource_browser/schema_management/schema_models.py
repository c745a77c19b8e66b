"""Schema management entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Final


class _NoDefault:
    """Marker for a schema node without a `default` key."""

    def __repr__(self) -> str:
        return "NO_DEFAULT"

    def __bool__(self) -> bool:
        return False


NO_DEFAULT: Final = _NoDefault()


@dataclass(frozen=True)
class BaseSchema:
    """Fields shared by every schema node."""

    type: str = ""
    description: str = ""
    default: Any = NO_DEFAULT
    format: str | None = None
    enum: tuple[Any, ...] = ()
    minimum: float | None = None
    maximum: float | None = None

    @property
    def has_default(self) -> bool:
        return self.default is not NO_DEFAULT


@dataclass(frozen=True)
class ObjectSchema(BaseSchema):
    """Schema node describing an object with named properties."""

    type: str = "object"
    properties: Mapping[str, Schema] = field(default_factory=dict)
    required: frozenset[str] = frozenset()


@dataclass(frozen=True)
class ArraySchema(BaseSchema):
    """Schema node whose elements are all described by `items`."""

    type: str = "array"
    items: Schema = field(default_factory=lambda: PrimitiveSchema())
    min_items: int | None = None
    max_items: int | None = None


@dataclass(frozen=True)
class PrimitiveSchema(BaseSchema):
    """Schema node for string, integer, number or boolean values."""


Schema = ObjectSchema | ArraySchema | PrimitiveSchema


@dataclass(frozen=True)
class OpenAPISchema:
    """One version of a CRD with its `spec` and `status` schemas."""

    name: str
    deprecated: bool
    spec: Schema
    status: Schema


@dataclass(frozen=True)
class CrdDefinition:
    """Full CustomResourceDefinition with every served version."""

    group: str
    kind: str
    versions: Mapping[str, OpenAPISchema]
