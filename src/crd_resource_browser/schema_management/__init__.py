"""Schema management exports."""

from .field_display import (
    hash_contains_id,
    resolve_default,
    resolve_description,
    resolve_enum,
    resolve_scope,
)
from .schema_models import (
    NO_DEFAULT,
    ArraySchema,
    CrdDefinition,
    ObjectSchema,
    OpenAPISchema,
    PrimitiveSchema,
    Schema,
)
from .schema_projection import (
    SchemaError,
    load_crd_definition,
    load_schema_document,
    parse_schema,
)

__all__ = [
    "NO_DEFAULT",
    "ArraySchema",
    "CrdDefinition",
    "ObjectSchema",
    "OpenAPISchema",
    "PrimitiveSchema",
    "Schema",
    "SchemaError",
    "hash_contains_id",
    "load_crd_definition",
    "load_schema_document",
    "parse_schema",
    "resolve_default",
    "resolve_description",
    "resolve_enum",
    "resolve_scope",
]
