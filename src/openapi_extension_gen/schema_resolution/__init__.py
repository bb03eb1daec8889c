"""Schema resolution exports."""

from .schema_models import ResolvedSchema, SchemaDefinition, SchemaDocument
from .schema_resolver import SchemaError, load_schema_document, reference_target, resolve_schema

__all__ = [
    "ResolvedSchema",
    "SchemaDefinition",
    "SchemaDocument",
    "SchemaError",
    "load_schema_document",
    "reference_target",
    "resolve_schema",
]
