"""Decide the generated shape of one extension definition."""

from __future__ import annotations

from openapi_extension_gen.schema_resolution.schema_models import SchemaDefinition

from .classification_models import GeneratedTypeInfo, ObjectExtension, PrimitiveExtension
from .primitive_types import SUPPORTED_PRIMITIVE_NAMES, SUPPORTED_PRIMITIVE_TYPES
from .validation_errors import MissingIdError, UnsupportedTypeError

OBJECT_TYPE_TAG = "object"


def classify(definition: SchemaDefinition) -> GeneratedTypeInfo:
    """Classify a definition as an object or a scalar wrapper extension.

    Raises:
      MissingIdError: If the definition declares no extension id.
      UnsupportedTypeError: If the type is neither object nor a supported scalar.
    """
    if not definition.id:
        raise MissingIdError(definition.name)

    if definition.type_tag is None or definition.type_tag == OBJECT_TYPE_TAG:
        return ObjectExtension(schema_name=definition.name)

    primitive = SUPPORTED_PRIMITIVE_TYPES.get(definition.type_tag)
    if primitive is None:
        raise UnsupportedTypeError(definition.name, definition.type_tag, SUPPORTED_PRIMITIVE_NAMES)
    return PrimitiveExtension(schema_name=definition.name, primitive=primitive)
