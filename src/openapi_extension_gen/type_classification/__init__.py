"""Type classification exports."""

from .classification_models import GeneratedTypeInfo, ObjectExtension, PrimitiveExtension
from .primitive_types import (
    SUPPORTED_PRIMITIVE_NAMES,
    SUPPORTED_PRIMITIVE_TYPES,
    PrimitiveTypeInfo,
)
from .type_classifier import classify
from .validation_errors import (
    DuplicateIdError,
    ExtensionSchemaError,
    ExtensionValidationError,
    InvalidMessageNameError,
    MessageNameClashError,
    MissingIdError,
    UnsupportedTypeError,
)

__all__ = [
    "GeneratedTypeInfo",
    "ObjectExtension",
    "PrimitiveExtension",
    "PrimitiveTypeInfo",
    "SUPPORTED_PRIMITIVE_NAMES",
    "SUPPORTED_PRIMITIVE_TYPES",
    "classify",
    "ExtensionSchemaError",
    "ExtensionValidationError",
    "MissingIdError",
    "DuplicateIdError",
    "UnsupportedTypeError",
    "MessageNameClashError",
    "InvalidMessageNameError",
]
