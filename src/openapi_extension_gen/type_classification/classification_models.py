"""Classification outcomes for extension definitions."""

from __future__ import annotations

from dataclasses import dataclass

from .primitive_types import PrimitiveTypeInfo


@dataclass(frozen=True)
class ObjectExtension:
    """Extension whose payload is a structured object message."""

    schema_name: str


@dataclass(frozen=True)
class PrimitiveExtension:
    """Extension whose payload is a scalar carried in a wrapper message."""

    schema_name: str
    primitive: PrimitiveTypeInfo


GeneratedTypeInfo = ObjectExtension | PrimitiveExtension
