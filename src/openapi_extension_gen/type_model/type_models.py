"""Structural type model entities for object extensions."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class FieldKind(str, Enum):
    """Whether a field holds a scalar or a nested message."""

    SCALAR = "scalar"
    MESSAGE = "message"


@dataclass(frozen=True)
class FieldModel:  # pylint: disable=too-many-instance-attributes
    """One message field derived from a schema property."""

    name: str
    json_name: str
    number: int
    kind: FieldKind
    type_name: str
    native_type: str | None
    repeated: bool
    required: bool


@dataclass(frozen=True)
class MessageModel:
    """One message derived from an object schema."""

    name: str
    description: str | None
    fields: tuple[FieldModel, ...]


@dataclass(frozen=True)
class TypeModel:
    """All messages of one extension schema, sorted by name."""

    messages: tuple[MessageModel, ...]

    def message_names(self) -> tuple[str, ...]:
        return tuple(message.name for message in self.messages)
