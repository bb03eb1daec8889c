"""Build message models from classified object extensions."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any

from openapi_extension_gen.artifact_planning.package_naming import (
    canonicalize,
    is_identifier,
    type_name_for_definition,
)
from openapi_extension_gen.extension_registry import ExtensionRegistry
from openapi_extension_gen.schema_resolution import SchemaDefinition, reference_target
from openapi_extension_gen.type_classification import (
    SUPPORTED_PRIMITIVE_TYPES,
    ExtensionSchemaError,
    ExtensionValidationError,
    InvalidMessageNameError,
    MessageNameClashError,
    ObjectExtension,
)

from .type_models import FieldKind, FieldModel, MessageModel, TypeModel

_LOGGER = logging.getLogger(__name__)
_WORD_SEPARATORS = re.compile(r"[^0-9A-Za-z]+")


@dataclass(frozen=True)
class _FieldShape:
    kind: FieldKind
    type_name: str
    native_type: str | None
    repeated: bool


@dataclass
class _BuildState:
    """Mutable collector for messages discovered while walking definitions."""

    definitions_by_name: Mapping[str, SchemaDefinition]
    messages: dict[str, MessageModel]
    origins: dict[str, str]
    errors: list[ExtensionSchemaError]


def build_type_model(
    definitions: Sequence[SchemaDefinition], registry: ExtensionRegistry
) -> TypeModel:
    """Return one message per object extension plus its nested object properties.

    Raises:
      ExtensionValidationError: If a definition name is not a usable message name, or
        two definitions or nested objects map to the same message name.
    """
    state = _BuildState(
        definitions_by_name={definition.name: definition for definition in definitions},
        messages={},
        origins={},
        errors=[],
    )
    for type_info in registry.values():
        if not isinstance(type_info, ObjectExtension):
            continue
        definition = state.definitions_by_name[type_info.schema_name]
        type_name = type_name_for_definition(definition.name)
        if not is_identifier(type_name):
            state.errors.append(InvalidMessageNameError(definition.name, type_name))
            continue
        _build_message(type_name, definition.schema, state, definition.name, definition.name)
    if state.errors:
        raise ExtensionValidationError(state.errors)
    return TypeModel(messages=tuple(state.messages[name] for name in sorted(state.messages)))


def _build_message(
    type_name: str,
    schema: Mapping[str, Any],
    state: _BuildState,
    schema_name: str,
    origin: str,
) -> None:
    first_origin = state.origins.get(type_name)
    if first_origin is not None:
        state.errors.append(MessageNameClashError(schema_name, type_name, first_origin))
        return
    state.origins[type_name] = origin

    properties = schema.get("properties") or {}
    required = set(schema.get("required") or ())
    fields: list[FieldModel] = []
    seen_names: set[str] = set()
    for json_name, node in properties.items():
        field_name = canonicalize(json_name)
        if not is_identifier(field_name) or field_name in seen_names:
            _LOGGER.warning("Skipping property %s.%s: unusable field name", type_name, json_name)
            continue
        shape = _field_shape(type_name, json_name, node, state, schema_name, origin)
        if shape is None:
            _LOGGER.warning(
                "Skipping property %s.%s: unsupported schema shape", type_name, json_name
            )
            continue
        seen_names.add(field_name)
        fields.append(
            FieldModel(
                name=field_name,
                json_name=json_name,
                number=len(fields) + 1,
                kind=shape.kind,
                type_name=shape.type_name,
                native_type=shape.native_type,
                repeated=shape.repeated,
                required=json_name in required,
            )
        )

    description = schema.get("description")
    state.messages[type_name] = MessageModel(
        name=type_name,
        description=description if isinstance(description, str) else None,
        fields=tuple(fields),
    )


def _field_shape(
    parent_type: str,
    json_name: str,
    node: Mapping[str, Any],
    state: _BuildState,
    schema_name: str,
    origin: str,
) -> _FieldShape | None:
    if "$ref" in node:
        return _reference_shape(node["$ref"], state)

    node_type = _node_type(node)
    primitive = SUPPORTED_PRIMITIVE_TYPES.get(node_type or "")
    if primitive is not None:
        return _FieldShape(FieldKind.SCALAR, primitive.proto_type, primitive.native_type, False)

    if node_type == "array":
        items = node.get("items")
        if not isinstance(items, Mapping):
            return None
        element = _field_shape(parent_type, json_name, items, state, schema_name, origin)
        if element is None or element.repeated:
            return None
        return _FieldShape(element.kind, element.type_name, element.native_type, True)

    if node_type in (None, "object") and isinstance(node.get("properties"), Mapping):
        nested_name = parent_type + _camel_case(json_name)
        _build_message(nested_name, node, state, schema_name, f"{origin}.{json_name}")
        return _FieldShape(FieldKind.MESSAGE, nested_name, None, False)

    return None


def _reference_shape(reference: str, state: _BuildState) -> _FieldShape:
    target = state.definitions_by_name[reference_target(reference)]
    primitive = SUPPORTED_PRIMITIVE_TYPES.get(target.type_tag or "")
    if primitive is not None:
        return _FieldShape(FieldKind.SCALAR, primitive.proto_type, primitive.native_type, False)
    return _FieldShape(FieldKind.MESSAGE, type_name_for_definition(target.name), None, False)


def _node_type(node: Mapping[str, Any]) -> str | None:
    value = node.get("type")
    if isinstance(value, list):
        non_null = [item for item in value if isinstance(item, str) and item != "null"]
        return non_null[0] if len(non_null) == 1 else None
    return value if isinstance(value, str) else None


def _camel_case(name: str) -> str:
    return "".join(part[:1].upper() + part[1:] for part in _WORD_SEPARATORS.split(name))
