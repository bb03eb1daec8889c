"""Build the extension registry from resolved schema definitions."""

from __future__ import annotations

from collections.abc import Iterable

from openapi_extension_gen.schema_resolution.schema_models import SchemaDefinition
from openapi_extension_gen.type_classification import (
    DuplicateIdError,
    ExtensionSchemaError,
    GeneratedTypeInfo,
    classify,
)

from .registry_models import RegistryBuildResult


def build_extension_registry(definitions: Iterable[SchemaDefinition]) -> RegistryBuildResult:
    """Classify every definition and collect all problems instead of stopping at the first.

    Definitions are visited in declared order. The first definition claiming an
    id owns the registry slot; later claimants are reported as duplicates.
    """
    registry: dict[str, GeneratedTypeInfo] = {}
    errors: list[ExtensionSchemaError] = []

    for definition in definitions:
        if definition.id and definition.id in registry:
            errors.append(DuplicateIdError(definition.name, registry[definition.id].schema_name))
            continue
        try:
            type_info = classify(definition)
        except ExtensionSchemaError as exc:
            errors.append(exc)
            continue
        assert definition.id
        registry[definition.id] = type_info

    return RegistryBuildResult(registry=registry, errors=tuple(errors))
