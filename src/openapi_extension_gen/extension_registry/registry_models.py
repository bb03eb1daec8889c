"""Extension registry entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from openapi_extension_gen.type_classification import (
    ExtensionSchemaError,
    ExtensionValidationError,
    GeneratedTypeInfo,
)

ExtensionRegistry = Mapping[str, GeneratedTypeInfo]


@dataclass(frozen=True)
class RegistryBuildResult:
    """Registry built from one schema plus every problem found on the way.

    The registry is partial when `errors` is not empty and must not be used
    to emit artifacts in that case.
    """

    registry: ExtensionRegistry
    errors: tuple[ExtensionSchemaError, ...]

    @property
    def is_valid(self) -> bool:
        """Return True when no validation problem was recorded."""
        return not self.errors

    def raise_for_errors(self) -> None:
        """Raise one combined error when any problem was recorded."""
        if self.errors:
            raise ExtensionValidationError(self.errors)
