"""Schema resolution entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True)
class SchemaDocument:
    """Parsed, unresolved schema file."""

    source_path: Path
    root: Mapping[str, Any]


@dataclass(frozen=True)
class SchemaDefinition:
    """One named entry of the resolved definitions table."""

    name: str
    id: str | None
    type_tag: str | None
    schema: Mapping[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ResolvedSchema:
    """Schema whose definitions have `allOf` merged and references checked."""

    source_path: Path
    definitions: tuple[SchemaDefinition, ...]
