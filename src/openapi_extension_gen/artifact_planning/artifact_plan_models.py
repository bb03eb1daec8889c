"""Artifact planning entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from openapi_extension_gen.type_classification import GeneratedTypeInfo

from .proto_options import ProtoOption


class DispatchShape(str, Enum):
    """Code shape used to decode one extension payload."""

    OBJECT = "object"
    WRAPPER = "wrapper"


@dataclass(frozen=True)
class DispatchEntry:
    """One branch of the generated extension dispatch table."""

    extension_id: str
    type_info: GeneratedTypeInfo
    shape: DispatchShape


@dataclass(frozen=True)
class ArtifactPlan:
    """Everything the emitters need, in the order they must emit it."""

    package_name: str
    proto_options: tuple[ProtoOption, ...]
    dispatch_entries: tuple[DispatchEntry, ...]
    needs_wrapper_import: bool
    imports: tuple[str, ...]
    dispatch_fragment: str


@dataclass(frozen=True)
class OutputLayout:
    """Output paths for one generated extension."""

    extension_dir: Path
    proto_dir: Path
    proto_path: Path
    compiler_path: Path
    main_path: Path
