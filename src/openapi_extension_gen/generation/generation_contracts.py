"""Generation entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from openapi_extension_gen.artifact_planning import ArtifactPlan, OutputLayout


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for generating one extension."""

    schema_path: str
    output_root: str


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation."""

    layout: OutputLayout
    plan: ArtifactPlan
    written_files: tuple[Path, ...]
