"""Generation use-case service."""

from __future__ import annotations

import logging
from pathlib import Path

from openapi_extension_gen.artifact_planning import (
    EXTENSION_NAME_PREFIX,
    plan_artifacts,
    plan_output_layout,
)
from openapi_extension_gen.configuration import DEFAULT_SETTINGS, GeneratorSettings
from openapi_extension_gen.extension_registry import build_extension_registry
from openapi_extension_gen.schema_resolution import (
    SchemaError,
    load_schema_document,
    resolve_schema,
)
from openapi_extension_gen.source_emission import (
    emit_compiler_module,
    emit_main_module,
    emit_proto,
)
from openapi_extension_gen.type_model import build_type_model

from .generation_contracts import GenerationOutcome, GenerationRequest
from .source_formatting import CommandRunner, SourceFormattingError, format_source_file

_LOGGER = logging.getLogger(__name__)


class GenerationError(Exception):
    """Raised when reading the schema or writing generated files fails."""


def generate_extension(
    request: GenerationRequest,
    *,
    settings: GeneratorSettings = DEFAULT_SETTINGS,
    run_command: CommandRunner | None = None,
) -> GenerationOutcome:
    """Generate the proto, decoder module and dispatch program for one extension schema.

    Raises:
      GenerationError: On schema loading, resolution, write or formatting failures.
      ExtensionValidationError: When the schema definitions are invalid; nothing is
        written in that case.
    """
    schema_path = Path(request.schema_path)
    file_base_name = schema_path.stem
    try:
        layout = plan_output_layout(request.output_root, file_base_name)
    except ValueError as exc:
        raise GenerationError(str(exc)) from exc

    _LOGGER.info("Resolving schema %s", schema_path)
    try:
        resolved = resolve_schema(load_schema_document(schema_path))
    except SchemaError as exc:
        raise GenerationError(str(exc)) from exc

    build_result = build_extension_registry(resolved.definitions)
    if not build_result.is_valid:
        _LOGGER.info("Schema %s has %d validation errors", schema_path, len(build_result.errors))
    build_result.raise_for_errors()

    type_model = build_type_model(resolved.definitions, build_result.registry)
    plan = plan_artifacts(build_result.registry, file_base_name[len(EXTENSION_NAME_PREFIX) :])
    _LOGGER.info(
        "Planned package %s with %d extensions and %d messages",
        plan.package_name,
        len(plan.dispatch_entries),
        len(type_model.messages),
    )

    written_files: list[Path] = []
    license_header = settings.license_header
    try:
        layout.proto_dir.mkdir(parents=True, exist_ok=True)
        _write_file(
            layout.proto_path,
            emit_proto(plan.package_name, plan.proto_options, type_model, license_header),
            written_files,
        )
        _write_file(
            layout.compiler_path,
            emit_compiler_module(type_model, layout.proto_path.name, license_header),
            written_files,
        )
        format_source_file(layout.compiler_path, settings.formatter, run_command=run_command)
        _write_file(
            layout.main_path,
            emit_main_module(plan, layout.compiler_path.name, license_header),
            written_files,
        )
        format_source_file(layout.main_path, settings.formatter, run_command=run_command)
    except OSError as exc:
        raise GenerationError(f"Failed to write generated files: {exc}") from exc
    except SourceFormattingError as exc:
        raise GenerationError(str(exc)) from exc

    return GenerationOutcome(layout=layout, plan=plan, written_files=tuple(written_files))


def _write_file(path: Path, text: str, written_files: list[Path]) -> None:
    path.write_text(text, encoding="utf-8")
    written_files.append(path)
    _LOGGER.info("Wrote %s", path)
