"""Derive the artifact plan for one extension schema."""

from __future__ import annotations

import json
from pathlib import Path

from openapi_extension_gen.extension_registry import ExtensionRegistry
from openapi_extension_gen.type_classification import GeneratedTypeInfo, PrimitiveExtension

from .artifact_plan_models import ArtifactPlan, DispatchEntry, DispatchShape, OutputLayout
from .package_naming import constructor_name_for, package_name_for, type_name_for_definition
from .proto_options import build_proto_options

EXTENSION_NAME_PREFIX = "x-"
EXTENSION_DIR_PREFIX = "openapi_extensions_"
SOURCE_FILE_EXTENSION = "py"

BASE_IMPORTS: tuple[str, ...] = (
    "import importlib.util",
    "import sys",
    "from pathlib import Path",
    "import yaml",
)
WRAPPER_IMPORT = "from google.protobuf import wrappers_pb2"

_OBJECT_CASE_TEMPLATE = """    if extension_name == {extension_id}:
        info = yaml.safe_load(yaml_input)
        return True, compiler.{constructor}(info, compiler.Context("$root"))
"""

_WRAPPER_CASE_TEMPLATE = """    if extension_name == {extension_id}:
        info = compiler.read_scalar(
            yaml.safe_load(yaml_input), {native_type}, compiler.Context("$root")
        )
        return True, wrappers_pb2.{wrapper}(value=info)
"""


def plan_artifacts(registry: ExtensionRegistry, package_name_seed: str) -> ArtifactPlan:
    """Plan the package name, proto options and dispatch table for a validated registry.

    Dispatch entries are sorted by extension id so generated code is byte-stable.
    """
    package_name = package_name_for(package_name_seed)
    entries = tuple(
        DispatchEntry(
            extension_id=extension_id,
            type_info=registry[extension_id],
            shape=_dispatch_shape(registry[extension_id]),
        )
        for extension_id in sorted(registry)
    )
    needs_wrapper_import = any(entry.shape is DispatchShape.WRAPPER for entry in entries)
    imports = BASE_IMPORTS + ((WRAPPER_IMPORT,) if needs_wrapper_import else ())
    return ArtifactPlan(
        package_name=package_name,
        proto_options=build_proto_options(package_name),
        dispatch_entries=entries,
        needs_wrapper_import=needs_wrapper_import,
        imports=imports,
        dispatch_fragment=render_dispatch_fragment(entries),
    )


def plan_output_layout(output_root: Path | str, file_base_name: str) -> OutputLayout:
    """Return output paths for a schema file base name such as `x-trace`.

    Raises:
      ValueError: If the base name lacks the `x-` extension marker or the rest of it
        does not yield a valid package name.
    """
    if not file_base_name.startswith(EXTENSION_NAME_PREFIX):
        raise ValueError(f"Schema file name has to start with '{EXTENSION_NAME_PREFIX}'.")
    extension_name = file_base_name[len(EXTENSION_NAME_PREFIX) :]
    package_name_for(extension_name)
    extension_dir = Path(output_root) / f"{EXTENSION_DIR_PREFIX}{extension_name}"
    proto_dir = extension_dir / "proto"
    return OutputLayout(
        extension_dir=extension_dir,
        proto_dir=proto_dir,
        proto_path=proto_dir / f"{file_base_name}.proto",
        compiler_path=proto_dir / f"{file_base_name}.{SOURCE_FILE_EXTENSION}",
        main_path=extension_dir / f"main.{SOURCE_FILE_EXTENSION}",
    )


def render_dispatch_fragment(entries: tuple[DispatchEntry, ...]) -> str:
    """Render the dispatch branches in entry order."""
    return "".join(_render_case(entry) for entry in entries)


def _dispatch_shape(type_info: GeneratedTypeInfo) -> DispatchShape:
    if isinstance(type_info, PrimitiveExtension):
        return DispatchShape.WRAPPER
    return DispatchShape.OBJECT


def _render_case(entry: DispatchEntry) -> str:
    extension_id = json.dumps(entry.extension_id)
    type_info = entry.type_info
    if isinstance(type_info, PrimitiveExtension):
        return _WRAPPER_CASE_TEMPLATE.format(
            extension_id=extension_id,
            native_type=type_info.primitive.native_type,
            wrapper=type_info.primitive.wrapper_proto_name,
        )
    return _OBJECT_CASE_TEMPLATE.format(
        extension_id=extension_id,
        constructor=constructor_name_for(type_name_for_definition(type_info.schema_name)),
    )
