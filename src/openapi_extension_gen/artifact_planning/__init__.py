"""Artifact planning exports."""

from .artifact_plan_models import ArtifactPlan, DispatchEntry, DispatchShape, OutputLayout
from .artifact_planner import (
    EXTENSION_NAME_PREFIX,
    plan_artifacts,
    plan_output_layout,
    render_dispatch_fragment,
)
from .package_naming import (
    canonicalize,
    constructor_name_for,
    is_identifier,
    package_name_for,
    type_name_for_definition,
)
from .proto_options import BASE_PROTO_OPTIONS, JAVA_PACKAGE_ROOT, ProtoOption, build_proto_options

__all__ = [
    "ArtifactPlan",
    "DispatchEntry",
    "DispatchShape",
    "OutputLayout",
    "EXTENSION_NAME_PREFIX",
    "plan_artifacts",
    "plan_output_layout",
    "render_dispatch_fragment",
    "canonicalize",
    "constructor_name_for",
    "is_identifier",
    "package_name_for",
    "type_name_for_definition",
    "BASE_PROTO_OPTIONS",
    "JAVA_PACKAGE_ROOT",
    "ProtoOption",
    "build_proto_options",
]
