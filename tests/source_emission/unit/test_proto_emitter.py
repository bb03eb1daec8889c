"""Proto emission tests."""

from __future__ import annotations

from openapi_extension_gen.artifact_planning import build_proto_options
from openapi_extension_gen.source_emission import AUTO_GENERATED_MARKER, emit_proto
from openapi_extension_gen.type_model import FieldKind, FieldModel, MessageModel, TypeModel


def _field(name: str, number: int, type_name: str, *, repeated: bool = False) -> FieldModel:
    kind = FieldKind.SCALAR if type_name[0].islower() else FieldKind.MESSAGE
    return FieldModel(
        name=name,
        json_name=name,
        number=number,
        kind=kind,
        type_name=type_name,
        native_type="str" if kind is FieldKind.SCALAR else None,
        repeated=repeated,
        required=False,
    )


def _type_model() -> TypeModel:
    return TypeModel(
        messages=(
            MessageModel(
                name="Trace",
                description="Tracing settings.",
                fields=(
                    _field("name", 1, "string"),
                    _field("children", 2, "Span", repeated=True),
                ),
            ),
        )
    )


def test_proto_contains_package_options_and_messages() -> None:
    proto = emit_proto("sample", build_proto_options("sample"), _type_model())

    assert proto.startswith(f"// {AUTO_GENERATED_MARKER}\n\nsyntax = \"proto3\";\n")
    assert "package sample;" in proto
    assert "option java_multiple_files = true;" in proto
    assert 'option java_outer_classname = "VendorExtensionProto";' in proto
    assert 'option java_package = "org.openapi.extension.sample";' in proto
    assert 'option objc_class_prefix = "sample";' in proto
    assert "// Tracing settings.\nmessage Trace {\n" in proto
    assert "  string name = 1;\n  repeated Span children = 2;\n}" in proto
    assert proto.endswith("}\n")


def test_options_keep_planned_order() -> None:
    proto = emit_proto("sample", build_proto_options("sample"), TypeModel(messages=()))

    positions = [
        proto.index(f"option {name} ")
        for name in (
            "java_multiple_files",
            "java_outer_classname",
            "java_package",
            "objc_class_prefix",
        )
    ]
    assert positions == sorted(positions)


def test_license_header_is_rendered_as_comments() -> None:
    proto = emit_proto(
        "sample",
        build_proto_options("sample"),
        TypeModel(messages=()),
        license_header="Copyright 2024 Example\n\nLicensed under Apache-2.0",
    )

    assert proto.startswith(
        "// Copyright 2024 Example\n//\n// Licensed under Apache-2.0\n\n"
        f"// {AUTO_GENERATED_MARKER}\n"
    )


def test_emission_is_byte_stable() -> None:
    first = emit_proto("sample", build_proto_options("sample"), _type_model())
    second = emit_proto("sample", build_proto_options("sample"), _type_model())

    assert first == second
