"""Decoder module and dispatch program emission tests."""

from __future__ import annotations

from openapi_extension_gen.artifact_planning import plan_artifacts
from openapi_extension_gen.source_emission import (
    AUTO_GENERATED_MARKER,
    emit_compiler_module,
    emit_main_module,
    messages_module_for,
)
from openapi_extension_gen.type_classification import (
    SUPPORTED_PRIMITIVE_TYPES,
    ObjectExtension,
    PrimitiveExtension,
)
from openapi_extension_gen.type_model import FieldKind, FieldModel, MessageModel, TypeModel


def _scalar(name: str, number: int, proto_type: str, native_type: str, **kwargs) -> FieldModel:
    return FieldModel(
        name=name,
        json_name=kwargs.get("json_name", name),
        number=number,
        kind=FieldKind.SCALAR,
        type_name=proto_type,
        native_type=native_type,
        repeated=kwargs.get("repeated", False),
        required=kwargs.get("required", False),
    )


def _message_field(name: str, number: int, type_name: str, *, repeated: bool) -> FieldModel:
    return FieldModel(
        name=name,
        json_name=name,
        number=number,
        kind=FieldKind.MESSAGE,
        type_name=type_name,
        native_type=None,
        repeated=repeated,
        required=False,
    )


def _type_model() -> TypeModel:
    return TypeModel(
        messages=(
            MessageModel(
                name="Span",
                description=None,
                fields=(_scalar("id", 1, "string", "str", required=True),),
            ),
            MessageModel(
                name="Trace",
                description=None,
                fields=(
                    _scalar("service_name", 1, "string", "str", json_name="serviceName"),
                    _scalar("tags", 2, "string", "str", repeated=True),
                    _scalar("from", 3, "int64", "int"),
                    _message_field("root", 4, "Span", repeated=False),
                    _message_field("children", 5, "Span", repeated=True),
                ),
            ),
        )
    )


def test_messages_module_name_follows_protoc_convention() -> None:
    assert messages_module_for("x-trace.proto") == "x_trace_pb2"


def test_compiler_module_defines_one_constructor_per_message() -> None:
    source = emit_compiler_module(_type_model(), "x-trace.proto")

    compile(source, "x-trace.py", "exec")
    assert source.startswith(f"# {AUTO_GENERATED_MARKER}\n")
    assert "import x_trace_pb2 as messages" in source
    assert "def new_span(info, context: Context) -> messages.Span:" in source
    assert "def new_trace(info, context: Context) -> messages.Trace:" in source
    assert 'allowed=("id",), required=("id",)' in source
    assert 'allowed=("serviceName", "tags", "from", "root", "children"), required=()' in source


def test_compiler_module_decodes_each_field_shape() -> None:
    source = emit_compiler_module(_type_model(), "x-trace.proto")

    assert (
        'message.service_name = read_scalar(mapping["serviceName"], str, '
        'context.child("serviceName"))'
    ) in source
    assert 'message.tags.append(read_scalar(item, str, context.child("tags")))' in source
    assert 'setattr(message, "from", read_scalar(mapping["from"], int' in source
    assert 'message.root.CopyFrom(new_span(mapping["root"], context.child("root")))' in source
    assert 'message.children.add().CopyFrom(new_span(item, context.child("children")))' in source


def test_compiler_module_without_messages_still_compiles() -> None:
    source = emit_compiler_module(TypeModel(messages=()), "x-empty.proto")

    compile(source, "x-empty.py", "exec")
    assert "def read_scalar(" in source
    assert "def new_" not in source


def test_main_module_embeds_dispatch_fragment_and_wrapper_import() -> None:
    plan = plan_artifacts(
        {
            "x-weight": PrimitiveExtension(
                schema_name="weight", primitive=SUPPORTED_PRIMITIVE_TYPES["number"]
            ),
            "x-trace": ObjectExtension(schema_name="trace"),
        },
        "trace",
    )

    source = emit_main_module(plan, "x-trace.py", license_header="Copyright Example")

    compile(source, "main.py", "exec")
    assert source.startswith(f"# Copyright Example\n\n# {AUTO_GENERATED_MARKER}\n")
    assert "from google.protobuf import wrappers_pb2" in source
    assert plan.dispatch_fragment in source
    assert '_PROTO_DIR / "x-trace.py"' in source
    assert source.index('"x-trace"') < source.index('"x-weight"')


def test_main_module_without_primitives_skips_wrapper_import() -> None:
    plan = plan_artifacts({"x-trace": ObjectExtension(schema_name="trace")}, "trace")

    source = emit_main_module(plan, "x-trace.py")

    compile(source, "main.py", "exec")
    assert "wrappers_pb2" not in source
    assert "compiler.new_trace(info" in source
