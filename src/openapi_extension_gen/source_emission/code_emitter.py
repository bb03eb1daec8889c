"""Render the Python decoding module and dispatch program of an extension."""

from __future__ import annotations

import json
import keyword

from openapi_extension_gen.artifact_planning import ArtifactPlan, constructor_name_for
from openapi_extension_gen.type_model import FieldKind, FieldModel, MessageModel, TypeModel

from .source_headers import render_header

_COMPILER_PRELUDE = '''"""Decoders that build {proto_file_name} messages from YAML values."""

from __future__ import annotations

import sys
from collections.abc import Mapping
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

import {messages_module} as messages  # noqa: E402


class CompilerError(Exception):
    """Raised when a YAML value does not match the extension schema."""


class Context:
    """Location of the value being decoded, used in error messages."""

    def __init__(self, path: str):
        self.path = path

    def child(self, name: str) -> Context:
        return Context(f"{{self.path}}.{{name}}")


def read_scalar(value, kind, context: Context):
    """Check one scalar value against its native type."""
    if kind is float and isinstance(value, int) and not isinstance(value, bool):
        return float(value)
    if kind is int and isinstance(value, bool):
        raise CompilerError(f"{{context.path}} must be of type int")
    if not isinstance(value, kind):
        raise CompilerError(f"{{context.path}} must be of type {{kind.__name__}}")
    return value


def read_list(value, context: Context) -> list:
    """Check that a value is a list."""
    if not isinstance(value, list):
        raise CompilerError(f"{{context.path}} must be a list")
    return value


def read_mapping(value, context: Context, *, allowed: tuple, required: tuple) -> Mapping:
    """Check that a value is a mapping with known and required keys only."""
    if not isinstance(value, Mapping):
        raise CompilerError(f"{{context.path}} must be a mapping")
    missing = [key for key in required if key not in value]
    if missing:
        raise CompilerError(f"{{context.path}} is missing required properties: {{missing}}")
    unknown = [str(key) for key in value if key not in allowed]
    if unknown:
        raise CompilerError(f"{{context.path}} has unexpected properties: {{unknown}}")
    return value
'''

_MAIN_TEMPLATE = '''"""Decode OpenAPI extension payloads of the {package_name} package."""

from __future__ import annotations

{imports}

_PROTO_DIR = Path(__file__).resolve().parent / "proto"


def _load_compiler():
    spec = importlib.util.spec_from_file_location(
        "{package_name}_compiler", _PROTO_DIR / "{compiler_file_name}"
    )
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


compiler = _load_compiler()


def handle_extension(extension_name: str, yaml_input: str):
    """Decode one extension payload; return (False, None) for unknown names."""
    # All supported extensions
{dispatch_fragment}    return False, None


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if len(args) != 1:
        print("usage: main.py EXTENSION_NAME < payload.yaml", file=sys.stderr)
        return 2
    handled, message = handle_extension(args[0], sys.stdin.read())
    if not handled:
        print(f"Unsupported extension: {{args[0]}}", file=sys.stderr)
        return 1
    sys.stdout.buffer.write(message.SerializeToString())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
'''


def messages_module_for(proto_file_name: str) -> str:
    """Return the module name protoc generates for a proto file such as `x-trace.proto`."""
    stem = proto_file_name.removesuffix(".proto")
    return stem.replace("-", "_").replace(".", "_") + "_pb2"


def emit_compiler_module(
    type_model: TypeModel, proto_file_name: str, license_header: str = ""
) -> str:
    """Return the module that decodes YAML values into the messages of `type_model`."""
    source = render_header(license_header, "#") + _COMPILER_PRELUDE.format(
        proto_file_name=proto_file_name,
        messages_module=messages_module_for(proto_file_name),
    )
    for message in type_model.messages:
        source += "\n\n" + _constructor_source(message) + "\n"
    return source


def emit_main_module(plan: ArtifactPlan, compiler_file_name: str, license_header: str = "") -> str:
    """Return the dispatch program embedding the planned imports and dispatch branches."""
    body = _MAIN_TEMPLATE.format(
        package_name=plan.package_name,
        imports="\n".join(plan.imports),
        compiler_file_name=compiler_file_name,
        dispatch_fragment=plan.dispatch_fragment,
    )
    return render_header(license_header, "#") + body


def _constructor_source(message: MessageModel) -> str:
    allowed = _tuple_literal(field.json_name for field in message.fields)
    required = _tuple_literal(field.json_name for field in message.fields if field.required)
    lines = [
        f"def {constructor_name_for(message.name)}(info, context: Context)"
        f" -> messages.{message.name}:",
        f'    """Build a {message.name} message."""',
        f"    mapping = read_mapping(info, context, allowed={allowed}, required={required})",
        f"    message = messages.{message.name}()",
    ]
    for field in message.fields:
        lines.extend(_field_lines(field))
    lines.append("    return message")
    return "\n".join(lines)


def _field_lines(field: FieldModel) -> list[str]:
    key = json.dumps(field.json_name)
    context = f"context.child({key})"
    lines = [f"    if {key} in mapping:"]
    if field.repeated:
        lines.append(f"        for item in read_list(mapping[{key}], {context}):")
        if field.kind is FieldKind.MESSAGE:
            value = f"{constructor_name_for(field.type_name)}(item, {context})"
            lines.append(f"            {_attribute(field)}.add().CopyFrom({value})")
        else:
            value = f"read_scalar(item, {field.native_type}, {context})"
            lines.append(f"            {_attribute(field)}.append({value})")
        return lines

    if field.kind is FieldKind.MESSAGE:
        value = f"{constructor_name_for(field.type_name)}(mapping[{key}], {context})"
        lines.append(f"        {_attribute(field)}.CopyFrom({value})")
    else:
        value = f"read_scalar(mapping[{key}], {field.native_type}, {context})"
        if keyword.iskeyword(field.name):
            lines.append(f'        setattr(message, "{field.name}", {value})')
        else:
            lines.append(f"        message.{field.name} = {value}")
    return lines


def _attribute(field: FieldModel) -> str:
    if keyword.iskeyword(field.name):
        return f'getattr(message, "{field.name}")'
    return f"message.{field.name}"


def _tuple_literal(items) -> str:
    rendered = [json.dumps(item) for item in items]
    if len(rendered) == 1:
        return f"({rendered[0]},)"
    return f"({', '.join(rendered)})"
