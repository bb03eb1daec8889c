"""Render the Protocol-Buffer definition of an extension."""

from __future__ import annotations

import json
from collections.abc import Sequence

from openapi_extension_gen.artifact_planning import ProtoOption
from openapi_extension_gen.type_model import MessageModel, TypeModel

from .source_headers import render_header

_UNQUOTED_OPTION_VALUES = {"true", "false"}


def emit_proto(
    package_name: str,
    options: Sequence[ProtoOption],
    type_model: TypeModel,
    license_header: str = "",
) -> str:
    """Return proto3 source for the package, its options and every message."""
    lines = [
        render_header(license_header, "//"),
        'syntax = "proto3";',
        "",
        f"package {package_name};",
        "",
    ]
    for option in options:
        lines.extend(option.comment.splitlines())
        lines.append(f"option {option.name} = {_option_value(option.value)};")
        lines.append("")
    for message in type_model.messages:
        lines.extend(_message_lines(message))
        lines.append("")
    return "\n".join(lines).rstrip("\n") + "\n"


def _option_value(value: str) -> str:
    if value in _UNQUOTED_OPTION_VALUES:
        return value
    return json.dumps(value)


def _message_lines(message: MessageModel) -> list[str]:
    lines = [f"// {line}".rstrip() for line in (message.description or "").splitlines()]
    lines.append(f"message {message.name} {{")
    for field in message.fields:
        label = "repeated " if field.repeated else ""
        lines.append(f"  {label}{field.type_name} {field.name} = {field.number};")
    lines.append("}")
    return lines
