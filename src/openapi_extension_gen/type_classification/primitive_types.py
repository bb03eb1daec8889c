"""Supported scalar extension kinds."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType


@dataclass(frozen=True)
class PrimitiveTypeInfo:
    """Native and wrapper representation of one JSON-Schema scalar kind."""

    native_type: str
    wrapper_proto_name: str
    proto_type: str


SUPPORTED_PRIMITIVE_TYPES: Mapping[str, PrimitiveTypeInfo] = MappingProxyType(
    {
        "string": PrimitiveTypeInfo(
            native_type="str", wrapper_proto_name="StringValue", proto_type="string"
        ),
        "number": PrimitiveTypeInfo(
            native_type="float", wrapper_proto_name="DoubleValue", proto_type="double"
        ),
        "integer": PrimitiveTypeInfo(
            native_type="int", wrapper_proto_name="Int64Value", proto_type="int64"
        ),
        "boolean": PrimitiveTypeInfo(
            native_type="bool", wrapper_proto_name="BoolValue", proto_type="bool"
        ),
    }
)

SUPPORTED_PRIMITIVE_NAMES: tuple[str, ...] = tuple(sorted(SUPPORTED_PRIMITIVE_TYPES))
