"""File-level proto compiler options for generated extensions."""

from __future__ import annotations

from dataclasses import dataclass

JAVA_PACKAGE_ROOT = "org.openapi.extension"


@dataclass(frozen=True)
class ProtoOption:
    """One `option name = value;` directive with its leading comment."""

    name: str
    value: str
    comment: str


BASE_PROTO_OPTIONS: tuple[ProtoOption, ...] = (
    ProtoOption(
        name="java_multiple_files",
        value="true",
        comment=(
            "// This option lets the proto compiler generate Java code inside the package\n"
            "// name (see below) instead of inside an outer class. It creates a simpler\n"
            "// developer experience by reducing one-level of name nesting and be\n"
            "// consistent with most programming languages that don't support outer classes."
        ),
    ),
    ProtoOption(
        name="java_outer_classname",
        value="VendorExtensionProto",
        comment=(
            "// The Java outer classname should be the filename in UpperCamelCase. This\n"
            "// class is only used to hold proto descriptor, so developers don't need to\n"
            "// work with it directly."
        ),
    ),
)


def build_proto_options(package_name: str) -> tuple[ProtoOption, ...]:
    """Return the ordered option list for one canonical package name."""
    return BASE_PROTO_OPTIONS + (
        ProtoOption(
            name="java_package",
            value=f"{JAVA_PACKAGE_ROOT}.{package_name}",
            comment="// The Java package name must be proto package name with proper prefix.",
        ),
        ProtoOption(
            name="objc_class_prefix",
            value=package_name,
            comment=(
                "// A reasonable prefix for the Objective-C symbols generated from the package.\n"
                "// It should at a minimum be 3 characters long, all uppercase, and convention\n"
                "// is to use an abbreviation of the package name. Something short, but\n"
                "// hopefully unique enough to not conflict with things that may come along in\n"
                "// the future. 'GPB' is reserved for the protocol buffer implementation itself."
            ),
        ),
    )
