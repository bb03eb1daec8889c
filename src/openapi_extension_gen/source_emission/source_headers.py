"""Header lines shared by every generated file."""

from __future__ import annotations

AUTO_GENERATED_MARKER = "THIS FILE IS AUTOMATICALLY GENERATED."


def render_header(license_header: str, comment_prefix: str) -> str:
    """Return the license block and generated-file marker as comment lines."""
    lines = [
        f"{comment_prefix} {line}".rstrip() for line in license_header.strip("\n").splitlines()
    ]
    if lines:
        lines.append("")
    lines.append(f"{comment_prefix} {AUTO_GENERATED_MARKER}")
    return "\n".join(lines) + "\n"
