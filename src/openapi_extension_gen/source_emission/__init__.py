"""Source emission exports."""

from .code_emitter import emit_compiler_module, emit_main_module, messages_module_for
from .proto_emitter import emit_proto
from .source_headers import AUTO_GENERATED_MARKER, render_header

__all__ = [
    "AUTO_GENERATED_MARKER",
    "emit_compiler_module",
    "emit_main_module",
    "emit_proto",
    "messages_module_for",
    "render_header",
]
