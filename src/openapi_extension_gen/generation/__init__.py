"""Generation domain exports."""

from .generation_contracts import GenerationOutcome, GenerationRequest
from .generation_driver import GenerationError, generate_extension
from .source_formatting import CommandRunner, SourceFormattingError, format_source_file

__all__ = [
    "CommandRunner",
    "GenerationError",
    "GenerationOutcome",
    "GenerationRequest",
    "SourceFormattingError",
    "format_source_file",
    "generate_extension",
]
