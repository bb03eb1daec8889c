"""Run the configured source formatter on generated files."""

from __future__ import annotations

import shlex
import subprocess
from collections.abc import Callable
from pathlib import Path

from openapi_extension_gen.configuration import FormatterSettings

CommandRunner = Callable[[tuple[str, ...], Path], None]


class SourceFormattingError(Exception):
    """Raised when the formatter command fails."""


def format_source_file(
    path: Path, formatter: FormatterSettings, *, run_command: CommandRunner | None = None
) -> bool:
    """Format one file in place; return False when no formatter is configured."""
    if not formatter.enabled:
        return False
    command_runner = run_command or _run_checked_command
    command_runner(formatter.command + (str(path),), path.parent)
    return True


def _run_checked_command(command: tuple[str, ...], cwd: Path) -> None:
    """Run one formatter command and wrap subprocess errors with domain-friendly messages."""
    try:
        subprocess.run(list(command), cwd=cwd, check=True, capture_output=True)
    except FileNotFoundError as exc:
        command_text = shlex.join(command)
        raise SourceFormattingError(f"Formatter command not found: {command_text}") from exc
    except subprocess.CalledProcessError as exc:
        command_text = shlex.join(command)
        raise SourceFormattingError(
            f"Formatter command failed with exit code {exc.returncode}: {command_text}"
        ) from exc
