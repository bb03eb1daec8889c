"""Tests for formatter command orchestration."""

from __future__ import annotations

import sys
from pathlib import Path

import pytest
from openapi_extension_gen.configuration import FormatterSettings
from openapi_extension_gen.generation.source_formatting import (
    SourceFormattingError,
    format_source_file,
)


def test_format_source_file_is_skipped_without_formatter(tmp_path: Path) -> None:
    captured_calls: list[tuple[tuple[str, ...], Path]] = []

    def _fake_run(command: tuple[str, ...], cwd: Path) -> None:
        captured_calls.append((command, cwd))

    formatted = format_source_file(tmp_path / "main.py", FormatterSettings(), run_command=_fake_run)

    assert formatted is False
    assert captured_calls == []


def test_format_source_file_appends_path_to_configured_command(tmp_path: Path) -> None:
    captured_calls: list[tuple[tuple[str, ...], Path]] = []

    def _fake_run(command: tuple[str, ...], cwd: Path) -> None:
        captured_calls.append((command, cwd))

    target = tmp_path / "main.py"
    formatted = format_source_file(
        target, FormatterSettings(command=("ruff", "format")), run_command=_fake_run
    )

    assert formatted is True
    assert captured_calls == [(("ruff", "format", str(target)), tmp_path)]


def test_missing_formatter_command_raises(tmp_path: Path) -> None:
    target = tmp_path / "main.py"
    target.write_text("x = 1\n", encoding="utf-8")

    with pytest.raises(SourceFormattingError, match="Formatter command not found"):
        format_source_file(
            target, FormatterSettings(command=("definitely-not-a-formatter-binary",))
        )


def test_failing_formatter_command_raises(tmp_path: Path) -> None:
    target = tmp_path / "main.py"
    target.write_text("x = 1\n", encoding="utf-8")

    with pytest.raises(SourceFormattingError, match="failed with exit code 3"):
        format_source_file(
            target,
            FormatterSettings(command=(sys.executable, "-c", "raise SystemExit(3)")),
        )
