"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FormatterSettings:
    """External formatter run on every generated Python file."""

    command: tuple[str, ...] = ()

    @property
    def enabled(self) -> bool:
        return bool(self.command)


@dataclass(frozen=True)
class GeneratorSettings:
    """Top-level generator configuration aggregate."""

    path: Path | None = None
    license_header: str = ""
    license_path: Path | None = None
    formatter: FormatterSettings = FormatterSettings()


DEFAULT_SETTINGS = GeneratorSettings()
