"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import DEFAULT_SETTINGS, FormatterSettings, GeneratorSettings


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str | None) -> GeneratorSettings:
    """Load and validate the generator configuration; `None` yields the defaults."""
    if config_path is None:
        return DEFAULT_SETTINGS

    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigurationError(f"Cannot read configuration file {path}: {exc}") from exc
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown = sorted(str(key) for key in parsed if key not in ("license", "formatter"))
    if unknown:
        raise ConfigurationError(f"Unknown configuration sections: {', '.join(unknown)}")

    license_header, license_path = _parse_license_section(parsed.get("license"), path.parent)
    formatter = _parse_formatter_section(parsed.get("formatter"))

    return GeneratorSettings(
        path=path,
        license_header=license_header,
        license_path=license_path,
        formatter=formatter,
    )


def _parse_license_section(value: Any, base_path: Path) -> tuple[str, Path | None]:
    if value is None:
        return "", None
    if isinstance(value, str):
        return value, None
    mapping = _require_mapping(value, "license")
    inline = mapping.get("inline")
    path_value = mapping.get("path")
    if inline and path_value:
        raise ConfigurationError("License definition must not set both inline and path.")
    if inline:
        if not isinstance(inline, str):
            raise ConfigurationError("License inline value must be a string.")
        return inline, None
    if path_value:
        if not isinstance(path_value, str):
            raise ConfigurationError("License path must be a string.")
        license_path = _resolve_path(base_path, path_value)
        if not license_path.exists():
            raise ConfigurationError(f"License file not found: {license_path}")
        try:
            return license_path.read_text(encoding="utf-8"), license_path
        except OSError as exc:
            raise ConfigurationError(f"Cannot read license file {license_path}: {exc}") from exc
    raise ConfigurationError("License definition requires either inline or path.")


def _parse_formatter_section(value: Any) -> FormatterSettings:
    if value is None:
        return FormatterSettings()
    section = _require_mapping(value, "formatter")
    command = section.get("command")
    if command is None:
        return FormatterSettings()
    if isinstance(command, str):
        parts = tuple(command.split())
    elif isinstance(command, Sequence):
        parts = tuple(_require_non_empty_string(item, "formatter.command") for item in command)
    else:
        raise ConfigurationError("formatter.command must be a string or list of strings.")
    if not parts:
        raise ConfigurationError("formatter.command must not be empty.")
    return FormatterSettings(command=parts)


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path)
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} entries must be strings.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} entries must not be empty.")
    return stripped
