"""Configuration domain exports."""

from .loader import ConfigurationError, load_configuration
from .runtime_settings import DEFAULT_SETTINGS, FormatterSettings, GeneratorSettings

__all__ = [
    "DEFAULT_SETTINGS",
    "FormatterSettings",
    "GeneratorSettings",
    "ConfigurationError",
    "load_configuration",
]
