"""Extension registry exports."""

from .registry_builder import build_extension_registry
from .registry_models import ExtensionRegistry, RegistryBuildResult

__all__ = ["ExtensionRegistry", "RegistryBuildResult", "build_extension_registry"]
