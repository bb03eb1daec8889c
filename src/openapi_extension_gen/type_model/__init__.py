"""Type model exports."""

from .type_model_builder import build_type_model
from .type_models import FieldKind, FieldModel, MessageModel, TypeModel

__all__ = ["FieldKind", "FieldModel", "MessageModel", "TypeModel", "build_type_model"]
