"""Schema validation problems found while classifying extensions."""

from __future__ import annotations

from collections.abc import Sequence


class ExtensionSchemaError(Exception):
    """Base class for one content problem in an extension schema."""

    def __init__(self, schema_name: str, message: str):
        super().__init__(message)
        self.schema_name = schema_name
        self.message = message


class MissingIdError(ExtensionSchemaError):
    """Definition does not declare the extension it represents."""

    def __init__(self, schema_name: str):
        super().__init__(
            schema_name,
            f"Schema {schema_name} has no 'id' field, which must match the name of the "
            "OpenAPI extension that the schema represents.",
        )


class DuplicateIdError(ExtensionSchemaError):
    """Definition claims an id that an earlier definition already owns."""

    def __init__(self, schema_name: str, first_schema_name: str):
        super().__init__(
            schema_name,
            f"Schema {schema_name} and {first_schema_name} have the same 'id' field value.",
        )
        self.first_schema_name = first_schema_name


class UnsupportedTypeError(ExtensionSchemaError):
    """Definition uses a type that cannot be generated."""

    def __init__(self, schema_name: str, type_tag: str, supported_types: Sequence[str]):
        self.type_tag = type_tag
        self.supported_types = tuple(supported_types)
        super().__init__(
            schema_name,
            f"Schema {schema_name} has type '{type_tag}' which is not supported. "
            f"Supported primitive types are [{' '.join(self.supported_types)}].",
        )


class MessageNameClashError(ExtensionSchemaError):
    """Two schema parts map to the same generated message name."""

    def __init__(self, schema_name: str, message_name: str, first_origin: str):
        super().__init__(
            schema_name,
            f"Schema {schema_name} generates message {message_name}, which is already "
            f"generated for {first_origin}.",
        )
        self.message_name = message_name
        self.first_origin = first_origin


class InvalidMessageNameError(ExtensionSchemaError):
    """Definition name does not yield a usable message name."""

    def __init__(self, schema_name: str, message_name: str):
        super().__init__(
            schema_name,
            f"Schema {schema_name} yields message name '{message_name}', which is not a "
            "valid identifier.",
        )
        self.message_name = message_name


class ExtensionValidationError(Exception):
    """Combined report of every schema validation problem in one schema file."""

    def __init__(self, errors: Sequence[ExtensionSchemaError]):
        self.errors = tuple(errors)
        super().__init__("\n".join(error.message for error in self.errors))
