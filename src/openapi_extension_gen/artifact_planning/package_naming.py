"""Name canonicalization shared by the proto and Python outputs."""

from __future__ import annotations

import re

_NON_IDENTIFIER_CHARACTERS = re.compile(r"[^0-9A-Za-z_]+")
_IDENTIFIER = re.compile(r"[A-Za-z_][0-9A-Za-z_]*")


def canonicalize(raw: str) -> str:
    """Turn an arbitrary identifier into a lowercase, underscore-delimited name.

    `myExtension-Name` becomes `my_extension_name`. Characters other than ASCII
    letters, digits and underscores are dropped first.
    """
    stripped = _NON_IDENTIFIER_CHARACTERS.sub("", raw)
    parts: list[str] = []
    for index, character in enumerate(stripped):
        if "A" <= character <= "Z":
            if index > 0 and stripped[index - 1] != "_":
                parts.append("_")
            parts.append(character.lower())
        else:
            parts.append(character)
    return "".join(parts)


def type_name_for_definition(definition_name: str) -> str:
    """Return the message type name used for a schema definition."""
    stripped = _NON_IDENTIFIER_CHARACTERS.sub("", definition_name)
    return stripped[:1].upper() + stripped[1:]


def constructor_name_for(type_name: str) -> str:
    """Return the decoder function name generated for a message type."""
    return f"new_{canonicalize(type_name)}"


def is_identifier(name: str) -> bool:
    """Return whether `name` is usable as a proto and Python identifier."""
    return _IDENTIFIER.fullmatch(name) is not None


def package_name_for(seed: str) -> str:
    """Return the canonical package name for an extension name such as `trace`.

    Raises:
      ValueError: If the canonical name is empty or starts with a digit.
    """
    package_name = canonicalize(seed)
    if not is_identifier(package_name):
        raise ValueError(
            f"Extension name '{seed}' does not yield a valid package name; "
            "it needs a letter or underscore before any digits."
        )
    return package_name
