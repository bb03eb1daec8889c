"""Schema loading and reference flattening service."""

from __future__ import annotations

import json
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .schema_models import ResolvedSchema, SchemaDefinition, SchemaDocument

DEFINITIONS_REF_PREFIX = "#/definitions/"
_YAML_SUFFIXES = (".yaml", ".yml")


class SchemaError(Exception):
    """Raised for schema loading or reference resolution failures."""


def load_schema_document(schema_path: Path | str) -> SchemaDocument:
    """Read a JSON or YAML schema file into a document."""
    path = Path(schema_path)
    try:
        text = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SchemaError(f"Cannot read schema file {path}: {exc}") from exc

    if path.suffix.lower() in _YAML_SUFFIXES:
        try:
            root = yaml.safe_load(text)
        except yaml.YAMLError as exc:
            raise SchemaError(f"Invalid YAML schema {path}: {exc}") from exc
    else:
        try:
            root = json.loads(text)
        except json.JSONDecodeError as exc:
            raise SchemaError(f"Invalid JSON schema {path}: {exc}") from exc

    if not isinstance(root, Mapping):
        raise SchemaError(f"Schema root must be an object: {path}")
    return SchemaDocument(source_path=path, root=root)


def resolve_schema(document: SchemaDocument) -> ResolvedSchema:
    """Flatten `allOf` and definition-level `$ref` for every definition, in declared order.

    Property-level references stay as `{"$ref": ...}` nodes once their target
    has been checked, so the type model can refer to the named definition.
    """
    definitions = document.root.get("definitions")
    if definitions is None:
        definitions = {}
    if not isinstance(definitions, Mapping):
        raise SchemaError("Schema 'definitions' must be an object.")

    resolver = _ReferenceResolver(definitions)
    resolved: list[SchemaDefinition] = []
    for name, node in definitions.items():
        flattened = resolver.flatten(node, trail=(name,), inline_refs=True)
        resolved.append(
            SchemaDefinition(
                name=name,
                id=_read_id(flattened),
                type_tag=_read_type_tag(flattened),
                schema=flattened,
            )
        )
    return ResolvedSchema(source_path=document.source_path, definitions=tuple(resolved))


def reference_target(reference: Any) -> str:
    """Return the definition name a local `#/definitions/<name>` reference points to."""
    if not isinstance(reference, str) or not reference.startswith(DEFINITIONS_REF_PREFIX):
        raise SchemaError(f"Unsupported schema reference: {reference!r}")
    return reference[len(DEFINITIONS_REF_PREFIX) :]


class _ReferenceResolver:
    def __init__(self, definitions: Mapping[str, Any]):
        self._definitions = definitions

    def flatten(
        self, node: Any, *, trail: tuple[str, ...], inline_refs: bool
    ) -> dict[str, Any]:
        if not isinstance(node, Mapping):
            raise SchemaError(f"Schema node under {'/'.join(trail)} must be an object.")

        if "$ref" in node:
            target_name = self._lookup(node["$ref"], trail)
            if not inline_refs:
                return {"$ref": node["$ref"]}
            if target_name in trail:
                cycle = " -> ".join(trail + (target_name,))
                raise SchemaError(f"Circular schema reference: {cycle}")
            target = self.flatten(
                self._definitions[target_name], trail=trail + (target_name,), inline_refs=True
            )
            siblings = {key: value for key, value in node.items() if key != "$ref"}
            if not siblings:
                return target
            return _merge(self.flatten(siblings, trail=trail, inline_refs=True), target)

        result: dict[str, Any] = {}
        for key, value in node.items():
            if key == "allOf":
                continue
            if key == "properties":
                result[key] = self._flatten_properties(value, trail)
            elif key == "items":
                result[key] = self._flatten_items(value, trail)
            elif key == "additionalProperties" and isinstance(value, Mapping):
                result[key] = self.flatten(value, trail=trail, inline_refs=False)
            else:
                result[key] = value

        parts = node.get("allOf", ())
        if not isinstance(parts, Sequence) or isinstance(parts, str):
            raise SchemaError(f"'allOf' under {'/'.join(trail)} must be a list.")
        for part in parts:
            result = _merge(result, self.flatten(part, trail=trail, inline_refs=True))
        return result

    def _flatten_properties(self, properties: Any, trail: tuple[str, ...]) -> dict[str, Any]:
        if not isinstance(properties, Mapping):
            raise SchemaError(f"'properties' under {'/'.join(trail)} must be an object.")
        return {
            name: self.flatten(child, trail=trail + (name,), inline_refs=False)
            for name, child in properties.items()
        }

    def _flatten_items(self, items: Any, trail: tuple[str, ...]) -> Any:
        if isinstance(items, Sequence) and not isinstance(items, str):
            return [self.flatten(item, trail=trail, inline_refs=False) for item in items]
        return self.flatten(items, trail=trail, inline_refs=False)

    def _lookup(self, reference: Any, trail: tuple[str, ...]) -> str:
        target_name = reference_target(reference)
        if target_name not in self._definitions:
            raise SchemaError(f"Unresolved schema reference {reference} under {'/'.join(trail)}")
        return target_name


def _merge(base: Mapping[str, Any], addition: Mapping[str, Any]) -> dict[str, Any]:
    """Merge `addition` into `base`; keys already in `base` win."""
    merged = dict(base)
    for key, value in addition.items():
        if key == "properties" and isinstance(merged.get(key), Mapping):
            properties = dict(merged[key])
            for name, child in value.items():
                properties.setdefault(name, child)
            merged[key] = properties
        elif key == "required" and isinstance(merged.get(key), list):
            merged[key] = merged[key] + [item for item in value if item not in merged[key]]
        else:
            merged.setdefault(key, value)
    return merged


def _read_id(schema: Mapping[str, Any]) -> str | None:
    value = schema.get("id", schema.get("$id"))
    if isinstance(value, str):
        return value
    return None


def _read_type_tag(schema: Mapping[str, Any]) -> str | None:
    value = schema.get("type")
    if value is None or isinstance(value, str):
        return value
    if isinstance(value, list):
        non_null = [item for item in value if item != "null"]
        if len(non_null) == 1 and isinstance(non_null[0], str):
            return non_null[0]
    return json.dumps(value)
