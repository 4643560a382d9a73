from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from ..models import FieldSpec, NodeKindSpec


class RegistryError(ValueError):
    """Raised when a node-schema registry document is malformed."""


class NodeSchemaRegistry:
    """Read-only view over the node kinds the generator iterates.

    Typical usage::

        registry = load_registry("babel-types.json")
        for kind in registry.list_kinds():      # sorted, deterministic
            spec = registry.get(kind)
            for name in spec.ordered_fields():
                ...

    Attributes:
        _kinds: Internal mapping from kind name to :class:`NodeKindSpec`.
    """

    def __init__(self, kinds: Mapping[str, NodeKindSpec]):
        self._kinds = dict(kinds)

    def __contains__(self, kind: object) -> bool:
        return kind in self._kinds

    def __len__(self) -> int:
        return len(self._kinds)

    def list_kinds(self) -> list[str]:
        return sorted(self._kinds.keys())

    def get(self, kind: str) -> NodeKindSpec:
        try:
            return self._kinds[kind]
        except KeyError:
            raise KeyError(f"Unknown node kind: {kind!r}") from None

    def field(self, kind: str, name: str) -> FieldSpec:
        spec = self.get(kind)
        try:
            return spec.fields[name]
        except KeyError:
            raise KeyError(f"Unknown field {name!r} on node kind {kind!r}") from None


def _table(payload: Mapping[str, Any], key: str, *, required: bool) -> Mapping[str, Any]:
    table = payload.get(key)
    if table is None:
        if required:
            raise RegistryError(f"Registry document requires table {key!r}")
        return {}
    if not isinstance(table, Mapping):
        raise RegistryError(f"Registry table {key!r} must be an object")
    return table


def registry_from_tables(
    node_fields: Mapping[str, Mapping[str, Any]],
    builder_keys: Mapping[str, list[str]],
    alias_keys: Mapping[str, list[str]] | None = None,
) -> NodeSchemaRegistry:
    """Build a registry from the three tables a node-schema library exposes.

    Kinds are taken from ``builder_keys``; a kind without ``node_fields``
    entry has no fields.
    """

    aliases = alias_keys or {}
    kinds: dict[str, NodeKindSpec] = {}
    for name, keys in builder_keys.items():
        raw_fields = node_fields.get(name) or {}
        if not isinstance(raw_fields, Mapping):
            raise RegistryError(f"{name}: field table must be an object")
        try:
            kinds[name] = NodeKindSpec(
                name=name,
                builder_keys=tuple(keys or ()),
                fields={
                    field_name: FieldSpec.model_validate(raw or {})
                    for field_name, raw in raw_fields.items()
                },
                aliases=tuple(aliases.get(name) or ()),
            )
        except ValidationError as exc:
            raise RegistryError(f"{name}: invalid registry entry: {exc}") from exc
    return NodeSchemaRegistry(kinds)


def registry_from_payload(payload: Mapping[str, Any]) -> NodeSchemaRegistry:
    if not isinstance(payload, Mapping):
        raise RegistryError(f"Registry document must be an object, got {type(payload)!r}")
    return registry_from_tables(
        node_fields=_table(payload, "NODE_FIELDS", required=True),
        builder_keys=_table(payload, "BUILDER_KEYS", required=True),
        alias_keys=_table(payload, "ALIAS_KEYS", required=False),
    )


def load_registry(path: str | Path) -> NodeSchemaRegistry:
    """Load a registry from a JSON document with ``NODE_FIELDS``,
    ``BUILDER_KEYS`` and optional ``ALIAS_KEYS`` tables."""

    source = Path(path)
    try:
        text = source.read_text(encoding="utf-8")
    except OSError as exc:
        raise RegistryError(f"{source}: cannot read registry: {exc}") from exc
    try:
        payload = json.loads(text)
    except json.JSONDecodeError as exc:
        raise RegistryError(f"{source}: invalid JSON: {exc}") from exc
    return registry_from_payload(payload)
