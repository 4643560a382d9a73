from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from typing import Any


class Validator:
    """Base of the closed set of field validator variants."""

    __slots__ = ()


@dataclass(frozen=True, slots=True)
class ExactType(Validator):
    name: str


@dataclass(frozen=True, slots=True)
class OneOfTypes(Validator):
    names: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class OneOfValues(Validator):
    values: tuple[bool | int | float | str | None, ...]


@dataclass(frozen=True, slots=True)
class Each(Validator):
    item: Validator


@dataclass(frozen=True, slots=True)
class ChainOf(Validator):
    links: tuple[Validator, ...]


@dataclass(frozen=True, slots=True)
class UnknownValidator(Validator):
    raw: Any


def _as_names(value: Any, key: str) -> tuple[str, ...]:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ValueError(f"validator field {key!r} must be a list of type names")
    return tuple(str(name) for name in value)


def parse_validator(payload: Validator | Mapping[str, Any] | None) -> Validator | None:
    """Convert a native validator description into a :class:`Validator`.

    The native format is a nested option object, e.g. ``{"type": "string"}``,
    ``{"oneOfNodeTypes": [...]}`` or ``{"chainOf": [{"type": "array"},
    {"each": {...}}]}``.  Keys are checked in the same precedence the
    registry assigns them.  A mapping carrying none of the known keys is kept
    as :class:`UnknownValidator` so that translation can report it.
    """

    if payload is None or isinstance(payload, Validator):
        return payload
    if not isinstance(payload, Mapping):
        return UnknownValidator(payload)

    if payload.get("type"):
        return ExactType(str(payload["type"]))
    if payload.get("oneOfNodeTypes"):
        return OneOfTypes(_as_names(payload["oneOfNodeTypes"], "oneOfNodeTypes"))
    if payload.get("oneOfNodeOrValueTypes"):
        return OneOfTypes(
            _as_names(payload["oneOfNodeOrValueTypes"], "oneOfNodeOrValueTypes")
        )
    if payload.get("oneOf"):
        values = payload["oneOf"]
        if isinstance(values, str) or not isinstance(values, Sequence):
            raise ValueError("validator field 'oneOf' must be a list of literal values")
        return OneOfValues(tuple(values))
    if payload.get("each"):
        return Each(parse_validator(payload["each"]) or UnknownValidator(payload["each"]))
    if payload.get("chainOf"):
        links = payload["chainOf"]
        if isinstance(links, str) or not isinstance(links, Sequence):
            return UnknownValidator(dict(payload))
        return ChainOf(
            tuple(parse_validator(link) or UnknownValidator(link) for link in links)
        )

    return UnknownValidator(dict(payload))


def validator_to_dict(validator: Validator) -> Any:
    """Render a validator back to its native shape, for diagnostics."""

    if isinstance(validator, ExactType):
        return {"type": validator.name}
    if isinstance(validator, OneOfTypes):
        return {"oneOfNodeTypes": list(validator.names)}
    if isinstance(validator, OneOfValues):
        return {"oneOf": list(validator.values)}
    if isinstance(validator, Each):
        return {"each": validator_to_dict(validator.item)}
    if isinstance(validator, ChainOf):
        return {"chainOf": [validator_to_dict(link) for link in validator.links]}
    if isinstance(validator, UnknownValidator):
        return validator.raw
    raise TypeError(f"Unsupported validator: {type(validator)!r}")
