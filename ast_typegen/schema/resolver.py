from __future__ import annotations

import logging
import pprint
from collections.abc import Mapping
from dataclasses import dataclass, field

from .registry import NodeSchemaRegistry
from .translate import DEFAULT_SEQUENCE_TYPE, UNRECOGNIZED_SHAPE, TranslationError, translate
from .validators import validator_to_dict

logger = logging.getLogger(__name__)

UNKNOWN_TYPE = "mixed"

# Fields validated at run time as any expression, surfaced narrowly.
TYPE_OVERRIDES: dict[str, dict[str, str]] = {
    "ClassMethod": {"key": "Expression"},
    "ClassProperty": {"key": "Expression"},
    "Identifier": {"name": "string"},
    "MemberExpression": {"property": "Expression"},
    "OptionalMemberExpression": {"property": "Expression"},
    "ObjectMethod": {"key": "Expression"},
    "ObjectProperty": {"key": "Expression"},
    "TSDeclareMethod": {"key": "Expression"},
}


@dataclass(frozen=True, slots=True)
class Diagnostic:
    """A field whose validator could not be narrowed to a type."""

    kind: str
    field: str
    validator: object

    def __str__(self) -> str:
        return f"Unrecognised validator type for {self.kind}.{self.field}"


@dataclass(slots=True)
class TypeResolver:
    """Resolve the declared type of one ``(kind, field)`` pair.

    Precedence: the override table, then validator translation, then
    ``unknown_type``.  Unrecognized validator shapes are logged, recorded in
    ``diagnostics`` and degraded to ``unknown_type``; every other error
    propagates.
    """

    registry: NodeSchemaRegistry
    overrides: Mapping[str, Mapping[str, str]] = field(default_factory=lambda: TYPE_OVERRIDES)
    unknown_type: str = UNKNOWN_TYPE
    sequence_type: str = DEFAULT_SEQUENCE_TYPE
    diagnostics: list[Diagnostic] = field(default_factory=list)

    def override_for(self, kind: str, name: str) -> str | None:
        return self.overrides.get(kind, {}).get(name)

    def resolve(self, kind: str, name: str) -> str:
        override = self.override_for(kind, name)
        if override is not None:
            return override

        validator = self.registry.field(kind, name).validator
        if validator is None:
            return self.unknown_type

        try:
            return translate(validator, self.sequence_type)
        except TranslationError as exc:
            if exc.code != UNRECOGNIZED_SHAPE:
                raise
            diagnostic = Diagnostic(kind=kind, field=name, validator=exc.validator)
            self.diagnostics.append(diagnostic)
            logger.warning("%s", diagnostic)
            logger.warning("%s", pprint.pformat(validator_to_dict(validator), depth=10))
            return self.unknown_type
