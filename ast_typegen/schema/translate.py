from __future__ import annotations

import json
import math
from dataclasses import dataclass

from .validators import ChainOf, Each, ExactType, OneOfTypes, OneOfValues, Validator

UNRECOGNIZED_SHAPE = "unrecognized_validator_shape"

DEFAULT_SEQUENCE_TYPE = "$ReadOnlyArray"


@dataclass(slots=True)
class TranslationError(ValueError):
    """Raised when a validator cannot be expressed as a type.

    Attributes:
        code: Machine-readable error code.  Only ``"unrecognized_validator_shape"``
            is recoverable; the resolver re-raises every other code.
        validator: The offending validator, kept for diagnostics.
        message: Human-readable description.
    """

    code: str
    validator: object
    message: str = "Unrecognised validator type"

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


_STRING_ESCAPES = {"\\": "\\\\", "'": "\\'", "\n": "\\n", "\r": "\\r", "\t": "\\t"}


def _render_float(value: float) -> str:
    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    # Integral floats print without a fraction below the exponent threshold.
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    return repr(value)


def render_literal(value: bool | int | float | str | None) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, int):
        return str(value)
    if isinstance(value, float):
        return _render_float(value)
    escaped = "".join(_STRING_ESCAPES.get(char, char) for char in str(value))
    return f"'{escaped}'"


def translate(validator: Validator, sequence_type: str = DEFAULT_SEQUENCE_TYPE) -> str:
    """Translate a validator into a Flow type expression.

    Raises:
        TranslationError: with code ``"unrecognized_validator_shape"`` when the
            validator matches none of the supported shapes.
    """

    if isinstance(validator, ExactType):
        return validator.name
    if isinstance(validator, OneOfTypes):
        return " | ".join(validator.names)
    if isinstance(validator, OneOfValues):
        return " | ".join(render_literal(value) for value in validator.values)
    if isinstance(validator, ChainOf) and len(validator.links) == 2:
        marker, rule = validator.links
        if isinstance(marker, ExactType) and marker.name == "array" and isinstance(rule, Each):
            return f"{sequence_type}<{translate(rule.item, sequence_type)}>"
        if (
            isinstance(marker, ExactType)
            and marker.name == "string"
            and isinstance(rule, OneOfValues)
        ):
            return " | ".join(json.dumps(value) for value in rule.values)

    raise TranslationError(code=UNRECOGNIZED_SHAPE, validator=validator)
