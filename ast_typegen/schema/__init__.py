from .translate import UNRECOGNIZED_SHAPE, TranslationError, render_literal, translate
from .validators import (
    ChainOf,
    Each,
    ExactType,
    OneOfTypes,
    OneOfValues,
    UnknownValidator,
    Validator,
    parse_validator,
    validator_to_dict,
)

__all__ = [
    "UNRECOGNIZED_SHAPE",
    "ChainOf",
    "Each",
    "ExactType",
    "OneOfTypes",
    "OneOfValues",
    "TranslationError",
    "UnknownValidator",
    "Validator",
    "parse_validator",
    "render_literal",
    "translate",
    "validator_to_dict",
]
