from .aliases import AliasMap
from .declarations import DeclarationResult, emit_declarations
from .text import GeneratedText
from .wrapper import builder_name, builder_signature, emit_wrapper

__all__ = [
    "AliasMap",
    "DeclarationResult",
    "GeneratedText",
    "builder_name",
    "builder_signature",
    "emit_declarations",
    "emit_wrapper",
]
