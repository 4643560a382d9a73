"""Public package API for ast-typegen."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("ast-typegen")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

from .schema.registry import NodeSchemaRegistry, RegistryError, load_registry, registry_from_tables
from .schema.resolver import TYPE_OVERRIDES, Diagnostic, TypeResolver
from .config import GeneratorConfig
from .data import load_sample_registry
from .models import FieldSpec, NodeKindSpec
from .runner import GenerationResult, generate, run_generator
from .runtime import NodeBuilders, is_location

__all__ = [
    "__version__",
    "TYPE_OVERRIDES",
    "Diagnostic",
    "FieldSpec",
    "GenerationResult",
    "GeneratorConfig",
    "NodeBuilders",
    "NodeKindSpec",
    "NodeSchemaRegistry",
    "RegistryError",
    "TypeResolver",
    "generate",
    "is_location",
    "load_registry",
    "load_sample_registry",
    "registry_from_tables",
    "run_generator",
]
