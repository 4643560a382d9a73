"""Programmatic and CLI entry points for generating declarations and wrappers."""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import dataclass
from pathlib import Path

from .config import GeneratorConfig
from .emit.declarations import emit_declarations
from .emit.text import GeneratedText
from .emit.wrapper import emit_wrapper
from .schema.registry import NodeSchemaRegistry, RegistryError, load_registry
from .schema.resolver import Diagnostic, TypeResolver
from .writer import Artifact, write_artifacts

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class GenerationResult:
    declarations: GeneratedText
    wrapper: GeneratedText
    diagnostics: tuple[Diagnostic, ...]

    def artifacts(self, config: GeneratorConfig) -> list[Artifact]:
        return [
            Artifact(config.declarations_path, self.declarations),
            Artifact(config.wrapper_path, self.wrapper),
        ]


def generate(
    registry: NodeSchemaRegistry,
    config: GeneratorConfig | None = None,
) -> GenerationResult:
    """Generate both artifacts in memory.

    Fields whose validator shape is unrecognized degrade to
    ``config.unknown_type`` and are reported in ``diagnostics``; any other
    resolution error aborts generation.
    """

    cfg = config or GeneratorConfig()
    resolver = TypeResolver(
        registry=registry,
        unknown_type=cfg.unknown_type,
        sequence_type=cfg.sequence_type,
    )
    logger.debug("emitting declarations for %d node kinds", len(registry))
    declarations = emit_declarations(registry, resolver, cfg)
    logger.debug("emitting wrapper module")
    wrapper = emit_wrapper(registry, resolver, cfg)

    # Builder keys are resolved twice (declaration and signature).
    unique: dict[tuple[str, str], Diagnostic] = {}
    for diagnostic in resolver.diagnostics:
        unique.setdefault((diagnostic.kind, diagnostic.field), diagnostic)
    return GenerationResult(
        declarations=declarations.text,
        wrapper=wrapper,
        diagnostics=tuple(unique.values()),
    )


def run_generator(
    registry_path: str | Path,
    root: str | Path = ".",
    config: GeneratorConfig | None = None,
) -> list[Path]:
    """Load a registry, generate both artifacts and write them under ``root``.

    Returns:
        Destination paths in write order (declarations, then wrapper).
    """

    cfg = config or GeneratorConfig()
    registry = load_registry(registry_path)
    result = generate(registry, cfg)
    return write_artifacts(result.artifacts(cfg), root)


def _display_path(target: Path, root: Path) -> str:
    """Destination relative to the output root, or absolute when outside it."""

    try:
        return target.relative_to(root).as_posix()
    except ValueError:
        return str(target.resolve())


def _build_parser() -> argparse.ArgumentParser:
    defaults = GeneratorConfig()
    parser = argparse.ArgumentParser(
        description="Generate Flow node declarations and builder wrappers from a node-schema registry."
    )
    parser.add_argument("registry", help="JSON document with NODE_FIELDS/BUILDER_KEYS/ALIAS_KEYS")
    parser.add_argument("--root", default=".", help="Output root directory (default: .)")
    parser.add_argument(
        "--declarations",
        default=defaults.declarations_path,
        help=f"Declarations destination under root (default: {defaults.declarations_path})",
    )
    parser.add_argument(
        "--wrapper",
        default=defaults.wrapper_path,
        help=f"Wrapper destination under root (default: {defaults.wrapper_path})",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entrypoint that writes both artifacts and prints one line per file."""

    parser = _build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    config = GeneratorConfig(declarations_path=args.declarations, wrapper_path=args.wrapper)
    try:
        written = run_generator(args.registry, root=args.root, config=config)
    except RegistryError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    root = Path(args.root)
    for target in written:
        print(f"{config.source_label} -> {_display_path(target, root)}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
