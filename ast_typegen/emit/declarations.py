"""Flow declaration emitter: one ``declare class`` per node kind plus alias unions."""

from __future__ import annotations

from dataclasses import dataclass

from ..config import GeneratorConfig
from ..schema.registry import NodeSchemaRegistry
from ..schema.resolver import TypeResolver
from .aliases import AliasMap
from .text import GeneratedText

LOCATION_DECLARATION = (
    "type Location = {start: {line: number, column: number}, "
    "end: {line: number, column: number}};"
)

JSX_VALUE_DECLARATION = (
    "type JSXValue = JSXText | JSXExpressionContainer | JSXSpreadChild | JSXElement;"
)


@dataclass(frozen=True, slots=True)
class DeclarationResult:
    text: GeneratedText
    aliases: AliasMap


def _declare_kind(
    kind: str,
    registry: NodeSchemaRegistry,
    resolver: TypeResolver,
    config: GeneratorConfig,
    aliases: AliasMap,
) -> list[str]:
    spec = registry.get(kind)
    lines = [f"declare class {kind} {{", f"  type: '{kind}';", "  loc: ?Location;"]
    for name in spec.ordered_fields():
        if name in config.skipped_fields:
            continue
        field_type = resolver.resolve(kind, name)
        marker = "?" if spec.fields[name].is_optional else ""
        lines.append(f"  {name}: {marker}{field_type};")
    lines.append("")

    memberships = [*spec.aliases, config.universal_alias]
    for alias in memberships:
        lines.append(f"  // alias: {alias}")
    aliases.record(kind, memberships)

    lines.append("}")
    lines.append("")
    return lines


def _alias_union(alias: str, members: tuple[str, ...]) -> str:
    union = "".join(f" | {member}" for member in members)
    return f"type {alias} = ({union.lstrip()});"


def emit_declarations(
    registry: NodeSchemaRegistry,
    resolver: TypeResolver,
    config: GeneratorConfig | None = None,
) -> DeclarationResult:
    """Emit the type-declaration artifact.

    Node kinds are visited in sorted order and their fields in builder-key
    order followed by the remaining names sorted, so two runs over the same
    registry produce identical text.  Alias unions follow in the order the
    aliases were first seen; ``config.excluded_aliases`` are skipped because a
    callable category is not a disjoint union of node kinds.
    """

    cfg = config or GeneratorConfig()
    aliases = AliasMap()
    lines = [f"// {cfg.disclaimer}", "", LOCATION_DECLARATION, ""]

    for kind in registry.list_kinds():
        lines.extend(_declare_kind(kind, registry, resolver, cfg, aliases))

    for alias in aliases:
        if alias in cfg.excluded_aliases:
            continue
        lines.append(_alias_union(alias, aliases.members(alias)))
        lines.append("")

    lines.append(JSX_VALUE_DECLARATION)
    return DeclarationResult(text=GeneratedText.from_lines(lines), aliases=aliases)
