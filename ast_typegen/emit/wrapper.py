"""Wrapper-module emitter: builder, predicate, assertion and cast functions."""

from __future__ import annotations

from ..config import GeneratorConfig
from ..schema.registry import NodeSchemaRegistry
from ..schema.resolver import TypeResolver
from .text import GeneratedText


def builder_name(kind: str) -> str:
    return kind[:1].lower() + kind[1:]


def parameter_name(name: str, config: GeneratorConfig) -> str:
    return f"_{name}" if name in config.reserved_words else name


def builder_signature(
    kind: str,
    registry: NodeSchemaRegistry,
    resolver: TypeResolver,
    config: GeneratorConfig,
) -> str:
    spec = registry.get(kind)
    params = []
    for name in spec.builder_keys:
        marker = "?" if spec.fields[name].is_optional else ""
        params.append(f"{parameter_name(name, config)}: {marker}{resolver.resolve(kind, name)}")
    return f"{builder_name(kind)}({', '.join(params)}): {kind}"


def _preamble(config: GeneratorConfig) -> list[str]:
    return [
        f"// {config.disclaimer}",
        "// @flow",
        "",
        "let t: any = null;",
        "let currentLocation: any = null;",
        "export function getCurrentLocation(): Location { return currentLocation; }",
        "export function setCurrentLocation(loc: Location): Location "
        "{ return currentLocation = loc; }",
        f"export function {config.delegate_setter}(_t: Object): Location {{ return t = _t; }}",
        "",
    ]


def _builder(kind: str, signature: str) -> list[str]:
    # Trailing location detection is a shape check: a data argument shaped
    # like {start: {...}, end: {...}} is indistinguishable from a location.
    return [
        f"  {signature} {{",
        "    const args = ([].slice: any).call(arguments);",
        "    let loc = args[args.length - 1];",
        "    const hasLoc = (loc && typeof loc === 'object' "
        "&& typeof loc.start === 'object' && typeof loc.end === 'object');",
        "    if (hasLoc) {",
        "      args.pop();",
        "    }",
        f"    return {{...t.{kind}.apply(t, args), "
        "loc: hasLoc ? (loc: any) : getCurrentLocation()};",
        "  },",
    ]


def _predicate(kind: str) -> list[str]:
    return [
        f"  is{kind}(value: any, opts?: Object): boolean {{",
        f"    return t.is{kind}.apply(t, arguments);",
        "  },",
    ]


def _assertion(kind: str) -> list[str]:
    return [
        f"  assert{kind}(value: {kind}, opts?: Object): mixed {{",
        f"    return t.assert{kind}.apply(t, arguments);",
        "  },",
    ]


def _cast(kind: str) -> list[str]:
    return [
        f"  as{kind}(value: any, opts?: Object): {kind} | void {{",
        f"    return t.is{kind}.apply(t, arguments) ? (value: any) : undefined;",
        "  },",
    ]


def emit_wrapper(
    registry: NodeSchemaRegistry,
    resolver: TypeResolver,
    config: GeneratorConfig | None = None,
) -> GeneratedText:
    """Emit the wrapper-module artifact.

    The module keeps two pieces of process-wide state: the delegate ``t``
    installed by ``config.delegate_setter`` and the ambient current location.
    Builders stamp every node with an explicit trailing location when given,
    otherwise with the ambient one.  Concurrent callers relying on the
    ambient location race with each other.

    Functions are grouped by family (all builders, then all predicates, all
    assertions, all casts), each family in sorted kind order.
    """

    cfg = config or GeneratorConfig()
    kinds = registry.list_kinds()
    lines = _preamble(cfg)
    lines.append(f"const {cfg.aggregate_name} = {{")

    for kind in kinds:
        lines.extend(_builder(kind, builder_signature(kind, registry, resolver, cfg)))
    for kind in kinds:
        lines.extend(_predicate(kind))
    for kind in kinds:
        lines.extend(_assertion(kind))
    for kind in kinds:
        lines.extend(_cast(kind))

    lines.extend(["}", "", f"export default {cfg.aggregate_name};", ""])
    return GeneratedText.from_lines(lines)
