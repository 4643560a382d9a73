"""Python builders with the calling convention of the generated wrapper module."""

from __future__ import annotations

import functools
from collections.abc import Callable, Mapping
from typing import Any

from .emit.wrapper import builder_name
from .schema.registry import NodeSchemaRegistry


def is_location(value: Any) -> bool:
    """Whether ``value`` is shaped like ``{start: {...}, end: {...}}``.

    This is a structural check.  A trailing data argument with the same shape
    is treated as a location too.
    """

    return (
        isinstance(value, Mapping)
        and isinstance(value.get("start"), Mapping)
        and isinstance(value.get("end"), Mapping)
    )


class NodeBuilders:
    """Construction context forwarding to a node-construction delegate.

    Each instance holds its own delegate and current location, so separate
    instances do not share ambient state.  Within one instance the current
    location is still shared by every call and is not thread-safe.

    Typical usage::

        builders = NodeBuilders(registry, delegate=babel_types)
        builders.set_current_location(loc)
        node = builders.identifier("x")              # loc from context
        node = builders.identifier("x", other_loc)   # explicit loc
        builders.asIdentifier(node)                  # node or None

    The delegate exposes one attribute per kind (``delegate.Identifier``)
    plus ``is<Kind>`` and ``assert<Kind>`` predicates.  Builder results may
    be mappings or plain objects; objects are copied from ``vars(node)``.

    Generated names take precedence over instance attributes: with a
    ``Delegate`` kind, ``builders.delegate`` is that kind's builder and the
    installed delegate is reached through :meth:`get_delegate`.
    """

    def __init__(
        self,
        registry: NodeSchemaRegistry,
        delegate: Any = None,
        current_location: Mapping[str, Any] | None = None,
    ):
        self._registry = registry
        self._delegate = delegate
        self._current_location = current_location
        dispatch: dict[str, tuple[str, str]] = {}
        for kind in registry.list_kinds():
            dispatch[builder_name(kind)] = ("build", kind)
            dispatch[f"is{kind}"] = ("is_kind", kind)
            dispatch[f"assert{kind}"] = ("assert_kind", kind)
            dispatch[f"as{kind}"] = ("as_kind", kind)
        self._dispatch = dispatch

    def __getattribute__(self, name: str) -> Any:
        if not name.startswith("_"):
            try:
                dispatch = object.__getattribute__(self, "_dispatch")
            except AttributeError:
                dispatch = {}
            entry = dispatch.get(name)
            if entry is not None:
                method, kind = entry
                return functools.partial(getattr(type(self), method), self, kind)
        return object.__getattribute__(self, name)

    @property
    def registry(self) -> NodeSchemaRegistry:
        return self._registry

    @property
    def delegate(self) -> Any:
        return self._delegate

    def get_delegate(self) -> Any:
        return self._delegate

    def set_delegate(self, delegate: Any) -> Any:
        self._delegate = delegate
        return delegate

    @property
    def current_location(self) -> Mapping[str, Any] | None:
        return self._current_location

    def set_current_location(self, loc: Mapping[str, Any] | None) -> Mapping[str, Any] | None:
        self._current_location = loc
        return loc

    def _delegate_fn(self, kind: str, prefix: str = "") -> Callable[..., Any]:
        if kind not in self._registry:
            raise KeyError(f"Unknown node kind: {kind!r}")
        if self._delegate is None:
            raise RuntimeError("No node-construction delegate installed; call set_delegate first")
        return getattr(self._delegate, f"{prefix}{kind}")

    @staticmethod
    def _forward_args(value: Any, opts: Mapping[str, Any] | None) -> tuple[Any, ...]:
        return (value,) if opts is None else (value, opts)

    def build(self, kind: str, *args: Any) -> dict[str, Any]:
        fn = self._delegate_fn(kind)
        has_loc = bool(args) and is_location(args[-1])
        if has_loc:
            loc = args[-1]
            args = args[:-1]
        else:
            loc = self._current_location
        node = fn(*args)
        fields = dict(node) if isinstance(node, Mapping) else dict(vars(node))
        return {**fields, "loc": loc}

    def is_kind(self, kind: str, value: Any, opts: Mapping[str, Any] | None = None) -> bool:
        return bool(self._delegate_fn(kind, "is")(*self._forward_args(value, opts)))

    def assert_kind(self, kind: str, value: Any, opts: Mapping[str, Any] | None = None) -> Any:
        return self._delegate_fn(kind, "assert")(*self._forward_args(value, opts))

    def as_kind(self, kind: str, value: Any, opts: Mapping[str, Any] | None = None) -> Any:
        return value if type(self).is_kind(self, kind, value, opts) else None
