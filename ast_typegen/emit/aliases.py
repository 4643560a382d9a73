from __future__ import annotations

from collections.abc import Iterable, Iterator


class AliasMap:
    """Accumulates alias name -> member node kinds during a declaration pass.

    Aliases keep the order in which they were first seen, and members keep
    the order in which they were recorded.
    """

    def __init__(self) -> None:
        self._members: dict[str, list[str]] = {}

    def record(self, kind: str, aliases: Iterable[str]) -> None:
        for alias in aliases:
            members = self._members.setdefault(alias, [])
            if kind not in members:
                members.append(kind)

    def members(self, alias: str) -> tuple[str, ...]:
        return tuple(self._members.get(alias, ()))

    def __contains__(self, alias: object) -> bool:
        return alias in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._members)

    def __len__(self) -> int:
        return len(self._members)

    def as_dict(self) -> dict[str, list[str]]:
        return {alias: list(members) for alias, members in self._members.items()}
