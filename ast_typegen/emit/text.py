from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class GeneratedText:
    """Immutable sequence of output lines for one generated artifact."""

    lines: tuple[str, ...]

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> GeneratedText:
        return cls(tuple(lines))

    def render(self) -> str:
        return "\n".join(self.lines)

    def __str__(self) -> str:
        return self.render()
