from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from .emit.text import GeneratedText

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Artifact:
    """One generated text and its destination relative to the output root."""

    destination: str
    text: GeneratedText


def write_artifacts(artifacts: Iterable[Artifact], root: str | Path) -> list[Path]:
    """Overwrite each artifact under ``root``, creating parent directories."""

    base = Path(root)
    written: list[Path] = []
    for artifact in artifacts:
        target = base / artifact.destination
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(artifact.text.render(), encoding="utf-8")
        logger.debug("wrote %s (%d lines)", target, len(artifact.text.lines))
        written.append(target)
    return written
