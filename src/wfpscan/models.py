"""Core wfpscan data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass(slots=True, frozen=True)
class SourceFile:
    """Raw content of a file together with the path recorded in its header."""

    path: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


@dataclass(slots=True, frozen=True)
class FingerprintEvent:
    """Masked window minimum and the source line it was selected on."""

    line: int
    value: int


@dataclass(slots=True)
class WfpDocument:
    """Header record and fingerprints of a single file."""

    path: str
    digest: str
    size: int
    events: List[FingerprintEvent] = field(default_factory=list)
