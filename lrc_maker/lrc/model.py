from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType


@dataclass(frozen=True, slots=True)
class Word:
    text: str
    time: float | None = None  # None: no own timestamp


@dataclass(frozen=True, slots=True)
class Line:
    words: tuple[Word, ...] = ()
    time: float | None = None  # None: literal text line

    @property
    def is_timed(self) -> bool:
        return self.time is not None

    @property
    def text(self) -> str:
        return "".join(w.text for w in self.words)


@dataclass(frozen=True, slots=True)
class Document:
    lines: tuple[Line, ...] = ()
    info: Mapping[str, str] = field(default_factory=dict)

    def __post_init__(self) -> None:
        # read-only copy, detached from the caller's dict
        object.__setattr__(self, "info", MappingProxyType(dict(self.info)))

    def __hash__(self) -> int:
        return hash((self.lines, tuple(self.info.items())))
