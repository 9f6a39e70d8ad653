"""Chords: sequences of strokes that make up a dictionary key."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from chordkit.stroke import Stroke


@dataclass(frozen=True)
class Chord:
    """An ordered, hashable sequence of strokes."""

    strokes: tuple[Stroke, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "strokes", tuple(self.strokes))

    @classmethod
    def parse(cls, text: str) -> Chord:
        """Parse slash-separated steno such as ``"KAT/-S"``."""
        return cls(tuple(Stroke.parse(part) for part in text.split("/")))

    def __len__(self) -> int:
        return len(self.strokes)

    def __iter__(self) -> Iterator[Stroke]:
        return iter(self.strokes)

    def __str__(self) -> str:
        # Only the two strokes within each consecutive pair are slash-separated.
        written = [stroke.steno() for stroke in self.strokes]
        pairs: Iterable[list[str]] = (
            written[start:start + 2] for start in range(0, len(written), 2)
        )
        return "".join("/".join(pair) for pair in pairs)