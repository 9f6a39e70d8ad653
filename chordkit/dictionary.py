"""Steno dictionaries mapping chords to actions."""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from os import PathLike

from chordkit.action import Action, action_from_json
from chordkit.chord import Chord
from chordkit.stroke import Stroke


class Dictionary:
    """A mapping from chords to the actions they produce."""

    def __init__(self, entries: Mapping[Chord, Action] | None = None) -> None:
        self._entries: dict[Chord, Action] = dict(entries or {})
        self._longest: int | None = None

    @classmethod
    def load_from_json(cls, path: str | PathLike[str]) -> Dictionary:
        """Load a JSON object of ``"STROKE/STROKE": "text"`` entries.

        Entries whose key or value cannot be understood are skipped.
        Raises ValueError when the document is not a JSON object.
        """
        with open(path, encoding="utf-8") as handle:
            raw = json.load(handle)
        if not isinstance(raw, dict):
            raise ValueError("Expected JSON object")

        entries: dict[Chord, Action] = {}
        for key, value in raw.items():
            try:
                entries[Chord.parse(key)] = action_from_json(value)
            except ValueError:
                continue
        return cls(entries)

    def lookup(self, strokes: Iterable[Stroke]) -> Action | None:
        """Return the action for exactly this sequence of strokes, if any."""
        return self._entries.get(Chord(tuple(strokes)))

    def extend(self, other: Dictionary) -> None:
        """Add every entry of ``other``, replacing entries with the same chord."""
        self._update_longest()
        self._entries.update(other._entries)

    def _update_longest(self) -> int:
        if not self._entries:
            return 0
        self._longest = max(len(chord) for chord in self._entries)
        return self._longest

    def longest_key_len(self) -> int:
        """Number of strokes in the longest chord."""
        if self._longest is None:
            return self._update_longest()
        return self._longest

    def print_dict(self) -> None:
        """Print every entry, one per line."""
        for chord, action in self._entries.items():
            print(f"{chord}: {action!r}")

    def __len__(self) -> int:
        return len(self._entries)