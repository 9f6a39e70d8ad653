"""Steno strokes on the standard English keyboard layout."""

from __future__ import annotations

import enum


class Stroke(enum.IntFlag):
    """The set of keys pressed together in a single stroke."""

    HASH = 1 << 0
    START_S = 1 << 1
    START_T = 1 << 2
    START_K = 1 << 3
    START_P = 1 << 4
    START_W = 1 << 5
    START_H = 1 << 6
    START_R = 1 << 7
    START_A = 1 << 8
    START_O = 1 << 9
    STAR = 1 << 10
    END_E = 1 << 11
    END_U = 1 << 12
    END_F = 1 << 13
    END_R = 1 << 14
    END_P = 1 << 15
    END_B = 1 << 16
    END_L = 1 << 17
    END_G = 1 << 18
    END_T = 1 << 19
    END_S = 1 << 20
    END_D = 1 << 21
    END_Z = 1 << 22

    @classmethod
    def parse(cls, text: str) -> Stroke:
        """Parse steno notation such as ``"KAT"`` or ``"-S"`` into a stroke.

        Letters are case-insensitive. Raises ValueError on unknown characters.
        """
        stroke = cls(0)
        level = 0
        for char in text:
            try:
                threshold, start, end = _PARSE_RULES[char]
            except KeyError:
                raise ValueError(f"Failed to parse stroke: {text}") from None
            if end is not None and level >= threshold:
                stroke |= end
            else:
                stroke |= start
            level = max(level, threshold)
        return stroke

    def as_tape(self) -> str:
        """Render the stroke as a fixed-width paper-tape line."""
        return "".join(letter if key in self else " " for key, letter in _TAPE_KEYS)

    def steno(self) -> str:
        """Render the stroke in steno notation, inserting hyphens where needed."""
        out: list[str] = []
        level = 0
        for key, letter, hyphen_below, sets in _STENO_RULES:
            if key not in self:
                continue
            level = max(level, sets)
            if hyphen_below is not None and level < hyphen_below:
                out.append("-")
            out.append(letter)
        return "".join(out)

    def __str__(self) -> str:
        return self.steno()


_KEY_LETTERS = "#STKPWHRAO*EUFRPBLGTSDZ"

_TAPE_KEYS: tuple[tuple[Stroke, str], ...] = tuple(
    zip(
        (
            Stroke.HASH, Stroke.START_S, Stroke.START_T, Stroke.START_K,
            Stroke.START_P, Stroke.START_W, Stroke.START_H, Stroke.START_R,
            Stroke.START_A, Stroke.START_O, Stroke.STAR, Stroke.END_E,
            Stroke.END_U, Stroke.END_F, Stroke.END_R, Stroke.END_P,
            Stroke.END_B, Stroke.END_L, Stroke.END_G, Stroke.END_T,
            Stroke.END_S, Stroke.END_D, Stroke.END_Z,
        ),
        _KEY_LETTERS,
    )
)

# Progress through the left bank: 1 after S, 2 after T/K, 3 after P/W/H,
# 4 once the left bank is finished (R, vowels, star, right bank or hyphen).
# Each rule: (progress level, key when still on the left, key once past it).
_UPPER_RULES: dict[str, tuple[int, Stroke, Stroke | None]] = {
    "#": (0, Stroke.HASH, None),
    "S": (1, Stroke.START_S, Stroke.END_S),
    "T": (2, Stroke.START_T, Stroke.END_T),
    "K": (2, Stroke.START_K, None),
    "P": (3, Stroke.START_P, Stroke.END_P),
    "W": (3, Stroke.START_W, None),
    "H": (3, Stroke.START_H, None),
    "R": (4, Stroke.START_R, Stroke.END_R),
    "A": (4, Stroke.START_A, None),
    "O": (4, Stroke.START_O, None),
    "*": (4, Stroke.STAR, None),
    "E": (4, Stroke.END_E, None),
    "U": (4, Stroke.END_U, None),
    "F": (4, Stroke.END_F, None),
    "B": (4, Stroke.END_B, None),
    "L": (4, Stroke.END_L, None),
    "G": (4, Stroke.END_G, None),
    "D": (4, Stroke.END_D, None),
    "Z": (4, Stroke.END_Z, None),
    "-": (4, Stroke(0), None),
}

_PARSE_RULES: dict[str, tuple[int, Stroke, Stroke | None]] = {
    **_UPPER_RULES,
    **{char.lower(): rule for char, rule in _UPPER_RULES.items() if char.isalpha()},
}

# Each rule: (key, letter, hyphen needed while progress is below, progress it sets).
_STENO_RULES: tuple[tuple[Stroke, str, int | None, int], ...] = (
    (Stroke.HASH, "#", None, 0),
    (Stroke.START_S, "S", None, 1),
    (Stroke.START_T, "T", None, 2),
    (Stroke.START_K, "K", None, 2),
    (Stroke.START_P, "P", None, 3),
    (Stroke.START_W, "W", None, 3),
    (Stroke.START_H, "H", None, 3),
    (Stroke.START_R, "R", None, 4),
    (Stroke.START_A, "A", None, 4),
    (Stroke.START_O, "O", None, 4),
    (Stroke.STAR, "*", None, 4),
    (Stroke.END_E, "E", None, 4),
    (Stroke.END_U, "U", None, 4),
    (Stroke.END_F, "F", None, 4),
    (Stroke.END_R, "R", 4, 3),
    (Stroke.END_P, "P", 3, 2),
    (Stroke.END_B, "B", None, 2),
    (Stroke.END_L, "L", None, 2),
    (Stroke.END_G, "G", None, 2),
    (Stroke.END_T, "T", 2, 1),
    (Stroke.END_S, "S", 1, 0),
    (Stroke.END_D, "D", None, 0),
    (Stroke.END_Z, "Z", None, 0),
)