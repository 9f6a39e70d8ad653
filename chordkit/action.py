"""Actions produced by dictionary lookups, and how they reach the user."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Any, Protocol, TextIO, Union


@dataclass(frozen=True)
class TextAction:
    """Type a piece of text."""

    text: str


@dataclass(frozen=True)
class UndoAction:
    """Erase previously typed characters."""

    count: int


Action = Union[TextAction, UndoAction]


class KeyboardOutput(Protocol):
    """Something that can type text and press backspace."""

    def type_text(self, text: str) -> None: ...

    def press_backspace(self) -> None: ...


class TextOutput:
    """Keyboard output written to a text stream."""

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream if stream is not None else sys.stdout

    def type_text(self, text: str) -> None:
        self._stream.write(text)
        self._stream.flush()

    def press_backspace(self) -> None:
        self._stream.write("\b")
        self._stream.flush()


def action_from_json(value: Any) -> Action:
    """Build an action from a JSON dictionary value; only strings are accepted."""
    if isinstance(value, str):
        return TextAction(value)
    raise ValueError(f"Malformed entry: {value!r}")


def execute_action(action: Action, output: KeyboardOutput) -> None:
    """Carry out an action on the given keyboard output."""
    match action:
        case TextAction(text=text):
            output.type_text(text)
        case UndoAction(count=count):
            for _ in range(1, count):
                output.press_backspace()
        case _:
            raise TypeError(f"Unknown action: {action!r}")