"""The translation engine: turns strokes into typed output."""

from __future__ import annotations

from collections import deque

from chordkit.action import Action, KeyboardOutput, TextAction, TextOutput, UndoAction, execute_action
from chordkit.dictionary import Dictionary
from chordkit.machines import Machine
from chordkit.stroke import Stroke


class Engine:
    """Reads strokes from a machine, translates them and types the result."""

    def __init__(self, output: KeyboardOutput | None = None) -> None:
        self.dictionary = Dictionary()
        self.machine: Machine | None = None
        self.output: KeyboardOutput = output if output is not None else TextOutput()
        self._strokes: deque[Stroke] = deque()
        self._history: list[Action] = []

    def connect(self, machine: Machine) -> None:
        """Connect the machine and use it as the stroke source."""
        machine.connect()
        self.machine = machine

    def include(self, dictionary: Dictionary) -> None:
        """Add a dictionary's entries to the engine's dictionary."""
        self.dictionary.extend(dictionary)

    def run(self) -> None:
        """Translate strokes until the machine raises EOFError.

        Read errors from the machine are ignored and reading continues.
        """
        if self.machine is None:
            raise RuntimeError("No machine connected")
        while True:
            try:
                stroke = self.machine.get_stroke()
            except EOFError:
                return
            except (OSError, ValueError):
                continue
            self.new_stroke(stroke)
            print(stroke.as_tape())

    def disconnect(self) -> None:
        """Disconnect and forget the machine."""
        if self.machine is not None:
            self.machine.disconnect()
        self.machine = None

    def translate_strokes(self) -> list[Action]:
        """Translate the pending strokes, greedily taking the longest match."""
        strokes = list(self._strokes)
        actions: list[Action] = []
        start = 0
        while start < len(strokes):
            best: tuple[int, Action] | None = None
            for end in range(start + 1, len(strokes) + 1):
                action = self.dictionary.lookup(strokes[start:end])
                if action is not None:
                    best = (end, action)
            if best is None:
                start += 1
            else:
                start, action = best
                actions.append(action)
        return actions

    def new_stroke(self, stroke: Stroke) -> None:
        """Feed one stroke and type whatever its translation changes."""
        self._strokes.append(stroke)
        if len(self._strokes) > self.dictionary.longest_key_len():
            self._strokes.popleft()

        actions = self.translate_strokes()
        for update in self._differences(actions):
            execute_action(update, self.output)
        self._history.extend(actions)

    def _differences(self, actions: list[Action]) -> list[Action]:
        updates: list[Action] = []
        for previous, current in zip(self._history, actions):
            if previous != current:
                if isinstance(previous, TextAction):
                    updates.append(UndoAction(len(previous.text)))
                updates.append(current)
        updates.extend(actions[len(self._history):])
        return updates