# chordkit

A small stenography chording engine. It reads strokes from a steno machine
speaking the Gemini PR protocol over a serial port, looks them up in a JSON
steno dictionary, and writes the translations to a text stream. When a later
stroke turns an earlier translation into a different one, the engine emits
backspace characters for the old text and then writes the new text.

## Installing

```
pip install .
```

For running the tests:

```
pip install .[test]
pytest
```

## Running

```
chordkit
```

By default this loads the dictionary at `dict/main.json` and connects to a
Gemini PR machine on `/dev/ttyACM0`. Both can be changed:

```
chordkit --dictionary my-dict.json --port /dev/ttyUSB0
```

Translations are written to standard output, and each stroke is also printed
there as a line of steno tape. Stop it with Ctrl-C. If the dictionary cannot
be read, is not a JSON object, or the serial port cannot be opened, the
command prints `Error: ...` to standard error and exits with status 1.

## Dictionaries

A dictionary is a JSON object mapping steno outlines to text:

```json
{
  "KAT": "cat",
  "KAT/-S": "cats",
  "TKOG": "dog"
}
```

Strokes of a multi-stroke outline are separated by `/`. Letters may be upper
or lower case; `-` marks the split between the left and right banks. Entries
whose outline cannot be parsed, or whose value is not a string, are skipped.

## Using it as a library

```python
import sys

from chordkit.action import TextOutput
from chordkit.chord import Chord
from chordkit.dictionary import Dictionary
from chordkit.engine import Engine
from chordkit.machines import GeminiPR, decode_packet
from chordkit.stroke import Stroke

stroke = Stroke.parse("KAT")
print(stroke.steno())     # KAT
print(stroke.as_tape())   # fixed-width steno tape line

chord = Chord.parse("KAT/-S")
print(len(chord), str(chord))

dictionary = Dictionary.load_from_json("dict/main.json")
print(dictionary.lookup(chord))   # TextAction(text='cats') if present

engine = Engine(TextOutput(sys.stdout))
engine.include(dictionary)
engine.connect(GeminiPR("/dev/ttyACM0"))
try:
    engine.run()
finally:
    engine.disconnect()
```

The pieces:

- `chordkit.stroke.Stroke` – an `enum.IntFlag` of the steno keys, with
  `parse`, `steno` and `as_tape`.
- `chordkit.chord.Chord` – a hashable sequence of strokes, with `parse`.
- `chordkit.action` – `TextAction`, `UndoAction`, `action_from_json`,
  `execute_action`, and `TextOutput`, which writes text and `"\b"` for
  backspace to a stream (standard output by default).
- `chordkit.dictionary.Dictionary` – `load_from_json`, `lookup`, `extend`,
  `longest_key_len`, `print_dict`.
- `chordkit.machines` – the abstract `Machine`, the serial `GeminiPR`
  machine, and `decode_packet` for turning a raw six-byte Gemini PR packet
  into a `Stroke`.
- `chordkit.engine.Engine` – `connect`, `include`, `run`, `disconnect`,
  `new_stroke` and `translate_strokes`.

Strokes can be fed to the engine directly with `Engine.new_stroke`, which is
handy without a machine attached. Any object with `type_text(text)` and
`press_backspace()` methods can be passed to `Engine` as its output.

`Engine.run` keeps reading until the machine raises `EOFError`; read errors
(`OSError`, `ValueError`) are skipped.

## What it does not do

- It does not type into other applications. Output goes to a text stream,
  with backspace written as the `"\b"` character; there is no virtual
  keyboard.
- Only Gemini PR machines are supported, and only string dictionary entries
  are understood.