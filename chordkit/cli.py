"""Command-line entry point."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from chordkit.dictionary import Dictionary
from chordkit.engine import Engine
from chordkit.machines import GeminiPR

DEFAULT_DICTIONARY = "dict/main.json"
DEFAULT_PORT = "/dev/ttyACM0"


def _parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="chordkit", description="Translate steno strokes into typed text."
    )
    parser.add_argument("--dictionary", default=DEFAULT_DICTIONARY, help="JSON dictionary file")
    parser.add_argument("--port", default=DEFAULT_PORT, help="serial port of a Gemini PR machine")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Load the dictionary, connect the machine and translate until stopped."""
    args = _parser().parse_args(argv)
    try:
        dictionary = Dictionary.load_from_json(args.dictionary)
        engine = Engine()
        engine.include(dictionary)
        engine.connect(GeminiPR(args.port))
    except (OSError, ValueError) as error:
        print(f"Error: {error}", file=sys.stderr)
        return 1

    try:
        engine.run()
    except KeyboardInterrupt:
        pass
    finally:
        engine.disconnect()
    return 0


if __name__ == "__main__":
    sys.exit(main())