import json

import pytest

from chordkit.action import TextAction
from chordkit.chord import Chord
from chordkit.dictionary import Dictionary
from chordkit.stroke import Stroke


def _write(tmp_path, data):
    path = tmp_path / "dict.json"
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_load_skips_malformed_entries(tmp_path):
    path = _write(tmp_path, {"KAT": "cat", "KAT/-S": "cats", "XQ": "bad", "TK": 5})
    dictionary = Dictionary.load_from_json(path)
    assert len(dictionary) == 2
    assert dictionary.lookup([Stroke.parse("KAT")]) == TextAction("cat")
    assert dictionary.lookup([Stroke.parse("KAT"), Stroke.parse("-S")]) == TextAction("cats")


def test_load_rejects_non_object(tmp_path):
    path = _write(tmp_path, ["KAT", "cat"])
    with pytest.raises(ValueError):
        Dictionary.load_from_json(path)


def test_load_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        Dictionary.load_from_json(tmp_path / "absent.json")


def test_lookup_missing_returns_none():
    dictionary = Dictionary({Chord.parse("KAT"): TextAction("cat")})
    assert dictionary.lookup([Stroke.parse("TKOG")]) is None


def test_longest_key_len():
    assert Dictionary().longest_key_len() == 0
    dictionary = Dictionary(
        {Chord.parse("KAT"): TextAction("cat"), Chord.parse("KAT/-S"): TextAction("cats")}
    )
    assert dictionary.longest_key_len() == 2


def test_extend_adds_and_overrides():
    base = Dictionary({Chord.parse("KAT"): TextAction("cat")})
    base.extend(
        Dictionary(
            {Chord.parse("KAT"): TextAction("kitten"), Chord.parse("TKOG"): TextAction("dog")}
        )
    )
    assert len(base) == 2
    assert base.lookup([Stroke.parse("KAT")]) == TextAction("kitten")
    assert base.lookup([Stroke.parse("TKOG")]) == TextAction("dog")


def test_extend_into_empty_then_longest():
    empty = Dictionary()
    empty.extend(Dictionary({Chord.parse("KAT/-S/-Z"): TextAction("x")}))
    assert empty.longest_key_len() == 3


def test_print_dict(capsys):
    Dictionary({Chord.parse("KAT"): TextAction("cat")}).print_dict()
    out = capsys.readouterr().out.strip()
    assert out.startswith("KAT: ")
    assert "cat" in out