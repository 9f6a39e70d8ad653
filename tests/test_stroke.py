import itertools

import pytest

from chordkit.stroke import Stroke

ALL_KEYS = [
    Stroke.HASH, Stroke.START_S, Stroke.START_T, Stroke.START_K,
    Stroke.START_P, Stroke.START_W, Stroke.START_H, Stroke.START_R,
    Stroke.START_A, Stroke.START_O, Stroke.STAR, Stroke.END_E,
    Stroke.END_U, Stroke.END_F, Stroke.END_R, Stroke.END_P,
    Stroke.END_B, Stroke.END_L, Stroke.END_G, Stroke.END_T,
    Stroke.END_S, Stroke.END_D, Stroke.END_Z,
]


def test_empty_string_is_empty_stroke():
    assert Stroke.parse("") == Stroke(0)


def test_full_layout_parses_to_every_key():
    stroke = Stroke.parse("#STKPWHRAO*EUFRPBLGTSDZ")
    for key in ALL_KEYS:
        assert key in stroke


def test_repeated_letters_move_to_right_bank():
    assert Stroke.parse("SS") == Stroke.START_S | Stroke.END_S
    assert Stroke.parse("TT") == Stroke.START_T | Stroke.END_T
    assert Stroke.parse("PP") == Stroke.START_P | Stroke.END_P
    assert Stroke.parse("RR") == Stroke.START_R | Stroke.END_R


def test_hyphen_forces_right_bank():
    assert Stroke.parse("-T") == Stroke.END_T
    assert Stroke.parse("-S") == Stroke.END_S
    assert Stroke.parse("-P") == Stroke.END_P
    assert Stroke.parse("-R") == Stroke.END_R


def test_later_letters_end_left_bank():
    assert Stroke.parse("KT") == Stroke.START_K | Stroke.END_T
    assert Stroke.parse("AS") == Stroke.START_A | Stroke.END_S
    assert Stroke.parse("ST") == Stroke.START_S | Stroke.START_T


def test_lowercase_matches_uppercase():
    assert Stroke.parse("stkpwhraoeufbplgtsdz") == Stroke.parse("STKPWHRAOEUFBPLGTSDZ")


@pytest.mark.parametrize("text", ["X", "KAX", "S/T", "1"])
def test_unknown_character_raises(text):
    with pytest.raises(ValueError, match="Failed to parse stroke"):
        Stroke.parse(text)


def test_as_tape_width_and_empty():
    assert Stroke(0).as_tape() == " " * len(ALL_KEYS)
    assert len(Stroke.parse("KAT").as_tape()) == len(ALL_KEYS)


def test_as_tape_full_layout():
    full = Stroke.parse("#STKPWHRAO*EUFRPBLGTSDZ")
    assert full.as_tape() == "#STKPWHRAO*EUFRPBLGTSDZ"


def test_as_tape_places_single_key():
    tape = Stroke.START_S.as_tape()
    assert tape[1] == "S"
    assert tape.strip() == "S"


def test_steno_pins_right_bank_hyphen():
    assert Stroke.END_S.steno() == "-S"
    assert str(Stroke.parse("KAT")) == "KAT"


@pytest.mark.parametrize("key", ALL_KEYS)
def test_single_key_round_trip(key):
    assert Stroke.parse(key.steno()) == key


@pytest.mark.parametrize("pair", list(itertools.combinations(ALL_KEYS, 2)))
def test_pair_round_trip(pair):
    stroke = pair[0] | pair[1]
    assert Stroke.parse(stroke.steno()) == stroke


def test_full_stroke_round_trip():
    full = Stroke(0)
    for key in ALL_KEYS:
        full |= key
    assert Stroke.parse(full.steno()) == full