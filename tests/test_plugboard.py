from __future__ import annotations

import pytest

from enigmasim.core.alphabet import ALPHABET
from enigmasim.core.errors import DuplicateWiring, InvalidLetter, PlugboardError
from enigmasim.core.plugboard import Plugboard


def test_one_pair():
    board = Plugboard([("A", "E")])
    assert board.transpose("A") == "E"
    assert board.transpose("E") == "A"
    assert board.transpose("Z") == "Z"


def test_many_pairs():
    board = Plugboard([("A", "E"), ("F", "J"), ("M", "G")])
    assert board.transpose("F") == "J"
    assert board.transpose("J") == "F"
    assert board.transpose("M") == "G"
    assert board.transpose("G") == "M"
    assert board.transpose("Z") == "Z"
    assert len(board) == 3
    assert board.pairs == [("A", "E"), ("F", "J"), ("G", "M")]


def test_string_pairs_accepted():
    board = Plugboard(["FT", "OB"])
    assert board.transpose("T") == "F"
    assert board.transpose("B") == "O"


def test_empty_board_is_identity():
    board = Plugboard()
    assert all(board.transpose(x) == x for x in ALPHABET)
    assert len(board) == 0


def test_transpose_is_involution():
    board = Plugboard([tuple(ALPHABET[i:i + 2]) for i in range(0, 26, 2)])
    assert len(board) == 13
    for x in ALPHABET:
        assert board.transpose(board.transpose(x)) == x
        assert board.transpose(x) != x


@pytest.mark.parametrize(
    "pairs, bad",
    [
        ([("É", "A")], "É"),
        ([("A", "É")], "É"),
        ([("Ö", "É")], "Ö"),
        ([("a", "B")], "a"),
        ([("A", "1")], "1"),
    ],
)
def test_invalid_letter(pairs, bad):
    with pytest.raises(InvalidLetter) as exc:
        Plugboard(pairs)
    assert exc.value.letter == bad


@pytest.mark.parametrize(
    "pairs, dup",
    [
        ([("A", "F"), ("A", "E")], "A"),
        ([("A", "F"), ("E", "F")], "F"),
        ([("A", "F"), ("F", "A")], "F"),
        ([("C", "C"), ("C", "D")], "C"),
    ],
)
def test_duplicate_wiring(pairs, dup):
    with pytest.raises(DuplicateWiring) as exc:
        Plugboard(pairs)
    assert exc.value.letter == dup
    assert "already wired" in str(exc.value)


@pytest.mark.parametrize("pair", ["FTO", "F", ("A", "B", "C"), ("A",), ["A", "B", "C"], 7])
def test_bad_pair_shape(pair):
    with pytest.raises(PlugboardError, match="exactly 2 letters"):
        Plugboard([("Q", "R"), pair])


def test_letter_cabled_to_itself_maps_to_itself():
    board = Plugboard([("A", "A"), ("F", "T")])
    assert board.transpose("A") == "A"
    assert board.transpose("F") == "T"
    assert len(board) == 2
    assert board.pairs == [("A", "A"), ("F", "T")]
    with pytest.raises(DuplicateWiring):
        Plugboard([("A", "A"), ("A", "B")])


def test_from_string():
    board = Plugboard.from_string("ft, o-b GU")
    assert board.pairs == [("B", "O"), ("F", "T"), ("G", "U")]
    assert len(Plugboard.from_string("")) == 0


def test_repr():
    assert repr(Plugboard([("T", "F")])) == "<Plugboard FT>"
