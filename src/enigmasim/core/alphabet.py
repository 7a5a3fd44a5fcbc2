from __future__ import annotations

from .errors import InvalidLetter, InvalidWiring

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
SIZE = len(ALPHABET)
A_ORD = ord("A")
Z_ORD = ord("Z")


def is_az(ch: str) -> bool:
    if len(ch) != 1:
        return False
    o = ord(ch)
    return A_ORD <= o <= Z_ORD


def check_letter(ch: str) -> str:
    """Return ch unchanged if it is a single A-Z letter, else raise InvalidLetter."""
    if not isinstance(ch, str) or not is_az(ch):
        raise InvalidLetter(ch)
    return ch


def shift(letter: str, delta: int) -> str:
    """
    Shift one A-Z letter by 'delta' places (any integer, can be negative).

    Every piece of mod-26 arithmetic in the engine goes through here.
    """
    idx = (ord(letter) - A_ORD + delta) % SIZE
    return chr(A_ORD + idx)


def index_of(letter: str) -> int:
    return ord(letter) - A_ORD


def letter_at(index: int) -> str:
    return shift("A", index)


def check_ordering(ordering: str) -> str:
    """
    Validate a 26-letter substitution ordering such as "EKMFLGDQVZNTOWYHXUSPAIBRCJ".

    Position i of the ordering is where ALPHABET[i] is wired to.
    """
    if sorted(ordering) != list(ALPHABET):
        raise InvalidWiring(f"Expected 26 unique characters A-Z in ordering {ordering!r}.")
    return ordering
