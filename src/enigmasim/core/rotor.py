from __future__ import annotations

import logging
from dataclasses import dataclass, field

from .alphabet import ALPHABET, check_letter, check_ordering, index_of, letter_at, shift
from .errors import InvalidWiring

log = logging.getLogger(__name__)


@dataclass(frozen=True)
class RotorWiring:
    """
    A rotor model: its substitution ordering and the letters carrying a notch.

    The inverse table is derived once here so every Rotor built from the
    same wiring shares it.
    """

    name: str
    ordering: str
    notches: frozenset[str]

    inverse: str = field(init=False, repr=False)

    def __post_init__(self) -> None:
        check_ordering(self.ordering)
        if not self.notches or not all(len(n) == 1 and n in ALPHABET for n in self.notches):
            raise InvalidWiring(f"Rotor {self.name!r} notches must be letters A-Z, got {sorted(self.notches)}")

        inverse = "".join(ALPHABET[self.ordering.index(c)] for c in ALPHABET)
        object.__setattr__(self, "notches", frozenset(self.notches))
        object.__setattr__(self, "inverse", inverse)


class Rotor:
    """
    One wired disk with its ring setting and rotational state.

    `current_offset` is the only mutable state. The effective offset is the
    distance between ring setting and current position; signals are shifted
    back by it before the table lookup and forward by it afterwards.
    """

    def __init__(self, wiring: RotorWiring, ring_setting: str = "A", initial_position: str = "A") -> None:
        self.wiring = wiring
        self.ring_setting = check_letter(ring_setting)
        self.initial_position = check_letter(initial_position)
        self.current_offset = index_of(initial_position)

    @property
    def name(self) -> str:
        return self.wiring.name

    @property
    def effective_offset(self) -> int:
        return index_of(shift(self.ring_setting, -self.current_offset))

    # ── signal paths ---------------------------------------------
    def signal_in(self, letter: str) -> str:
        offset = self.effective_offset
        mapped = self.wiring.ordering[index_of(shift(letter, -offset))]
        return shift(mapped, offset)

    def signal_out(self, letter: str) -> str:
        offset = self.effective_offset
        mapped = self.wiring.inverse[index_of(shift(letter, -offset))]
        return shift(mapped, offset)

    # ── stepping --------------------------------------------------
    def at_notch(self) -> bool:
        # notches sit on the wired letter, independent of the ring setting
        return letter_at(self.current_offset) in self.wiring.notches

    def advance(self) -> None:
        self.current_offset = index_of(letter_at(self.current_offset + 1))

    def position(self) -> str:
        """Letter showing in the rotor's window."""
        return shift(self.ring_setting, -self.effective_offset)

    def reset(self) -> None:
        self.current_offset = index_of(self.initial_position)

    def __repr__(self) -> str:
        return f"<Rotor {self.name} ring={self.ring_setting} pos={self.position()}>"
