from __future__ import annotations

import logging
from typing import Optional

from .errors import (
    InvalidCharacter,
    NonAlphabeticCharacter,
    NonAsciiCharacter,
    NonUppercaseCharacter,
)
from .plugboard import Plugboard
from .reflector import Reflector
from .rotor import Rotor

log = logging.getLogger(__name__)


def check_input(ch: str) -> str:
    """
    Validate one keypress. Raises, in order of precedence:
      - NonAsciiCharacter      for anything outside 7-bit ASCII
      - NonAlphabeticCharacter for ASCII that is not a letter
      - NonUppercaseCharacter  for lowercase letters
    """
    if not isinstance(ch, str) or len(ch) != 1:
        raise InvalidCharacter(ch)
    if not ch.isascii():
        raise NonAsciiCharacter(ch)
    if not ch.isalpha():
        raise NonAlphabeticCharacter(ch)
    if not ch.isupper():
        raise NonUppercaseCharacter(ch)
    return ch


class Machine:
    """
    Three-rotor machine: left, middle and right rotor (reading order), a
    reflector and an optional plugboard. The machine owns its components;
    nothing else should advance or rewire them once assembled.

    Not thread-safe: share an instance only under external locking.
    """

    def __init__(
        self,
        left: Rotor,
        middle: Rotor,
        right: Rotor,
        reflector: Reflector,
        plugboard: Optional[Plugboard] = None,
    ) -> None:
        self.left = left
        self.middle = middle
        self.right = right
        self.reflector = reflector
        self.plugboard = plugboard

    # ── stepping logic ───────────────────────────────────────────
    def _step_rotors(self) -> None:
        # notch state must be read before anything moves
        right_at_notch = self.right.at_notch()
        middle_at_notch = self.middle.at_notch()

        self.right.advance()

        if right_at_notch:
            self.middle.advance()

        # double step: the middle rotor carries itself and the left rotor
        if middle_at_notch:
            self.middle.advance()
            self.left.advance()

        log.debug(
            "stepped to %s (right notch=%s, middle notch=%s)",
            "".join(self.settings()),
            right_at_notch,
            middle_at_notch,
        )

    # ── public API ───────────────────────────────────────────────
    def press(self, ch: str) -> str:
        check_input(ch)
        self._step_rotors()

        out = self.plugboard_transpose(ch)
        out = self.right.signal_in(out)
        out = self.middle.signal_in(out)
        out = self.left.signal_in(out)
        out = self.reflector.reflect(out)
        out = self.left.signal_out(out)
        out = self.middle.signal_out(out)
        out = self.right.signal_out(out)
        out = self.plugboard_transpose(out)

        log.debug("%s -> %s", ch, out)
        return out

    def encipher(self, text: str) -> str:
        """Press every character of text in turn; the first invalid one raises."""
        return "".join(self.press(ch) for ch in text)

    def plugboard_transpose(self, letter: str) -> str:
        if self.plugboard is None:
            return letter
        return self.plugboard.transpose(letter)

    def settings(self) -> list[str]:
        return [self.left.position(), self.middle.position(), self.right.position()]

    def reset(self) -> None:
        for rotor in (self.left, self.middle, self.right):
            rotor.reset()
        log.debug("reset to %s", "".join(self.settings()))

    def __repr__(self) -> str:
        names = "-".join(r.name for r in (self.left, self.middle, self.right))
        return f"<Machine {names} {self.reflector.name} at {''.join(self.settings())}>"
