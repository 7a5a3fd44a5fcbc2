from __future__ import annotations

from enigmasim.core.alphabet import is_az
from enigmasim.core.machine import Machine
from enigmasim.core.results import Transcript


class Session:
    """
    Operator-facing state around one machine: everything typed and
    everything lit up since the last reset.

    Lowercase letters are uppercased before pressing; anything else that
    is not A-Z is ignored, the way a keyboard without those keys would.
    """

    def __init__(self, machine: Machine) -> None:
        self.machine = machine
        self._input: list[str] = []
        self._output: list[str] = []

    def type(self, text: str) -> str:
        """Press each usable character of text; returns the lamp letters for this call only."""
        lit = []
        for ch in text:
            up = ch.upper() if ch.isascii() else ch
            if not is_az(up):
                continue
            out = self.machine.press(up)
            self._input.append(up)
            self._output.append(out)
            lit.append(out)
        return "".join(lit)

    def reset(self) -> None:
        self.machine.reset()
        self._input.clear()
        self._output.clear()

    def snapshot(self) -> Transcript:
        return Transcript(
            plaintext="".join(self._input),
            ciphertext="".join(self._output),
            settings=tuple(self.machine.settings()),
        )

    @property
    def rotor_display(self) -> str:
        return "".join(f" {x}" for x in self.machine.settings())
