from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from .alphabet import check_letter
from .errors import DuplicateWiring, PlugboardError

log = logging.getLogger(__name__)


class Plugboard:
    """
    Symmetric letter swaps applied before and after the rotor stack.

    Immutable once built: every pair is validated and both directions are
    inserted together, so transpose() is always an involution.
    """

    def __init__(self, pairs: Iterable[str | tuple[str, str]] = ()) -> None:
        mapping: dict[str, str] = {}
        cables: list[tuple[str, str]] = []

        for raw in pairs:
            # normalise to (a, b)
            if not isinstance(raw, (str, tuple, list)) or len(raw) != 2:
                raise PlugboardError(f"Pair {raw!r} must be exactly 2 letters")
            a, b = raw

            check_letter(a)
            check_letter(b)

            if a in mapping:
                raise DuplicateWiring(a)
            if b in mapping:
                raise DuplicateWiring(b)

            # a letter cabled to itself is one pair and maps to itself
            mapping[a] = b
            mapping[b] = a
            cables.append((min(a, b), max(a, b)))

        self._mapping: Mapping[str, str] = MappingProxyType(mapping)
        self._cables: tuple[tuple[str, str], ...] = tuple(sorted(cables))
        log.debug("plugboard wired: %s", self)

    @classmethod
    def from_string(cls, text: str) -> "Plugboard":
        """
        Parse pairs like "FT OB GU", "FT,OB,GU" or "F-T O-B".
        An empty string gives an empty board.
        """
        raw = text.replace(",", " ").replace("-", "").replace(":", "")
        return cls(raw.upper().split())

    def transpose(self, letter: str) -> str:
        return self._mapping.get(letter, letter)

    @property
    def pairs(self) -> list[tuple[str, str]]:
        return list(self._cables)

    def __len__(self) -> int:
        return len(self._cables)

    def __repr__(self) -> str:
        swaps = [f"{a}{b}" for a, b in self.pairs]
        return f"<Plugboard {' '.join(swaps)}>"
