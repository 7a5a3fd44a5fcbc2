from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from .utils import group_blocks


@dataclass(frozen=True)
class Transcript:
    plaintext: str
    ciphertext: str

    # window letters after the last keypress, left to right
    settings: tuple[str, ...] = field(default_factory=tuple)

    def grouped(self, size: int = 5) -> tuple[str, str]:
        """Plain and cipher text in the traditional five-letter groups."""
        return group_blocks(self.plaintext, size), group_blocks(self.ciphertext, size)

    def to_dict(self) -> dict[str, Any]:
        return {
            "plaintext": self.plaintext,
            "ciphertext": self.ciphertext,
            "settings": "".join(self.settings),
        }
