from __future__ import annotations


class EnigmaError(ValueError):
    """Root of every error raised by the engine and its configuration layer."""


# ── keypress validation ───────────────────────────────────────────
class InvalidCharacter(EnigmaError):
    kind = "acceptable"

    def __init__(self, character: str) -> None:
        self.character = character
        super().__init__(f"{character!r} is not an {self.kind} character")


class NonAsciiCharacter(InvalidCharacter):
    kind = "ASCII"


class NonAlphabeticCharacter(InvalidCharacter):
    kind = "alphabetic"


class NonUppercaseCharacter(InvalidCharacter):
    kind = "uppercase"


# ── plugboard construction ────────────────────────────────────────
class PlugboardError(EnigmaError):
    pass


class InvalidLetter(PlugboardError):
    def __init__(self, letter: object) -> None:
        self.letter = letter
        super().__init__(f"{letter!r} is not an uppercase ASCII letter")


class DuplicateWiring(PlugboardError):
    def __init__(self, letter: str) -> None:
        self.letter = letter
        super().__init__(f"{letter!r} already wired to the board")


# ── wiring tables & configuration ─────────────────────────────────
class InvalidWiring(EnigmaError):
    pass


class ConfigError(EnigmaError):
    pass
