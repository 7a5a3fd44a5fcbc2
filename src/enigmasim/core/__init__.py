from .alphabet import ALPHABET, shift
from .errors import (
    ConfigError,
    DuplicateWiring,
    EnigmaError,
    InvalidCharacter,
    InvalidLetter,
    InvalidWiring,
    NonAlphabeticCharacter,
    NonAsciiCharacter,
    NonUppercaseCharacter,
)
from .machine import Machine
from .plugboard import Plugboard
from .reflector import Reflector
from .results import Transcript
from .rotor import Rotor, RotorWiring

__all__ = [
    "ALPHABET",
    "shift",
    "ConfigError",
    "DuplicateWiring",
    "EnigmaError",
    "InvalidCharacter",
    "InvalidLetter",
    "InvalidWiring",
    "NonAlphabeticCharacter",
    "NonAsciiCharacter",
    "NonUppercaseCharacter",
    "Machine",
    "Plugboard",
    "Reflector",
    "Transcript",
    "Rotor",
    "RotorWiring",
]
