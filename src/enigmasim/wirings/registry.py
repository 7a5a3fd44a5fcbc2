from __future__ import annotations

import logging
from importlib import resources

from enigmasim.core.errors import ConfigError, InvalidWiring
from enigmasim.core.reflector import Reflector
from enigmasim.core.rotor import Rotor, RotorWiring

log = logging.getLogger(__name__)

_ROTORS: dict[str, RotorWiring] = {}
_REFLECTORS: dict[str, Reflector] = {}
_LOADED: set[str] = set()


def _key(name: str) -> str:
    key = name.upper().strip()
    if not key:
        raise ConfigError("Component must have a non-empty name.")
    return key


def register_rotor(wiring: RotorWiring) -> None:
    _ROTORS[_key(wiring.name)] = wiring


def register_reflector(reflector: Reflector) -> None:
    _REFLECTORS[_key(reflector.name)] = reflector


def list_rotors() -> list[str]:
    return sorted(_ROTORS.keys())


def list_reflectors() -> list[str]:
    return sorted(_REFLECTORS.keys())


def rotor_wiring(name: str) -> RotorWiring:
    key = _key(name)
    if key not in _ROTORS:
        raise ConfigError(f"Unknown rotor '{name}'. Available: {', '.join(list_rotors())}")
    return _ROTORS[key]


def build_rotor(name: str, ring_setting: str = "A", initial_position: str = "A") -> Rotor:
    """A fresh Rotor of the named model; rotors are never shared between machines."""
    return Rotor(rotor_wiring(name), ring_setting, initial_position)


def build_reflector(name: str) -> Reflector:
    # reflectors are stateless, the registered instance can be handed out as is
    key = _key(name)
    if key not in _REFLECTORS:
        raise ConfigError(f"Unknown reflector '{name}'. Available: {', '.join(list_reflectors())}")
    return _REFLECTORS[key]


def parse_tables(text: str) -> tuple[list[RotorWiring], list[Reflector]]:
    """
    Parse table lines of the form:
        rotor     NAME ORDERING NOTCHES
        reflector NAME ORDERING
    Blank lines and '#' comments are skipped.
    """
    rotors: list[RotorWiring] = []
    reflectors: list[Reflector] = []

    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.split("#", 1)[0].strip()
        if not line:
            continue

        parts = line.split()
        kind = parts[0].lower()
        try:
            if kind == "rotor" and len(parts) == 4:
                _, name, ordering, notches = parts
                rotors.append(RotorWiring(name.upper(), ordering.upper(), frozenset(notches.upper())))
            elif kind == "reflector" and len(parts) == 3:
                _, name, ordering = parts
                reflectors.append(Reflector(name.upper(), ordering.upper()))
            else:
                raise InvalidWiring(f"Unrecognised table line: {raw!r}")
        except InvalidWiring as e:
            raise InvalidWiring(f"line {lineno}: {e}") from e

    return rotors, reflectors


def load_tables(filename: str = "tables.txt") -> None:
    if filename in _LOADED:
        return

    text = resources.files("enigmasim.wirings").joinpath(filename).read_text(encoding="utf-8")
    rotors, reflectors = parse_tables(text)
    for wiring in rotors:
        register_rotor(wiring)
    for reflector in reflectors:
        register_reflector(reflector)

    _LOADED.add(filename)
    log.debug("loaded %d rotors and %d reflectors from %s", len(rotors), len(reflectors), filename)
