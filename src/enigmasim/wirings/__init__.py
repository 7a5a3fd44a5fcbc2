from __future__ import annotations

from .registry import (
    build_reflector,
    build_rotor,
    list_reflectors,
    list_rotors,
    load_tables,
    register_reflector,
    register_rotor,
    rotor_wiring,
)


def register_all() -> None:
    """Load the bundled historical tables. Safe to call more than once."""
    load_tables()


__all__ = [
    "register_all",
    "build_reflector",
    "build_rotor",
    "list_reflectors",
    "list_rotors",
    "load_tables",
    "register_reflector",
    "register_rotor",
    "rotor_wiring",
]
