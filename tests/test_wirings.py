from __future__ import annotations

import pytest

from enigmasim.core.errors import ConfigError, InvalidWiring
from enigmasim.wirings import build_reflector, build_rotor, list_reflectors, list_rotors, register_all
from enigmasim.wirings.registry import parse_tables


def test_bundled_tables():
    assert list_rotors() == ["I", "II", "III", "IV", "V"]
    assert list_reflectors() == ["A", "B", "C"]


def test_register_all_is_idempotent():
    register_all()
    register_all()
    assert list_rotors() == ["I", "II", "III", "IV", "V"]


def test_lookup_is_case_insensitive():
    assert build_rotor("iii").name == "III"
    assert build_reflector(" b ").name == "B"


def test_rotors_are_fresh_objects():
    a = build_rotor("I")
    b = build_rotor("I")
    assert a is not b
    a.advance()
    assert b.position() == "A"
    assert a.wiring is b.wiring


def test_unknown_names():
    with pytest.raises(ConfigError, match="Unknown rotor 'IX'. Available: I, II, III, IV, V"):
        build_rotor("IX")
    with pytest.raises(ConfigError, match="Unknown reflector"):
        build_reflector("D")


def test_parse_tables():
    rotors, reflectors = parse_tables(
        """
        # comment
        rotor  VI  JPGVOUMFYQBENHZRDKASXLICTW  ZM   # two notches
        reflector Bthin ENKQAUYWJICOPBLMDXZVFTHRGS
        """
    )
    assert [r.name for r in rotors] == ["VI"]
    assert rotors[0].notches == frozenset("ZM")
    assert [r.name for r in reflectors] == ["BTHIN"]


def test_parse_tables_reports_line():
    with pytest.raises(InvalidWiring, match="line 2"):
        parse_tables("rotor I EKMFLGDQVZNTOWYHXUSPAIBRCJ Q\nrotor II ABC E\n")
    with pytest.raises(InvalidWiring, match="Unrecognised table line"):
        parse_tables("stator ETW ABCDEFGHIJKLMNOPQRSTUVWXYZ\n")


def test_blank_names_rejected():
    with pytest.raises(ConfigError, match="non-empty name"):
        build_rotor("  ")
    with pytest.raises(ConfigError, match="non-empty name"):
        build_reflector("")
