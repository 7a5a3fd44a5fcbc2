from __future__ import annotations

import pytest

from enigmasim.core.machine import Machine
from enigmasim.core.plugboard import Plugboard
from enigmasim.wirings import build_reflector, build_rotor, register_all


@pytest.fixture(scope="session", autouse=True)
def _tables():
    register_all()


@pytest.fixture
def make_machine():
    """
    make_machine("I II III", rings="AAA", positions="ADU", reflector="B", plugs=[("F", "T")])
    Rotor names, rings and positions all run left to right.
    """

    def _make(rotors="I II III", rings="AAA", positions="AAA", reflector="B", plugs=None) -> Machine:
        left, middle, right = (
            build_rotor(name, ring, pos) for name, ring, pos in zip(rotors.split(), rings, positions)
        )
        board = Plugboard(plugs) if plugs is not None else None
        return Machine(left, middle, right, build_reflector(reflector), board)

    return _make
