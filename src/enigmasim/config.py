from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Optional, Sequence

from enigmasim.core.alphabet import check_letter
from enigmasim.core.errors import ConfigError, InvalidLetter
from enigmasim.core.machine import Machine
from enigmasim.core.plugboard import Plugboard
from enigmasim.wirings import build_reflector, build_rotor, register_all

log = logging.getLogger(__name__)

ROTOR_COUNT = 3


def parse_names(raw: str | Sequence[str]) -> tuple[str, ...]:
    """
    Parse rotor names like "I,II,III", "I II III" or ["I", "II", "III"].
    """
    if isinstance(raw, str):
        parts = raw.replace(",", " ").split()
    else:
        parts = list(raw)
    names = tuple(p.strip().upper() for p in parts if p.strip())
    if len(names) != ROTOR_COUNT:
        raise ConfigError(f"Expected {ROTOR_COUNT} rotor names (left to right), got {len(names)}: {raw!r}")
    return names


def parse_letters(raw: str | Sequence[str], what: str = "letters") -> tuple[str, ...]:
    """
    Parse one letter per rotor: "ADU", "A,D,U", "a d u" or ["A", "D", "U"].
    """
    if isinstance(raw, str):
        text = raw.replace(",", "").replace(" ", "")
    else:
        text = "".join(str(p).strip() for p in raw)
    letters = tuple(text.upper())
    if len(letters) != ROTOR_COUNT:
        raise ConfigError(f"Expected {ROTOR_COUNT} {what}, got {raw!r}")
    try:
        for ch in letters:
            check_letter(ch)
    except InvalidLetter as e:
        raise ConfigError(f"Bad {what} {raw!r}: {e}") from e
    return letters


def parse_plugs(raw: str | Sequence[Any] | None) -> tuple[tuple[str, str], ...]:
    """
    Accept "FT OB GU", "F-T,O-B" or a list of "FT" strings / [a, b] pairs.
    Only the shape is checked here; Plugboard validates the letters.
    """
    if not raw:
        return ()

    items = raw.replace(",", " ").replace("-", "").split() if isinstance(raw, str) else list(raw)

    pairs: list[tuple[str, str]] = []
    for item in items:
        pair = tuple(str(x).upper() for x in item)
        if len(pair) != 2:
            raise ConfigError(f"Plug pair {item!r} must have exactly 2 letters")
        pairs.append((pair[0], pair[1]))
    return tuple(pairs)


def _is_str_list(value: Any) -> bool:
    return isinstance(value, list) and all(isinstance(v, str) for v in value)


def _lookup(data: dict[str, Any], *keys: str, text_only: bool = False, nested: bool = False) -> Any:
    """
    First non-null value among keys, checked to be a string or, unless
    text_only, a list of strings (nested: a list whose items are strings or
    lists of strings, for plug pairs like ["F", "T"]).
    """
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        if isinstance(value, str):
            return value
        if not text_only and isinstance(value, list):
            if _is_str_list(value) or (nested and all(isinstance(v, str) or _is_str_list(v) for v in value)):
                return value
        kind = "a string" if text_only else "a string or a list of strings"
        raise ConfigError(f"Configuration key {key!r} must be {kind}, got {value!r}")
    return None


@dataclass(frozen=True)
class MachineConfig:
    """Everything needed to assemble a machine. Rotor-ordered fields run left to right."""

    rotors: tuple[str, ...] = ("I", "II", "III")
    rings: tuple[str, ...] = ("A", "A", "A")
    positions: tuple[str, ...] = ("A", "A", "A")
    reflector: str = "B"
    plugs: tuple[tuple[str, str], ...] = field(default_factory=tuple)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "MachineConfig":
        cfg = cls()
        return cfg.merged(
            rotors=_lookup(data, "rotors"),
            rings=_lookup(data, "rings", "ring_settings"),
            positions=_lookup(data, "positions"),
            reflector=_lookup(data, "reflector", text_only=True),
            plugs=_lookup(data, "plugs", "plugboard", nested=True),
        )

    def merged(
        self,
        *,
        rotors: Optional[str | Sequence[str]] = None,
        rings: Optional[str | Sequence[str]] = None,
        positions: Optional[str | Sequence[str]] = None,
        reflector: Optional[str] = None,
        plugs: Optional[str | Sequence[Any]] = None,
    ) -> "MachineConfig":
        """A copy with every given (non-None) value parsed and applied."""
        changes: dict[str, Any] = {}
        if rotors is not None:
            changes["rotors"] = parse_names(rotors)
        if rings is not None:
            changes["rings"] = parse_letters(rings, "ring settings")
        if positions is not None:
            changes["positions"] = parse_letters(positions, "start positions")
        if reflector is not None:
            changes["reflector"] = reflector.strip().upper()
        if plugs is not None:
            changes["plugs"] = parse_plugs(plugs)
        return replace(self, **changes)

    def to_dict(self) -> dict[str, Any]:
        return {
            "rotors": list(self.rotors),
            "rings": "".join(self.rings),
            "positions": "".join(self.positions),
            "reflector": self.reflector,
            "plugs": ["".join(p) for p in self.plugs],
        }


def load_config(path: str | Path) -> MachineConfig:
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Failed to load configuration {str(path)!r}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Configuration {str(path)!r} must be a JSON object")
    return MachineConfig.from_dict(data)


def build_machine(cfg: MachineConfig) -> Machine:
    register_all()

    left, middle, right = (
        build_rotor(name, ring, pos) for name, ring, pos in zip(cfg.rotors, cfg.rings, cfg.positions)
    )
    plugboard = Plugboard(cfg.plugs) if cfg.plugs else None
    machine = Machine(left, middle, right, build_reflector(cfg.reflector), plugboard)

    log.debug("built %r from %s", machine, cfg.to_dict())
    return machine
