"""
ISO 8820-3 blade fuses for 12/24/32/48 V vehicle and boat systems (0.5 A to 120 A).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple

FUSE_APPLICATIONS: FrozenSet[str] = frozenset({"automotive", "marine", "led"})
AUTOMOTIVE_VOLTAGES: Tuple[int, ...] = (12, 24, 32, 48)
MAX_FUSE_RATING = 120
FUSE_TEMPERATURE_RANGE: Tuple[int, int] = (-40, 85)
FUSE_VOLTAGE_RATING = 58


@dataclass(frozen=True)
class AutomotiveVoltageSystem:
    voltage: int
    name: str
    efficiency: float
    continuous_factor: float
    intermittent_factor: float


AUTOMOTIVE_SYSTEMS: Dict[int, AutomotiveVoltageSystem] = {
    12: AutomotiveVoltageSystem(12, "12V System", 0.85, 1.25, 1.15),
    24: AutomotiveVoltageSystem(24, "24V System", 0.90, 1.30, 1.20),
    32: AutomotiveVoltageSystem(32, "32V System", 0.92, 1.25, 1.15),
    48: AutomotiveVoltageSystem(48, "48V System", 0.95, 1.20, 1.10),
}


@dataclass(frozen=True)
class AutomotiveFuse:
    rating: float
    fuse_type: str
    color: str
    applications: FrozenSet[str]

    @property
    def physical_size_mm(self) -> Tuple[float, float, float]:
        return FUSE_BODY_SIZES[self.fuse_type]


# length, width, height in mm
FUSE_BODY_SIZES: Dict[str, Tuple[float, float, float]] = {
    "regular": (19.1, 5.1, 18.5),
    "mini": (16.3, 5.1, 18.5),
    "maxi": (29.2, 8.5, 34.3),
    "micro2": (15.0, 3.6, 16.6),
}

_AUTO_LED = frozenset({"automotive", "led"})
_AUTO_MARINE_LED = frozenset({"automotive", "marine", "led"})
_AUTO_MARINE = frozenset({"automotive", "marine"})
_AUTO = frozenset({"automotive"})
_HEAVY = frozenset({"automotive", "marine", "industrial"})

AUTOMOTIVE_FUSES: Tuple[AutomotiveFuse, ...] = (
    AutomotiveFuse(0.5, "regular", "black", _AUTO_LED),
    AutomotiveFuse(1, "regular", "black", _AUTO_LED),
    AutomotiveFuse(2, "regular", "grey", _AUTO_LED),
    AutomotiveFuse(3, "regular", "violet", _AUTO_LED),
    AutomotiveFuse(5, "regular", "tan", _AUTO_LED),
    AutomotiveFuse(7.5, "regular", "brown", _AUTO_LED),
    AutomotiveFuse(10, "regular", "red", _AUTO_MARINE_LED),
    AutomotiveFuse(15, "regular", "blue", _AUTO_MARINE_LED),
    AutomotiveFuse(20, "regular", "yellow", _AUTO_MARINE),
    AutomotiveFuse(25, "regular", "white", _AUTO_MARINE),
    AutomotiveFuse(30, "regular", "green", _AUTO_MARINE),
    AutomotiveFuse(35, "regular", "light green", _AUTO_MARINE),
    AutomotiveFuse(40, "regular", "orange", _AUTO_MARINE),
    AutomotiveFuse(2, "mini", "grey", _AUTO_LED),
    AutomotiveFuse(5, "mini", "tan", _AUTO_LED),
    AutomotiveFuse(10, "mini", "red", _AUTO_LED),
    AutomotiveFuse(15, "mini", "blue", _AUTO_LED),
    AutomotiveFuse(20, "mini", "yellow", _AUTO),
    AutomotiveFuse(25, "mini", "white", _AUTO),
    AutomotiveFuse(30, "mini", "green", _AUTO),
    AutomotiveFuse(20, "maxi", "yellow", _HEAVY),
    AutomotiveFuse(30, "maxi", "green", _HEAVY),
    AutomotiveFuse(40, "maxi", "orange", _HEAVY),
    AutomotiveFuse(50, "maxi", "red", _HEAVY),
    AutomotiveFuse(60, "maxi", "blue", _HEAVY),
    AutomotiveFuse(70, "maxi", "brown", _HEAVY),
    AutomotiveFuse(80, "maxi", "clear", _HEAVY),
    AutomotiveFuse(100, "maxi", "clear", _HEAVY),
    AutomotiveFuse(120, "maxi", "clear", _HEAVY),
    AutomotiveFuse(5, "micro2", "tan", _AUTO_LED),
    AutomotiveFuse(10, "micro2", "red", _AUTO_LED),
    AutomotiveFuse(15, "micro2", "blue", _AUTO_LED),
    AutomotiveFuse(20, "micro2", "yellow", _AUTO),
    AutomotiveFuse(25, "micro2", "white", _AUTO),
    AutomotiveFuse(30, "micro2", "green", _AUTO),
)


def fuse_ratings(app_id: str) -> List[float]:
    return sorted({f.rating for f in AUTOMOTIVE_FUSES if app_id in f.applications})


def next_fuse_rating(current: float, app_id: str) -> Optional[float]:
    """Smallest fuse rating >= current for the application, or None."""
    return next((r for r in fuse_ratings(app_id) if r >= current), None)


def _preferred_type(rating: float) -> str:
    if rating <= 10:
        return "micro2"
    if rating <= 40:
        return "regular"
    return "maxi"


def fuses_for(rating: float, app_id: str) -> List[AutomotiveFuse]:
    """Fuses of ``rating`` for the application, the usual body for that size first."""
    matches = [f for f in AUTOMOTIVE_FUSES if f.rating == rating and app_id in f.applications]
    preferred = _preferred_type(rating)
    return sorted(matches, key=lambda f: f.fuse_type != preferred)


def primary_fuse(rating: float, app_id: str) -> Optional[AutomotiveFuse]:
    matches = fuses_for(rating, app_id)
    return matches[0] if matches else None
