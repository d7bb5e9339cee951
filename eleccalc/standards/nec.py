"""
NEC tables: NEC Chapter 9, Table 310.15(B)(16), 310.15(B)(2)(a), 310.15(B)(3)(a).

Areas in square inches, resistance in ohm per 1000 ft at 75°C.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from .catalog import ConductorSpec


def _w(size, area, resistance, a60, a75, a90, diameter):
    return ConductorSpec(size=size, area=area, resistance=resistance, reactance=0.0,
                         ampacity={60: a60, 75: a75, 90: a90}, diameter=diameter)


NEC_WIRES: Tuple[ConductorSpec, ...] = (
    _w("14", 0.0097, 3.070, 15, 20, 25, 0.064),
    _w("12", 0.0133, 1.930, 20, 25, 30, 0.081),
    _w("10", 0.0211, 1.210, 30, 35, 40, 0.102),
    _w("8", 0.0366, 0.764, 40, 50, 55, 0.128),
    _w("6", 0.0507, 0.491, 55, 65, 75, 0.162),
    _w("4", 0.0824, 0.308, 70, 85, 95, 0.204),
    _w("3", 0.1040, 0.245, 85, 100, 115, 0.229),
    _w("2", 0.1318, 0.194, 95, 115, 130, 0.258),
    _w("1", 0.1662, 0.154, 110, 130, 150, 0.289),
    _w("1/0", 0.2109, 0.122, 125, 150, 170, 0.325),
    _w("2/0", 0.2642, 0.097, 145, 175, 195, 0.365),
    _w("3/0", 0.3355, 0.077, 165, 200, 225, 0.410),
    _w("4/0", 0.4202, 0.061, 195, 230, 260, 0.460),
    # kcmil
    _w("250", 0.4963, 0.052, 215, 255, 290, 0.505),
    _w("300", 0.5958, 0.043, 240, 285, 320, 0.555),
    _w("350", 0.6837, 0.037, 260, 310, 350, 0.595),
    _w("400", 0.7901, 0.032, 280, 335, 380, 0.630),
    _w("500", 0.9887, 0.026, 320, 380, 430, 0.711),
    _w("600", 1.1705, 0.022, 355, 420, 475, 0.777),
    _w("750", 1.4784, 0.017, 400, 475, 535, 0.870),
    _w("1000", 1.9635, 0.013, 455, 545, 615, 1.000),
)

NEC_TEMPERATURE_RATINGS = (60, 75, 90)

NEC_TEMPERATURE_CORRECTION: Dict[int, Dict[int, float]] = {
    60: {21: 1.08, 25: 1.05, 30: 1.00, 35: 0.94, 40: 0.88, 45: 0.82, 50: 0.75, 55: 0.67,
         60: 0.58, 65: 0.47, 70: 0.33},
    75: {21: 1.05, 25: 1.02, 30: 1.00, 35: 0.96, 40: 0.91, 45: 0.87, 50: 0.82, 55: 0.76,
         60: 0.71, 65: 0.65, 70: 0.58, 75: 0.50, 80: 0.41},
    90: {21: 1.04, 25: 1.02, 30: 1.00, 35: 0.97, 40: 0.95, 45: 0.92, 50: 0.89, 55: 0.86,
         60: 0.83, 65: 0.80, 70: 0.76, 75: 0.73, 80: 0.69, 85: 0.65, 90: 0.61},
}

# current-carrying conductors in a raceway -> adjustment factor
NEC_CONDUCTOR_ADJUSTMENT: Dict[int, float] = {
    3: 1.00, 6: 0.80, 21: 0.70, 30: 0.60, 40: 0.50, 41: 0.45,
}

NEC_INSTALLATION_METHODS: Dict[str, Tuple[float, str]] = {
    "conduit": (1.0, "Conduit or tubing"),
    "cable_tray": (1.0, "Cable tray installation"),
    "direct_burial": (0.8, "Direct burial"),
    "free_air": (1.2, "Free air installation"),
}

ALUMINUM_RESISTANCE_MULTIPLIER = 1.63
CONTINUOUS_LOAD_MULTIPLIER = 1.25


@dataclass(frozen=True)
class ConduitSize:
    conduit_type: str
    size: str
    area: float  # internal area, in²


def _conduits(conduit_type, rows):
    return tuple(ConduitSize(conduit_type, size, area) for size, area in rows)


_TRADE_SIZES = ("1/2", "3/4", "1", "1-1/4", "1-1/2", "2", "2-1/2", "3", "3-1/2", "4")

NEC_CONDUITS: Tuple[ConduitSize, ...] = (
    _conduits("EMT", zip(_TRADE_SIZES, (0.304, 0.533, 0.864, 1.496, 2.036, 3.356, 5.858, 8.846, 11.545, 14.753)))
    + _conduits("PVC", zip(_TRADE_SIZES, (0.285, 0.508, 0.832, 1.453, 1.986, 3.291, 5.793, 8.688, 11.427, 14.519)))
    + _conduits("Steel", zip(_TRADE_SIZES, (0.304, 0.533, 0.864, 1.496, 2.036, 3.356, 5.858, 8.846, 11.545, 14.753)))
    + _conduits("IMC", zip(_TRADE_SIZES, (0.342, 0.586, 0.959, 1.647, 2.225, 3.630, 6.135, 9.180, 11.990, 15.279)))
)

NEC_CONDUIT_TYPES = ("EMT", "PVC", "Steel", "IMC")


def get_nec_wire(size: str) -> Optional[ConductorSpec]:
    for w in NEC_WIRES:
        if w.size == size:
            return w
    return None


def nec_wire_sizes() -> Tuple[str, ...]:
    return tuple(w.size for w in NEC_WIRES)


def nec_conduits(conduit_type: str) -> Tuple[ConduitSize, ...]:
    return tuple(sorted((c for c in NEC_CONDUITS if c.conduit_type == conduit_type), key=lambda c: c.area))


def nec_fill_limit(wire_count: int) -> float:
    """NEC Chapter 9 Table 1: 53% for one wire, 31% for two, 40% for three or more."""
    if wire_count == 1:
        return 53.0
    if wire_count == 2:
        return 31.0
    return 40.0
