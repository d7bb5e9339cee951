"""
IEC 60364-5-52 and BS 7671 cable tables.

Cross-sections in mm², resistance and reactance in ohm per km.
"""
from __future__ import annotations

from typing import Dict, Optional, Tuple

from .catalog import ConductorSpec


def _c(size, resistance, reactance, a60, a70, a90, diameter):
    return ConductorSpec(size=size, area=float(size), resistance=resistance, reactance=reactance,
                         ampacity={60: a60, 70: a70, 90: a90}, diameter=diameter)


IEC_CABLES: Tuple[ConductorSpec, ...] = (
    _c("0.75", 24.5, 0.08, 11, 13, 16, 5.2),
    _c("1.0", 18.1, 0.08, 13, 16, 19, 5.6),
    _c("1.5", 12.1, 0.08, 17.5, 21, 24, 6.1),
    _c("2.5", 7.41, 0.08, 24, 28, 32, 6.8),
    _c("4", 4.61, 0.075, 32, 37, 43, 7.5),
    _c("6", 3.08, 0.075, 41, 47, 54, 8.2),
    _c("10", 1.83, 0.075, 57, 66, 75, 9.5),
    _c("16", 1.15, 0.070, 76, 87, 100, 10.5),
    _c("25", 0.727, 0.070, 101, 115, 132, 12.2),
    _c("35", 0.524, 0.065, 125, 144, 165, 13.4),
    _c("50", 0.387, 0.065, 151, 173, 196, 15.0),
    _c("70", 0.268, 0.065, 192, 218, 246, 17.0),
    _c("95", 0.193, 0.060, 232, 263, 297, 19.2),
    _c("120", 0.153, 0.060, 269, 305, 344, 21.0),
    _c("150", 0.124, 0.055, 309, 350, 394, 22.8),
    _c("185", 0.099, 0.055, 353, 400, 450, 24.8),
    _c("240", 0.077, 0.050, 415, 469, 527, 27.3),
    _c("300", 0.061, 0.050, 477, 539, 606, 29.8),
    _c("400", 0.047, 0.045, 546, 618, 695, 33.0),
    _c("500", 0.037, 0.045, 609, 689, 775, 35.8),
    _c("630", 0.030, 0.040, 686, 776, 873, 39.5),
    _c("800", 0.023, 0.040, 758, 857, 964, 42.8),
    _c("1000", 0.018, 0.035, 814, 920, 1035, 45.8),
)

# BS 7671 Table 4D5A style values (thermoplastic / thermosetting)
BS7671_CABLES: Tuple[ConductorSpec, ...] = (
    _c("1.0", 18.1, 0.08, 11, 13, 16, 5.6),
    _c("1.5", 12.1, 0.08, 14.5, 17.5, 20, 6.1),
    _c("2.5", 7.41, 0.08, 20, 24, 27, 6.8),
    _c("4", 4.61, 0.075, 26, 32, 36, 7.5),
    _c("6", 3.08, 0.075, 34, 41, 46, 8.2),
    _c("10", 1.83, 0.075, 46, 57, 64, 9.5),
    _c("16", 1.15, 0.070, 61, 76, 85, 10.5),
    _c("25", 0.727, 0.070, 80, 101, 112, 12.2),
    _c("35", 0.524, 0.065, 99, 125, 138, 13.4),
    _c("50", 0.387, 0.065, 119, 151, 167, 15.0),
    _c("70", 0.268, 0.065, 151, 192, 213, 17.0),
    _c("95", 0.193, 0.060, 182, 232, 258, 19.2),
    _c("120", 0.153, 0.060, 210, 269, 299, 21.0),
    _c("150", 0.124, 0.055, 240, 309, 344, 22.8),
    _c("185", 0.099, 0.055, 273, 353, 392, 24.8),
    _c("240", 0.077, 0.050, 320, 415, 461, 27.3),
    _c("300", 0.061, 0.050, 367, 477, 530, 29.8),
    _c("400", 0.047, 0.045, 419, 546, 607, 33.0),
    _c("500", 0.037, 0.045, 467, 609, 677, 35.8),
    _c("630", 0.030, 0.040, 525, 686, 763, 39.5),
)

IEC_TEMPERATURE_CORRECTION: Dict[int, Dict[int, float]] = {
    60: {10: 1.22, 15: 1.17, 20: 1.12, 25: 1.06, 30: 1.00, 35: 0.94, 40: 0.87, 45: 0.79,
         50: 0.71, 55: 0.61, 60: 0.50},
    70: {10: 1.15, 15: 1.12, 20: 1.08, 25: 1.04, 30: 1.00, 35: 0.96, 40: 0.91, 45: 0.87,
         50: 0.82, 55: 0.76, 60: 0.71, 65: 0.65, 70: 0.58},
    90: {10: 1.10, 15: 1.08, 20: 1.05, 25: 1.03, 30: 1.00, 35: 0.98, 40: 0.95, 45: 0.93,
         50: 0.90, 55: 0.87, 60: 0.84, 65: 0.81, 70: 0.77, 75: 0.74, 80: 0.70, 85: 0.67, 90: 0.63},
}

# circuits grouped together -> grouping factor (shared by IEC and BS 7671)
GROUPING_FACTORS: Dict[int, float] = {
    1: 1.00, 2: 0.80, 3: 0.70, 4: 0.65, 5: 0.60, 6: 0.57, 7: 0.54, 8: 0.52, 9: 0.50,
    10: 0.48, 11: 0.46, 12: 0.45, 13: 0.44, 14: 0.43, 15: 0.42, 16: 0.41, 17: 0.40,
    18: 0.39, 19: 0.38, 20: 0.38,
}

INSTALLATION_METHODS: Dict[str, Tuple[float, str]] = {
    "A1": (1.0, "Insulated conductors in conduit in thermally insulating wall"),
    "A2": (1.0, "Multicore cable in conduit in thermally insulating wall"),
    "B1": (1.0, "Insulated conductors in conduit on wall or in trunking"),
    "B2": (1.0, "Multicore cable in conduit on wall or in trunking"),
    "C": (1.0, "Multicore cable on wall or ceiling"),
    "D1": (1.0, "Multicore cable in underground duct"),
    "D2": (1.0, "Multicore cable buried direct in ground"),
    "E": (1.2, "Multicore cable in free air"),
    "F": (1.1, "Single core cables in free air"),
    "G": (1.0, "Single core cables in underground duct"),
}

UNDERGROUND_METHODS = ("D1", "D2")
REFERENCE_SOIL_RESISTIVITY = 2.5  # K·m/W

ALUMINUM_RESISTANCE_MULTIPLIER = 1.64

# conductor temperature column used for sizing
IEC_SIZING_RATING = 90
BS7671_SIZING_RATING = 70


def cable_table(standard_id: str) -> Tuple[ConductorSpec, ...]:
    return BS7671_CABLES if standard_id == "BS7671" else IEC_CABLES


def get_cable(standard_id: str, size: str) -> Optional[ConductorSpec]:
    for c in cable_table(standard_id):
        if c.size == size:
            return c
    return None
