"""
Electrical standards catalogue (AC standards selectable in the UI).
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Tuple

from ..infra.exceptions import ValidationError


@dataclass(frozen=True)
class VoltageDropLimits:
    normal: float
    sensitive: float
    critical: float


@dataclass(frozen=True)
class ElectricalStandard:
    id: str
    name: str
    full_name: str
    wire_system: str  # "AWG" | "mm2"
    length_unit: str  # "ft" | "m"
    single_phase_voltages: Tuple[int, ...]
    three_phase_voltages: Tuple[int, ...]
    regions: Tuple[str, ...]
    voltage_drop_limits: VoltageDropLimits


ELECTRICAL_STANDARDS: Dict[str, ElectricalStandard] = {
    "NEC": ElectricalStandard(
        id="NEC",
        name="NEC",
        full_name="National Electrical Code (US)",
        wire_system="AWG",
        length_unit="ft",
        single_phase_voltages=(120, 240),
        three_phase_voltages=(208, 240, 277, 480),
        regions=("United States", "Canada (modified)"),
        voltage_drop_limits=VoltageDropLimits(normal=3.0, sensitive=2.0, critical=1.0),
    ),
    "IEC": ElectricalStandard(
        id="IEC",
        name="IEC 60364",
        full_name="International Electrotechnical Commission",
        wire_system="mm2",
        length_unit="m",
        single_phase_voltages=(230,),
        three_phase_voltages=(400, 690),
        regions=("International", "Most of Europe", "Asia", "Africa"),
        voltage_drop_limits=VoltageDropLimits(normal=4.0, sensitive=3.0, critical=2.0),
    ),
    "BS7671": ElectricalStandard(
        id="BS7671",
        name="BS 7671",
        full_name="British Standard (18th Edition)",
        wire_system="mm2",
        length_unit="m",
        single_phase_voltages=(230,),
        three_phase_voltages=(400,),
        regions=("United Kingdom", "Ireland"),
        voltage_drop_limits=VoltageDropLimits(normal=4.0, sensitive=3.0, critical=2.0),
    ),
}


def get_standard(standard_id: str) -> ElectricalStandard:
    try:
        return ELECTRICAL_STANDARDS[standard_id]
    except KeyError:
        raise ValidationError(f"unknown electrical standard: {standard_id}", field="standard", value=standard_id)


def get_voltage_drop_limits(standard_id: str) -> VoltageDropLimits:
    return get_standard(standard_id).voltage_drop_limits


@dataclass(frozen=True)
class ConductorSpec:
    """One row of a conductor table.

    NEC rows use in² / ohm per 1000 ft; IEC and BS7671 rows use mm² / ohm per km.
    ``ampacity`` maps conductor temperature rating (°C) to current capacity (A).
    """
    size: str
    area: float
    resistance: float
    reactance: float
    ampacity: Dict[int, float]
    diameter: float

    def ampacity_at(self, rating: int) -> float:
        return self.ampacity[rating]


def step_lookup(table: Dict[int, float], value: float) -> float:
    """Factor of the first key >= value; values beyond the table use the last key."""
    keys = sorted(table)
    for k in keys:
        if value <= k:
            return table[k]
    return table[keys[-1]]
