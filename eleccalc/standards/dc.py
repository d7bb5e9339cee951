"""
DC tables: application standards (ISO 6722, ABYC E-11, UL 4703 ...),
DC wire table and standard breaker ratings.

Wire resistance is ohm per 1000 ft; IEC sizing converts it to ohm per km
and reports the next metric cross-section.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, FrozenSet, List, Optional, Tuple

from ..infra.exceptions import ValidationError


@dataclass(frozen=True)
class DCApplication:
    id: str
    name: str
    voltages: Tuple[int, ...]
    voltage_drop_normal: float
    voltage_drop_critical: float
    ampacity_safety_factor: float
    breaker_factor_continuous: float
    breaker_factor_intermittent: float
    breaker_standard: str
    efficiency: float


DC_APPLICATIONS: Dict[str, DCApplication] = {
    "automotive": DCApplication("automotive", "Automotive Systems", (12, 24), 2.0, 1.0, 1.25, 1.25, 1.15, "SAE J1128", 0.98),
    "marine": DCApplication("marine", "Marine Systems", (12, 24, 48), 3.0, 2.0, 1.2, 1.30, 1.20, "ABYC E-11", 0.97),
    "solar": DCApplication("solar", "Solar/Renewable Energy", (12, 24, 48), 2.0, 1.0, 1.25, 1.56, 1.25, "NEC 690.8(A)", 0.95),
    "telecom": DCApplication("telecom", "Telecommunications", (24, 48), 1.0, 0.5, 1.15, 1.15, 1.10, "NECA/BICSI", 0.99),
    "battery": DCApplication("battery", "Battery Systems", (12, 24, 48), 1.5, 1.0, 1.3, 1.40, 1.25, "UL 1973/UL 9540A", 0.93),
    "led": DCApplication("led", "LED Lighting", (12, 24), 3.0, 2.0, 1.15, 1.20, 1.15, "UL 8750", 0.90),
    "industrial": DCApplication("industrial", "Industrial DC", (24, 48), 3.0, 2.0, 1.25, 1.25, 1.15, "NEC 430", 0.96),
}


@dataclass(frozen=True)
class DCWire:
    gauge: str
    cross_section_mm2: float
    resistance: float
    continuous_ampacity: float
    intermittent_ampacity: float
    temperature_rating: int


DC_WIRES: Tuple[DCWire, ...] = (
    DCWire("20", 0.52, 10.15, 11, 14, 105),
    DCWire("18", 0.82, 6.385, 16, 20, 105),
    DCWire("16", 1.31, 4.016, 22, 27, 105),
    DCWire("14", 2.08, 2.525, 32, 40, 105),
    DCWire("12", 3.31, 1.588, 45, 55, 105),
    DCWire("10", 5.26, 0.999, 60, 75, 105),
    DCWire("8", 8.37, 0.628, 80, 100, 105),
    DCWire("6", 13.3, 0.395, 105, 130, 105),
    DCWire("4", 21.2, 0.249, 140, 175, 105),
    DCWire("2", 33.6, 0.156, 190, 240, 105),
    DCWire("1", 42.4, 0.124, 220, 275, 105),
    DCWire("1/0", 53.5, 0.098, 260, 325, 105),
    DCWire("2/0", 67.4, 0.078, 300, 375, 105),
    DCWire("4/0", 107.2, 0.049, 380, 475, 105),
)

# ambient °C -> ampacity correction, linearly interpolated
DC_TEMPERATURE_CORRECTION: Dict[str, Dict[int, float]] = {
    "automotive": {-40: 1.15, -20: 1.10, 0: 1.05, 25: 1.00, 40: 0.95, 60: 0.87, 80: 0.76, 100: 0.62, 125: 0.40},
    "marine": {-20: 1.10, 0: 1.05, 25: 1.00, 40: 0.95, 60: 0.87, 80: 0.76},
    "solar": {-40: 1.15, -20: 1.10, 0: 1.05, 25: 1.00, 40: 0.95, 60: 0.87, 70: 0.82, 80: 0.76, 90: 0.67},
    "telecom": {0: 1.05, 10: 1.02, 25: 1.00, 40: 0.95, 50: 0.87},
    "battery": {-20: 1.10, 0: 1.05, 25: 1.00, 40: 0.95, 60: 0.87},
    "led": {-10: 1.05, 0: 1.02, 25: 1.00, 40: 0.95, 60: 0.87, 70: 0.82},
}

ALUMINUM_RESISTANCE_MULTIPLIER = 1.61
SOLAR_ISC_FACTOR = 1.56  # NEC 690.8(A): 125% x 125%

STANDARD_BREAKER_RATINGS: Tuple[int, ...] = (
    1, 2, 3, 5, 6, 7, 10, 15, 16, 20, 25, 30, 32, 35, 40, 45, 50, 60, 63, 70, 80, 90, 100,
    110, 125, 150, 175, 200, 225, 250, 300, 350, 400, 450, 500, 600, 700, 800,
)


def get_application(app_id: str) -> DCApplication:
    try:
        return DC_APPLICATIONS[app_id]
    except KeyError:
        raise ValidationError(f"unknown DC application: {app_id}", field="application", value=app_id)


def temperature_correction(app_id: str, ambient: float) -> float:
    factors = DC_TEMPERATURE_CORRECTION.get(app_id)
    if not factors:
        return 1.0
    temps = sorted(factors)
    if ambient <= temps[0]:
        return factors[temps[0]]
    if ambient >= temps[-1]:
        return factors[temps[-1]]
    for t1, t2 in zip(temps, temps[1:]):
        if t1 <= ambient <= t2:
            f1, f2 = factors[t1], factors[t2]
            return f1 + (f2 - f1) * (ambient - t1) / (t2 - t1)
    return 1.0


def next_standard_breaker_size(current: float) -> int:
    """Smallest standard rating >= current, capped at the largest rating."""
    if current <= 0:
        return STANDARD_BREAKER_RATINGS[0]
    for rating in STANDARD_BREAKER_RATINGS:
        if rating >= current:
            return rating
    return STANDARD_BREAKER_RATINGS[-1]


# --- metric (IEC) wire sizing ---

FEET_PER_METRE = 3.28084

METRIC_WIRE_SIZES: Tuple[float, ...] = (
    1.5, 2.5, 4, 6, 10, 16, 25, 35, 50, 70, 95, 120, 150, 185, 240, 300, 400, 500,
)


def resistance_per_km(wire: DCWire) -> float:
    return wire.resistance * FEET_PER_METRE


def metric_size_for(cross_section_mm2: float) -> float:
    """Smallest metric size >= the given area, capped at the largest."""
    for size in METRIC_WIRE_SIZES:
        if size >= cross_section_mm2:
            return size
    return METRIC_WIRE_SIZES[-1]


def format_metric_size(size: float) -> str:
    return f"{size:g}"


# --- IEC DC protection (IEC 62548-1, IEC 60947, IEC 62619, IEC 60898) ---

@dataclass(frozen=True)
class DutyFactors:
    continuous: float
    intermittent: float
    standard: str

    def for_duty(self, duty_cycle: str) -> float:
        return self.continuous if duty_cycle == "continuous" else self.intermittent


IEC_SAFETY_FACTORS: Dict[str, DutyFactors] = {
    "solar": DutyFactors(1.375, 1.25, "IEC 62548-1:2023"),
    "automotive": DutyFactors(1.25, 1.15, "IEC 60364-7-722"),
    "marine": DutyFactors(1.30, 1.20, "IEC 60364-7-709"),
    "telecom": DutyFactors(1.15, 1.10, "IEC 60364-7-711"),
    "battery": DutyFactors(1.40, 1.25, "IEC 62619:2022"),
    "led": DutyFactors(1.20, 1.15, "IEC 60364-7-715"),
    "industrial": DutyFactors(1.25, 1.15, "IEC 60364-4-43"),
}

IEC_SOLAR_FACTOR = 1.375  # 1.25 x K_corr 1.1 for bifacial modules
IEC_BATTERY_CONTINUOUS_FACTOR = 1.2  # thermal runaway
IEC_BATTERY_INTERMITTENT_FACTOR = 1.1  # inrush

# ambient °C -> derating; a temperature uses the next listed step up
IEC_TEMPERATURE_DERATING: Dict[int, float] = {
    25: 1.00, 30: 0.94, 35: 0.87, 40: 0.82, 45: 0.76, 50: 0.71,
    55: 0.65, 60: 0.58, 65: 0.50, 70: 0.41, 75: 0.29,
}


def iec_temperature_derating(ambient: float) -> float:
    if ambient <= 25:
        return 1.0
    for temp in sorted(IEC_TEMPERATURE_DERATING):
        if temp >= ambient:
            return IEC_TEMPERATURE_DERATING[temp]
    return IEC_TEMPERATURE_DERATING[max(IEC_TEMPERATURE_DERATING)]


@dataclass(frozen=True)
class IECBreaker:
    rating: int
    standard: str
    breaker_type: str
    voltage: int
    temperature_rating: int
    applications: FrozenSet[str]


def _iec(rating: int, standard: str, *applications: str) -> IECBreaker:
    if standard == "IEC 62619":
        return IECBreaker(rating, standard, "electronic", 120, 60, frozenset(applications))
    voltage = {"IEC 60947": 250, "IEC 60898-1": 48, "IEC 60898-3": 440}[standard]
    return IECBreaker(rating, standard, "thermal-magnetic", voltage, 85, frozenset(applications))


_LOW = ("automotive", "marine", "telecom", "led")
_MID = ("automotive", "marine", "solar", "battery")
_BIG = ("solar", "battery", "industrial")

IEC_BREAKERS: Tuple[IECBreaker, ...] = (
    # IEC 60947-2 industrial
    _iec(6, "IEC 60947", *_LOW),
    _iec(10, "IEC 60947", *_LOW),
    _iec(16, "IEC 60947", *_MID),
    _iec(20, "IEC 60947", "marine", *_BIG),
    _iec(25, "IEC 60947", "automotive", "marine", *_BIG),
    _iec(32, "IEC 60947", "automotive", "marine", *_BIG),
    _iec(35, "IEC 60947", *_MID),
    _iec(40, "IEC 60947", *_BIG),
    _iec(50, "IEC 60947", "marine", *_BIG),
    _iec(63, "IEC 60947", "automotive", *_BIG),
    _iec(80, "IEC 60947", "marine", *_BIG),
    _iec(100, "IEC 60947", *_BIG),
    _iec(125, "IEC 60947", "marine", *_BIG),
    _iec(150, "IEC 60947", "marine", *_BIG),
    _iec(160, "IEC 60947", "marine", *_BIG),
    _iec(200, "IEC 60947", *_BIG),
    # IEC 62619 battery energy storage
    *(_iec(r, "IEC 62619", "battery") for r in (16, 25, 32, 50, 60, 63, 80, 90, 100)),
    # IEC 60898-1 miniature breakers up to 48 V DC
    _iec(1, "IEC 60898-1", "automotive", "led"),
    _iec(2, "IEC 60898-1", "automotive", "led"),
    _iec(6, "IEC 60898-1", *_LOW),
    _iec(10, "IEC 60898-1", *_LOW),
    _iec(15, "IEC 60898-1", "automotive", "marine", "telecom"),
    _iec(16, "IEC 60898-1", "automotive", "marine", "telecom", "battery"),
    _iec(20, "IEC 60898-1", "automotive", "marine", "solar"),
    _iec(25, "IEC 60898-1", *_MID),
    _iec(30, "IEC 60898-1", *_MID),
    _iec(32, "IEC 60898-1", *_MID),
    # IEC 60898-3 DC miniature breakers above 48 V
    _iec(6, "IEC 60898-3", "solar", "industrial"),
    _iec(10, "IEC 60898-3", "solar", "industrial"),
    *(_iec(r, "IEC 60898-3", *_BIG) for r in (16, 20, 25)),
    _iec(30, "IEC 60898-3", "marine", *_BIG),
    *(_iec(r, "IEC 60898-3", *_BIG) for r in (32, 40, 50, 63)),
)

_IEC_PREFERENCE: Dict[str, Tuple[str, ...]] = {
    "battery": ("IEC 62619",),
    "solar": ("IEC 60947", "IEC 60898-3"),
    "industrial": ("IEC 60947",),
}


def iec_breaker_ratings(app_id: str) -> List[int]:
    return sorted({b.rating for b in IEC_BREAKERS if app_id in b.applications})


def iec_breakers_for(rating: int, app_id: str) -> List[IECBreaker]:
    """Breakers of ``rating`` listed for ``app_id``, preferred family first."""
    matches = [b for b in IEC_BREAKERS if b.rating == rating and app_id in b.applications]
    preference = _IEC_PREFERENCE.get(app_id, ())

    def rank(b: IECBreaker) -> int:
        return preference.index(b.standard) if b.standard in preference else len(preference)

    return sorted(matches, key=rank)


def primary_iec_breaker(rating: int, app_id: str) -> Optional[IECBreaker]:
    matches = iec_breakers_for(rating, app_id)
    return matches[0] if matches else None
