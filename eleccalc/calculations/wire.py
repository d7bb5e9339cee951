"""
AC wire sizing engine (NEC, IEC 60364-5-52, BS 7671).

Sizing sequence, shared by all three standards:

1. design current (NEC adds 125% for continuous loads)
2. required ampacity = design current / (temperature x grouping x installation x thermal)
3. candidate sizes: every table row whose ampacity covers the requirement
4. the smallest candidate whose voltage drop is within the standard's normal
   limit; if none is, the smallest candidate with a warning

NEC lengths are feet against ohm/1000 ft; IEC and BS 7671 lengths are metres
against ohm/km, including the reactive term X·sinφ.
"""
from __future__ import annotations

import math
from typing import Any, Dict, List, Sequence, Tuple, Union

from ..domain.models import Compliance, CorrectionFactors, WireAlternative, WireSizeResult
from ..infra.exceptions import CalculationError, ValidationError, handle_errors
from ..infra.logging import get_logger
from ..standards import ConductorSpec, get_voltage_drop_limits, step_lookup
from ..standards import iec, nec
from .inputs import WireInput, validate_input

logger = get_logger(__name__)

MAX_ALTERNATIVES = 5


def resistance_for(spec: ConductorSpec, standard: str, material: str) -> float:
    if material != "aluminum":
        return spec.resistance
    multiplier = nec.ALUMINUM_RESISTANCE_MULTIPLIER if standard == "NEC" else iec.ALUMINUM_RESISTANCE_MULTIPLIER
    return spec.resistance * multiplier


def conductor_voltage_drop(
    spec: ConductorSpec,
    standard: str,
    current: float,
    length: float,
    voltage: float,
    voltage_system: str,
    material: str,
    power_factor: float,
) -> Tuple[float, float]:
    """Return (volts, percent) dropped along ``length`` for one table row."""
    r = resistance_for(spec, standard, material)
    k = 2.0 if voltage_system == "single" else math.sqrt(3)
    if standard == "NEC":
        volts = k * current * length * r * power_factor / 1000
    else:
        sin_phi = math.sqrt(max(0.0, 1 - power_factor * power_factor))
        volts = k * current * (length / 1000) * (r * power_factor + spec.reactance * sin_phi)
    return volts, volts / voltage * 100


def power_loss(spec: ConductorSpec, standard: str, current: float, length: float,
               voltage_system: str, material: str) -> float:
    r = resistance_for(spec, standard, material)
    multiplier = 1 if voltage_system == "single" else 3
    return multiplier * current * current * r * (length / 1000)


def _table_for(data: WireInput) -> Tuple[Sequence[ConductorSpec], int]:
    if data.standard == "NEC":
        if data.temperature_rating not in nec.NEC_TEMPERATURE_RATINGS:
            raise ValidationError(
                f"NEC temperature rating must be one of {nec.NEC_TEMPERATURE_RATINGS}",
                field="temperature_rating", value=data.temperature_rating,
            )
        return nec.NEC_WIRES, data.temperature_rating
    if data.standard == "BS7671":
        return iec.BS7671_CABLES, iec.BS7671_SIZING_RATING
    return iec.IEC_CABLES, iec.IEC_SIZING_RATING


def default_installation_method(standard: str) -> str:
    return "conduit" if standard == "NEC" else "C"


def correction_factors(data: WireInput, rating: int) -> CorrectionFactors:
    method = data.installation_method or default_installation_method(data.standard)
    if data.standard == "NEC":
        return CorrectionFactors(
            temperature=step_lookup(nec.NEC_TEMPERATURE_CORRECTION[rating], data.ambient_temperature),
            grouping=step_lookup(nec.NEC_CONDUCTOR_ADJUSTMENT, data.number_of_conductors),
            installation=nec.NEC_INSTALLATION_METHODS.get(method, (1.0, ""))[0],
        )

    thermal = 1.0
    if method in iec.UNDERGROUND_METHODS and data.soil_resistivity > iec.REFERENCE_SOIL_RESISTIVITY:
        thermal = iec.REFERENCE_SOIL_RESISTIVITY / data.soil_resistivity
    return CorrectionFactors(
        temperature=step_lookup(iec.IEC_TEMPERATURE_CORRECTION[rating], data.ambient_temperature),
        grouping=step_lookup(iec.GROUPING_FACTORS, data.number_of_conductors),
        installation=iec.INSTALLATION_METHODS.get(method, (1.0, ""))[0],
        thermal=thermal,
    )


def installation_methods(standard: str) -> Dict[str, str]:
    table = nec.NEC_INSTALLATION_METHODS if standard == "NEC" else iec.INSTALLATION_METHODS
    return {k: desc for k, (_, desc) in table.items()}


@handle_errors(logger)
def calculate_wire_size(data: Union[WireInput, Dict[str, Any]]) -> WireSizeResult:
    """Recommend a conductor size for an AC circuit."""
    data = validate_input(WireInput, data)
    table, rating = _table_for(data)
    method = data.installation_method or default_installation_method(data.standard)

    assumptions: List[str] = []
    warnings: List[str] = []

    design_current = data.load_current
    if data.standard == "NEC" and data.continuous_load:
        design_current = data.load_current * nec.CONTINUOUS_LOAD_MULTIPLIER
        assumptions.append("Applied NEC 1.25x multiplier for continuous loads")
    elif data.standard != "NEC":
        assumptions.append(f"No continuous load multiplier applied ({data.standard})")

    factors = correction_factors(data, rating)
    if factors.combined <= 0:
        raise CalculationError(
            f"ambient temperature {data.ambient_temperature}°C leaves no usable ampacity",
            standard=data.standard, calculation="wire_size",
        )
    required = design_current / factors.combined

    candidates = [c for c in table if c.ampacity_at(rating) >= required]
    if not candidates:
        raise CalculationError(
            f"No suitable {data.standard} conductor size for a required ampacity of {required:.1f} A",
            standard=data.standard, calculation="wire_size",
        )

    limit = get_voltage_drop_limits(data.standard).normal

    def _vd(spec: ConductorSpec) -> Tuple[float, float]:
        return conductor_voltage_drop(spec, data.standard, data.load_current, data.circuit_length,
                                      data.voltage, data.voltage_system, data.conductor_material,
                                      data.power_factor)

    selected = candidates[0]
    vd_volts, vd_percent = _vd(selected)
    for spec in candidates:
        volts, percent = _vd(spec)
        if percent <= limit:
            selected, vd_volts, vd_percent = spec, volts, percent
            break
    else:
        warnings.append(
            f"No size keeps voltage drop within {limit}%; consider a shorter run or higher voltage"
        )

    alternatives = []
    for spec in candidates[:MAX_ALTERNATIVES]:
        _, percent = _vd(spec)
        alternatives.append(WireAlternative(spec.size, spec.ampacity_at(rating), percent, percent <= limit))

    capacity = selected.ampacity_at(rating)
    known_method = method in (nec.NEC_INSTALLATION_METHODS if data.standard == "NEC" else iec.INSTALLATION_METHODS)
    if not known_method:
        warnings.append(f"Unknown installation method '{method}', factor 1.0 used")

    result = WireSizeResult(
        standard=data.standard,
        recommended_size=selected.size,
        size_unit="AWG/kcmil" if data.standard == "NEC" else "mm²",
        current_capacity=capacity,
        required_ampacity=required,
        design_current=design_current,
        voltage_drop_volts=vd_volts,
        voltage_drop_percent=vd_percent,
        voltage_drop_limit=limit,
        power_loss_watts=power_loss(selected, data.standard, data.load_current, data.circuit_length,
                                    data.voltage_system, data.conductor_material),
        efficiency_percent=(data.voltage - vd_volts) / data.voltage * 100,
        correction_factors=factors,
        compliance=Compliance(
            current=capacity >= required,
            voltage_drop=vd_percent <= limit,
            temperature=-40 <= data.ambient_temperature <= 90,
            installation=known_method,
        ),
        alternatives=alternatives,
        assumptions=assumptions,
        warnings=warnings,
    )
    logger.info(
        f"{data.standard} wire size for {data.load_current} A over {data.circuit_length}: "
        f"{result.recommended_size} ({vd_percent:.2f}% drop)"
    )
    return result
