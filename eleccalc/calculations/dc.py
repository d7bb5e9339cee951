"""
DC wire sizing.

NEC lengths are one-way feet against ohm per 1000 ft; IEC lengths are one-way
metres against ohm per km. The loop doubles the length in the drop formula.
"""
from __future__ import annotations

from typing import Any, Dict, Union

from ..domain.models import Compliance, DCWireResult
from ..infra.exceptions import CalculationError, handle_errors
from ..infra.logging import get_logger
from ..standards.dc import (
    ALUMINUM_RESISTANCE_MULTIPLIER,
    DC_WIRES,
    DCWire,
    format_metric_size,
    get_application,
    metric_size_for,
    resistance_per_km,
    temperature_correction,
)
from .inputs import DCWireInput, validate_input

logger = get_logger(__name__)


def _loop_resistance(wire: DCWire, material: str, wire_standard: str) -> float:
    resistance = resistance_per_km(wire) if wire_standard == "IEC" else wire.resistance
    multiplier = ALUMINUM_RESISTANCE_MULTIPLIER if material == "aluminum" else 1.0
    return resistance * multiplier


def dc_voltage_drop(wire: DCWire, current: float, length: float, material: str,
                    wire_standard: str = "NEC") -> float:
    return 2 * current * _loop_resistance(wire, material, wire_standard) * length / 1000


def dc_power_loss(wire: DCWire, current: float, length: float, material: str,
                  wire_standard: str = "NEC") -> float:
    return current * current * _loop_resistance(wire, material, wire_standard) * length / 1000


def wire_size_label(wire: DCWire, wire_standard: str = "NEC") -> str:
    """AWG gauge for NEC, next metric cross-section in mm² for IEC."""
    if wire_standard == "IEC":
        return format_metric_size(metric_size_for(wire.cross_section_mm2))
    return wire.gauge


@handle_errors(logger)
def calculate_dc_wire_size(data: Union[DCWireInput, Dict[str, Any]]) -> DCWireResult:
    """Pick the smallest DC wire that carries the load within the drop limit.

    When no ampacity-suitable wire meets the limit, the one with the lowest
    drop is returned and flagged non-compliant.
    """
    data = validate_input(DCWireInput, data)
    app = get_application(data.application)
    std = data.wire_standard

    if data.allowable_voltage_drop is not None:
        limit = data.allowable_voltage_drop
    elif data.critical_load:
        limit = app.voltage_drop_critical
    else:
        limit = app.voltage_drop_normal

    factor = temperature_correction(app.id, data.ambient_temperature)
    safety_current = data.current * app.ampacity_safety_factor

    suitable = [w for w in DC_WIRES if w.continuous_ampacity * factor >= safety_current]
    if not suitable:
        raise CalculationError(
            f"No wire size found with sufficient ampacity for {safety_current:.1f} A",
            standard=app.breaker_standard, calculation="dc_wire_size",
        )

    def _percent(w: DCWire) -> float:
        return dc_voltage_drop(w, data.current, data.length, data.conductor_material, std) / data.voltage * 100

    selected = next((w for w in suitable if _percent(w) <= limit), None)
    if selected is None:
        selected = min(suitable, key=_percent)

    volts = dc_voltage_drop(selected, data.current, data.length, data.conductor_material, std)
    percent = volts / data.voltage * 100
    corrected = selected.continuous_ampacity * factor
    size = wire_size_label(selected, std)
    unit = "mm²" if std == "IEC" else "AWG"

    logger.info(f"DC {app.id} wire for {data.current} A ({std}): {size} {unit} ({percent:.2f}% drop)")
    return DCWireResult(
        application=app.id,
        recommended_gauge=size,
        corrected_ampacity=corrected,
        safety_current=safety_current,
        voltage_drop_volts=volts,
        voltage_drop_percent=percent,
        voltage_drop_limit=limit,
        power_loss_watts=dc_power_loss(selected, data.current, data.length, data.conductor_material, std),
        efficiency_percent=(data.voltage - volts) / data.voltage * 100,
        temperature_factor=factor,
        compliance=Compliance(
            current=corrected >= safety_current,
            voltage_drop=percent <= limit,
            temperature=data.ambient_temperature <= selected.temperature_rating,
        ),
        wire_standard=std,
        size_unit=unit,
        awg_gauge=selected.gauge,
        length_unit="m" if std == "IEC" else "ft",
    )


__all__ = [
    "calculate_dc_wire_size",
    "dc_voltage_drop",
    "dc_power_loss",
    "wire_size_label",
]
