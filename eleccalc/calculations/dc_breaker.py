"""
DC overcurrent protection sizing.

Automotive, marine and LED loads on 12/24/32/48 V systems get an ISO 8820-3
blade fuse while the adjusted current stays inside the fuse range. Everything
else gets a breaker sized to the NEC or IEC rules selected by ``wire_standard``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple, Union

from ..domain.models import DCBreakerResult
from ..infra.exceptions import ValidationError, handle_errors
from ..infra.logging import get_logger
from ..standards.dc import (
    IEC_BATTERY_CONTINUOUS_FACTOR,
    IEC_BATTERY_INTERMITTENT_FACTOR,
    IEC_SAFETY_FACTORS,
    IEC_SOLAR_FACTOR,
    SOLAR_ISC_FACTOR,
    STANDARD_BREAKER_RATINGS,
    DCApplication,
    get_application,
    iec_breaker_ratings,
    iec_temperature_derating,
    next_standard_breaker_size,
    primary_iec_breaker,
)
from ..standards.iso8820 import (
    AUTOMOTIVE_SYSTEMS,
    AUTOMOTIVE_VOLTAGES,
    FUSE_APPLICATIONS,
    FUSE_TEMPERATURE_RANGE,
    MAX_FUSE_RATING,
    fuse_ratings,
    next_fuse_rating,
    primary_fuse,
)
from .inputs import DCBreakerInput, validate_input

logger = get_logger(__name__)

DERATING_THRESHOLD_C = 40
DERATING_PER_DEGREE = 0.01
MIN_DERATING = 0.58
MARINE_ENVIRONMENT_FACTOR = 1.05
BATTERY_CONTINUOUS_FACTOR = 1.1

# rough estimate used only to decide between a fuse and a breaker
FUSE_ROUTING_CONTINUOUS = 1.25
FUSE_ROUTING_INTERMITTENT = 1.15
FUSE_ROUTING_MARINE = 1.1
FUSE_ROUTING_HOT = 1.1

FUSE_DERATING_PER_DEGREE = 0.005
FUSE_MIN_DERATING = 0.5


def _base_current(data: DCBreakerInput, efficiency: float) -> Tuple[float, str]:
    if data.input_method == "power":
        if data.load_power is None:
            raise ValidationError("load power is required for the power input method", field="load_power")
        return (data.load_power / (data.system_voltage * efficiency),
                f"I = P / (V x {efficiency:.2f} efficiency)")
    if data.load_current is None:
        raise ValidationError("load current is required for the current input method", field="load_current")
    return data.load_current, "Load current"


def _automotive_voltage(data: DCBreakerInput) -> Optional[int]:
    voltage = data.system_voltage
    return int(voltage) if voltage in AUTOMOTIVE_VOLTAGES else None


def uses_automotive_fuse(data: DCBreakerInput) -> bool:
    """Whether the load belongs on an ISO 8820-3 blade fuse rather than a breaker."""
    voltage = _automotive_voltage(data)
    if data.application not in FUSE_APPLICATIONS or voltage is None:
        return False

    if data.input_method == "power":
        if data.load_power is None:
            return False
        estimate = data.load_power / (voltage * AUTOMOTIVE_SYSTEMS[voltage].efficiency)
    else:
        if data.load_current is None:
            return False
        estimate = data.load_current

    factor = FUSE_ROUTING_CONTINUOUS if data.duty_cycle == "continuous" else FUSE_ROUTING_INTERMITTENT
    if data.application == "marine":
        factor *= FUSE_ROUTING_MARINE
    if data.ambient_temperature > DERATING_THRESHOLD_C:
        factor *= FUSE_ROUTING_HOT
    return estimate * factor <= MAX_FUSE_RATING


def _size_automotive_fuse(data: DCBreakerInput, app: DCApplication) -> Optional[DCBreakerResult]:
    """ISO 8820-3 fuse, or None when no fuse rating covers the adjusted current."""
    system = AUTOMOTIVE_SYSTEMS[int(data.system_voltage)]
    base_current, method = _base_current(data, system.efficiency)
    if data.duty_cycle == "continuous":
        safety_factor = system.continuous_factor
    else:
        safety_factor = system.intermittent_factor
    adjusted = base_current * safety_factor
    notes = [f"ISO 8820-3 {system.name}: {safety_factor:.2f}x for {data.duty_cycle} duty"]

    derating = 1.0
    if data.ambient_temperature > DERATING_THRESHOLD_C:
        derating = max(FUSE_MIN_DERATING,
                       1 - (data.ambient_temperature - DERATING_THRESHOLD_C) * FUSE_DERATING_PER_DEGREE)
        adjusted /= derating
        notes.append(f"Fuse derated to {derating:.2f} for {data.ambient_temperature}°C ambient")

    if data.marine_environment:
        adjusted *= MARINE_ENVIRONMENT_FACTOR
        notes.append("Marine environment factor applied")

    rating = next_fuse_rating(adjusted, app.id) if adjusted <= MAX_FUSE_RATING else None
    if rating is None:
        logger.info(f"{adjusted:.1f} A {app.id} load is outside the ISO 8820-3 fuse range")
        return None

    fuse = primary_fuse(rating, app.id)
    low, high = FUSE_TEMPERATURE_RANGE
    notes.append(f"{fuse.color.title()} {fuse.fuse_type} blade fuse")
    return DCBreakerResult(
        application=app.id,
        base_current=base_current,
        adjusted_current=adjusted,
        safety_factor=safety_factor,
        temperature_derating=derating,
        recommended_rating=rating,
        calculation_method=method,
        notes=notes,
        standard="ISO 8820-3",
        device="fuse",
        device_type=fuse.fuse_type,
        fuse_color=fuse.color,
        available_ratings=fuse_ratings(app.id),
        compliant=low <= data.ambient_temperature <= high,
    )


def _size_nec_breaker(data: DCBreakerInput, app: DCApplication) -> DCBreakerResult:
    base_current, method = _base_current(data, app.efficiency)
    if data.duty_cycle == "continuous":
        safety_factor = app.breaker_factor_continuous
    else:
        safety_factor = app.breaker_factor_intermittent
    adjusted = base_current * safety_factor
    notes: List[str] = [f"{app.breaker_standard}: {safety_factor:.2f}x for {data.duty_cycle} duty"]

    if app.id == "solar" and data.short_circuit_current:
        adjusted = data.short_circuit_current * SOLAR_ISC_FACTOR
        notes.append(f"NEC 690.8(A): Isc x {SOLAR_ISC_FACTOR}")

    derating = 1.0
    if data.ambient_temperature > DERATING_THRESHOLD_C:
        derating = max(MIN_DERATING, 1 - (data.ambient_temperature - DERATING_THRESHOLD_C) * DERATING_PER_DEGREE)
        adjusted /= derating
        notes.append(f"Derated to {derating:.2f} for {data.ambient_temperature}°C ambient")

    if data.marine_environment:
        adjusted *= MARINE_ENVIRONMENT_FACTOR
        notes.append("Marine environment factor applied")

    if app.id == "battery" and data.duty_cycle == "continuous":
        adjusted *= BATTERY_CONTINUOUS_FACTOR
        notes.append("Battery continuous duty factor applied")

    rating = next_standard_breaker_size(adjusted)
    if rating < adjusted:
        notes.append(f"Required {adjusted:.1f} A exceeds the largest standard rating")
    return DCBreakerResult(
        application=app.id,
        base_current=base_current,
        adjusted_current=adjusted,
        safety_factor=safety_factor,
        temperature_derating=derating,
        recommended_rating=rating,
        calculation_method=method,
        notes=notes,
        standard="NEC",
        available_ratings=list(STANDARD_BREAKER_RATINGS),
        compliant=rating >= adjusted,
    )


def _size_iec_breaker(data: DCBreakerInput, app: DCApplication) -> DCBreakerResult:
    factors = IEC_SAFETY_FACTORS[app.id]
    base_current, method = _base_current(data, app.efficiency)
    safety_factor = factors.for_duty(data.duty_cycle)
    adjusted = base_current * safety_factor
    notes: List[str] = [f"{factors.standard}: {safety_factor:g}x for {data.duty_cycle} duty"]

    if app.id == "solar" and data.short_circuit_current:
        adjusted = data.short_circuit_current * IEC_SOLAR_FACTOR
        notes.append(f"IEC 62548-1: Isc x {IEC_SOLAR_FACTOR} (bifacial)")

    derating = iec_temperature_derating(data.ambient_temperature)
    if derating < 1:
        adjusted /= derating
        notes.append(f"IEC derating {derating:.2f} for {data.ambient_temperature}°C ambient")

    if data.marine_environment:
        adjusted *= MARINE_ENVIRONMENT_FACTOR
        notes.append("Marine environment factor applied")

    if app.id == "battery":
        if data.duty_cycle == "continuous":
            adjusted *= IEC_BATTERY_CONTINUOUS_FACTOR
            notes.append("IEC 62619 thermal runaway factor applied")
        else:
            adjusted *= IEC_BATTERY_INTERMITTENT_FACTOR
            notes.append("Battery inrush factor applied")

    ratings = iec_breaker_ratings(app.id)
    rating = next((r for r in ratings if r >= adjusted), None)
    if rating is None:
        rating = ratings[-1]
        notes.append(f"Required {adjusted:.1f} A exceeds the largest IEC rating for {app.name}")

    breaker = primary_iec_breaker(rating, app.id)
    return DCBreakerResult(
        application=app.id,
        base_current=base_current,
        adjusted_current=adjusted,
        safety_factor=safety_factor,
        temperature_derating=derating,
        recommended_rating=rating,
        calculation_method=method,
        notes=notes,
        standard=breaker.standard,
        device_type=breaker.breaker_type,
        available_ratings=list(ratings),
        compliant=rating >= adjusted and data.ambient_temperature <= breaker.temperature_rating,
    )


@handle_errors(logger)
def calculate_dc_breaker_size(data: Union[DCBreakerInput, Dict[str, Any]]) -> DCBreakerResult:
    data = validate_input(DCBreakerInput, data)
    app = get_application(data.application)

    use_fuse = uses_automotive_fuse(data)
    result = _size_automotive_fuse(data, app) if use_fuse else None
    if result is None:
        if data.wire_standard == "IEC":
            result = _size_iec_breaker(data, app)
        else:
            result = _size_nec_breaker(data, app)
        if use_fuse:
            result.notes.insert(0, "Load exceeds the ISO 8820-3 fuse range for this application; sized as a breaker")
    logger.info(f"DC {app.id} protection ({result.standard}): {result.recommended_rating:g} A {result.device}")
    return result


__all__ = ["calculate_dc_breaker_size", "uses_automotive_fuse"]
