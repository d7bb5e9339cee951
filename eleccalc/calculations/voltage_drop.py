"""
Voltage drop analysis: every conductor of the selected standard evaluated for
one circuit, plus a distance sweep for charting.
"""
from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

from ..domain.models import VoltageDropAnalysis, VoltageDropPoint, VoltageDropRow
from ..infra.exceptions import CalculationError, handle_errors
from ..infra.logging import get_logger
from ..standards import ConductorSpec, get_voltage_drop_limits
from ..standards import iec, nec
from .inputs import VoltageDropInput, validate_input
from .wire import conductor_voltage_drop, power_loss

logger = get_logger(__name__)

# capacity column shown next to each size
_CAPACITY_RATING = {"NEC": 75, "IEC": iec.IEC_SIZING_RATING, "BS7671": iec.BS7671_SIZING_RATING}


def conductor_table(standard: str) -> Sequence[ConductorSpec]:
    return nec.NEC_WIRES if standard == "NEC" else iec.cable_table(standard)


def _find(standard: str, size: str) -> ConductorSpec:
    for spec in conductor_table(standard):
        if spec.size == size:
            return spec
    raise CalculationError(f"unknown {standard} conductor size: {size}",
                           standard=standard, calculation="voltage_drop")


@handle_errors(logger)
def analyze_voltage_drop(data: Union[VoltageDropInput, Dict[str, Any]]) -> VoltageDropAnalysis:
    data = validate_input(VoltageDropInput, data)
    limit = data.limit_percent or get_voltage_drop_limits(data.standard).normal
    rating = _CAPACITY_RATING[data.standard]

    rows: List[VoltageDropRow] = []
    for spec in conductor_table(data.standard):
        volts, percent = conductor_voltage_drop(
            spec, data.standard, data.current, data.length, data.voltage,
            data.voltage_system, data.conductor_material, data.power_factor,
        )
        capacity = spec.ampacity_at(rating)
        rows.append(VoltageDropRow(
            size=spec.size,
            voltage_drop_volts=volts,
            voltage_drop_percent=percent,
            power_loss_watts=power_loss(spec, data.standard, data.current, data.length,
                                        data.voltage_system, data.conductor_material),
            efficiency_percent=(data.voltage - volts) / data.voltage * 100,
            current_capacity=capacity,
            is_compliant=percent <= limit and capacity >= data.current,
        ))

    recommended = next((r for r in rows if r.is_compliant), None)
    if recommended is None:
        logger.warning(f"No {data.standard} size meets {limit}% at {data.current} A over {data.length}")
    return VoltageDropAnalysis(standard=data.standard, voltage_drop_limit=limit,
                               rows=rows, recommended=recommended)


def voltage_drop_curve(
    data: Union[VoltageDropInput, Dict[str, Any]],
    size: str,
    points: int = 20,
    max_length: Optional[float] = None,
) -> List[VoltageDropPoint]:
    """Voltage drop of ``size`` at evenly spaced distances up to ``max_length``.

    ``max_length`` defaults to twice the circuit length so the chart shows
    where the limit is crossed.
    """
    data = validate_input(VoltageDropInput, data)
    spec = _find(data.standard, size)
    span = max_length if max_length is not None else data.length * 2
    points = max(points, 2)

    curve = []
    for i in range(points):
        distance = span * i / (points - 1)
        if distance <= 0:
            curve.append(VoltageDropPoint(0.0, 0.0, 0.0))
            continue
        volts, percent = conductor_voltage_drop(
            spec, data.standard, data.current, distance, data.voltage,
            data.voltage_system, data.conductor_material, data.power_factor,
        )
        curve.append(VoltageDropPoint(distance, volts, percent))
    return curve
