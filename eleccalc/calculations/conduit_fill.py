"""
Conduit fill per NEC Chapter 9 Table 1.
"""
from __future__ import annotations

from typing import Any, Dict, List, Union

from ..domain.models import ConduitFillResult, ConduitOption, ConduitWireLine
from ..infra.exceptions import CalculationError, ValidationError, handle_errors
from ..infra.logging import get_logger
from ..standards.nec import get_nec_wire, nec_conduits, nec_fill_limit
from .inputs import ConduitFillInput, validate_input

logger = get_logger(__name__)

_FILL_RULES = {
    1: "NEC Chapter 9 Table 1: one conductor, 53%",
    2: "NEC Chapter 9 Table 1: two conductors, 31%",
}
_FILL_RULE_MANY = "NEC Chapter 9 Table 1: over two conductors, 40%"


@handle_errors(logger)
def calculate_conduit_fill(data: Union[ConduitFillInput, Dict[str, Any]]) -> ConduitFillResult:
    """Size a conduit (or check a requested one) for a set of NEC conductors."""
    data = validate_input(ConduitFillInput, data)

    lines = []
    raw_area = 0.0
    wire_count = 0
    for wire in data.wires:
        spec = get_nec_wire(wire.gauge)
        if spec is None:
            raise ValidationError(f"unknown wire gauge: {wire.gauge}", field="gauge", value=wire.gauge)
        total = spec.area * wire.quantity
        raw_area += total
        wire_count += wire.quantity
        lines.append((wire.gauge, wire.quantity, spec.area, total))

    total_area = raw_area * (1 + data.future_fill_reserve / 100)
    max_fill = nec_fill_limit(wire_count)
    breakdown = [
        ConduitWireLine(gauge, qty, unit, total, total / raw_area * 100)
        for gauge, qty, unit, total in lines
    ]

    conduits = nec_conduits(data.conduit_type)
    options: List[ConduitOption] = []
    for c in conduits:
        fill = total_area / c.area * 100
        options.append(ConduitOption(c.size, fill, fill <= max_fill))

    if data.conduit_size:
        chosen = next((c for c in conduits if c.size == data.conduit_size), None)
        if chosen is None:
            raise CalculationError(
                f"unknown {data.conduit_type} conduit size: {data.conduit_size}",
                standard="NEC", calculation="conduit_fill",
            )
    else:
        chosen = next((c for c, o in zip(conduits, options) if o.is_compliant), conduits[-1])

    fill_percent = total_area / chosen.area * 100
    result = ConduitFillResult(
        conduit_type=data.conduit_type,
        conduit_size=chosen.size,
        conduit_area=chosen.area,
        total_wire_area=total_area,
        wire_count=wire_count,
        fill_percent=fill_percent,
        max_fill_percent=max_fill,
        fill_rule=_FILL_RULES.get(wire_count, _FILL_RULE_MANY),
        is_compliant=fill_percent <= max_fill,
        wire_breakdown=breakdown,
        alternatives=[o for o in options if o.is_compliant][:5],
    )
    if not result.is_compliant:
        logger.warning(f"{data.conduit_type} {chosen.size}\" filled to {fill_percent:.1f}% (limit {max_fill}%)")
    return result
