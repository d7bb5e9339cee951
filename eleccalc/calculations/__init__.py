"""Calculation engines. Pure functions, no Streamlit imports."""

from .conduit_fill import calculate_conduit_fill
from .dc import calculate_dc_wire_size
from .dc_breaker import calculate_dc_breaker_size
from .inputs import (
    ConduitFillInput,
    ConduitWire,
    DCBreakerInput,
    DCWireInput,
    VoltageDropInput,
    WireInput,
    validate_input,
)
from .voltage_drop import analyze_voltage_drop, voltage_drop_curve
from .wire import calculate_wire_size

__all__ = [
    "calculate_wire_size",
    "analyze_voltage_drop",
    "voltage_drop_curve",
    "calculate_conduit_fill",
    "calculate_dc_wire_size",
    "calculate_dc_breaker_size",
    "WireInput",
    "VoltageDropInput",
    "ConduitWire",
    "ConduitFillInput",
    "DCWireInput",
    "DCBreakerInput",
    "validate_input",
]
