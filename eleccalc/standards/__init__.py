"""Electrical code tables (NEC, IEC 60364, BS 7671, DC applications)."""

from .catalog import (
    ELECTRICAL_STANDARDS,
    ConductorSpec,
    ElectricalStandard,
    VoltageDropLimits,
    get_standard,
    get_voltage_drop_limits,
    step_lookup,
)

__all__ = [
    "ELECTRICAL_STANDARDS",
    "ConductorSpec",
    "ElectricalStandard",
    "VoltageDropLimits",
    "get_standard",
    "get_voltage_drop_limits",
    "step_lookup",
]
