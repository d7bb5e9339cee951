"""
Domain models: calculation results. Pure data, no IO.
"""
from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class CorrectionFactors:
    temperature: float = 1.0
    grouping: float = 1.0
    installation: float = 1.0
    thermal: float = 1.0

    @property
    def combined(self) -> float:
        return self.temperature * self.grouping * self.installation * self.thermal


@dataclass(frozen=True)
class Compliance:
    current: bool
    voltage_drop: bool
    temperature: bool = True
    installation: bool = True

    @property
    def overall(self) -> bool:
        return self.current and self.voltage_drop and self.temperature and self.installation


@dataclass(frozen=True)
class WireAlternative:
    size: str
    capacity: float
    voltage_drop_percent: float
    is_compliant: bool


@dataclass
class WireSizeResult:
    standard: str
    recommended_size: str
    size_unit: str
    current_capacity: float
    required_ampacity: float
    design_current: float
    voltage_drop_volts: float
    voltage_drop_percent: float
    voltage_drop_limit: float
    power_loss_watts: float
    efficiency_percent: float
    correction_factors: CorrectionFactors
    compliance: Compliance
    alternatives: List[WireAlternative] = field(default_factory=list)
    assumptions: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class VoltageDropRow:
    size: str
    voltage_drop_volts: float
    voltage_drop_percent: float
    power_loss_watts: float
    efficiency_percent: float
    current_capacity: float
    is_compliant: bool


@dataclass(frozen=True)
class VoltageDropPoint:
    distance: float
    voltage_drop_volts: float
    voltage_drop_percent: float


@dataclass
class VoltageDropAnalysis:
    standard: str
    voltage_drop_limit: float
    rows: List[VoltageDropRow]
    recommended: Optional[VoltageDropRow] = None


@dataclass(frozen=True)
class ConduitWireLine:
    gauge: str
    quantity: int
    unit_area: float
    total_area: float
    share_percent: float


@dataclass(frozen=True)
class ConduitOption:
    size: str
    fill_percent: float
    is_compliant: bool


@dataclass
class ConduitFillResult:
    conduit_type: str
    conduit_size: str
    conduit_area: float
    total_wire_area: float
    wire_count: int
    fill_percent: float
    max_fill_percent: float
    fill_rule: str
    is_compliant: bool
    wire_breakdown: List[ConduitWireLine] = field(default_factory=list)
    alternatives: List[ConduitOption] = field(default_factory=list)


@dataclass
class DCWireResult:
    application: str
    recommended_gauge: str
    corrected_ampacity: float
    safety_current: float
    voltage_drop_volts: float
    voltage_drop_percent: float
    voltage_drop_limit: float
    power_loss_watts: float
    efficiency_percent: float
    temperature_factor: float
    compliance: Compliance
    wire_standard: str = "NEC"
    size_unit: str = "AWG"
    awg_gauge: str = ""
    length_unit: str = "ft"


@dataclass
class DCBreakerResult:
    """Overcurrent device sizing. ``device`` is "breaker" or "fuse"."""
    application: str
    base_current: float
    adjusted_current: float
    safety_factor: float
    temperature_derating: float
    recommended_rating: float
    calculation_method: str
    notes: List[str] = field(default_factory=list)
    standard: str = "NEC"
    device: str = "breaker"
    device_type: str = "thermal-magnetic"
    fuse_color: Optional[str] = None
    available_ratings: List[float] = field(default_factory=list)
    compliant: bool = True
