"""
Validated calculation inputs.

Each engine receives one of these models; pydantic violations are converted
into the app's ValidationError by ``validate_input``.
"""
from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional, Type, TypeVar

from pydantic import BaseModel, Field, ValidationError as PydanticValidationError

from ..infra.exceptions import ValidationError

Material = Literal["copper", "aluminum"]
VoltageSystem = Literal["single", "three"]
DCWireStandard = Literal["NEC", "IEC"]


class WireInput(BaseModel):
    standard: Literal["NEC", "IEC", "BS7671"] = "NEC"
    load_current: float = Field(gt=0, description="Load current (A)")
    circuit_length: float = Field(gt=0, description="One-way length (ft for NEC, m otherwise)")
    voltage: float = Field(gt=0)
    voltage_system: VoltageSystem = "single"
    conductor_material: Material = "copper"
    installation_method: Optional[str] = None  # NEC "conduit", IEC/BS7671 "C"
    ambient_temperature: float = 30
    number_of_conductors: int = Field(3, ge=1)
    power_factor: float = Field(1.0, gt=0, le=1)
    temperature_rating: int = 75  # NEC only
    continuous_load: bool = True  # NEC 210.19(A)(1)
    soil_resistivity: float = Field(2.5, gt=0)  # IEC/BS7671 D1/D2 only


class VoltageDropInput(BaseModel):
    standard: Literal["NEC", "IEC", "BS7671"] = "NEC"
    current: float = Field(gt=0)
    length: float = Field(gt=0)
    voltage: float = Field(gt=0)
    voltage_system: VoltageSystem = "single"
    conductor_material: Material = "copper"
    power_factor: float = Field(1.0, gt=0, le=1)
    limit_percent: Optional[float] = Field(None, gt=0)


class ConduitWire(BaseModel):
    gauge: str
    quantity: int = Field(gt=0)


class ConduitFillInput(BaseModel):
    conduit_type: Literal["EMT", "PVC", "Steel", "IMC"] = "EMT"
    wires: List[ConduitWire] = Field(min_length=1)
    conduit_size: Optional[str] = None
    future_fill_reserve: float = Field(0, ge=0, le=100)


class DCWireInput(BaseModel):
    application: str = "automotive"
    current: float = Field(gt=0)
    length: float = Field(gt=0, description="One-way length, feet for NEC and metres for IEC")
    voltage: float = Field(gt=0)
    conductor_material: Material = "copper"
    ambient_temperature: float = 25
    critical_load: bool = False
    allowable_voltage_drop: Optional[float] = Field(None, gt=0)
    wire_standard: DCWireStandard = "NEC"


class DCBreakerInput(BaseModel):
    application: str = "automotive"
    input_method: Literal["current", "power"] = "current"
    load_current: Optional[float] = Field(None, gt=0)
    load_power: Optional[float] = Field(None, gt=0)
    system_voltage: float = Field(12, gt=0)
    duty_cycle: Literal["continuous", "intermittent"] = "continuous"
    ambient_temperature: float = 25
    short_circuit_current: Optional[float] = Field(None, gt=0)
    marine_environment: bool = False
    wire_standard: DCWireStandard = "NEC"


M = TypeVar("M", bound=BaseModel)


def validate_input(model: Type[M], data: Any) -> M:
    """Build ``model`` from a dict (or pass an instance through)."""
    if isinstance(data, model):
        return data
    try:
        return model(**dict(data))
    except PydanticValidationError as e:
        first: Dict[str, Any] = e.errors()[0]
        field_name = ".".join(str(p) for p in first.get("loc", ()))
        raise ValidationError(f"{field_name}: {first.get('msg')}", field=field_name, value=first.get("input")) from e
