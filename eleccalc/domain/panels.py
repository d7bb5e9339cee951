"""
Panel registry: the ordered, static list of calculator panels shown in the
navigation drawer. Plain data only; icons are symbolic keys resolved by the
rendering layer (eleccalc.web.icons).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, Iterator, Optional, Tuple


class IconKey(Enum):
    CABLE = "cable"
    CALCULATE = "calculate"
    SETTINGS = "settings"
    BATTERY = "battery"
    ELECTRICAL_SERVICES = "electrical_services"
    BAR_CHART = "bar_chart"


@dataclass(frozen=True)
class PanelDescriptor:
    id: str
    label: str
    icon: IconKey


class PanelRegistry:
    """Ordered collection of PanelDescriptor with unique ids."""

    def __init__(self, panels: Iterable[PanelDescriptor]):
        items = tuple(panels)
        if not items:
            raise ValueError("panel registry must not be empty")

        by_id: Dict[str, PanelDescriptor] = {}
        for p in items:
            if p.id in by_id:
                raise ValueError(f"duplicate panel id: {p.id}")
            if not p.label.strip():
                raise ValueError(f"panel {p.id} has an empty label")
            by_id[p.id] = p

        self._panels: Tuple[PanelDescriptor, ...] = items
        self._by_id = by_id

    def list(self) -> Tuple[PanelDescriptor, ...]:
        return self._panels

    def find(self, panel_id: str) -> Optional[PanelDescriptor]:
        return self._by_id.get(panel_id)

    def ids(self) -> Tuple[str, ...]:
        return tuple(p.id for p in self._panels)

    def __contains__(self, panel_id: object) -> bool:
        return panel_id in self._by_id

    def __iter__(self) -> Iterator[PanelDescriptor]:
        return iter(self._panels)

    def __len__(self) -> int:
        return len(self._panels)


PANELS: Tuple[PanelDescriptor, ...] = (
    PanelDescriptor("wire-calc", "Wire Size Calculator", IconKey.CABLE),
    PanelDescriptor("voltage-drop", "Voltage Drop Calculator", IconKey.CALCULATE),
    PanelDescriptor("conduit-fill", "Conduit Fill Calculator", IconKey.SETTINGS),
    PanelDescriptor("dc-calc", "DC Wire Calculator", IconKey.BATTERY),
    PanelDescriptor("dc-breaker-calc", "DC Breaker Calculator", IconKey.ELECTRICAL_SERVICES),
    PanelDescriptor("iec-ref-charts", "IEC Reference Charts", IconKey.BAR_CHART),
    PanelDescriptor("nec-ref-charts", "NEC Reference Charts", IconKey.BAR_CHART),
    PanelDescriptor("bs7671-ref-charts", "BS7671 Reference Charts", IconKey.BAR_CHART),
)

DEFAULT_REGISTRY = PanelRegistry(PANELS)


__all__ = ["IconKey", "PanelDescriptor", "PanelRegistry", "PANELS", "DEFAULT_REGISTRY"]
