"""
Navigation state and viewport classification (no Streamlit imports).
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from ..infra.exceptions import ConfigError
from ..infra.logging import get_logger
from .panels import PanelRegistry

logger = get_logger(__name__)

DEFAULT_BREAKPOINT_PX = 900
DEFAULT_DRAWER_WIDTH_PX = 240


class ViewportClass(Enum):
    WIDE = "wide"      # permanent drawer
    NARROW = "narrow"  # temporary overlay drawer, closed by default


def classify_viewport(width: float, breakpoint: int = DEFAULT_BREAKPOINT_PX) -> ViewportClass:
    """Pure width -> class mapping; widths below the breakpoint are narrow."""
    return ViewportClass.NARROW if width < breakpoint else ViewportClass.WIDE


@dataclass
class NavigationState:
    active_id: str
    drawer_open: bool = False
    last_viewport: Optional[ViewportClass] = None

    @classmethod
    def create(cls, default_id: str, registry: PanelRegistry) -> "NavigationState":
        if default_id not in registry:
            raise ConfigError(f"default panel '{default_id}' is not registered", config_key="default_panel")
        return cls(active_id=default_id, drawer_open=False)

    def select(self, panel_id: str, registry: PanelRegistry) -> bool:
        """Make panel_id active. Unknown ids are ignored and return False."""
        if panel_id not in registry:
            logger.warning(f"ignoring selection of unknown panel '{panel_id}'")
            return False
        if panel_id != self.active_id:
            logger.info(f"panel changed: {self.active_id} -> {panel_id}")
        self.active_id = panel_id
        self.drawer_open = False
        return True

    def toggle_drawer(self) -> bool:
        self.drawer_open = not self.drawer_open
        return self.drawer_open

    def on_viewport_change(self, width: float, breakpoint: int = DEFAULT_BREAKPOINT_PX) -> ViewportClass:
        # entering the narrow class always starts with the overlay closed
        vc = classify_viewport(width, breakpoint)
        if vc is ViewportClass.NARROW and self.last_viewport is not ViewportClass.NARROW:
            self.drawer_open = False
        self.last_viewport = vc
        return vc


__all__ = [
    "DEFAULT_BREAKPOINT_PX",
    "DEFAULT_DRAWER_WIDTH_PX",
    "ViewportClass",
    "classify_viewport",
    "NavigationState",
]
