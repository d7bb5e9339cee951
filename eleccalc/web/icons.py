"""IconKey -> glyph used in the navigation menu."""
from __future__ import annotations

from typing import Dict

from eleccalc.domain.panels import IconKey

ICON_GLYPHS: Dict[IconKey, str] = {
    IconKey.CABLE: "🔌",
    IconKey.CALCULATE: "🧮",
    IconKey.SETTINGS: "⚙️",
    IconKey.BATTERY: "🔋",
    IconKey.ELECTRICAL_SERVICES: "⚡",
    IconKey.BAR_CHART: "📊",
}

FALLBACK_GLYPH = "•"


def icon_for(key: IconKey) -> str:
    return ICON_GLYPHS.get(key, FALLBACK_GLYPH)
