from __future__ import annotations

import math
from typing import Any, Dict, Optional

import streamlit as st

from eleccalc.domain.navigation import NavigationState
from eleccalc.domain.panels import PanelRegistry
from eleccalc.infra.logging import get_logger
from eleccalc.web.config import NAV_STATE_KEY, VIEWPORT_PARAM

logger = get_logger(__name__)


def ensure_defaults(defaults: Dict[str, Any]) -> None:
    """Ensure session_state has default values for keys."""
    for k, v in defaults.items():
        if k not in st.session_state:
            st.session_state[k] = v


def get_navigation_state(default_id: str, registry: PanelRegistry) -> NavigationState:
    """Session-scoped NavigationState, created on first access."""
    state = st.session_state.get(NAV_STATE_KEY)
    if not isinstance(state, NavigationState):
        state = NavigationState.create(default_id, registry)
        st.session_state[NAV_STATE_KEY] = state
    return state


def parse_viewport_width(raw: Optional[str]) -> Optional[int]:
    """Positive finite pixel width, or None for anything else."""
    if raw is None:
        return None
    try:
        value = float(raw)
    except (TypeError, ValueError):
        value = math.nan
    if not math.isfinite(value) or value <= 0:
        logger.debug(f"ignoring viewport width: {raw!r}")
        return None
    return int(value)


def read_viewport_width() -> Optional[int]:
    """Viewport width from the query string, or None when not supplied."""
    return parse_viewport_width(st.query_params.get(VIEWPORT_PARAM))
