"""
Panel router: active panel id -> render function, wrapped in an error boundary.
"""
from __future__ import annotations

from typing import Callable, Dict, FrozenSet

import streamlit as st

from eleccalc.infra.exceptions import ErrorHandler, PanelRenderError
from eleccalc.infra.logging import get_logger
from eleccalc.web.components.standard_selector import render_standard_selector
from eleccalc.web.pages_impl import conduit_fill, dc_breaker, dc_wire, reference_charts, voltage_drop, wire_calculator

logger = get_logger(__name__)
_errors = ErrorHandler(logger)

# panels that take the selected AC standard
AC_PANELS: FrozenSet[str] = frozenset({"wire-calc", "voltage-drop", "conduit-fill"})

PANEL_RENDERERS: Dict[str, Callable[..., None]] = {
    "wire-calc": wire_calculator.render,
    "voltage-drop": voltage_drop.render,
    "conduit-fill": conduit_fill.render,
    "dc-calc": dc_wire.render,
    "dc-breaker-calc": dc_breaker.render,
    "iec-ref-charts": reference_charts.render_iec,
    "nec-ref-charts": reference_charts.render_nec,
    "bs7671-ref-charts": reference_charts.render_bs7671,
}


def shows_standard_selector(panel_id: str) -> bool:
    return panel_id in AC_PANELS


def render_panel(panel_id: str, default_standard: str = "NEC") -> None:
    """Render one panel; failures are logged and shown inside the content region."""
    renderer = PANEL_RENDERERS.get(panel_id)
    if renderer is None:
        st.info("Select a calculator from the menu.")
        return

    try:
        if shows_standard_selector(panel_id):
            standard = render_standard_selector(default_standard)
            renderer(standard)
        else:
            renderer()
    except Exception as e:
        _errors.handle_and_log(e, {"panel_id": panel_id})
        error = PanelRenderError(f"The {panel_id} panel failed to render: {e}", panel_id=panel_id)
        st.error(error.message)
        with st.expander("Details"):
            st.json(_errors.create_error_response(e))


def panel_content(panel_id: str, default_standard: str = "NEC") -> Callable[[], None]:
    """Content callable for ``render_shell``."""
    return lambda: render_panel(panel_id, default_standard)
