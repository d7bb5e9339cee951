from __future__ import annotations

import streamlit as st

from eleccalc.standards import ELECTRICAL_STANDARDS, get_standard
from eleccalc.web.config import STANDARD_KEY
from eleccalc.web.framework.state import ensure_defaults


def render_standard_selector(default: str = "NEC") -> str:
    """Selectbox for the AC electrical standard; returns the chosen id."""
    ids = list(ELECTRICAL_STANDARDS)
    ensure_defaults({STANDARD_KEY: default if default in ids else ids[0]})

    with st.container(border=True):
        st.markdown("##### 🛠️ Electrical Standard Selection")
        standard_id = st.selectbox(
            "Electrical Standard",
            ids,
            key=STANDARD_KEY,
            format_func=lambda s: f"{ELECTRICAL_STANDARDS[s].name} - {ELECTRICAL_STANDARDS[s].full_name}",
        )
        std = get_standard(standard_id)
        limits = std.voltage_drop_limits
        c1, c2, c3 = st.columns(3)
        c1.caption(f"Wire system: **{'AWG' if std.wire_system == 'AWG' else 'mm²'}** · lengths in **{std.length_unit}**")
        c2.caption(f"Voltage drop: {limits.normal}% normal / {limits.sensitive}% sensitive / {limits.critical}% critical")
        c3.caption("Regions: " + ", ".join(std.regions))
    return standard_id
