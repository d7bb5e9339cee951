from __future__ import annotations

import streamlit as st

from eleccalc.calculations import calculate_dc_breaker_size
from eleccalc.infra.exceptions import CalculatorException
from eleccalc.standards.dc import DC_APPLICATIONS


def render() -> None:
    st.subheader("⚡ DC Breaker Calculator")

    app_ids = list(DC_APPLICATIONS)
    c1, c2, c3 = st.columns(3)
    app_id = c1.selectbox("Application", app_ids, format_func=lambda a: DC_APPLICATIONS[a].name,
                          key="dc_breaker_app")
    input_method = c2.radio("Input method", ["current", "power"], horizontal=True,
                            format_func=lambda m: "Load current" if m == "current" else "Load power",
                            key="dc_breaker_method")
    wire_standard = c3.radio("Breaker standard", ["NEC", "IEC"], horizontal=True, key="dc_breaker_standard",
                             help="Automotive, marine and LED loads up to 120 A get an ISO 8820-3 fuse either way")

    with st.form("dc_breaker"):
        f1, f2, f3 = st.columns(3)
        voltages = DC_APPLICATIONS[app_id].voltages
        system_voltage = f1.selectbox("System voltage (V)", voltages)
        if input_method == "current":
            load_current = f2.number_input("Load current (A)", min_value=0.1, value=20.0, step=1.0)
            load_power = None
        else:
            load_power = f2.number_input("Load power (W)", min_value=1.0, value=240.0, step=10.0)
            load_current = None
        duty_cycle = f3.radio("Duty cycle", ["continuous", "intermittent"], horizontal=True, format_func=str.title)

        g1, g2, g3 = st.columns(3)
        ambient = g1.number_input("Ambient temperature (°C)", value=25.0, step=1.0)
        isc = None
        if app_id == "solar":
            isc = g2.number_input("Panel short-circuit current Isc (A)", min_value=0.0, value=0.0, step=0.5) or None
        marine = g3.checkbox("Marine environment", value=(app_id == "marine"))
        submitted = st.form_submit_button("Size breaker", type="primary", use_container_width=True)

    if not submitted:
        return

    try:
        result = calculate_dc_breaker_size({
            "application": app_id,
            "input_method": input_method,
            "load_current": load_current,
            "load_power": load_power,
            "system_voltage": system_voltage,
            "duty_cycle": duty_cycle,
            "ambient_temperature": ambient,
            "short_circuit_current": isc,
            "marine_environment": marine,
            "wire_standard": wire_standard,
        })
    except CalculatorException as e:
        st.error(e.message)
        return

    if result.device == "fuse":
        headline = (f"Recommended fuse: **{result.recommended_rating:g} A** "
                    f"{result.fuse_color} {result.device_type} blade ({result.standard})")
    else:
        headline = f"Recommended breaker: **{result.recommended_rating:g} A** {result.device_type} ({result.standard})"
    (st.success if result.compliant else st.warning)(headline)
    m1, m2, m3 = st.columns(3)
    m1.metric("Load current", f"{result.base_current:.2f} A", help=result.calculation_method)
    m2.metric("Adjusted current", f"{result.adjusted_current:.2f} A")
    m3.metric("Safety factor", f"{result.safety_factor:.2f}x")
    if result.temperature_derating < 1:
        st.caption(f"Temperature derating {result.temperature_derating:.2f}")
    for note in result.notes:
        st.caption(f"• {note}")
    st.caption("Available ratings: " + ", ".join(f"{r:g}" for r in result.available_ratings) + " A")
