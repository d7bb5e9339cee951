from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from eleccalc.calculations import calculate_dc_wire_size
from eleccalc.calculations.dc import dc_voltage_drop, wire_size_label
from eleccalc.infra.exceptions import CalculatorException
from eleccalc.standards.dc import DC_APPLICATIONS, DC_WIRES

WIRE_STANDARD_LABELS = {
    "NEC": "NEC (AWG, feet)",
    "IEC": "IEC (metric mm², metres)",
}


def render() -> None:
    st.subheader("🔋 DC Wire Calculator")

    app_ids = list(DC_APPLICATIONS)
    s1, s2 = st.columns(2)
    app_id = s1.selectbox("Application", app_ids,
                          format_func=lambda a: f"{DC_APPLICATIONS[a].name} ({DC_APPLICATIONS[a].breaker_standard})",
                          key="dc_wire_app")
    wire_standard = s2.radio("Wire sizing standard", list(WIRE_STANDARD_LABELS), horizontal=True,
                             format_func=WIRE_STANDARD_LABELS.get, key="dc_wire_standard")
    length_unit = "m" if wire_standard == "IEC" else "ft"

    with st.form("dc_wire"):
        c1, c2, c3 = st.columns(3)
        with c1:
            voltage = st.selectbox("System voltage (V)", DC_APPLICATIONS[app_id].voltages)
            current = st.number_input("Current (A)", min_value=0.1, value=20.0, step=1.0)
        with c2:
            length = st.number_input(f"One-way length ({length_unit})", min_value=0.5,
                                     value=6.0 if wire_standard == "IEC" else 20.0, step=1.0)
            ambient = st.number_input("Ambient temperature (°C)", value=25.0, step=1.0)
        with c3:
            material = st.radio("Conductor", ["copper", "aluminum"], horizontal=True, format_func=str.title)
        o1, o2 = st.columns(2)
        critical = o1.checkbox("Critical load (tighter drop limit)")
        custom_limit = o2.number_input("Custom voltage drop limit (%)", min_value=0.0, value=0.0, step=0.5,
                                       help="0 uses the application's limit")
        submitted = st.form_submit_button("Calculate", type="primary", use_container_width=True)

    if not submitted:
        return

    try:
        result = calculate_dc_wire_size({
            "application": app_id,
            "current": current,
            "length": length,
            "voltage": voltage,
            "conductor_material": material,
            "ambient_temperature": ambient,
            "critical_load": critical,
            "allowable_voltage_drop": custom_limit or None,
            "wire_standard": wire_standard,
        })
    except CalculatorException as e:
        st.error(e.message)
        return

    headline = f"Recommended wire: **{result.recommended_gauge} {result.size_unit}**"
    if result.wire_standard == "IEC":
        headline += f" (sized from {result.awg_gauge} AWG)"
    (st.success if result.compliance.overall else st.warning)(headline)
    m1, m2, m3, m4 = st.columns(4)
    m1.metric("Corrected ampacity", f"{result.corrected_ampacity:.1f} A",
              help=f"Required with safety factor: {result.safety_current:.1f} A")
    m2.metric("Voltage drop", f"{result.voltage_drop_volts:.2f} V ({result.voltage_drop_percent:.2f}%)",
              delta=f"limit {result.voltage_drop_limit}%", delta_color="off")
    m3.metric("Power loss", f"{result.power_loss_watts:.1f} W")
    m4.metric("Efficiency", f"{result.efficiency_percent:.2f} %")
    st.caption(f"Temperature correction factor {result.temperature_factor:.3f}")

    df = pd.DataFrame([
        {
            "size": f"{wire_size_label(w, wire_standard)} {result.size_unit} ({w.gauge} AWG)"
            if wire_standard == "IEC" else w.gauge,
            "voltage_drop_pct": dc_voltage_drop(w, current, length, material, wire_standard) / voltage * 100,
        }
        for w in DC_WIRES
    ])
    chart = alt.Chart(df).mark_bar().encode(
        x=alt.X("size:N", sort=None, title=f"Size ({result.size_unit})"),
        y=alt.Y("voltage_drop_pct:Q", title="Voltage drop (%)"),
        color=alt.condition(
            alt.datum.voltage_drop_pct <= result.voltage_drop_limit,
            alt.value("#2e7d32"), alt.value("#c62828"),
        ),
    )
    st.altair_chart(chart, use_container_width=True)
