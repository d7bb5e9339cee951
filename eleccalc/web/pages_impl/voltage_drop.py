from __future__ import annotations

from dataclasses import asdict

import altair as alt
import pandas as pd
import streamlit as st

from eleccalc.calculations import analyze_voltage_drop, voltage_drop_curve
from eleccalc.infra.exceptions import CalculatorException
from eleccalc.standards import get_standard


def render(standard: str = "NEC") -> None:
    std = get_standard(standard)
    limits = std.voltage_drop_limits
    st.subheader(f"🧮 Voltage Drop Calculator ({std.name})")

    with st.form(f"voltage_drop_{standard}"):
        c1, c2, c3 = st.columns(3)
        with c1:
            current = st.number_input("Current (A)", min_value=0.1, value=30.0, step=1.0)
            length = st.number_input(f"One-way length ({std.length_unit})", min_value=1.0, value=150.0, step=5.0)
        with c2:
            voltages = sorted(set(std.single_phase_voltages + std.three_phase_voltages))
            voltage = st.selectbox("Voltage (V)", voltages)
            voltage_system = st.radio("System", ["single", "three"], horizontal=True,
                                      format_func=lambda s: "Single-phase" if s == "single" else "Three-phase")
        with c3:
            material = st.radio("Conductor", ["copper", "aluminum"], horizontal=True, format_func=str.title)
            power_factor = st.slider("Power factor", 0.5, 1.0, 1.0, 0.01)
            limit_kind = st.selectbox(
                "Circuit type",
                ["normal", "sensitive", "critical"],
                format_func=lambda k: f"{k.title()} ({getattr(limits, k)}%)",
            )
        submitted = st.form_submit_button("Analyze", type="primary", use_container_width=True)

    if not submitted:
        return

    params = {
        "standard": standard,
        "current": current,
        "length": length,
        "voltage": voltage,
        "voltage_system": voltage_system,
        "conductor_material": material,
        "power_factor": power_factor,
        "limit_percent": getattr(limits, limit_kind),
    }
    try:
        analysis = analyze_voltage_drop(params)
    except CalculatorException as e:
        st.error(e.message)
        return

    rec = analysis.recommended
    if rec is None:
        st.warning(f"No conductor keeps the drop within {analysis.voltage_drop_limit}% at this length.")
    else:
        st.success(f"Smallest compliant size: **{rec.size}** ({rec.voltage_drop_percent:.2f}% drop)")
        c1, c2, c3 = st.columns(3)
        c1.metric("Voltage drop", f"{rec.voltage_drop_volts:.2f} V")
        c2.metric("Power loss", f"{rec.power_loss_watts:.1f} W")
        c3.metric("Efficiency", f"{rec.efficiency_percent:.2f} %")

    df = pd.DataFrame([asdict(r) for r in analysis.rows])
    st.dataframe(df, hide_index=True, use_container_width=True)

    if rec is not None:
        curve = voltage_drop_curve(params, rec.size)
        df_curve = pd.DataFrame([asdict(p) for p in curve])
        line = alt.Chart(df_curve).mark_line(point=True).encode(
            x=alt.X("distance:Q", title=f"Distance ({std.length_unit})"),
            y=alt.Y("voltage_drop_percent:Q", title="Voltage drop (%)"),
            tooltip=["distance", "voltage_drop_volts", "voltage_drop_percent"],
        )
        rule = alt.Chart(pd.DataFrame({"limit": [analysis.voltage_drop_limit]})).mark_rule(
            strokeDash=[4, 4], color="#c62828"
        ).encode(y="limit:Q")
        st.markdown(f"##### Voltage drop vs distance ({rec.size})")
        st.altair_chart(line + rule, use_container_width=True)
