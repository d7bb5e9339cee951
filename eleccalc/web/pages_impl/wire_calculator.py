"""Wire size calculator panel (NEC / IEC / BS7671)."""
from __future__ import annotations

import altair as alt
import pandas as pd
import streamlit as st

from eleccalc.calculations import calculate_wire_size
from eleccalc.calculations.wire import default_installation_method, installation_methods
from eleccalc.infra.exceptions import CalculatorException
from eleccalc.standards import get_standard
from eleccalc.standards.nec import NEC_TEMPERATURE_RATINGS


def _render_result(result, length_unit: str) -> None:
    ok = result.compliance.overall
    (st.success if ok else st.warning)(
        f"Recommended size: **{result.recommended_size} {result.size_unit}**"
        + ("" if ok else " (not fully compliant)")
    )

    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Current capacity", f"{result.current_capacity:.0f} A",
              help=f"Required ampacity {result.required_ampacity:.1f} A")
    c2.metric("Voltage drop", f"{result.voltage_drop_percent:.2f} %",
              delta=f"limit {result.voltage_drop_limit}%", delta_color="off")
    c3.metric("Power loss", f"{result.power_loss_watts:.1f} W")
    c4.metric("Efficiency", f"{result.efficiency_percent:.2f} %")

    f = result.correction_factors
    with st.expander("Correction factors and compliance", expanded=False):
        st.dataframe(
            pd.DataFrame([
                {"factor": "Temperature", "value": f.temperature},
                {"factor": "Grouping", "value": f.grouping},
                {"factor": "Installation", "value": f.installation},
                {"factor": "Thermal (soil)", "value": f.thermal},
                {"factor": "Combined", "value": f.combined},
            ]),
            hide_index=True,
            use_container_width=True,
        )
        comp = result.compliance
        st.write(
            f"Ampacity {'✅' if comp.current else '❌'} · "
            f"Voltage drop {'✅' if comp.voltage_drop else '❌'} · "
            f"Temperature {'✅' if comp.temperature else '❌'} · "
            f"Installation {'✅' if comp.installation else '❌'}"
        )
        st.caption(f"Design current {result.design_current:.1f} A, lengths in {length_unit}")

    for note in result.assumptions:
        st.caption(f"ℹ️ {note}")
    for w in result.warnings:
        st.warning(w)

    if result.alternatives:
        st.markdown("##### Alternatives")
        df = pd.DataFrame([
            {
                "size": a.size,
                "capacity_a": a.capacity,
                "voltage_drop_pct": round(a.voltage_drop_percent, 3),
                "compliant": a.is_compliant,
            }
            for a in result.alternatives
        ])
        chart = alt.Chart(df).mark_bar().encode(
            x=alt.X("size:N", sort=None, title=f"Size ({result.size_unit})"),
            y=alt.Y("voltage_drop_pct:Q", title="Voltage drop (%)"),
            color=alt.Color("compliant:N", scale=alt.Scale(domain=[True, False], range=["#2e7d32", "#c62828"])),
            tooltip=["size", "capacity_a", "voltage_drop_pct", "compliant"],
        )
        rule = alt.Chart(pd.DataFrame({"limit": [result.voltage_drop_limit]})).mark_rule(
            strokeDash=[4, 4], color="#6b7a90"
        ).encode(y="limit:Q")
        st.altair_chart(chart + rule, use_container_width=True)
        st.dataframe(df, hide_index=True, use_container_width=True)


def render(standard: str = "NEC") -> None:
    std = get_standard(standard)
    st.subheader(f"🔌 Wire Size Calculator ({std.name})")

    methods = installation_methods(standard)
    method_ids = list(methods)
    voltages = list(std.single_phase_voltages) + [v for v in std.three_phase_voltages if v not in std.single_phase_voltages]

    with st.form(f"wire_calc_{standard}"):
        c1, c2, c3 = st.columns(3)
        with c1:
            load_current = st.number_input("Load current (A)", min_value=0.1, value=20.0, step=1.0)
            circuit_length = st.number_input(f"Circuit length ({std.length_unit})", min_value=1.0, value=100.0, step=5.0)
            voltage = st.selectbox("Voltage (V)", voltages)
        with c2:
            voltage_system = st.radio("System", ["single", "three"], horizontal=True,
                                      format_func=lambda s: "Single-phase" if s == "single" else "Three-phase")
            material = st.radio("Conductor", ["copper", "aluminum"], horizontal=True, format_func=str.title)
            method = st.selectbox(
                "Installation method", method_ids,
                index=method_ids.index(default_installation_method(standard)),
                format_func=lambda m: f"{m} - {methods[m]}",
            )
        with c3:
            ambient = st.number_input("Ambient temperature (°C)", value=30.0, step=1.0)
            conductors = st.number_input("Number of conductors / circuits", min_value=1, value=3, step=1)
            power_factor = st.slider("Power factor", 0.5, 1.0, 0.85 if standard != "NEC" else 1.0, 0.01)

        extra = {}
        if standard == "NEC":
            e1, e2 = st.columns(2)
            extra["temperature_rating"] = e1.selectbox("Insulation rating (°C)", NEC_TEMPERATURE_RATINGS, index=1)
            extra["continuous_load"] = e2.checkbox("Continuous load (125%)", value=True)
        elif method in ("D1", "D2"):
            extra["soil_resistivity"] = st.number_input("Soil thermal resistivity (K·m/W)", min_value=0.5, value=2.5)

        submitted = st.form_submit_button("Calculate", type="primary", use_container_width=True)

    if not submitted:
        return

    try:
        result = calculate_wire_size({
            "standard": standard,
            "load_current": load_current,
            "circuit_length": circuit_length,
            "voltage": voltage,
            "voltage_system": voltage_system,
            "conductor_material": material,
            "installation_method": method,
            "ambient_temperature": ambient,
            "number_of_conductors": int(conductors),
            "power_factor": power_factor,
            **extra,
        })
    except CalculatorException as e:
        st.error(e.message)
        return
    _render_result(result, std.length_unit)
