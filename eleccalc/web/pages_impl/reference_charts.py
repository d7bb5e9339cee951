"""Reference chart panels: conductor tables and correction factors per standard."""
from __future__ import annotations

from typing import Dict, Sequence

import altair as alt
import pandas as pd
import streamlit as st

from eleccalc.standards import ConductorSpec, get_standard
from eleccalc.standards import iec, nec


def conductor_frame(table: Sequence[ConductorSpec], resistance_unit: str) -> pd.DataFrame:
    rows = []
    for c in table:
        row = {"size": c.size, f"resistance ({resistance_unit})": c.resistance}
        if c.reactance:
            row["reactance (Ω/km)"] = c.reactance
        for rating, amps in sorted(c.ampacity.items()):
            row[f"{rating}°C (A)"] = amps
        rows.append(row)
    return pd.DataFrame(rows)


def _ampacity_chart(table: Sequence[ConductorSpec], size_title: str) -> alt.Chart:
    df = pd.DataFrame([
        {"size": c.size, "rating": f"{rating}°C", "ampacity": amps}
        for c in table
        for rating, amps in sorted(c.ampacity.items())
    ])
    return alt.Chart(df).mark_bar().encode(
        x=alt.X("size:N", sort=None, title=size_title),
        y=alt.Y("ampacity:Q", title="Current capacity (A)"),
        color=alt.Color("rating:N", title="Insulation"),
        xOffset="rating:N",
        tooltip=["size", "rating", "ampacity"],
    )


def _correction_frame(tables: Dict[int, Dict[int, float]]) -> pd.DataFrame:
    temps = sorted({t for col in tables.values() for t in col})
    return pd.DataFrame([
        {"ambient (°C)": t, **{f"{r}°C": tables[r].get(t) for r in sorted(tables)}}
        for t in temps
    ])


def _methods_frame(methods) -> pd.DataFrame:
    return pd.DataFrame([{"method": k, "factor": f, "description": d} for k, (f, d) in methods.items()])


def _header(standard_id: str) -> None:
    std = get_standard(standard_id)
    st.subheader(f"📊 {std.name} Reference Charts")
    st.caption(f"{std.full_name} · " + ", ".join(std.regions))


def render_nec() -> None:
    _header("NEC")
    tab1, tab2, tab3, tab4 = st.tabs(["Ampacity", "Temperature correction", "Adjustment", "Conduit areas"])
    with tab1:
        st.altair_chart(_ampacity_chart(nec.NEC_WIRES, "Size (AWG/kcmil)"), use_container_width=True)
        st.dataframe(conductor_frame(nec.NEC_WIRES, "Ω/1000 ft"), hide_index=True, use_container_width=True)
    with tab2:
        st.dataframe(_correction_frame(nec.NEC_TEMPERATURE_CORRECTION), hide_index=True, use_container_width=True)
    with tab3:
        st.dataframe(
            pd.DataFrame([{"conductors up to": k, "factor": v} for k, v in nec.NEC_CONDUCTOR_ADJUSTMENT.items()]),
            hide_index=True, use_container_width=True,
        )
        st.dataframe(_methods_frame(nec.NEC_INSTALLATION_METHODS), hide_index=True, use_container_width=True)
    with tab4:
        df = pd.DataFrame([{"type": c.conduit_type, "size": c.size, "area (in²)": c.area} for c in nec.NEC_CONDUITS])
        st.dataframe(df.pivot(index="size", columns="type", values="area (in²)").reindex(list(dict.fromkeys(df["size"]))),
                     use_container_width=True)
        st.caption("Maximum fill: 53% one conductor, 31% two conductors, 40% over two.")


def _render_metric(standard_id: str, rating_note: str) -> None:
    _header(standard_id)
    table = iec.cable_table(standard_id)
    tab1, tab2, tab3 = st.tabs(["Current capacity", "Correction factors", "Installation methods"])
    with tab1:
        st.altair_chart(_ampacity_chart(table, "Cross-section (mm²)"), use_container_width=True)
        st.dataframe(conductor_frame(table, "Ω/km"), hide_index=True, use_container_width=True)
        st.caption(rating_note)
    with tab2:
        st.dataframe(_correction_frame(iec.IEC_TEMPERATURE_CORRECTION), hide_index=True, use_container_width=True)
        st.dataframe(
            pd.DataFrame([{"circuits": k, "factor": v} for k, v in iec.GROUPING_FACTORS.items()]),
            hide_index=True, use_container_width=True,
        )
    with tab3:
        st.dataframe(_methods_frame(iec.INSTALLATION_METHODS), hide_index=True, use_container_width=True)


def render_iec() -> None:
    _render_metric("IEC", f"Sizing uses the {iec.IEC_SIZING_RATING}°C column.")


def render_bs7671() -> None:
    _render_metric("BS7671", f"Sizing uses the {iec.BS7671_SIZING_RATING}°C column.")
