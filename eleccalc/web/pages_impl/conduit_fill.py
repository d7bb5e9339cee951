from __future__ import annotations

from dataclasses import asdict

import altair as alt
import pandas as pd
import streamlit as st

from eleccalc.calculations import calculate_conduit_fill
from eleccalc.infra.exceptions import CalculatorException
from eleccalc.standards.nec import NEC_CONDUIT_TYPES, nec_conduits, nec_wire_sizes

_ROWS_KEY = "conduit_fill_rows"


def render(standard: str = "NEC") -> None:
    st.subheader("⚙️ Conduit Fill Calculator")
    if standard != "NEC":
        st.info("Conduit fill uses NEC Chapter 9 conductor and conduit areas for every standard.")

    if _ROWS_KEY not in st.session_state:
        st.session_state[_ROWS_KEY] = pd.DataFrame([{"gauge": "12", "quantity": 3}])

    c1, c2, c3 = st.columns(3)
    conduit_type = c1.selectbox("Conduit type", NEC_CONDUIT_TYPES)
    sizes = ["Auto"] + [c.size for c in nec_conduits(conduit_type)]
    conduit_size = c2.selectbox("Conduit size (in)", sizes)
    reserve = c3.slider("Future fill reserve (%)", 0, 50, 0, 5)

    rows = st.data_editor(
        st.session_state[_ROWS_KEY],
        num_rows="dynamic",
        use_container_width=True,
        column_config={
            "gauge": st.column_config.SelectboxColumn("Wire size (AWG/kcmil)", options=list(nec_wire_sizes()), required=True),
            "quantity": st.column_config.NumberColumn("Quantity", min_value=1, step=1, required=True),
        },
        key="conduit_fill_editor",
    )

    if not st.button("Calculate fill", type="primary", use_container_width=True):
        return

    wires = [
        {"gauge": str(r["gauge"]), "quantity": int(r["quantity"])}
        for _, r in rows.dropna().iterrows()
    ]
    try:
        result = calculate_conduit_fill({
            "conduit_type": conduit_type,
            "wires": wires,
            "conduit_size": None if conduit_size == "Auto" else conduit_size,
            "future_fill_reserve": reserve,
        })
    except CalculatorException as e:
        st.error(e.message)
        return

    (st.success if result.is_compliant else st.error)(
        f'{result.conduit_type} {result.conduit_size}": {result.fill_percent:.1f}% fill '
        f"(max {result.max_fill_percent:.0f}%)"
    )
    m1, m2, m3 = st.columns(3)
    m1.metric("Wire area", f"{result.total_wire_area:.4f} in²")
    m2.metric("Conduit area", f"{result.conduit_area:.3f} in²")
    m3.metric("Conductors", result.wire_count)
    st.caption(result.fill_rule)

    df = pd.DataFrame([asdict(line) for line in result.wire_breakdown])
    st.dataframe(df, hide_index=True, use_container_width=True)

    if result.alternatives:
        df_alt = pd.DataFrame([asdict(o) for o in result.alternatives])
        chart = alt.Chart(df_alt).mark_bar().encode(
            x=alt.X("size:N", sort=None, title="Conduit size (in)"),
            y=alt.Y("fill_percent:Q", title="Fill (%)"),
            tooltip=["size", "fill_percent"],
        )
        st.markdown("##### Compliant conduit sizes")
        st.altair_chart(chart, use_container_width=True)
