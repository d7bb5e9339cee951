from __future__ import annotations

from dataclasses import dataclass
import streamlit as st


@dataclass(frozen=True)
class PageSpec:
    title: str
    icon: str
    layout: str = "wide"
    sidebar_state: str = "auto"


def init_page(spec: PageSpec, *, apply_style: bool = True) -> None:
    """Initialize the Streamlit page.

    NOTE: This must be called before any other Streamlit command.
    """
    st.set_page_config(
        page_title=spec.title,
        page_icon=spec.icon,
        layout=spec.layout,
        initial_sidebar_state=spec.sidebar_state,
    )

    if apply_style:
        from eleccalc.web.styles import load_app_style

        load_app_style()


__all__ = ["PageSpec", "init_page"]
