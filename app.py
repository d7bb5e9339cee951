import streamlit as st

from eleccalc.domain.panels import DEFAULT_REGISTRY
from eleccalc.infra import ConfigError, configure_logging, get_config_manager, get_logger
from eleccalc.infra.config import PROJECT_ROOT
from eleccalc.web.framework.page import PageSpec, init_page
from eleccalc.web.framework.shell import render_shell
from eleccalc.web.framework.state import get_navigation_state, read_viewport_width
from eleccalc.web.router import panel_content

config_error = None
try:
    settings = get_config_manager().load_settings()
except ConfigError as e:
    config_error = e

# MUST be the first Streamlit command on this page
init_page(PageSpec(title="Electrical Calculator", icon="⚡"))

if config_error is not None:
    st.error(f"Configuration error: {config_error.message}")
    st.stop()

configure_logging(settings.log_level, PROJECT_ROOT / settings.log_file if settings.log_file else None)
logger = get_logger("eleccalc.app")

try:
    nav = get_navigation_state(settings.default_panel, DEFAULT_REGISTRY)
except ConfigError as e:
    st.error(f"Configuration error: {e.message}")
    st.stop()

viewport_width = read_viewport_width()
if viewport_width is not None:
    nav.on_viewport_change(viewport_width, settings.breakpoint_px)


def on_select(panel_id: str) -> None:
    nav.select(panel_id, DEFAULT_REGISTRY)


render_shell(
    panel_content(nav.active_id, settings.default_standard),
    nav.active_id,
    on_select,
    registry=DEFAULT_REGISTRY,
    title=settings.app_title,
    subtitle="Wire sizing · voltage drop · conduit fill · DC systems",
    version=settings.app_version,
    viewport_width=viewport_width,
    drawer_open=nav.drawer_open,
    on_toggle_drawer=nav.toggle_drawer,
    drawer_width=settings.drawer_width_px,
    breakpoint=settings.breakpoint_px,
)
