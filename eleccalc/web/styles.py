import streamlit as st


def load_app_style():
    """Inject the calculator theme CSS."""
    st.markdown("""
        <style>
        .stApp {
            font-family: 'Roboto', 'ui-sans-serif', 'system-ui', -apple-system, 'Segoe UI', sans-serif;
            background-color: #f5f7fa;
            color: #1a2027;
        }

        section[data-testid="stSidebar"] {
            background-color: #ffffff;
            border-right: 1px solid #e0e3e7;
        }

        section[data-testid="stSidebar"] .block-container {
            padding-top: 1rem;
            padding-left: 0.75rem;
            padding-right: 0.75rem;
        }

        header[data-testid="stHeader"] {
            background-color: transparent;
        }

        /* app bar */
        .eleccalc-topbar {
            display: flex;
            align-items: center;
            gap: 0.75rem;
            background-color: #1976d2;
            color: #ffffff;
            padding: 0.75rem 1rem;
            border-radius: 6px;
            margin-bottom: 1rem;
            box-shadow: 0 2px 4px rgba(0,0,0,0.12);
        }
        .eleccalc-topbar .title {
            font-weight: 600;
            font-size: 1.15rem;
        }
        .eleccalc-topbar .subtitle {
            font-size: 0.75rem;
            opacity: 0.85;
        }

        /* menu entries */
        .stButton > button {
            border-radius: 6px;
            border: 1px solid transparent;
            background-color: transparent;
            color: #3e5060;
            font-weight: 500;
            justify-content: flex-start;
            transition: all 0.1s ease;
        }
        .stButton > button:hover {
            background-color: #eef3f8;
            color: #1a2027;
        }
        .stButton > button[kind="primary"] {
            background-color: #1976d2;
            color: white;
            border: none;
        }
        .stButton > button[kind="primary"]:hover {
            background-color: #1565c0;
        }

        div[data-testid="stMetric"], div[data-testid="stExpander"] {
            background-color: #ffffff;
            border: 1px solid #e0e3e7;
            border-radius: 6px;
            padding: 1rem;
            box-shadow: 0 1px 2px rgba(0,0,0,0.05);
        }
        div[data-testid="stMetricLabel"] {
            font-size: 0.875rem;
            color: #6b7a90;
        }
        div[data-testid="stMetricValue"] {
            font-size: 1.5rem;
            font-weight: 600;
            color: #1a2027;
        }
        </style>
    """, unsafe_allow_html=True)


def responsive_css(breakpoint_px: int, drawer_width_px: int) -> str:
    """CSS applying the drawer rule in the browser.

    At or above the breakpoint the sidebar is a permanent drawer of fixed
    width; below it the sidebar floats over the content and the content keeps
    the full width.
    """
    return f"""
        <style>
        @media (min-width: {breakpoint_px}px) {{
            section[data-testid="stSidebar"] {{
                width: {drawer_width_px}px !important;
                min-width: {drawer_width_px}px !important;
                max-width: {drawer_width_px}px !important;
            }}
        }}
        @media (max-width: {breakpoint_px - 1}px) {{
            section[data-testid="stSidebar"] {{
                position: fixed;
                z-index: 1000;
                height: 100vh;
                box-shadow: 0 8px 16px rgba(0,0,0,0.2);
            }}
            .main .block-container {{
                max-width: 100%;
                padding-left: 1rem;
                padding-right: 1rem;
            }}
        }}
        </style>
    """


def apply_responsive_layout(breakpoint_px: int, drawer_width_px: int) -> None:
    st.markdown(responsive_css(breakpoint_px, drawer_width_px), unsafe_allow_html=True)


def overlay_drawer_css(drawer_width_px: int) -> str:
    """Sidebar forced open as a fixed panel floating over the content."""
    return f"""
        <style>
        section[data-testid="stSidebar"] {{
            position: fixed;
            top: 0;
            left: 0;
            z-index: 1000;
            height: 100vh;
            transform: none !important;
            margin-left: 0 !important;
            width: {drawer_width_px}px !important;
            min-width: {drawer_width_px}px !important;
            visibility: visible !important;
            box-shadow: 0 8px 16px rgba(0,0,0,0.2);
        }}
        </style>
    """


def apply_overlay_drawer(drawer_width_px: int) -> None:
    # written into the sidebar so the main column does not gain an element
    st.sidebar.markdown(overlay_drawer_css(drawer_width_px), unsafe_allow_html=True)


def render_top_bar(title: str, subtitle: str = "") -> None:
    sub = f'<div class="subtitle">{subtitle}</div>' if subtitle else ""
    st.markdown(f"""
        <div class="eleccalc-topbar">
            <span style="font-size: 1.4rem;">⚡</span>
            <div>
                <div class="title">{title}</div>
                {sub}
            </div>
        </div>
    """, unsafe_allow_html=True)


def render_sidebar_header(title: str, version: str) -> None:
    """Logo block at the top of the drawer."""
    st.sidebar.markdown(f"""
        <div style="padding-bottom: 1rem; padding-left: 0.5rem;">
            <div style="display: flex; align-items: center; gap: 0.75rem;">
                <div style="width: 32px; height: 32px; background-color: #1976d2; border-radius: 6px; display: flex; align-items: center; justify-content: center;">
                    <span style="color: white; font-weight: bold; font-size: 18px;">E</span>
                </div>
                <div>
                    <div style="font-weight: 600; font-size: 1rem; color: #1a2027;">{title}</div>
                    <div style="font-size: 0.75rem; color: #6b7a90;">v{version}</div>
                </div>
            </div>
        </div>
    """, unsafe_allow_html=True)
