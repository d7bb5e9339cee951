"""Frontend framework layer for the Streamlit UI.

This package centralizes:
- page initialization (set_page_config + CSS)
- the navigation shell (top bar, drawer, content region)
- session-state helpers
"""
