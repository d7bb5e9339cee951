# session_state keys
NAV_STATE_KEY = "nav_state"
STANDARD_KEY = "selected_standard"

# query parameter carrying the viewport width in px
VIEWPORT_PARAM = "vw"
