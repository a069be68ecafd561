"""Centralized constants: single source of truth for hardcoded values."""

# --- InnerTube API ---
API_BASE_URL = "https://www.youtube.com/youtubei/v1"
BROWSE_PATH = "/browse"
SEARCH_PATH = "/search"
NEXT_PATH = "/next"
SETTINGS_BROWSE_ID = "SPaccount_overview"

# --- Client identity ---
CLIENT_NAME = "WEB"
CLIENT_NAME_ID = "1"
CLIENT_VERSION = "2.20250219.01.00"
DEFAULT_HL = "en"
DEFAULT_GL = "US"
DEFAULT_USER_AGENT = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/131.0.0.0 Safari/537.36"
)

# --- HTTP Client ---
HTTP_TOTAL_TIMEOUT = 30  # seconds
HTTP_CONNECT_TIMEOUT = 10  # seconds

# --- Parser ---
# Raw node keys ending in one of these are shapes; "Renderer" is stripped from the tag
RENDERER_SUFFIX = "Renderer"

# --- Continuation ---
# Continuation request types mapped to the API path they are sent to
CONTINUATION_REQUEST_PATHS = {
    "CONTINUATION_REQUEST_TYPE_BROWSE": BROWSE_PATH,
    "CONTINUATION_REQUEST_TYPE_SEARCH": SEARCH_PATH,
    "CONTINUATION_REQUEST_TYPE_WATCH_NEXT": NEXT_PATH,
}

# --- Channel tab URL fragments ---
TAB_HOME = "featured"
TAB_VIDEOS = "videos"
TAB_SHORTS = "shorts"
TAB_LIVE = "streams"
TAB_PLAYLISTS = "playlists"
TAB_COMMUNITY = "community"
TAB_CHANNELS = "channels"
TAB_ABOUT = "about"
