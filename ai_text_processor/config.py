"""Configuration constants shared across the text processor."""

APP_TITLE = "AI Text Processor CLI Application"
APP_VERSION = "1.0.0"

# List conversion
BULLET = "• "

# Case conversion cycles through this many modes in the editor
CASE_MODE_COUNT = 4
DEFAULT_CASE_MODE = 0

# Smart recognition keywords
LOCATION_HINTS = ["Street", "Avenue"]
LOCATION_KEYWORDS = ["Street", "Avenue", "Road", "Boulevard", "Lane", "Drive"]
SECURE_KEYWORDS = ["password", "token", "api_key", "secret", "private_key", "auth"]

# Labels shown next to detected smart items
SMART_ITEM_LABELS = {
    "PHONE": "Call",
    "EMAIL": "Email",
    "LINK": "Open",
    "LOCATION": "Map",
}

# Apple-friendly fonts for HTML output
PRE_STYLE = (
    "white-space: pre-wrap; "
    "font-family: -apple-system, BlinkMacSystemFont, "
    "'Helvetica Neue', Helvetica, Arial, sans-serif; "
    "font-size: 14px; line-height: 1.4;"
)
