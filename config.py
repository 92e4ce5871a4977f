"""
PadCalc Configuration Settings
"""
import os

# Application Settings
APP_NAME = "PadCalc"
VERSION = "1.0.0"

# Engine Settings
MAX_DIGITS = 13   # characters the display can hold, decimal point included

# Error messages shown to the user before the engine resets
DIVISION_BY_ZERO_MESSAGE = "Error: Division by zero."
OUT_OF_RANGE_MESSAGE = "Error: Result out of range."

# Display Settings
WINDOW_WIDTH = 320
WINDOW_HEIGHT = 420
DISPLAY_FONT = ("Consolas", 28, "bold")   # LCD/segmented-style font
BUTTON_FONT = ("Segoe UI", 16)

# ── Neumorphic Palettes ────────────────────────────────────────────────────────

# LIGHT palette  – soft sage-green background
NEU_LIGHT = {
    "bg":           "#DDE6ED",   # base surface
    "bg_dark":      "#C8D4DF",   # slightly darker variant (inset feel)
    "shadow_dark":  "#B2BFC8",
    "shadow_lite":  "#FFFFFF",
    "display_bg":   "#C8D4DF",
    "display_fg":   "#1A2332",   # LCD dark on light
    "btn_bg":       "#DDE6ED",
    "btn_fg":       "#2B3A4A",
    "operator_fg":  "#1E7A56",
    "equals_bg":    "#2E8B57",
    "equals_fg":    "#FFFFFF",
    "danger":       "#B03A2E",
}

# DARK palette  – deep slate with green accents
NEU_DARK = {
    "bg":           "#1E2530",
    "bg_dark":      "#161C26",
    "shadow_dark":  "#10161E",
    "shadow_lite":  "#283040",
    "display_bg":   "#161C26",
    "display_fg":   "#9ADDB0",   # LCD green-on-dark
    "btn_bg":       "#1E2530",
    "btn_fg":       "#BDD0E0",
    "operator_fg":  "#4DB888",
    "equals_bg":    "#2D8A58",
    "equals_fg":    "#FFFFFF",
    "danger":       "#E55A4E",
}


def _env_flag(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ("1", "true", "yes", "on")


DARK_MODE = _env_flag("PADCALC_DARK_MODE")


def get_theme(dark: bool) -> dict:
    """Return the active neumorphic colour palette."""
    return NEU_DARK if dark else NEU_LIGHT


# Logging
LOG_LEVEL = os.environ.get("PADCALC_LOG_LEVEL", "WARNING").upper()

# Web Portal settings
WEB_HOST = os.environ.get("PADCALC_WEB_HOST", "127.0.0.1")
WEB_PORT = int(os.environ.get("PADCALC_WEB_PORT", "8888"))
WEB_PORTAL_ENABLED = _env_flag("PADCALC_WEB")
MAX_SESSIONS = 256
