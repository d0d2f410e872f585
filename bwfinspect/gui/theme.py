"""Dark theme constants for the BWF Inspector window."""

# Base colors
BG_PRIMARY = "#1e1e1e"
BG_TERTIARY = "#383838"

# Report view: dark grey with light goldenrod text
REPORT_BG = "#3f3f3f"
REPORT_TEXT = "#fafad2"

# Accent colors
ACCENT = "#bb86fc"
ACCENT_DARK = "#9a67db"
ACCENT_SUCCESS = "#03dac6"

# Text colors
TEXT_MUTED = "#888888"

# Fonts
FONT_FAMILY = "Segoe UI"
FONT_MONO = "Consolas"
FONT_SIZE_SMALL = 9
FONT_SIZE_MONO = 12
