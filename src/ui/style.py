# src/ui/style.py

from __future__ import annotations

"""
UI / visual style constants for the dashboard.

Keep anything purely presentational in here (colours, line widths, spacing),
and keep domain / modelling constants in src/config/settings.py.
"""

# ---------------------------------------------------------------------------
# Colour palette
# ---------------------------------------------------------------------------
# Green palette shared by the financial chart, the map and the roadmap.

COLOR_PRIMARY = "#1a472a"  # dark green
COLOR_SECONDARY = "#2d5a3d"  # medium green
COLOR_ACCENT = "#a8d5ba"  # light green
COLOR_DANGER = "#e74c3c"  # red for alerts / negative values
COLOR_WARNING = "#f39c12"  # orange
COLOR_SUCCESS = "#27ae60"  # bright green / positive values
COLOR_BACKGROUND = "#f0f4f1"
COLOR_NEUTRAL = "#666666"

# ---------------------------------------------------------------------------
# Financial chart series
# ---------------------------------------------------------------------------

COLOR_REVENUE = COLOR_PRIMARY
COLOR_COSTS = COLOR_WARNING
COLOR_GROSS_PROFIT = COLOR_SUCCESS
COLOR_DEBT = COLOR_DANGER

FILL_REVENUE = "rgba(26, 71, 42, 0.05)"
FILL_COSTS = "rgba(243, 156, 18, 0.05)"
FILL_GROSS_PROFIT = "rgba(39, 174, 96, 0.08)"

LINE_WIDTH_PRIMARY = 3
LINE_WIDTH_SECONDARY = 2
MARKER_SIZE_PRIMARY = 10
MARKER_SIZE_SECONDARY = 8
GRID_COLOR = "rgba(0, 0, 0, 0.05)"

# ---------------------------------------------------------------------------
# Roadmap
# ---------------------------------------------------------------------------

# Gradient from light to dark green, one per year (cycled past 18)
ROADMAP_YEAR_COLORS = (
    "#d4f1de", "#c9ead7", "#bfe3d0", "#b4dcc9", "#a8d5ba", "#9dceac",
    "#92c79e", "#87c090", "#7cb982", "#71b274", "#66ab66", "#5ba458",
    "#509d4a", "#45963c", "#3a8f2e", "#2f8820", "#248112", "#1a7a04",
)  # fmt: skip
ROADMAP_HOVER_BG = "rgba(26, 71, 42, 0.9)"

# ---------------------------------------------------------------------------
# Map markers
# ---------------------------------------------------------------------------

MARKER_COLORS = {
    "refinery": COLOR_PRIMARY,
    "terminal": COLOR_SECONDARY,
    "storage": COLOR_WARNING,
    "maintenance": COLOR_ACCENT,
    "education": COLOR_SUCCESS,
}
MARKER_EMOJIS = {
    "refinery": "🏭",
    "terminal": "⚓",
    "storage": "🛢️",
    "maintenance": "🛠️",
    "education": "🎓",
}
MARKER_FALLBACK_EMOJI = "📍"
MARKER_ICON_SIZE_PX = 40
