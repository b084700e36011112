# src/config/settings.py

import os

from src.config.env import APP_ENV

# Presentation settings for the Newfoundland Energy Project dashboard

# --- Page sections / anchors ---
# Each widget renders into the container registered under its anchor id.
ANCHOR_FINANCIAL_CHART = "financialChart"
ANCHOR_INFRASTRUCTURE_MAP = "infrastructureMap"
ANCHOR_ROADMAP = "roadmapContainer"
ALL_ANCHORS = (ANCHOR_FINANCIAL_CHART, ANCHOR_INFRASTRUCTURE_MAP, ANCHOR_ROADMAP)

# Comma separated subset of ALL_ANCHORS, e.g. "financialChart,roadmapContainer"
DASHBOARD_SECTIONS = tuple(
    section.strip()
    for section in os.getenv("DASHBOARD_SECTIONS", ",".join(ALL_ANCHORS)).split(",")
    if section.strip()
)

# --- Financial scenarios ---
# Market-capture percentages with a hardcoded 20-year trajectory
SCENARIO_KEYS = (50, 75, 100)
DEFAULT_SCENARIO_KEY = 75
PROJECTION_YEARS = 20
ROI_DECIMALS = 1
FINANCIAL_AXIS_TITLE = "CAD ($ Millions)"

# --- Roadmap ---
ROADMAP_FIRST_YEAR = 1
ROADMAP_LAST_YEAR = 20
ROADMAP_TITLE = "Newfoundland Energy Project - 20-Year Roadmap"
CURRENCY_UNITS_PER_MILLION = 1_000_000

# --- Infrastructure map ---
MAP_CENTER_LAT = 47.2500
MAP_CENTER_LNG = -52.7500
MAP_DEFAULT_ZOOM = 9
MAP_HIGHLIGHT_ZOOM = 12
MAP_FIT_PADDING_PX = (50, 50)
MAP_HEIGHT_PX = 600
MAP_TILE_URL = os.getenv(
    "MAP_TILE_URL", "https://{s}.tile.openstreetmap.org/{z}/{x}/{y}.png"
)
MAP_TILE_ATTRIBUTION = "© OpenStreetMap contributors"
MAP_TILE_MAX_ZOOM = 19

# --- Timeline (custom HTML) ---
TIMELINE_ROW_HEIGHT_PX = 44
TIMELINE_HEADER_HEIGHT_PX = 60

# Show per-year data tables expanded while developing locally
SHOW_DATA_TABLES_EXPANDED = APP_ENV == "dev"
