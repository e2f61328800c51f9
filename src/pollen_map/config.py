# src/pollen_map/config.py
import os

# ---------- Data ----------
DEFAULT_CSV = os.path.join("data", "pollen_sample.csv")
CSV_SEP = os.environ.get("POLLEN_CSV_SEP", ",")


def data_path() -> str:
    """Input table; POLLEN_CSV wins over DEFAULT_CSV, read on every call."""
    return os.environ.get("POLLEN_CSV", DEFAULT_CSV)


# ---------- Filter ----------
WINDOW_YEARS = 250         # half-width of the time window, years BP
TIME_STEP = 250            # slider step, years

# ---------- Map ----------
MAP_CENTER = [50.0, -100.0]    # lat, lon
MAP_ZOOM = 3
MAP_HEIGHT = 560

# Base layers offered in the sidebar (label -> folium tiles name)
TILE_PROVIDERS = {
    "OpenStreetMap": "OpenStreetMap",
    "Light": "CartoDB Positron",
    "Dark": "CartoDB DarkMatter",
}
DEFAULT_TILES = "Light"

# ---------- Markers ----------
MARKER_RADIUS = 6
MARKER_COLOR = "#2A9D8F"
OPACITY_FULL_PCT = 100.0   # percentage drawn fully opaque

# ---------- Logging ----------
LOG_LEVEL = os.environ.get("POLLEN_LOG_LEVEL", "INFO")
