# src/pollen_map/schema.py

# Canonical column names
SITE_COL = "site_name"
LAT_COL = "lat"              # degrees
LON_COL = "lon"              # degrees
AGE_COL = "age"              # years before present
AGE_TYPE_COL = "age_type"    # optional label, e.g. "Calibrated radiocarbon years BP"
TAXON_COL = "taxon"
PCT_COL = "pct"              # percentage abundance, 0-100

REQUIRED_COLS = [SITE_COL, LAT_COL, LON_COL, AGE_COL, TAXON_COL, PCT_COL]
NUMERIC_COLS = [LAT_COL, LON_COL, AGE_COL, PCT_COL]
TEXT_COLS = [SITE_COL, TAXON_COL, AGE_TYPE_COL]

# Column order kept after loading
TIDY_COLS = [SITE_COL, LAT_COL, LON_COL, AGE_COL, AGE_TYPE_COL, TAXON_COL, PCT_COL]

# Source spellings seen in pollen exports (already lower-cased).
# Order matters: when several aliases of one column are present, the first listed wins.
COLUMN_ALIASES = {
    "sitename": SITE_COL,
    "site.name": SITE_COL,
    "site": SITE_COL,
    "site name": SITE_COL,
    "latitude": LAT_COL,
    "longitude": LON_COL,
    "long": LON_COL,
    "lng": LON_COL,
    "agetype": AGE_TYPE_COL,
    "age.type": AGE_TYPE_COL,
    "age type": AGE_TYPE_COL,
    "variablename": TAXON_COL,
    "taxonname": TAXON_COL,
    "percentage": PCT_COL,
    "percent": PCT_COL,
    "value": PCT_COL,
}

# Basic sanity bounds (used for validation)
LAT_MIN, LAT_MAX = -90.0, 90.0
LON_MIN, LON_MAX = -180.0, 180.0
