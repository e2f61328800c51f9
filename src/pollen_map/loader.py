# src/pollen_map/loader.py
import logging

import numpy as np
import pandas as pd

from .schema import (
    COLUMN_ALIASES, REQUIRED_COLS, NUMERIC_COLS, TEXT_COLS, TIDY_COLS,
    AGE_TYPE_COL, LAT_COL, LON_COL, LAT_MIN, LAT_MAX, LON_MIN, LON_MAX,
)
from .config import CSV_SEP

logger = logging.getLogger(__name__)


def normalize_columns(df: pd.DataFrame) -> pd.DataFrame:
    """Lower-case/strip headers and map known aliases to canonical names."""
    cleaned = {c: str(c).strip().lower() for c in df.columns}
    df = df.rename(columns=cleaned)
    # each canonical name is claimed once: an existing column first, then the first alias listed
    taken = set(df.columns)
    rename_map = {}
    for src, dst in COLUMN_ALIASES.items():
        if src in df.columns and dst not in taken:
            rename_map[src] = dst
            taken.add(dst)
    return df.rename(columns=rename_map)


def coerce_types(df: pd.DataFrame) -> pd.DataFrame:
    df = df.copy()
    for c in NUMERIC_COLS:
        df[c] = pd.to_numeric(df[c], errors="coerce")
    for c in TEXT_COLS:
        if c in df.columns:
            s = df[c].astype("string").str.strip()
            df[c] = s.replace("", pd.NA)
    return df


def load_records(path: str, sep: str = CSV_SEP) -> pd.DataFrame:
    """
    Read a delimited pollen table and return the tidy record frame:
      - headers normalized (see schema.COLUMN_ALIASES)
      - lat/lon/age/pct coerced to numbers
      - rows missing a required value, or with impossible coordinates, dropped
    Raises ValueError when required columns are absent.
    """
    raw = pd.read_csv(path, sep=sep)
    logger.info("Read %d rows from %s", len(raw), path)

    df = normalize_columns(raw)
    missing = set(REQUIRED_COLS) - set(df.columns)
    if missing:
        raise ValueError(f"Pollen table missing required columns: {sorted(missing)}")

    df = coerce_types(df)
    if AGE_TYPE_COL not in df.columns:
        df[AGE_TYPE_COL] = pd.NA

    before = len(df)
    df = df.dropna(subset=REQUIRED_COLS)
    in_bounds = df[LAT_COL].between(LAT_MIN, LAT_MAX) & df[LON_COL].between(LON_MIN, LON_MAX)
    df = df[in_bounds]
    dropped = before - len(df)
    if dropped > 0:
        logger.info("Dropped %d malformed rows", dropped)

    out = df[TIDY_COLS].reset_index(drop=True)
    out[NUMERIC_COLS] = out[NUMERIC_COLS].astype(np.float64)
    return out
