# src/pollen_map/filtering.py
import logging
from typing import List, Optional, Sequence, Tuple

import pandas as pd

from .config import WINDOW_YEARS
from .schema import SITE_COL, LAT_COL, LON_COL, AGE_COL, TAXON_COL, PCT_COL

logger = logging.getLogger(__name__)


def filter_records(
    df: pd.DataFrame, time: float, taxon: str, window: float = WINDOW_YEARS
) -> pd.DataFrame:
    """
    Records of `taxon` whose age lies in the closed window [time - window, time + window].
    An empty frame is a normal result.
    """
    in_window = df[AGE_COL].between(time - window, time + window, inclusive="both")
    out = df[in_window & (df[TAXON_COL] == taxon)].copy()
    logger.debug("%d records for %s at %s BP (+/- %s)", len(out), taxon, time, window)
    return out


def list_taxa(df: pd.DataFrame) -> List[str]:
    return sorted(df[TAXON_COL].dropna().astype(str).unique())


def age_range(df: pd.DataFrame) -> Tuple[float, float]:
    """(youngest, oldest) age in the table; (0, 0) when empty."""
    if df.empty:
        return 0.0, 0.0
    return float(df[AGE_COL].min()), float(df[AGE_COL].max())


def site_summary(df: pd.DataFrame) -> pd.DataFrame:
    """One row per site with its position, record/taxon counts and age span."""
    cols = [SITE_COL, LAT_COL, LON_COL, "n_records", "n_taxa", "youngest", "oldest"]
    if df.empty:
        return pd.DataFrame(columns=cols)
    out = (
        df.groupby(SITE_COL, as_index=False)
        .agg(**{
            LAT_COL: (LAT_COL, "first"),
            LON_COL: (LON_COL, "first"),
            "n_records": (TAXON_COL, "size"),
            "n_taxa": (TAXON_COL, "nunique"),
            "youngest": (AGE_COL, "min"),
            "oldest": (AGE_COL, "max"),
        })
        .sort_values(SITE_COL)
        .reset_index(drop=True)
    )
    return out[cols]


def site_profile(
    df: pd.DataFrame, site_name: str, taxa: Optional[Sequence[str]] = None
) -> pd.DataFrame:
    """Records for one site, sorted by taxon then age; optionally only the given taxa."""
    out = df[df[SITE_COL] == site_name]
    if taxa:
        out = out[out[TAXON_COL].isin(list(taxa))]
    return out[[AGE_COL, TAXON_COL, PCT_COL]].sort_values([TAXON_COL, AGE_COL]).reset_index(drop=True)
