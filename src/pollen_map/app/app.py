# app.py
import math
import os
import logging

import streamlit as st
import pandas as pd

# Maps & viz
from streamlit_folium import st_folium

from pollen_map.config import (
    data_path, WINDOW_YEARS, TIME_STEP, MAP_CENTER, MAP_ZOOM, MAP_HEIGHT,
    TILE_PROVIDERS, DEFAULT_TILES,
)
from pollen_map.filtering import filter_records, list_taxa, age_range, site_summary, site_profile
from pollen_map.loader import load_records
from pollen_map.logging_config import configure
from pollen_map.mapping import make_base_map, point_layer, site_overview_layer
from pollen_map.charts import site_profile_plot
from pollen_map.schema import SITE_COL, PCT_COL

logger = logging.getLogger("pollen_map.app")


# Page config first
st.set_page_config(page_title="Fossil Pollen Map", layout="wide")
configure()
st.title("Fossil Pollen Map")
st.caption("Pollen abundance through time. Marker opacity follows percentage abundance.")


# ==============================
# Load CSV
# ==============================
@st.cache_data(show_spinner=False)
def load_data(path: str) -> pd.DataFrame:
    return load_records(path)


csv_path = data_path()
if not os.path.exists(csv_path):
    st.error(f"CSV not found at {csv_path}. Place your file there or set POLLEN_CSV.")
    st.stop()

try:
    df = load_data(csv_path)
except ValueError as exc:
    st.error(str(exc))
    st.stop()

taxa = list_taxa(df)
if not taxa:
    st.warning("No usable records in the pollen table.")
    st.stop()


# ==============================
# Sidebar controls
# ==============================
age_lo, age_hi = age_range(df)
slider_min = int(math.floor(age_lo))
slider_max = int(math.ceil(age_hi))
if slider_max <= slider_min:
    slider_max = slider_min + TIME_STEP

with st.sidebar:
    st.header("Controls")
    time_bp = st.slider(
        "Time (years before present)",
        min_value=slider_min, max_value=slider_max, value=slider_min, step=TIME_STEP,
        key="time_bp",
    )
    taxon = st.selectbox("Taxon", taxa, index=0, key="taxon")
    tiles_label = st.selectbox(
        "Base map", list(TILE_PROVIDERS), index=list(TILE_PROVIDERS).index(DEFAULT_TILES), key="tiles"
    )
    st.markdown("---")
    st.caption(f"{len(df):,} records · {df[SITE_COL].nunique():,} sites · {len(taxa)} taxa")


tab_map, tab_sites, tab_profile = st.tabs(["Pollen map", "Sites", "Site profile"])

# =========================================================
# ----------------------- POLLEN MAP ----------------------
# =========================================================
with tab_map:
    visible = filter_records(df, time_bp, taxon, window=WINDOW_YEARS)
    st.markdown(
        f"**{taxon}** at **{time_bp:,} BP** (± {WINDOW_YEARS} years): "
        f"{len(visible):,} records from {visible[SITE_COL].nunique():,} sites"
    )
    if visible.empty:
        st.info("No records for this taxon in this time window.")

    # The base map keeps its tiles and view across reruns; only the point layer is swapped.
    m = make_base_map(tiles=tiles_label)
    st_folium(
        m,
        key="pollen_map",
        center=MAP_CENTER,
        zoom=MAP_ZOOM,
        feature_group_to_add=point_layer(visible),
        returned_objects=[],
        use_container_width=True,
        height=MAP_HEIGHT,
    )

    with st.expander("Records shown"):
        st.dataframe(
            visible.sort_values(PCT_COL, ascending=False).reset_index(drop=True),
            use_container_width=True,
        )

# =========================================================
# ------------------------- SITES -------------------------
# =========================================================
with tab_sites:
    sites = site_summary(df)
    m_sites = make_base_map(tiles=tiles_label)
    site_overview_layer(sites).add_to(m_sites)
    st_folium(m_sites, key="sites_map", returned_objects=[], use_container_width=True, height=MAP_HEIGHT)
    st.dataframe(sites, use_container_width=True)

# =========================================================
# ---------------------- SITE PROFILE ---------------------
# =========================================================
with tab_profile:
    site_names = sorted(df[SITE_COL].astype(str).unique())
    c1, c2 = st.columns([1, 2])
    with c1:
        sel_site = st.selectbox("Site", site_names, index=0, key="profile_site")
    site_taxa = list_taxa(df[df[SITE_COL] == sel_site])
    with c2:
        sel_taxa = st.multiselect(
            "Taxa", site_taxa,
            default=[taxon] if taxon in site_taxa else site_taxa[:3],
        )
    profile = site_profile(df, sel_site, sel_taxa or None)
    st.plotly_chart(site_profile_plot(profile, sel_site), use_container_width=True)
    logger.debug("Profile for %s: %d points", sel_site, len(profile))
