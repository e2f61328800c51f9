# src/pollen_map/mapping.py
import folium
import numpy as np
import pandas as pd
from folium.plugins import MarkerCluster

from .config import (
    MAP_CENTER, MAP_ZOOM, TILE_PROVIDERS, DEFAULT_TILES,
    MARKER_RADIUS, MARKER_COLOR, OPACITY_FULL_PCT,
)
from .schema import SITE_COL, LAT_COL, LON_COL, AGE_COL, AGE_TYPE_COL, TAXON_COL, PCT_COL


def make_base_map(center=MAP_CENTER, zoom: int = MAP_ZOOM, tiles: str = DEFAULT_TILES) -> folium.Map:
    """Base tile layer centred on `center`. `tiles` is a TILE_PROVIDERS label or a folium tiles name."""
    return folium.Map(location=list(center), zoom_start=zoom, tiles=TILE_PROVIDERS.get(tiles, tiles))


def marker_opacity(pct) -> float:
    """Opacity proportional to percentage abundance, clipped to [0, 1]."""
    return float(np.clip(float(pct) / OPACITY_FULL_PCT, 0.0, 1.0))


def _popup_html(r) -> str:
    age_type = r.get(AGE_TYPE_COL)
    age_type = "" if pd.isna(age_type) else f" ({age_type})"
    return f"""
    <div style="font-size:13px; line-height:1.35;">
      <b>Site:</b> {r[SITE_COL]}<br>
      <b>Taxon:</b> {r[TAXON_COL]}<br>
      <b>Age:</b> {r[AGE_COL]:,.0f} BP{age_type}<br>
      <b>Pollen:</b> {r[PCT_COL]:.1f}%
    </div>
    """


def point_layer(filtered: pd.DataFrame, name: str = "Pollen records") -> folium.FeatureGroup:
    """One circle marker per record; an empty frame gives an empty layer."""
    fg = folium.FeatureGroup(name=name)
    for _, r in filtered.iterrows():
        folium.CircleMarker(
            location=[r[LAT_COL], r[LON_COL]],
            radius=MARKER_RADIUS,
            color=MARKER_COLOR,
            weight=1,
            fill=True,
            fill_color=MARKER_COLOR,
            fill_opacity=marker_opacity(r[PCT_COL]),
            tooltip=str(r[SITE_COL]),
            popup=folium.Popup(_popup_html(r), max_width=280),
        ).add_to(fg)
    return fg


def site_overview_layer(sites: pd.DataFrame) -> MarkerCluster:
    """Clustered markers for a site summary frame (see filtering.site_summary)."""
    cluster = MarkerCluster(name="Sites")
    for _, r in sites.iterrows():
        popup_html = (
            f"<b>{r[SITE_COL]}</b><br>"
            f"{int(r['n_records'])} records, {int(r['n_taxa'])} taxa<br>"
            f"{r['youngest']:,.0f} to {r['oldest']:,.0f} BP"
        )
        folium.Marker(
            location=[r[LAT_COL], r[LON_COL]],
            tooltip=str(r[SITE_COL]),
            popup=folium.Popup(popup_html, max_width=240),
        ).add_to(cluster)
    return cluster
