# src/pollen_map/charts.py
import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from .schema import AGE_COL, TAXON_COL, PCT_COL


def site_profile_plot(profile: pd.DataFrame, site_name: str):
    """Percentage vs age, one line per taxon; older ages on the left."""
    if profile.empty:
        fig = go.Figure()
        fig.update_layout(title=f"No records for {site_name}", height=450)
        return fig

    fig = px.line(
        profile, x=AGE_COL, y=PCT_COL, color=TAXON_COL,
        labels={AGE_COL: "Age (years BP)", PCT_COL: "Pollen (%)", TAXON_COL: "Taxon"},
        title=f"Pollen profile: {site_name}",
    )
    fig.update_traces(mode="lines+markers")
    fig.update_xaxes(autorange="reversed")
    fig.update_layout(height=450)
    return fig
