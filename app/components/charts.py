"""
Scene figures.

Builders return plain Plotly figures (no Streamlit calls) so the views stay
thin and the figures can be inspected in tests. Projection, scales and axes
are Plotly's job; this module only picks domains and encodings.
"""
from __future__ import annotations

from typing import Any, Optional

import pandas as pd
import plotly.graph_objects as go
from plotly.subplots import make_subplots

from components.metrics import apply_plotly_theme
from config import CHART_HEIGHT, THEME


def _upper(series: pd.Series) -> Optional[float]:
    top = pd.to_numeric(series, errors="coerce").max()
    return float(top) if top == top else None


def neighbourhood_map(geojson: dict[str, Any], counts: pd.DataFrame, selected: Optional[str] = None) -> go.Figure:
    """Choropleth of neighbourhood polygons, shaded by listing count."""
    line_widths = [3 if n == selected else 1 for n in counts["neighbourhood"]]
    fig = go.Figure(
        go.Choropleth(
            geojson=geojson,
            featureidkey="properties.neighbourhood",
            locations=counts["neighbourhood"],
            z=counts["listing_count"],
            customdata=counts[["neighbourhood", "listing_count"]].to_numpy(),
            colorscale=[[0.0, THEME["region_fill"]], [1.0, THEME["accent_primary"]]],
            marker=dict(line=dict(color=THEME["region_stroke"], width=line_widths)),
            colorbar=dict(title="Listings", thickness=12),
            hovertemplate="<b>%{customdata[0]}</b><br>Listings: %{customdata[1]}<extra></extra>",
        )
    )
    fig.update_geos(
        fitbounds="locations",
        visible=False,
        projection_type="mercator",
        bgcolor="rgba(0,0,0,0)",
    )
    fig.update_layout(
        height=CHART_HEIGHT,
        margin=dict(l=0, r=0, t=0, b=0),
        paper_bgcolor="rgba(0,0,0,0)",
        clickmode="event+select",
    )
    return fig


def listings_scatter(listings: pd.DataFrame) -> go.Figure:
    """Price vs reviews per month for one neighbourhood; both axes start at 0."""
    fig = go.Figure(
        go.Scatter(
            x=listings["price"],
            y=listings["reviews_per_month"],
            mode="markers",
            marker=dict(size=10, color=THEME["accent_primary"], opacity=0.8, line=dict(width=1, color="white")),
            customdata=listings[["id", "name"]].to_numpy(),
            hovertemplate="Name: %{customdata[1]}<br>Price: $%{x}<br>Reviews/Month: %{y}<extra></extra>",
        )
    )
    fig = apply_plotly_theme(fig, x_title="Price ($/night)", y_title="Reviews per month")
    x_max = _upper(listings["price"])
    y_max = _upper(listings["reviews_per_month"])
    if x_max is not None:
        fig.update_xaxes(range=[0, x_max * 1.05])
    if y_max is not None:
        fig.update_yaxes(range=[0, y_max * 1.05])
    fig.update_layout(clickmode="event+select")
    return fig


def reviews_timeline(reviews: pd.DataFrame) -> go.Figure:
    """Rating over time; ratings are on a 0-5 scale."""
    fig = go.Figure(
        go.Scatter(
            x=reviews["date"],
            y=reviews["rating"],
            mode="lines+markers",
            line=dict(color=THEME["teal"], width=1.5),
            marker=dict(size=9, color=THEME["teal"]),
            hovertemplate="Date: %{x|%Y-%m-%d}<br>Rating: %{y}<extra></extra>",
        )
    )
    fig = apply_plotly_theme(fig, x_title="Review date", y_title="Rating")
    fig.update_yaxes(range=[0, 5])
    dates = pd.to_datetime(reviews["date"], errors="coerce").dropna()
    if len(dates):
        fig.update_xaxes(range=[dates.min(), dates.max()])
    fig.update_layout(clickmode="event+select")
    return fig


def insights_chart(insights: pd.DataFrame) -> go.Figure:
    """Mean price per neighbourhood (bars) with mean reviews/month (line, right axis)."""
    fig = make_subplots(specs=[[{"secondary_y": True}]])
    custom = insights[["avg_price", "avg_reviews_per_month", "listing_count"]].to_numpy()
    fig.add_trace(
        go.Bar(
            x=insights["neighbourhood"],
            y=insights["avg_price"],
            name="Avg price",
            marker_color=THEME["accent_primary"],
            customdata=custom,
            hovertemplate=(
                "Neighbourhood: %{x}<br>Avg Price: $%{customdata[0]:.2f}"
                "<br>Avg Reviews/Month: %{customdata[1]:.2f}<br>Listings: %{customdata[2]}<extra></extra>"
            ),
        ),
        secondary_y=False,
    )
    fig.add_trace(
        go.Scatter(
            x=insights["neighbourhood"],
            y=insights["avg_reviews_per_month"],
            name="Avg reviews/month",
            mode="lines+markers",
            line=dict(color=THEME["ink_700"], width=2, shape="spline"),
            hovertemplate="%{x}<br>Avg Reviews/Month: %{y:.2f}<extra></extra>",
        ),
        secondary_y=True,
    )
    fig = apply_plotly_theme(fig, x_title="Neighbourhood", y_title="Average price ($)")
    fig.update_yaxes(title_text="Average reviews per month", secondary_y=True, showgrid=False)
    fig.update_xaxes(tickangle=-45)
    fig.update_layout(bargap=0.1, showlegend=True, legend=dict(orientation="h", y=1.02, x=0, yanchor="bottom"))
    return fig


def selected_row(event: Any, frame: pd.DataFrame, key: Optional[str] = None) -> Optional[pd.Series]:
    """
    Row of `frame` behind the first point of a Streamlit plotly selection event.

    Choropleth points carry a `location` that is matched against `key`;
    other traces are resolved by `point_index`.
    """
    if not event or frame.empty:
        return None
    points = (event.get("selection") or {}).get("points") or []
    if not points:
        return None
    point = points[0]

    if key is not None and point.get("location") is not None:
        hits = frame[frame[key] == point["location"]]
        return hits.iloc[0] if len(hits) else None

    idx = point.get("point_index", point.get("point_number"))
    if idx is None or not 0 <= int(idx) < len(frame):
        return None
    return frame.iloc[int(idx)]
