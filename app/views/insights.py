"""
Scene 4 - Aggregated insights across all neighbourhoods.
"""
from __future__ import annotations

import streamlit as st

from components.charts import insights_chart
from components.controls import render_nav_controls, widget_key
from components.metrics import Kpi, fmt_money, fmt_num, render_kpi_row
from components.narrative import render_chart_annotation, render_scene_intro
from config import AppConfig
from data.pipeline import neighbourhood_insights
from data.service import get_listings
from navigation import SceneContext


SORT_LABELS = {
    "first_seen": "Order in data",
    "avg_price": "Average price (high → low)",
    "neighbourhood": "Neighbourhood name",
}


def render(cfg: AppConfig, ctx: SceneContext, use_sample: bool) -> None:
    render_scene_intro(
        title=ctx.title,
        question="How do neighbourhoods compare on price and booking activity?",
        context="Averages are recomputed from every listing on each visit. Neighbourhoods without listings are left out.",
    )
    render_nav_controls(ctx)

    res = get_listings(cfg, use_sample)
    if not res.ok:
        st.warning(res.error)
        st.info("No listing data available.")
        return

    sort_by = st.selectbox(
        "Sort by",
        list(SORT_LABELS),
        format_func=SORT_LABELS.get,
        key=widget_key("insights_sort"),
    )
    insights = neighbourhood_insights(res.df, sort_by=sort_by)
    if insights.empty:
        st.info("No listings to aggregate.")
        return

    render_kpi_row(
        [
            Kpi("Neighbourhoods", f"{len(insights):,}"),
            Kpi("Avg price (all listings)", fmt_money(float(res.df["price"].mean()))),
            Kpi("Avg reviews/month", fmt_num(float(res.df["reviews_per_month"].mean()))),
        ]
    )

    if ctx.neighbourhood in set(insights["neighbourhood"]):
        row = insights[insights["neighbourhood"] == ctx.neighbourhood].iloc[0]
        render_chart_annotation(
            title=f"Your pick: {ctx.neighbourhood}",
            body=f"Average price {fmt_money(row['avg_price'])}, {fmt_num(row['avg_reviews_per_month'])} reviews per month across {row['listing_count']} listings.",
        )

    st.plotly_chart(insights_chart(insights), use_container_width=True)

    with st.expander("Show underlying data"):
        st.dataframe(insights, hide_index=True)
