"""
Scene 3 - Review ratings of the selected listing over time.
"""
from __future__ import annotations

import streamlit as st

from components.charts import reviews_timeline, selected_row
from components.controls import go_to, render_nav_controls, widget_key
from components.metrics import Kpi, fmt_num, render_kpi_row
from components.narrative import render_chart_annotation, render_scene_intro
from config import AppConfig
from data.pipeline import reviews_for
from data.service import get_reviews
from navigation import Action, SceneContext, transition


def render(cfg: AppConfig, ctx: SceneContext, use_sample: bool) -> None:
    render_scene_intro(
        title=ctx.title,
        question="Has the guest experience at this listing held up over time?",
        context=f"Ratings are on a 0–5 scale. Listing {ctx.listing_id} in {ctx.neighbourhood}.",
    )
    render_nav_controls(ctx)

    res = get_reviews(cfg, use_sample)
    if not res.ok:
        st.warning(res.error)
        st.info("No review data available.")
        return

    df = reviews_for(res.df, ctx.listing_id)
    if df.empty:
        st.info("This listing has no reviews yet.")
        return

    latest = df["date"].max()
    render_kpi_row(
        [
            Kpi("Reviews", f"{len(df):,}"),
            Kpi("Avg rating", fmt_num(float(df["rating"].mean()), 1)),
            Kpi("Latest review", latest.strftime("%Y-%m-%d") if latest == latest else "—"),
        ]
    )

    render_chart_annotation(
        title="What to notice",
        body="A run of low points is a stronger signal than a single bad stay. Click any point to see how neighbourhoods compare overall.",
    )
    event = st.plotly_chart(
        reviews_timeline(df),
        use_container_width=True,
        key=widget_key("reviews_timeline"),
        on_select="rerun",
        selection_mode="points",
    )
    if selected_row(event, df) is not None:
        go_to(transition(ctx, Action.NEXT))
