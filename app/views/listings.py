"""
Scene 2 - Listings in the selected neighbourhood.
"""
from __future__ import annotations

import streamlit as st

from components.charts import listings_scatter, selected_row
from components.controls import go_to, render_nav_controls, widget_key
from components.metrics import Kpi, fmt_money, fmt_num, render_kpi_row
from components.narrative import render_chart_annotation, render_scene_intro
from config import AppConfig
from data.pipeline import listings_in
from data.service import get_listings
from navigation import Action, SceneContext, select_listing, transition


def render(cfg: AppConfig, ctx: SceneContext, use_sample: bool) -> None:
    render_scene_intro(
        title=ctx.title,
        question="How do price and booking activity trade off in this neighbourhood?",
        context="Each dot is a listing. Click one to see how its guests rated it over time.",
    )
    render_nav_controls(ctx)

    res = get_listings(cfg, use_sample)
    if not res.ok:
        st.warning(res.error)
        st.info("No listing data available.")
        return

    df = listings_in(res.df, ctx.neighbourhood)
    if df.empty:
        st.info(f"No listings found in {ctx.neighbourhood}.")
        return

    render_kpi_row(
        [
            Kpi("Listings", f"{len(df):,}"),
            Kpi("Median price", fmt_money(float(df["price"].median()))),
            Kpi("Avg reviews/month", fmt_num(float(df["reviews_per_month"].mean())), help="Listing-level engagement"),
        ]
    )

    render_chart_annotation(
        title="What to notice",
        body="Listings toward the top left are cheap and busy; the bottom right holds pricier, quieter places.",
    )
    event = st.plotly_chart(
        listings_scatter(df),
        use_container_width=True,
        key=widget_key("listings_scatter"),
        on_select="rerun",
        selection_mode="points",
    )
    row = selected_row(event, df)
    if row is not None:
        go_to(transition(select_listing(ctx, row["id"], row["name"]), Action.NEXT))

    labels = {str(r.id): f"{r.name} ({fmt_money(r.price)})" for r in df.itertuples()}
    ids = list(labels)
    choice = st.selectbox(
        "Listing",
        ids,
        format_func=lambda i: labels[i],
        index=ids.index(ctx.listing_id) if ctx.listing_id in labels else None,
        placeholder="Choose a listing",
        key=widget_key("listings_pick"),
    )
    if choice and choice != ctx.listing_id:
        go_to(select_listing(ctx, choice, str(df.loc[df["id"] == choice, "name"].iloc[0])))

    with st.expander("Show underlying data"):
        st.dataframe(df, hide_index=True)
