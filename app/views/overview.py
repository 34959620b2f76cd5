"""
Scene 1 - Overview of listings by neighbourhood.

Choropleth of the neighbourhood boundary collection. Clicking a region (or
picking it below the map) selects it and moves on to its listings.
"""
from __future__ import annotations

import streamlit as st

from components.charts import neighbourhood_map, selected_row
from components.controls import go_to, render_nav_controls, widget_key
from components.metrics import Kpi, render_kpi_row
from components.narrative import render_chart_annotation, render_scene_intro
from config import AppConfig
from data.loader import region_names
from data.pipeline import listing_counts
from data.service import get_listings, get_neighbourhoods
from navigation import Action, SceneContext, select_neighbourhood, transition


def render(cfg: AppConfig, ctx: SceneContext, use_sample: bool) -> None:
    render_scene_intro(
        title=ctx.title,
        question="Where are the listings, and which neighbourhood do you want to explore?",
        context="Darker regions hold more listings. Hover for a name, click a region to see its listings.",
    )
    render_nav_controls(ctx)

    geo = get_neighbourhoods(cfg, use_sample)
    listings = get_listings(cfg, use_sample)
    for result in (geo, listings):
        if not result.ok:
            st.warning(result.error)

    st.caption(f"Data source: **{geo.source}**")

    regions = region_names(geo.data) if geo.ok else []
    if not regions:
        st.info("No neighbourhood boundaries available.")
        return

    counts = listing_counts(listings.df, regions)
    render_kpi_row(
        [
            Kpi("Neighbourhoods", f"{len(regions):,}"),
            Kpi("Listings", f"{int(counts['listing_count'].sum()):,}"),
            Kpi("Without listings", f"{int((counts['listing_count'] == 0).sum()):,}"),
        ]
    )

    fig = neighbourhood_map(geo.data, counts, selected=ctx.neighbourhood)
    event = st.plotly_chart(
        fig,
        use_container_width=True,
        key=widget_key("overview_map"),
        on_select="rerun",
        selection_mode="points",
    )
    row = selected_row(event, counts, key="neighbourhood")
    if row is not None:
        go_to(transition(select_neighbourhood(ctx, str(row["neighbourhood"])), Action.NEXT))

    render_chart_annotation(
        title="Pick without the map",
        body="Choosing a neighbourhood here keeps you on this scene; use Next to continue.",
    )
    choice = st.selectbox(
        "Neighbourhood",
        regions,
        index=regions.index(ctx.neighbourhood) if ctx.neighbourhood in regions else None,
        placeholder="Choose a neighbourhood",
        key=widget_key("overview_pick"),
    )
    if choice and choice != ctx.neighbourhood:
        go_to(select_neighbourhood(ctx, choice))
