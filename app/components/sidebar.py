from __future__ import annotations

from dataclasses import dataclass

import streamlit as st

from config import AppConfig
from navigation import Scene, SceneContext


@dataclass(frozen=True)
class SidebarState:
    use_sample: bool


STEPS = [
    (Scene.OVERVIEW, "🗺️ Neighbourhoods"),
    (Scene.LISTINGS, "🏠 Listings"),
    (Scene.REVIEWS, "⭐ Reviews"),
    (Scene.INSIGHTS, "📊 Insights"),
]


def render_sidebar(cfg: AppConfig, ctx: SceneContext) -> SidebarState:
    with st.sidebar:
        st.markdown("### 🧭 Listings Story")
        st.caption("Use Back / Next under each chart to move through the story.")

        # Read-only progress; moving between scenes happens through the scene controls
        for scene, label in STEPS:
            cls = "step step-active" if scene == ctx.scene else "step"
            st.markdown(f'<div class="{cls}">{label}</div>', unsafe_allow_html=True)

        if ctx.neighbourhood:
            st.markdown(f"**Neighbourhood:** {ctx.neighbourhood}")
        if ctx.listing_id:
            st.markdown(f"**Listing:** {ctx.listing_name or ctx.listing_id}")

        with st.expander("⚙️ Settings", expanded=False):
            use_sample = st.toggle(
                "Use sample data",
                value=st.session_state.get("use_sample", cfg.default_use_sample),
                help="When off, the app reads the configured files. A failed load leaves the scene empty.",
            )
            st.session_state["use_sample"] = use_sample

            st.markdown("**Sources**")
            st.code("\n".join(f"{k}: {v}" for k, v in cfg.sources.items()), language="text")
    use_sample = st.session_state.get("use_sample", cfg.default_use_sample)

    return SidebarState(use_sample=use_sample)
