"""
Scene controls: the only place the SceneContext is read from or written to
Streamlit session state.
"""
from __future__ import annotations

import logging

import streamlit as st

from navigation import ACTION_LABELS, SceneContext, available_actions, can_transition, transition


logger = logging.getLogger(__name__)

CONTEXT_KEY = "scene_context"
VISIT_KEY = "scene_visit"


def current_context() -> SceneContext:
    ctx = st.session_state.get(CONTEXT_KEY)
    if not isinstance(ctx, SceneContext):
        ctx = SceneContext()
        st.session_state[CONTEXT_KEY] = ctx
    return ctx


def widget_key(name: str) -> str:
    # New key per scene visit, so a selection left on a chart never replays on return
    return f"{name}_{st.session_state.get(VISIT_KEY, 0)}"


def go_to(ctx: SceneContext) -> None:
    """Store the next context and rerun so exactly one scene renders with it."""
    logger.info("Entering scene %s (neighbourhood=%s, listing=%s)", ctx.scene.value, ctx.neighbourhood, ctx.listing_id)
    st.session_state[CONTEXT_KEY] = ctx
    st.session_state[VISIT_KEY] = st.session_state.get(VISIT_KEY, 0) + 1
    st.rerun()


def render_nav_controls(ctx: SceneContext) -> None:
    actions = available_actions(ctx.scene)
    if not actions:
        return
    cols = st.columns(len(actions) + 4)
    for col, action in zip(cols, actions):
        with col:
            clicked = st.button(
                ACTION_LABELS[action],
                key=widget_key(f"nav_{ctx.scene.value}_{action.value}"),
                disabled=not can_transition(ctx, action),
                use_container_width=True,
            )
        if clicked:
            go_to(transition(ctx, action))
