"""
Routing only.

All scene logic lives in app/views/.
All env reads happen ONLY in config.py.
"""

from __future__ import annotations

import logging
import os
import sys

# Make `app/` importable as a flat module path when running:
#   streamlit run app/app.py
APP_DIR = os.path.dirname(__file__)
REPO_ROOT = os.path.abspath(os.path.join(APP_DIR, ".."))
for p in [APP_DIR, REPO_ROOT]:
    if p not in sys.path:
        sys.path.insert(0, p)

import streamlit as st  # noqa: E402

from components.controls import current_context, render_nav_controls  # noqa: E402
from components.header import render_header  # noqa: E402
from components.narrative import render_scene_intro  # noqa: E402
from components.sidebar import render_sidebar  # noqa: E402
from components.styles import APP_TITLE, apply_theme  # noqa: E402
from config import get_config  # noqa: E402
from navigation import Scene, missing_selection  # noqa: E402

from views import insights, listings, overview, reviews  # noqa: E402


SCENES = {
    Scene.OVERVIEW: overview.render,
    Scene.LISTINGS: listings.render,
    Scene.REVIEWS: reviews.render,
    Scene.INSIGHTS: insights.render,
}


def main() -> None:
    apply_theme()
    cfg = get_config()
    logging.basicConfig(
        level=getattr(logging, cfg.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    ctx = current_context()
    state = render_sidebar(cfg, ctx)

    render_header(
        app_name=APP_TITLE,
        subtitle="Neighbourhoods → listings → reviews → the big picture",
        right_pill=f"Data: {'Sample' if state.use_sample else 'Configured files'}",
    )

    # Exactly one scene renders per run
    missing = missing_selection(ctx)
    if missing:
        render_scene_intro(title=ctx.title, question=f"Select a {missing} first.")
        render_nav_controls(ctx)
        return

    SCENES[ctx.scene](cfg, ctx, state.use_sample)


if __name__ == "__main__":
    main()
