from __future__ import annotations

import streamlit as st


def render_scene_intro(title: str, question: str, context: str | None = None) -> None:
    """
    Opening card of every scene:
    - scene title
    - the question the chart answers
    - optional 1–2 line context
    """
    st.markdown(
        f"""
<div class="scene-intro">
  <div class="scene-intro-title">{title}</div>
  <div class="scene-intro-question">{question}</div>
  {f'<div class="scene-intro-context">{context}</div>' if context else ''}
</div>
        """,
        unsafe_allow_html=True,
    )


def render_chart_annotation(title: str, body: str) -> None:
    st.markdown(
        f"""
<div class="callout">
  <div class="callout-title">{title}</div>
  <div class="callout-body">{body}</div>
</div>
        """,
        unsafe_allow_html=True,
    )
