from __future__ import annotations

import streamlit as st

from config import THEME


APP_TITLE = "Airbnb Listings Story"


def apply_theme() -> None:
    st.set_page_config(
        page_title=APP_TITLE,
        page_icon="🏠",
        layout="wide",
        initial_sidebar_state="expanded",
    )

    # Theme tokens (config.py) -> CSS variables
    radius = int(THEME["radius_px"])
    css = """
<style>
:root{
  --accent: __ACCENT__;
  --accent-hover: __ACCENT_HOVER__;
  --ink-900: __INK_900__;
  --ink-700: __INK_700__;

  --bg-primary: __BG_PRIMARY__;
  --bg-secondary: __BG_SECONDARY__;
  --card-bg: __CARD_BG__;
  --card-border: __CARD_BORDER__;

  --text-primary: __TEXT_PRIMARY__;
  --text-secondary: __TEXT_SECONDARY__;
  --shadow: __SHADOW__;
  --radius: __RADIUS_PX__px;
}

#MainMenu { visibility: hidden; }
footer { visibility: hidden; }

html, body, [data-testid="stAppViewContainer"]{
  background: var(--bg-primary) !important;
  color: var(--text-primary) !important;
}
[data-testid="stSidebar"]{
  background: var(--bg-secondary) !important;
  border-right: 1px solid var(--card-border) !important;
}
.block-container{
  padding-top: 1rem !important;
  padding-bottom: 2rem !important;
}

/* Header */
.story-header{
  display:flex;
  align-items:center;
  justify-content:space-between;
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 10px 14px;
  margin: 0 0 14px 0;
}
.story-title{ font-size: 20px; font-weight: 700; color: var(--ink-900); }
.story-subtitle{ font-size: 14px; color: var(--text-secondary); }
.pill{
  display:inline-flex;
  align-items:center;
  gap:6px;
  border: 1px solid var(--card-border);
  border-radius: 999px;
  padding: 6px 10px;
  font-size: 13px;
  font-weight: 600;
  color: var(--ink-700);
}
.pill .dot{
  width:8px;
  height:8px;
  border-radius:999px;
  background: var(--accent);
  display:inline-block;
}

/* Sidebar steps */
.step{
  border: 1px solid var(--card-border);
  border-radius: 10px;
  padding: 8px 12px;
  margin: 0 0 8px 0;
  color: var(--text-secondary);
}
.step-active{
  border-color: var(--accent);
  color: var(--ink-900);
  font-weight: 600;
}

/* Scene intro + callouts */
.scene-intro{
  background: var(--bg-secondary);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 14px;
  margin: 0 0 14px 0;
}
.scene-intro-title{ font-size: 24px; font-weight: 700; color: var(--ink-900); margin-bottom: 6px; }
.scene-intro-question{ font-size: 16px; font-weight: 600; color: var(--ink-700); margin-bottom: 6px; }
.scene-intro-context{ font-size: 14px; color: var(--text-secondary); line-height: 1.5; }
.callout{
  background: #FFFFFF;
  border: 1px solid var(--card-border);
  border-left: 4px solid var(--accent);
  border-radius: var(--radius);
  padding: 12px 14px;
  margin: 10px 0;
}
.callout-title{ font-size: 14px; font-weight: 700; color: var(--ink-900); margin-bottom: 6px; }
.callout-body{ font-size: 14px; color: var(--text-secondary); line-height: 1.5; }

/* Metric cards */
.metric-card{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 12px 14px;
}
.metric-label{ font-size: 14px; color: var(--text-secondary); margin-bottom: 6px; }
.metric-value{ font-size: 24px; font-weight: 700; color: var(--text-primary); }

/* Navigation buttons */
div.stButton > button{
  border-radius: 10px !important;
  font-weight: 600 !important;
  background: var(--accent) !important;
  color: white !important;
  border: 1px solid transparent !important;
}
div.stButton > button:hover{ background: var(--accent-hover) !important; }
div.stButton > button:disabled{ background: var(--card-border) !important; color: var(--text-secondary) !important; }

div[data-testid="stPlotlyChart"]{
  background: var(--card-bg);
  border: 1px solid var(--card-border);
  border-radius: var(--radius);
  box-shadow: var(--shadow);
  padding: 8px 10px;
}
</style>
"""

    tokens = {
        "__ACCENT__": str(THEME["accent_primary"]),
        "__ACCENT_HOVER__": str(THEME["accent_secondary"]),
        "__INK_900__": str(THEME["ink_900"]),
        "__INK_700__": str(THEME["ink_700"]),
        "__BG_PRIMARY__": str(THEME["bg_primary"]),
        "__BG_SECONDARY__": str(THEME["bg_secondary"]),
        "__CARD_BG__": str(THEME["bg_card"]),
        "__CARD_BORDER__": str(THEME["border_color"]),
        "__TEXT_PRIMARY__": str(THEME["text_primary"]),
        "__TEXT_SECONDARY__": str(THEME["text_secondary"]),
        "__SHADOW__": str(THEME["shadow"]),
        "__RADIUS_PX__": str(radius),
    }
    for k, v in tokens.items():
        css = css.replace(k, v)

    st.markdown(css, unsafe_allow_html=True)
