from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv


#
# Shared theme tokens
# - Centralized here so charts (Plotly) and CSS (components/styles.py) agree.
#
THEME = {
    # Backgrounds
    "bg_primary": "#F7F7F7",     # page background
    "bg_secondary": "#FFFFFF",   # sidebar / top surfaces
    "bg_card": "#FFFFFF",        # card surface
    # Accents
    "accent_primary": "#FF385C",    # map hover / bars
    "accent_secondary": "#E31C5F",  # button hover
    "ink_900": "#222222",
    "ink_700": "#484848",
    "teal": "#008489",
    # Text + borders
    "text_primary": "#222222",
    "text_secondary": "rgba(34, 34, 34, 0.70)",
    "border_color": "#EBEBEB",
    "grid": "rgba(34, 34, 34, 0.08)",
    "shadow": "0 1px 3px rgba(0,0,0,0.08)",
    "radius_px": 12,
    # Map fill
    "region_fill": "#D3D3D3",
    "region_stroke": "#FFFFFF",
}

# Chart surface used by every scene
CHART_WIDTH = 960
CHART_HEIGHT = 600


@dataclass(frozen=True)
class AppConfig:
    # Where the three flat files live (path or http(s) URL each)
    geojson_source: str
    listings_source: str
    reviews_source: str

    # Defaults
    default_use_sample: bool
    fetch_timeout_seconds: float
    log_level: str

    @property
    def sources(self) -> dict[str, str]:
        return {
            "neighbourhoods": self.geojson_source,
            "listings": self.listings_source,
            "reviews": self.reviews_source,
        }


def _getenv(name: str, default: Optional[str] = None) -> Optional[str]:
    v = os.getenv(name, default)
    if v is None:
        return None
    v = v.strip()
    return v if v else None


def get_config() -> AppConfig:
    """
    Centralized config: this is the ONLY place env vars are read.
    - Loads `.env` if present (local dev)
    - Each source can be overridden individually; otherwise it is resolved under DATA_DIR
    """
    load_dotenv(override=False)

    data_dir = _getenv("DATA_DIR", "data") or "data"

    timeout_raw = _getenv("FETCH_TIMEOUT_SECONDS", "30") or "30"
    try:
        timeout = float(timeout_raw)
    except ValueError:
        timeout = 30.0

    return AppConfig(
        geojson_source=_getenv("GEOJSON_SOURCE") or os.path.join(data_dir, "neighbourhoods.geojson"),
        listings_source=_getenv("LISTINGS_SOURCE") or os.path.join(data_dir, "listings.csv"),
        reviews_source=_getenv("REVIEWS_SOURCE") or os.path.join(data_dir, "reviews.csv"),
        default_use_sample=(_getenv("USE_SAMPLE_DATA", "false") or "false").lower() == "true",
        fetch_timeout_seconds=timeout,
        log_level=(_getenv("LOG_LEVEL", "INFO") or "INFO").upper(),
    )
