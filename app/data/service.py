from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

import pandas as pd

from config import AppConfig
from data import mock_data
from data.loader import SourceLoadError, get_reader, normalize_listings, normalize_reviews


logger = logging.getLogger(__name__)

SOURCE_IDS = ("neighbourhoods", "listings", "reviews")


@dataclass(frozen=True)
class LoadResult:
    data: Any  # pd.DataFrame for tables, dict for the boundary collection
    source: str  # "sample" | "file" | "url"
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def df(self) -> pd.DataFrame:
        return self.data if isinstance(self.data, pd.DataFrame) else pd.DataFrame()


def _empty(source_id: str) -> Any:
    if source_id == "neighbourhoods":
        return {"type": "FeatureCollection", "features": []}
    return pd.DataFrame()


def _load(source_id: str, use_sample: bool, location: str, fn_live: Callable[[], Any], fn_sample: Callable[[], Any]) -> LoadResult:
    if use_sample:
        return LoadResult(data=fn_sample(), source="sample")
    kind = "url" if location.startswith(("http://", "https://")) else "file"
    try:
        return LoadResult(data=fn_live(), source=kind)
    except SourceLoadError as e:
        logger.warning("Loading %s from %s failed: %s", source_id, location, e)
        return LoadResult(data=_empty(source_id), source=kind, error=f"Could not load {source_id}: {e}")


def load(cfg: AppConfig, source_id: str, use_sample: bool) -> LoadResult:
    """Load one flat source fresh (no caching); failures come back as LoadResult(error=...)."""
    if source_id not in SOURCE_IDS:
        raise ValueError(f"Unknown source {source_id!r}; expected one of {SOURCE_IDS}")

    reader = get_reader(cfg)
    location = cfg.sources[source_id]

    if source_id == "neighbourhoods":
        return _load(
            source_id,
            use_sample,
            location,
            fn_live=lambda: reader.read_geojson(location),
            fn_sample=mock_data.neighbourhoods_mock,
        )
    if source_id == "listings":
        return _load(
            source_id,
            use_sample,
            location,
            fn_live=lambda: normalize_listings(reader.read_table(location, dtype={"id": str})),
            fn_sample=lambda: normalize_listings(mock_data.listings_mock()),
        )
    return _load(
        source_id,
        use_sample,
        location,
        fn_live=lambda: normalize_reviews(reader.read_table(location, dtype={"listing_id": str})),
        fn_sample=lambda: normalize_reviews(mock_data.reviews_mock()),
    )


def get_neighbourhoods(cfg: AppConfig, use_sample: bool) -> LoadResult:
    return load(cfg, "neighbourhoods", use_sample)


def get_listings(cfg: AppConfig, use_sample: bool) -> LoadResult:
    return load(cfg, "listings", use_sample)


def get_reviews(cfg: AppConfig, use_sample: bool) -> LoadResult:
    return load(cfg, "reviews", use_sample)
