from __future__ import annotations

import io
import json
import logging
import os
from dataclasses import dataclass
from typing import Any, Optional

import pandas as pd
import requests

from config import AppConfig


logger = logging.getLogger(__name__)


class SourceLoadError(RuntimeError):
    pass


LISTING_COLUMNS = ["id", "name", "neighbourhood", "price", "reviews_per_month"]
REVIEW_COLUMNS = ["listing_id", "date", "rating"]


def _is_url(source: str) -> bool:
    return source.startswith(("http://", "https://"))


@dataclass(frozen=True)
class SourceReader:
    cfg: AppConfig

    def read_text(self, source: str) -> str:
        """
        Returns the raw text of a flat file.
        Supports local paths and http(s) URLs.
        """
        if _is_url(source):
            try:
                resp = requests.get(source, timeout=self.cfg.fetch_timeout_seconds)
            except requests.RequestException as e:
                raise SourceLoadError(f"Request to {source} failed: {e}") from e
            if resp.status_code >= 300:
                raise SourceLoadError(f"GET {source} returned HTTP {resp.status_code}")
            return resp.text

        if not os.path.exists(source):
            raise SourceLoadError(f"File not found: {source}")
        try:
            with open(source, "r", encoding="utf-8") as f:
                return f.read()
        except (OSError, UnicodeDecodeError) as e:
            raise SourceLoadError(f"Could not read {source}: {e}") from e

    def read_table(self, source: str, dtype: Optional[dict[str, Any]] = None) -> pd.DataFrame:
        text = self.read_text(source)
        try:
            return pd.read_csv(io.StringIO(text), dtype=dtype)
        except ValueError as e:
            raise SourceLoadError(f"Could not parse CSV {source}: {e}") from e

    def read_geojson(self, source: str) -> dict[str, Any]:
        text = self.read_text(source)
        try:
            data = json.loads(text)
        except json.JSONDecodeError as e:
            raise SourceLoadError(f"Could not parse GeoJSON {source}: {e}") from e
        if not isinstance(data, dict) or not isinstance(data.get("features"), list):
            raise SourceLoadError(f"{source} is not a GeoJSON FeatureCollection")
        return data


def get_reader(cfg: AppConfig) -> SourceReader:
    return SourceReader(cfg=cfg)


def _require(df: pd.DataFrame, columns: list[str], what: str) -> None:
    missing = [c for c in columns if c not in df.columns]
    if missing:
        raise SourceLoadError(f"{what} is missing columns: {missing}")


def _to_price(s: pd.Series) -> pd.Series:
    # Inside Airbnb exports price as "$1,200.00"
    if not pd.api.types.is_numeric_dtype(s):
        s = s.astype(str).str.replace(r"[$,]", "", regex=True)
    return pd.to_numeric(s, errors="coerce")


def _text(s: pd.Series) -> pd.Series:
    # Missing stays missing; astype(str) would turn it into "nan"
    return s.map(lambda v: v if pd.isna(v) else str(v)).astype(object)


def _key(s: pd.Series) -> pd.Series:
    # A blank id makes pandas read the column as float; 1.0 must still match "1"
    return _text(s.map(lambda v: int(v) if isinstance(v, float) and v.is_integer() else v))


def normalize_listings(df: pd.DataFrame) -> pd.DataFrame:
    _require(df, LISTING_COLUMNS, "listings")
    out = df.copy()
    out["id"] = _key(out["id"])
    out["neighbourhood"] = _text(out["neighbourhood"])
    out["price"] = _to_price(out["price"])
    out["reviews_per_month"] = pd.to_numeric(out["reviews_per_month"], errors="coerce")
    return out


def normalize_reviews(df: pd.DataFrame) -> pd.DataFrame:
    _require(df, REVIEW_COLUMNS, "reviews")
    out = df.copy()
    out["listing_id"] = _key(out["listing_id"])
    out["date"] = pd.to_datetime(out["date"], errors="coerce")
    out["rating"] = pd.to_numeric(out["rating"], errors="coerce")
    return out


def region_names(geojson: dict[str, Any], key: str = "neighbourhood") -> list[str]:
    """Names of the regions in a boundary collection, in file order."""
    names = []
    for feat in geojson.get("features") or []:
        if not isinstance(feat, dict):
            continue
        name = (feat.get("properties") or {}).get(key)
        if name is not None:
            names.append(str(name))
    return names
