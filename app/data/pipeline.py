"""
Filter / group / aggregate steps shared by the scenes.

Everything here is a pure function over DataFrames so it can be tested
without Streamlit or the charting layer.
"""

from __future__ import annotations

from typing import Callable, Union

import pandas as pd


Predicate = Callable[[pd.DataFrame], pd.Series]
# (column to project, reducer over the projected numeric series)
Reducer = tuple[str, Callable[[pd.Series], float]]

INSIGHT_SORTS = ("first_seen", "avg_price", "neighbourhood")


def mean(values: pd.Series) -> float:
    # Non-numeric values count as missing and are skipped; an all-missing group yields NaN
    return float(pd.to_numeric(values, errors="coerce").mean())


def filter_records(records: pd.DataFrame, predicate: Union[Predicate, pd.Series]) -> pd.DataFrame:
    """Matching rows in their original order."""
    mask = predicate(records) if callable(predicate) else predicate
    return records[mask.fillna(False).astype(bool)].reset_index(drop=True)


def aggregate(records: pd.DataFrame, key: str, reducers: dict[str, Reducer]) -> pd.DataFrame:
    """
    Group by `key` in first-seen order and reduce each group independently.

    Only keys that occur in `records` produce a row, so a category with no
    records never shows up with an empty-group mean.
    """
    columns = [key, *reducers.keys()]
    if records.empty:
        return pd.DataFrame(columns=columns)

    rows = []
    for value, group in records.groupby(key, sort=False, dropna=True):
        row = {key: value}
        for name, (column, fn) in reducers.items():
            row[name] = fn(group[column])
        rows.append(row)
    return pd.DataFrame(rows, columns=columns)


def listings_in(listings: pd.DataFrame, neighbourhood: str) -> pd.DataFrame:
    return filter_records(listings, lambda df: df["neighbourhood"] == neighbourhood)


def reviews_for(reviews: pd.DataFrame, listing_id: str) -> pd.DataFrame:
    out = filter_records(reviews, lambda df: df["listing_id"] == str(listing_id))
    # Line path follows time
    return out.sort_values("date", kind="stable").reset_index(drop=True)


def neighbourhood_insights(listings: pd.DataFrame, sort_by: str = "first_seen") -> pd.DataFrame:
    if sort_by not in INSIGHT_SORTS:
        raise ValueError(f"sort_by must be one of {INSIGHT_SORTS}, got {sort_by!r}")

    out = aggregate(
        listings,
        key="neighbourhood",
        reducers={
            "avg_price": ("price", mean),
            "avg_reviews_per_month": ("reviews_per_month", mean),
            "listing_count": ("id", lambda s: float(len(s))),
        },
    )
    if len(out):
        out["listing_count"] = out["listing_count"].astype(int)
    if sort_by == "avg_price":
        out = out.sort_values("avg_price", ascending=False, kind="stable")
    elif sort_by == "neighbourhood":
        out = out.sort_values("neighbourhood", kind="stable")
    return out.reset_index(drop=True)


def listing_counts(listings: pd.DataFrame, regions: list[str]) -> pd.DataFrame:
    """Listings per map region; regions with no listings get 0 (a count, not a mean)."""
    counts = listings.groupby("neighbourhood", sort=False).size() if len(listings) else pd.Series(dtype=int)
    return pd.DataFrame(
        {
            "neighbourhood": regions,
            "listing_count": [int(counts.get(r, 0)) for r in regions],
        }
    )
