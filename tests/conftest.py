"""Shared test fixtures: small file-backed listings, reviews and boundaries."""

import json

import pandas as pd
import pytest

from config import AppConfig


LISTINGS_ROWS = [
    {"id": 1, "name": "Loft by the water", "neighbourhood": "Harbourside", "price": "$120.00", "reviews_per_month": 2.5},
    {"id": 2, "name": "Quiet room", "neighbourhood": "Old Town", "price": "$80.00", "reviews_per_month": 1.0},
    {"id": 3, "name": "Harbour studio", "neighbourhood": "Harbourside", "price": "$1,000.00", "reviews_per_month": 0.5},
    {"id": 4, "name": "Attic nook", "neighbourhood": "Old Town", "price": "$40.00", "reviews_per_month": ""},
]

REVIEWS_ROWS = [
    {"listing_id": 1, "date": "2024-03-01", "rating": 4.5},
    {"listing_id": 1, "date": "2024-01-15", "rating": 3.0},
    {"listing_id": 2, "date": "2024-02-10", "rating": 5.0},
    {"listing_id": 1, "date": "2024-02-01", "rating": 4.0},
]


def _square(name, x0, y0):
    ring = [[x0, y0], [x0 + 1, y0], [x0 + 1, y0 + 1], [x0, y0 + 1], [x0, y0]]
    return {
        "type": "Feature",
        "properties": {"neighbourhood": name},
        "geometry": {"type": "Polygon", "coordinates": [ring]},
    }


GEOJSON = {
    "type": "FeatureCollection",
    "features": [
        _square("Harbourside", 0, 0),
        _square("Old Town", 1, 0),
        _square("Empty Quarter", 2, 0),
    ],
}


@pytest.fixture()
def data_dir(tmp_path):
    """Directory holding neighbourhoods.geojson, listings.csv and reviews.csv."""
    pd.DataFrame(LISTINGS_ROWS).to_csv(tmp_path / "listings.csv", index=False)
    pd.DataFrame(REVIEWS_ROWS).to_csv(tmp_path / "reviews.csv", index=False)
    (tmp_path / "neighbourhoods.geojson").write_text(json.dumps(GEOJSON), encoding="utf-8")
    return tmp_path


@pytest.fixture()
def cfg(data_dir):
    return AppConfig(
        geojson_source=str(data_dir / "neighbourhoods.geojson"),
        listings_source=str(data_dir / "listings.csv"),
        reviews_source=str(data_dir / "reviews.csv"),
        default_use_sample=False,
        fetch_timeout_seconds=5.0,
        log_level="INFO",
    )


@pytest.fixture()
def listings():
    """Normalized listings frame (no file I/O)."""
    return pd.DataFrame(
        [
            {"id": "1", "name": "a", "neighbourhood": "A", "price": 10.0, "reviews_per_month": 1.0},
            {"id": "2", "name": "b", "neighbourhood": "A", "price": 20.0, "reviews_per_month": 3.0},
            {"id": "3", "name": "c", "neighbourhood": "B", "price": 30.0, "reviews_per_month": 2.0},
        ]
    )


@pytest.fixture()
def geojson():
    return GEOJSON
