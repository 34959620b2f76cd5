"""Tests for source loading and the typed LoadResult."""

import dataclasses
from unittest.mock import MagicMock, patch

import pandas as pd
import pytest
import requests

from data.loader import (
    SourceLoadError,
    get_reader,
    normalize_listings,
    normalize_reviews,
    region_names,
)
from data.pipeline import neighbourhood_insights, reviews_for
from data.service import get_listings, get_neighbourhoods, get_reviews, load


class TestFileSources:
    def test_listings_are_normalized(self, cfg):
        res = get_listings(cfg, use_sample=False)
        assert res.ok
        assert res.source == "file"
        df = res.df
        assert df["id"].tolist() == ["1", "2", "3", "4"]
        assert df["price"].tolist() == [120.0, 80.0, 1000.0, 40.0]
        assert pd.isna(df.loc[3, "reviews_per_month"])

    def test_reviews_are_normalized(self, cfg):
        res = get_reviews(cfg, use_sample=False)
        assert res.ok
        assert res.df["listing_id"].tolist() == ["1", "1", "2", "1"]
        assert pd.api.types.is_datetime64_any_dtype(res.df["date"])

    def test_neighbourhoods(self, cfg):
        res = get_neighbourhoods(cfg, use_sample=False)
        assert res.ok
        assert region_names(res.data) == ["Harbourside", "Old Town", "Empty Quarter"]
        # Boundary results are not tables
        assert res.df.empty

    def test_missing_file_is_a_failed_result(self, cfg, data_dir):
        (data_dir / "listings.csv").unlink()
        res = get_listings(cfg, use_sample=False)
        assert not res.ok
        assert "listings" in res.error
        assert res.df.empty

    def test_malformed_geojson(self, cfg, data_dir):
        (data_dir / "neighbourhoods.geojson").write_text("{not json", encoding="utf-8")
        res = get_neighbourhoods(cfg, use_sample=False)
        assert not res.ok
        assert res.data == {"type": "FeatureCollection", "features": []}

    def test_geojson_without_features(self, cfg, data_dir):
        (data_dir / "neighbourhoods.geojson").write_text('{"type": "Feature"}', encoding="utf-8")
        assert not get_neighbourhoods(cfg, use_sample=False).ok

    def test_missing_columns(self, cfg, data_dir):
        pd.DataFrame({"id": [1], "name": ["x"]}).to_csv(data_dir / "listings.csv", index=False)
        res = get_listings(cfg, use_sample=False)
        assert not res.ok
        assert "missing columns" in res.error

    def test_undecodable_file_is_a_failed_result(self, cfg, data_dir):
        (data_dir / "listings.csv").write_bytes(
            "id,name,neighbourhood,price,reviews_per_month\n1,Caf\xe9,A,10,1\n".encode("latin-1")
        )
        res = get_listings(cfg, use_sample=False)
        assert not res.ok
        assert "listings" in res.error
        assert res.df.empty

    def test_directory_source_is_a_failed_result(self, cfg, data_dir):
        (data_dir / "reviews.csv").unlink()
        (data_dir / "reviews.csv").mkdir()
        res = get_reviews(cfg, use_sample=False)
        assert not res.ok
        assert "reviews" in res.error

    def test_geojson_with_null_features(self, cfg, data_dir):
        (data_dir / "neighbourhoods.geojson").write_text(
            '{"type": "FeatureCollection", "features": null}', encoding="utf-8"
        )
        res = get_neighbourhoods(cfg, use_sample=False)
        assert not res.ok
        assert region_names(res.data) == []

    def test_blank_listing_id_still_matches_reviews(self, cfg, data_dir):
        (data_dir / "listings.csv").write_text(
            "id,name,neighbourhood,price,reviews_per_month\n1,Loft,A,10,1\n,Ghost,A,20,1\n", encoding="utf-8"
        )
        listings = get_listings(cfg, use_sample=False).df
        assert listings.loc[0, "id"] == "1"
        assert pd.isna(listings.loc[1, "id"])

        reviews = get_reviews(cfg, use_sample=False).df
        assert len(reviews_for(reviews, listings.loc[0, "id"])) == 3

    def test_missing_neighbourhood_is_not_a_category(self, cfg, data_dir):
        (data_dir / "listings.csv").write_text(
            "id,name,neighbourhood,price,reviews_per_month\n1,Loft,A,10,1\n2,Nowhere,,20,1\n", encoding="utf-8"
        )
        listings = get_listings(cfg, use_sample=False).df
        assert pd.isna(listings.loc[1, "neighbourhood"])
        assert neighbourhood_insights(listings)["neighbourhood"].tolist() == ["A"]

    def test_unknown_source(self, cfg):
        with pytest.raises(ValueError):
            load(cfg, "calendar", use_sample=False)


class TestUrlSources:
    def _url_cfg(self, cfg):
        return dataclasses.replace(cfg, listings_source="https://example.org/listings.csv")

    def test_url_source(self, cfg):
        resp = MagicMock(status_code=200, text="id,name,neighbourhood,price,reviews_per_month\n5,x,A,10,1\n")
        with patch("data.loader.requests.get", return_value=resp) as get:
            res = get_listings(self._url_cfg(cfg), use_sample=False)
        get.assert_called_once_with("https://example.org/listings.csv", timeout=5.0)
        assert res.ok
        assert res.source == "url"
        assert res.df["id"].tolist() == ["5"]

    def test_http_error(self, cfg):
        with patch("data.loader.requests.get", return_value=MagicMock(status_code=404, text="")):
            res = get_listings(self._url_cfg(cfg), use_sample=False)
        assert not res.ok
        assert "404" in res.error

    def test_connection_error(self, cfg):
        with patch("data.loader.requests.get", side_effect=requests.ConnectionError("boom")):
            res = get_listings(self._url_cfg(cfg), use_sample=False)
        assert not res.ok
        assert "boom" in res.error


class TestSampleSources:
    def test_sample_ignores_configured_files(self, cfg, data_dir):
        (data_dir / "listings.csv").unlink()
        res = get_listings(cfg, use_sample=True)
        assert res.ok
        assert res.source == "sample"
        assert len(res.df) > 0

    def test_sample_reviews_reference_sample_listings(self, cfg):
        listing_ids = set(get_listings(cfg, use_sample=True).df["id"])
        review_ids = set(get_reviews(cfg, use_sample=True).df["listing_id"])
        assert review_ids <= listing_ids


class TestNormalization:
    def test_price_strings(self):
        df = normalize_listings(
            pd.DataFrame(
                {
                    "id": [1, 2],
                    "name": ["a", "b"],
                    "neighbourhood": ["A", "A"],
                    "price": ["$1,250.50", "n/a"],
                    "reviews_per_month": ["0.4", None],
                }
            )
        )
        assert df.loc[0, "price"] == 1250.5
        assert pd.isna(df.loc[1, "price"])
        assert df.loc[0, "reviews_per_month"] == 0.4

    def test_numeric_prices_pass_through(self):
        df = normalize_listings(
            pd.DataFrame({"id": [1], "name": ["a"], "neighbourhood": ["A"], "price": [99], "reviews_per_month": [1]})
        )
        assert df.loc[0, "price"] == 99

    def test_float_ids_match_integer_ids(self):
        listings = normalize_listings(
            pd.DataFrame(
                {
                    "id": [1.0, float("nan")],
                    "name": ["a", "b"],
                    "neighbourhood": ["A", "A"],
                    "price": [1, 2],
                    "reviews_per_month": [1, 1],
                }
            )
        )
        reviews = normalize_reviews(pd.DataFrame({"listing_id": [1], "date": ["2024-01-01"], "rating": [4]}))
        assert listings["id"].tolist()[0] == reviews.loc[0, "listing_id"] == "1"
        assert pd.isna(listings.loc[1, "id"])

    def test_bad_review_values(self):
        df = normalize_reviews(pd.DataFrame({"listing_id": [1], "date": ["not a date"], "rating": ["x"]}))
        assert pd.isna(df.loc[0, "date"])
        assert pd.isna(df.loc[0, "rating"])

    def test_reader_raises_on_missing_file(self, cfg, tmp_path):
        with pytest.raises(SourceLoadError):
            get_reader(cfg).read_table(str(tmp_path / "nope.csv"))

    def test_region_names_skips_unnamed(self):
        geo = {"features": [{"properties": {"neighbourhood": "A"}}, {"properties": {}}, {"properties": None}]}
        assert region_names(geo) == ["A"]
