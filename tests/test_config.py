"""Tests for environment-driven configuration."""

import os

import pytest

from config import get_config


ENV_VARS = [
    "DATA_DIR",
    "GEOJSON_SOURCE",
    "LISTINGS_SOURCE",
    "REVIEWS_SOURCE",
    "USE_SAMPLE_DATA",
    "FETCH_TIMEOUT_SECONDS",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_defaults():
    cfg = get_config()
    assert cfg.listings_source == os.path.join("data", "listings.csv")
    assert cfg.geojson_source == os.path.join("data", "neighbourhoods.geojson")
    assert cfg.default_use_sample is False
    assert cfg.fetch_timeout_seconds == 30.0
    assert cfg.log_level == "INFO"


def test_data_dir_and_overrides(monkeypatch):
    monkeypatch.setenv("DATA_DIR", "/srv/airbnb")
    monkeypatch.setenv("REVIEWS_SOURCE", "https://example.org/reviews.csv")
    cfg = get_config()
    assert cfg.listings_source == os.path.join("/srv/airbnb", "listings.csv")
    assert cfg.sources["reviews"] == "https://example.org/reviews.csv"


def test_flags_and_levels(monkeypatch):
    monkeypatch.setenv("USE_SAMPLE_DATA", "TRUE")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "2.5")
    cfg = get_config()
    assert cfg.default_use_sample is True
    assert cfg.log_level == "DEBUG"
    assert cfg.fetch_timeout_seconds == 2.5


def test_bad_timeout_falls_back(monkeypatch):
    monkeypatch.setenv("FETCH_TIMEOUT_SECONDS", "soon")
    assert get_config().fetch_timeout_seconds == 30.0


def test_blank_values_are_unset(monkeypatch):
    monkeypatch.setenv("LISTINGS_SOURCE", "   ")
    assert get_config().listings_source == os.path.join("data", "listings.csv")
