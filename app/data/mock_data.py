from __future__ import annotations

import random
from datetime import date, timedelta
from typing import Any

import pandas as pd
from faker import Faker


fake = Faker()


NEIGHBOURHOODS = [
    "Harbourside",
    "Old Town",
    "Riverbend",
    "Market District",
    "Hillcrest",
    "Eastgate",
    "Parkview",
    "University Heights",
    "Westfield",
]
# Sample grid is 3 x 3 cells anchored here (lon, lat)
_ORIGIN = (-122.46, 37.72)
_CELL = 0.04

ROOM_TYPES = ["Entire home/apt", "Private room", "Shared room"]


def neighbourhoods_mock() -> dict[str, Any]:
    """A FeatureCollection of square neighbourhoods laid out on a grid."""
    features = []
    for i, name in enumerate(NEIGHBOURHOODS):
        col, row = i % 3, i // 3
        x0 = _ORIGIN[0] + col * _CELL
        y0 = _ORIGIN[1] + row * _CELL
        ring = [
            [x0, y0],
            [x0 + _CELL, y0],
            [x0 + _CELL, y0 + _CELL],
            [x0, y0 + _CELL],
            [x0, y0],
        ]
        features.append(
            {
                "type": "Feature",
                "properties": {"neighbourhood": name, "neighbourhood_group": None},
                "geometry": {"type": "MultiPolygon", "coordinates": [[ring]]},
            }
        )
    return {"type": "FeatureCollection", "features": features}


def listings_mock(n_rows: int = 360) -> pd.DataFrame:
    random.seed(7)
    Faker.seed(7)
    # Last neighbourhood stays empty so the map shows a region without listings
    populated = NEIGHBOURHOODS[:-1]
    level = {n: random.uniform(90, 320) for n in populated}
    rows = []
    for i in range(n_rows):
        hood = random.choice(populated)
        room = random.choices(ROOM_TYPES, weights=[0.6, 0.35, 0.05])[0]
        room_adj = {"Entire home/apt": 1.0, "Private room": 0.55, "Shared room": 0.3}[room]
        price = max(25.0, random.gauss(level[hood] * room_adj, 40.0))
        # Cheaper places turn over faster
        rpm = max(0.0, random.gauss(3.2 - price / 150.0, 0.9))
        rows.append(
            {
                "id": str(10_000 + i),
                "name": f"{fake.word().title()} {room.split('/')[0].lower()} near {fake.street_name()}",
                "host_name": fake.first_name(),
                "neighbourhood": hood,
                "room_type": room,
                "price": round(price, 0),
                "reviews_per_month": round(rpm, 2),
            }
        )
    return pd.DataFrame(rows)


def reviews_mock(listings: pd.DataFrame | None = None, max_per_listing: int = 24) -> pd.DataFrame:
    random.seed(11)
    listings = listings if listings is not None else listings_mock()
    today = date.today()
    rows = []
    for _, l in listings.iterrows():
        n = int(min(max_per_listing, round(l["reviews_per_month"] * 6)))
        base = random.uniform(3.6, 4.9)
        for _ in range(n):
            d = today - timedelta(days=random.randint(0, 540))
            rating = max(0.0, min(5.0, random.gauss(base, 0.45)))
            rows.append(
                {
                    "listing_id": l["id"],
                    "date": d.isoformat(),
                    "reviewer_name": fake.first_name(),
                    "rating": round(rating, 1),
                }
            )
    return pd.DataFrame(rows, columns=["listing_id", "date", "reviewer_name", "rating"])
