from __future__ import annotations

import time

import numpy as np

from restaurant_viewer.services.geo import frame_camera, geocoded
from restaurant_viewer.services.normalizer import normalize_rows
from restaurant_viewer.services.search import filter_records

"""Performance smoke test: normalize + search + frame a large sheet in memory."""

ROWS = 20_000


def _rows(n: int) -> list[dict[str, object]]:
    rng = np.random.default_rng(42)
    lats = np.round(rng.uniform(-60, 60, n), 5)
    lngs = np.round(rng.uniform(-170, 170, n), 5)
    cities = ["Lyon", "Osaka", "Oakland", "Portland"]
    return [
        {
            "Name": f"Place {i}",
            "City": cities[i % len(cities)],
            "Latitude": str(lats[i]).replace(".", ",") if i % 3 == 0 else float(lats[i]),
            "Longitude": "" if i % 10 == 0 else float(lngs[i]),
        }
        for i in range(n)
    ]


def test_pipeline_smoke():
    rows = _rows(ROWS)
    start = time.perf_counter()
    records = normalize_rows(rows)
    visible = filter_records(geocoded(records), "osaka")
    camera = frame_camera(visible)
    elapsed = time.perf_counter() - start

    assert len(records) == ROWS
    assert camera.coordinates
    # lenient budget so CI stays stable
    assert elapsed < 10, f"pipeline too slow: {elapsed:.3f}s"
    throughput = ROWS / elapsed
    assert throughput > 2_000
