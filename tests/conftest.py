# Shared pytest fixtures
from __future__ import annotations

import tempfile
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pandas as pd
import pytest

from restaurant_viewer.logging.init import reset_logging
from restaurant_viewer.models.record import Record


@pytest.fixture()
def temp_workdir(monkeypatch) -> Path:
    with tempfile.TemporaryDirectory() as d:
        p = Path(d)
        (p / "config").mkdir()
        (p / "data").mkdir()
        monkeypatch.chdir(p)
        monkeypatch.delenv("VIEWER_CONFIG", raising=False)
        yield p


@pytest.fixture(autouse=True)
def _fresh_logging():
    reset_logging()
    yield
    reset_logging()


def write_workbook(path: Path, rows: list[dict[str, Any]], sheets: dict[str, list[dict[str, Any]]] | None = None) -> Path:
    """Write `rows` as the first sheet (header row + data rows)."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with pd.ExcelWriter(path, engine="openpyxl") as writer:
        pd.DataFrame(rows).to_excel(writer, sheet_name="Restaurants", index=False)
        for name, extra in (sheets or {}).items():
            pd.DataFrame(extra).to_excel(writer, sheet_name=name, index=False)
    return path


@pytest.fixture()
def make_workbook(temp_workdir: Path) -> Callable[..., Path]:
    def _make(rows: list[dict[str, Any]], name: str = "restaurants.xlsx", **kwargs: Any) -> Path:
        return write_workbook(temp_workdir / "data" / name, rows, **kwargs)
    return _make


@pytest.fixture()
def sample_rows() -> list[dict[str, Any]]:
    return [
        {"Name": "A", "City": "X", "Latitude": "1,5", "Longitude": "2.0"},
        {"name": "b", "city": "x"},
    ]


@pytest.fixture()
def restaurants() -> tuple[Record, ...]:
    return (
        Record(id="0-Zuni Cafe", name="Zuni Cafe", city="San Francisco", state="CA", country="USA",
               cuisine="Californian", lat=37.7735, lng=-122.4216),
        Record(id="1-Pizzeria Delfina", name="Pizzeria Delfina", city="San Francisco", state="CA",
               country="USA", cuisine="Italian", lat=37.7614, lng=-122.4241),
        Record(id="2-Le Bouchon", name="Le Bouchon", city="Lyon", country="France", cuisine="French",
               lat=45.764, lng=4.8357),
        Record(id="3-Pok Pok", name="Pok Pok", city="Portland", state="OR", country="USA", cuisine="Thai"),
        Record(id="4-", name="Unnamed", city="Osaka", country="Japan", lat=34.69, lng=None),
    )
