from __future__ import annotations

import math

import pytest

from restaurant_viewer.models import (
    Bounds,
    CameraInstruction,
    CameraKind,
    Coordinate,
    EdgePadding,
    ImportOutcome,
    Record,
)


def test_record_defaults():
    record = Record(id="0-")
    assert record.name == "Unnamed"
    assert record.address == record.city == record.notes == ""
    assert record.lat is None and record.lng is None
    assert record.is_geocoded is False


def test_record_immutability():
    record = Record(id="0-A", name="A")
    with pytest.raises(AttributeError):
        record.name = "B"  # type: ignore[misc]
    with pytest.raises(AttributeError):
        record.lat = 1.0  # type: ignore[misc]


@pytest.mark.parametrize(
    "lat, lng, expected",
    [(1.0, 2.0, True), (0.0, 0.0, True), (1, 2, True), (None, 2.0, False), (1.0, None, False),
     (math.nan, 1.0, False), (1.0, -math.inf, False), (True, 1.0, False)],
)
def test_record_is_geocoded(lat, lng, expected):
    assert Record(id="0-x", lat=lat, lng=lng).is_geocoded is expected


def test_edge_padding_symmetric():
    assert EdgePadding.symmetric(60) == EdgePadding(top=60, right=60, bottom=60, left=60)


def test_bounds_contains():
    bounds = Bounds(south=0, west=0, north=10, east=10)
    assert bounds.contains(Coordinate(5, 5))
    assert bounds.contains(Coordinate(0, 10))
    assert not bounds.contains(Coordinate(11, 5))


def test_camera_instruction_empty_flag():
    assert CameraInstruction(kind=CameraKind.NONE).is_empty
    assert not CameraInstruction(kind=CameraKind.CENTER_ZOOM, center=Coordinate(1, 2), zoom=14).is_empty


def test_import_outcome_defaults():
    outcome = ImportOutcome(succeeded=False, message="Failed")
    assert outcome.record_count == 0
    assert outcome.anomalies == ()
