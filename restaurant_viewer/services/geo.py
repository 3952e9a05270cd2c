from __future__ import annotations

from collections.abc import Sequence

from ..models.camera import Bounds, CameraInstruction, CameraKind, Coordinate, EdgePadding
from ..models.config_models import DEFAULT_CENTER_ZOOM, DEFAULT_EDGE_PADDING
from ..models.record import Record

"""Map projection: geocoded subset and camera framing.

Framing is a pure function of the visible point set, so the render layer can
recompute it on every change (new import, new query, layout change) and get
the same instruction for the same set.
"""

__all__ = [
    "CENTER_DURATION_MS",
    "geocoded",
    "coordinates",
    "bounds_of",
    "frame_camera",
]

CENTER_DURATION_MS = 600


def geocoded(records: Sequence[Record]) -> tuple[Record, ...]:
    """Records whose lat and lng are both finite numbers."""
    return tuple(r for r in records if r.is_geocoded)


def coordinates(records: Sequence[Record]) -> tuple[Coordinate, ...]:
    return tuple(Coordinate(latitude=float(r.lat), longitude=float(r.lng)) for r in records if r.is_geocoded)


def bounds_of(coords: Sequence[Coordinate]) -> Bounds:
    lats = [c.latitude for c in coords]
    lngs = [c.longitude for c in coords]
    return Bounds(south=min(lats), west=min(lngs), north=max(lats), east=max(lngs))


def frame_camera(
    records: Sequence[Record],
    *,
    zoom: float = DEFAULT_CENTER_ZOOM,
    padding: float = DEFAULT_EDGE_PADDING,
) -> CameraInstruction:
    """Decide how the map viewport should frame `records`.

    0 points -> NONE, 1 point -> CENTER_ZOOM, 2+ points -> BOUNDING_FIT.
    Records without coordinates are ignored.
    """
    coords = coordinates(records)
    if not coords:
        return CameraInstruction(kind=CameraKind.NONE)
    if len(coords) == 1:
        return CameraInstruction(
            kind=CameraKind.CENTER_ZOOM,
            center=coords[0],
            zoom=zoom,
            duration_ms=CENTER_DURATION_MS,
        )
    return CameraInstruction(
        kind=CameraKind.BOUNDING_FIT,
        coordinates=coords,
        padding=EdgePadding.symmetric(padding),
        bounds=bounds_of(coords),
    )
