from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

"""Camera framing models for the map presentation.

A CameraInstruction tells the render layer how to position the map viewport
for the currently visible point set:

    NONE         -> leave the camera alone (static default region + notice)
    CENTER_ZOOM  -> center on a single coordinate at a fixed zoom
    BOUNDING_FIT -> fit all coordinates with a symmetric edge padding
"""

__all__ = [
    "CameraKind",
    "Coordinate",
    "EdgePadding",
    "Bounds",
    "Region",
    "CameraInstruction",
]


class CameraKind(Enum):
    NONE = "none"
    CENTER_ZOOM = "center_zoom"
    BOUNDING_FIT = "bounding_fit"


@dataclass(frozen=True)
class Coordinate:
    latitude: float
    longitude: float


@dataclass(frozen=True)
class EdgePadding:
    """Pixel margin kept free on each edge when fitting coordinates."""
    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def symmetric(cls, value: float) -> EdgePadding:
        return cls(top=value, right=value, bottom=value, left=value)


@dataclass(frozen=True)
class Bounds:
    south: float
    west: float
    north: float
    east: float

    def contains(self, coord: Coordinate) -> bool:
        return (
            self.south <= coord.latitude <= self.north
            and self.west <= coord.longitude <= self.east
        )


@dataclass(frozen=True)
class Region:
    """Static map region (center + span in degrees)."""
    latitude: float
    longitude: float
    latitude_delta: float
    longitude_delta: float


@dataclass(frozen=True)
class CameraInstruction:
    kind: CameraKind
    center: Coordinate | None = None
    zoom: float | None = None
    coordinates: tuple[Coordinate, ...] = field(default_factory=tuple)
    padding: EdgePadding | None = None
    bounds: Bounds | None = None
    duration_ms: int | None = None  # animation hint for the render layer

    @property
    def is_empty(self) -> bool:
        return self.kind is CameraKind.NONE
