"""Domain models for the restaurant viewer.

This package contains the value objects that flow through the import,
search and map projection pipeline.
"""

from .camera import Bounds, CameraInstruction, CameraKind, Coordinate, EdgePadding, Region
from .config_models import MapSettings, ViewerConfig
from .import_issue import ImportIssue
from .import_outcome import ImportOutcome
from .record import CoercionAnomaly, Record

__all__ = [
    # Records
    "Record",
    "CoercionAnomaly",
    # Map
    "Bounds",
    "CameraInstruction",
    "CameraKind",
    "Coordinate",
    "EdgePadding",
    "Region",
    # Configuration
    "MapSettings",
    "ViewerConfig",
    # Import results
    "ImportIssue",
    "ImportOutcome",
]
