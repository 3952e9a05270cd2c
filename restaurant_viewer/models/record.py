from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any

"""Record domain model for the restaurant viewer.

A Record is the canonical, fully defaulted representation of one imported
spreadsheet row. Every string field is total (never None); only the
coordinate pair may be None.
"""

__all__ = [
    "Record",
    "CoercionAnomaly",
    "UNNAMED",
]

UNNAMED = "Unnamed"


@dataclass(frozen=True)
class Record:
    """One restaurant after normalization.

    `id` is assigned once at import time (row position + resolved name) and
    stays stable for the lifetime of the loaded collection.
    """
    id: str
    name: str = UNNAMED
    address: str = ""
    city: str = ""
    state: str = ""
    country: str = ""
    lat: float | None = None  # None if absent / unparsable
    lng: float | None = None
    phone: str = ""
    website: str = ""
    cuisine: str = ""
    notes: str = ""

    @property
    def is_geocoded(self) -> bool:
        """True when both coordinates are finite numbers."""
        return _finite(self.lat) and _finite(self.lng)


@dataclass(frozen=True)
class CoercionAnomaly:
    """A coordinate cell that was present but could not be parsed.

    Reported per field and never raised; the Record simply carries None.
    """
    row_index: int  # 0-based data row position
    field: str  # "lat" / "lng"
    raw_value: Any


def _finite(value: float | None) -> bool:
    if value is None or isinstance(value, bool):
        return False
    return isinstance(value, (int, float)) and math.isfinite(value)
