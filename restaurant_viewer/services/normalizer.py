from __future__ import annotations

import math
import re
from collections.abc import Callable, Iterable, Mapping
from typing import Any

import pandas as pd

from ..models.record import UNNAMED, CoercionAnomaly, Record
from .progress import RowProgress

"""Record normalization: raw spreadsheet rows -> canonical Records.

Header variants are resolved through an explicit, priority-ordered alias
table. Resolution runs two passes over the aliases:

1. exact header match, aliases in priority order
2. case-insensitive match on stripped headers, aliases in priority order,
   headers in sheet order

The first non-empty value wins. `Name` therefore beats `name`, while a
header spelled `NAME` still resolves.
"""

__all__ = [
    "FIELD_ALIASES",
    "resolve_field",
    "coerce_text",
    "safe_float",
    "normalize_row",
    "normalize_rows",
]

FIELD_ALIASES: dict[str, tuple[str, ...]] = {
    "name": ("Name", "name", "Title"),
    "address": ("Address", "address"),
    "city": ("City", "city"),
    "state": ("State", "state"),
    "country": ("Country", "country"),
    "lat": ("Latitude", "latitude", "lat"),
    "lng": ("Longitude", "longitude", "lng"),
    "phone": ("Phone", "phone"),
    "website": ("Website", "website"),
    "cuisine": ("Cuisine", "cuisine"),
    "notes": ("Notes", "notes"),
}

_TEXT_FIELDS = ("address", "city", "state", "country", "phone", "website", "cuisine", "notes")
_COORD_FIELDS = ("lat", "lng")

# leading float literal, the way parseFloat reads it
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return value.strip() == ""
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def resolve_field(row: Mapping[str, Any], aliases: Iterable[str]) -> Any:
    """Return the first non-empty value for the aliases, or None."""
    aliases = tuple(aliases)
    for alias in aliases:
        if alias in row and not _is_empty(row[alias]):
            return row[alias]
    folded = [(str(header).strip().casefold(), value) for header, value in row.items()]
    for alias in aliases:
        key = alias.casefold()
        for header, value in folded:
            if header == key and not _is_empty(value):
                return value
    return None


def coerce_text(value: Any) -> str:
    """Coerce a cell to a stripped string; empty cells become ""."""
    if _is_empty(value):
        return ""
    if isinstance(value, float) and value.is_integer():
        # 5551234.0 -> "5551234" (legacy workbooks store every number as float)
        return str(int(value))
    return str(value).strip()


def safe_float(value: Any) -> float | None:
    """Parse a coordinate cell, tolerating a decimal comma.

    Returns the parsed value when finite, otherwise None. Never raises.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        result = float(value)
        return result if math.isfinite(result) else None
    text = str(value).strip().replace(",", ".", 1)
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    try:
        result = float(match.group(0))
    except (OverflowError, ValueError):
        return None
    return result if math.isfinite(result) else None


def normalize_row(row: Mapping[str, Any], idx: int) -> Record:
    """Map one raw row at 0-based position `idx` to exactly one Record."""
    resolved_name = coerce_text(resolve_field(row, FIELD_ALIASES["name"]))
    text = {f: coerce_text(resolve_field(row, FIELD_ALIASES[f])) for f in _TEXT_FIELDS}
    return Record(
        id=f"{idx}-{resolved_name}",
        name=resolved_name or UNNAMED,
        lat=safe_float(resolve_field(row, FIELD_ALIASES["lat"])),
        lng=safe_float(resolve_field(row, FIELD_ALIASES["lng"])),
        **text,
    )


def _anomalies(row: Mapping[str, Any], idx: int, record: Record) -> list[CoercionAnomaly]:
    found: list[CoercionAnomaly] = []
    for f in _COORD_FIELDS:
        if getattr(record, f) is not None:
            continue
        raw = resolve_field(row, FIELD_ALIASES[f])
        if raw is not None:
            found.append(CoercionAnomaly(row_index=idx, field=f, raw_value=raw))
    return found


def normalize_rows(
    rows: Iterable[Mapping[str, Any]],
    on_anomaly: Callable[[CoercionAnomaly], None] | None = None,
    progress: RowProgress | None = None,
) -> tuple[Record, ...]:
    """Normalize every row in order. No row is dropped.

    Coordinates that are present but unparsable are reported through
    `on_anomaly` and end up as None on the Record.
    """
    records: list[Record] = []
    for idx, row in enumerate(rows):
        record = normalize_row(row, idx)
        if on_anomaly is not None:
            for anomaly in _anomalies(row, idx, record):
                on_anomaly(anomaly)
        records.append(record)
        if progress is not None:
            progress.advance()
    return tuple(records)
