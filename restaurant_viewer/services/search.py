from __future__ import annotations

from collections.abc import Sequence

from ..models.record import Record

"""Free-text search over the loaded Records.

A record matches when at least one searchable field contains the query as a
case-insensitive substring. No tokenizing, no fuzzy matching.
"""

__all__ = [
    "SEARCHABLE_FIELDS",
    "normalize_query",
    "matches",
    "filter_records",
]

SEARCHABLE_FIELDS = ("name", "city", "cuisine", "state", "country")


def normalize_query(query: str | None) -> str:
    """Trimmed, case-folded needle; "" means no filter."""
    return (query or "").strip().casefold()


def matches(record: Record, needle: str) -> bool:
    """True if any searchable field contains the (already folded) needle."""
    for field in SEARCHABLE_FIELDS:
        value = getattr(record, field, None) or ""
        if needle in str(value).casefold():
            return True
    return False


def filter_records(records: Sequence[Record], query: str | None) -> Sequence[Record]:
    """Return the records matching `query`, original order preserved.

    An empty or whitespace-only query returns `records` itself.
    """
    needle = normalize_query(query)
    if not needle:
        return records
    return tuple(r for r in records if matches(r, needle))
