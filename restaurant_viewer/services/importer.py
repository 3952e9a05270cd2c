from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..excel.decoder import decode_spreadsheet
from ..models.record import CoercionAnomaly, Record
from .normalizer import normalize_rows
from .progress import RowProgress

"""Import task: payload -> decode -> normalize.

Decoding and normalization are blocking (pandas / openpyxl / xlrd), so the
whole chain runs in a worker thread and the caller simply awaits the result.
Either a complete record tuple comes back or ImportDecodeError propagates;
nothing is committed here.
"""

__all__ = [
    "build_records",
    "load_records",
]

logger = logging.getLogger(__name__)


def build_records(
    payload: bytes | str,
    format_hint: str | None = None,
    *,
    on_anomaly: Callable[[CoercionAnomaly], None] | None = None,
    show_progress: bool = False,
) -> tuple[Record, ...]:
    """Synchronous import chain. Raises ImportDecodeError on bad payloads."""
    rows = decode_spreadsheet(payload, format_hint)
    with RowProgress(len(rows), enabled=show_progress) as progress:
        records = normalize_rows(rows, on_anomaly=on_anomaly, progress=progress)
    geocoded_count = sum(1 for r in records if r.is_geocoded)
    logger.debug(f"normalized rows={len(records)} geocoded={geocoded_count}")
    return records


async def load_records(
    payload: bytes | str,
    format_hint: str | None = None,
    *,
    on_anomaly: Callable[[CoercionAnomaly], None] | None = None,
    show_progress: bool = False,
) -> tuple[Record, ...]:
    """Run the import chain off the event loop."""
    return await asyncio.to_thread(
        build_records,
        payload,
        format_hint,
        on_anomaly=on_anomaly,
        show_progress=show_progress,
    )
