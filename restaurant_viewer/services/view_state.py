from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from pathlib import Path

from ..excel.decoder import IMPORT_FAILED_MESSAGE, ImportDecodeError, read_payload
from ..logging.issue_log import IssueLogBuffer
from ..models.camera import CameraInstruction, Region
from ..models.config_models import MapSettings
from ..models.import_issue import COORDINATE_COERCED, DECODE_FAILED, ImportIssue
from ..models.import_outcome import ImportOutcome
from ..models.record import CoercionAnomaly, Record
from .geo import frame_camera, geocoded
from .importer import load_records
from .presenters import NO_MAPPABLE_ROWS_NOTICE, Marker, markers
from .search import filter_records

"""View state and the import boundary.

ViewState holds the only two inputs (records, query); the list and map views
are recomputed from them on every call and never patched in place.

ViewerSession owns the current ViewState across imports. An import either
replaces the whole record collection in one assignment or leaves it alone.
"""

__all__ = [
    "MapView",
    "ViewState",
    "ViewerSession",
]

logger = logging.getLogger(__name__)

PAYLOAD_SOURCE = "<payload>"


@dataclass(frozen=True)
class MapView:
    records: tuple[Record, ...]
    markers: tuple[Marker, ...]
    camera: CameraInstruction
    region: Region  # static region shown while the camera has nothing to frame
    notice: str | None = None


@dataclass(frozen=True)
class ViewState:
    records: tuple[Record, ...] = field(default_factory=tuple)
    query: str = ""

    def with_records(self, records: tuple[Record, ...]) -> ViewState:
        return replace(self, records=tuple(records))

    def with_query(self, query: str) -> ViewState:
        return replace(self, query=query)

    def list_view(self) -> tuple[Record, ...]:
        return tuple(filter_records(self.records, self.query))

    def map_view(self, settings: MapSettings | None = None) -> MapView:
        settings = settings or MapSettings()
        # search runs on the geocoded subset; map rendering needs coordinates first
        visible = tuple(filter_records(geocoded(self.records), self.query))
        camera = frame_camera(visible, zoom=settings.center_zoom, padding=settings.edge_padding)
        return MapView(
            records=visible,
            markers=markers(visible),
            camera=camera,
            region=settings.default_region,
            notice=NO_MAPPABLE_ROWS_NOTICE if camera.is_empty else None,
        )


class ViewerSession:
    """Session-scoped holder of the current ViewState.

    Records live only as long as the session. A failed import keeps the
    previously loaded records and exposes a static advisory in `error`.
    """

    def __init__(
        self,
        settings: MapSettings | None = None,
        *,
        issue_log: IssueLogBuffer | None = None,
        show_progress: bool = False,
    ) -> None:
        self.settings = settings or MapSettings()
        self.issue_log = issue_log
        self.show_progress = show_progress
        self.error: str | None = None
        self._state = ViewState()

    @property
    def state(self) -> ViewState:
        return self._state

    def set_query(self, query: str) -> ViewState:
        self._state = self._state.with_query(query)
        return self._state

    def list_view(self) -> tuple[Record, ...]:
        return self._state.list_view()

    def map_view(self) -> MapView:
        return self._state.map_view(self.settings)

    async def import_payload(
        self, payload: bytes | str, format_hint: str | None = None, *, source: str = PAYLOAD_SOURCE
    ) -> ImportOutcome:
        """Import a workbook payload, replacing the records on success."""
        self.error = None
        anomalies: list[CoercionAnomaly] = []
        try:
            records = await load_records(
                payload,
                format_hint,
                on_anomaly=anomalies.append,
                show_progress=self.show_progress,
            )
        except ImportDecodeError as e:
            logger.error(f"import failed: {source}: {e}")
            self._record_issue(ImportIssue.create(source, -1, DECODE_FAILED, str(e)))
            self.error = IMPORT_FAILED_MESSAGE
            return ImportOutcome(succeeded=False, message=IMPORT_FAILED_MESSAGE)

        # single assignment: last completed import wins, never a torn collection
        self._state = self._state.with_records(records)
        for anomaly in anomalies:
            logger.warning(f"row {anomaly.row_index}: {anomaly.field}={anomaly.raw_value!r} is not a number")
            self._record_issue(
                ImportIssue.create(
                    source,
                    anomaly.row_index,
                    COORDINATE_COERCED,
                    f"{anomaly.field}={anomaly.raw_value!r} coerced to null",
                )
            )
        logger.info(f"imported {len(records)} records from {source}")
        return ImportOutcome(succeeded=True, record_count=len(records), anomalies=tuple(anomalies))

    async def import_path(self, path: Path, format_hint: str | None = None) -> ImportOutcome:
        """Read a workbook from disk and import it.

        The hint defaults to the file suffix.
        """
        self.error = None
        try:
            payload, suffix_hint = read_payload(path)
        except ImportDecodeError as e:
            self.error = IMPORT_FAILED_MESSAGE
            logger.error(f"import failed: {path.name}: {e}")
            self._record_issue(ImportIssue.create(path.name, -1, DECODE_FAILED, str(e)))
            return ImportOutcome(succeeded=False, message=IMPORT_FAILED_MESSAGE)
        return await self.import_payload(payload, format_hint or suffix_hint, source=path.name)

    def _record_issue(self, issue: ImportIssue) -> None:
        if self.issue_log is not None:
            self.issue_log.append(issue)
