from __future__ import annotations

from datetime import UTC, datetime
from pathlib import Path

from restaurant_viewer.models.import_issue import ImportIssue

"""Issue log buffering.

- JSON Lines with a fixed schema (no extra keys)
- one `logs/issues-YYYYMMDD-HHMMSS.log` (UTC) per run, created on first flush
- nothing is written when no issue was recorded
"""

__all__ = [
    "ImportIssue",
    "IssueLogBuffer",
]

LOGS_DIR = Path("./logs")
TIMESTAMP_FMT = "%Y%m%d-%H%M%S"


class IssueLogBuffer:
    """In-memory buffer for import issues. Flush writes JSON Lines.

    The file path is fixed on first flush; appends after that go to the same
    file. Single-threaded use is assumed.
    """
    def __init__(self, logs_dir: Path | None = None) -> None:
        self._records: list[ImportIssue] = []
        self._file_path: Path | None = None
        self._logs_dir = logs_dir or LOGS_DIR

    @property
    def file_path(self) -> Path:
        if self._file_path is None:
            self._logs_dir.mkdir(parents=True, exist_ok=True)
            stamp = datetime.now(UTC).strftime(TIMESTAMP_FMT)
            self._file_path = self._logs_dir / f"issues-{stamp}.log"
        return self._file_path

    @property
    def records(self) -> tuple[ImportIssue, ...]:
        return tuple(self._records)

    def append(self, record: ImportIssue) -> None:
        self._records.append(record)

    def __len__(self) -> int:  # pragma: no cover (trivial)
        return len(self._records)

    def flush(self) -> Path | None:
        if not self._records:
            return None
        fp = self.file_path
        with fp.open("a", encoding="utf-8") as f:
            for r in self._records:
                f.write(r.to_json_line() + "\n")
        self._records.clear()
        return fp
