from __future__ import annotations

import json
from dataclasses import asdict, dataclass
from datetime import UTC, datetime

"""ImportIssue model for the JSON Lines issue log.

Supports row=-1 as a sentinel for file-level issues (e.g. the payload could
not be decoded at all) where no specific row applies.
"""

__all__ = [
    "ImportIssue",
    "DECODE_FAILED",
    "COORDINATE_COERCED",
]

DECODE_FAILED = "DECODE_FAILED"
COORDINATE_COERCED = "COORDINATE_COERCED"


@dataclass(frozen=True)
class ImportIssue:
    """Structured issue record for JSON Lines logging.

    Attributes:
        timestamp: ISO8601 UTC timestamp with 'Z' suffix
        file: Source file name (or "<payload>" for in-memory imports)
        row: 0-based data row position, -1 for file-level issues
        issue_type: Classification in UPPER_SNAKE_CASE format
        message: Human-readable description
    """
    timestamp: str  # ISO8601 UTC
    file: str
    row: int
    issue_type: str  # UPPER_SNAKE
    message: str

    @staticmethod
    def create(file: str, row: int, issue_type: str, message: str) -> ImportIssue:
        """Create a new ImportIssue stamped with the current UTC time."""
        ts = datetime.now(UTC).isoformat().replace("+00:00", "Z")
        return ImportIssue(
            timestamp=ts,
            file=file,
            row=row,
            issue_type=issue_type,
            message=message,
        )

    def to_json_line(self) -> str:
        # fixed key set: dataclass -> dict -> json
        return json.dumps(asdict(self), ensure_ascii=False)
