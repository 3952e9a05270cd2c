from __future__ import annotations

from dataclasses import dataclass, field

from .record import CoercionAnomaly


@dataclass(frozen=True)
class ImportOutcome:
    """Result of one import attempt as seen by the presentation layer."""
    succeeded: bool
    record_count: int = 0
    message: str | None = None  # static advisory text on failure
    anomalies: tuple[CoercionAnomaly, ...] = field(default_factory=tuple)
