from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Row progress display with tqdm (TTY only).

Normalization of a large sheet can take a moment; on an interactive terminal
a single tqdm bar counts rows. In non-TTY environments (CI, pipes) the bar is
disabled to avoid ANSI control sequence spam.
"""

__all__ = [
    "RowProgress",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """True if stdout is a TTY and progress should be displayed."""
    return sys.stdout.isatty()


class RowProgress:
    """Progress tracker for rows normalized during one import."""

    def __init__(self, total_rows: int, *, description: str = "Normalizing rows", enabled: bool = True) -> None:
        """Initialize the tracker.

        Args:
            total_rows: Number of rows that will be normalized
            description: Description for the progress bar
            enabled: Caller switch (config `show_progress`); TTY is still required
        """
        self.total_rows = total_rows
        self.description = description
        self.current_row = 0

        self.enabled = enabled and is_tty_enabled()
        self.pbar: TqdmType[Any] | None
        if self.enabled:
            self.pbar = tqdm(
                total=total_rows,
                desc=description,
                unit="row",
                disable=False,
                leave=False,
                position=0,
                ncols=80,
                ascii=True,
            )
        else:
            self.pbar = None

    def advance(self, count: int = 1) -> None:
        self.current_row += count
        if self.enabled and self.pbar is not None:
            self.pbar.update(count)

    def set_postfix(self, **kwargs: Any) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.set_postfix(**kwargs)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> RowProgress:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
