from __future__ import annotations

import sys
from typing import Any

from tqdm import tqdm
from tqdm.std import tqdm as TqdmType

"""Progress display with tqdm (TTY only).

A single bar counts the CSV rows consumed by the extractor. In non-TTY
environments (CI, redirected output) the bar is disabled so that no ANSI
control sequences end up in captured logs.
"""

__all__ = [
    "ProgressTracker",
    "is_tty_enabled",
]


def is_tty_enabled() -> bool:
    """Return True when stdout is a TTY and progress should be displayed."""
    return sys.stdout.isatty()


class ProgressTracker:
    """Row progress bar for the block scan.

    Usable as the ``on_advance`` callback of extract_dives via ``advance``.
    """

    def __init__(self, total_rows: int, *, description: str = "Scanning rows") -> None:
        self.total_rows = total_rows
        self.description = description
        self.rows_done = 0
        self.dives = 0

        self.enabled = is_tty_enabled()
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

    def advance(self, rows: int) -> None:
        """Record ``rows`` consumed rows; a block-sized step counts as one dive."""
        self.rows_done += rows
        if rows > 1:
            self.dives += 1
        if self.enabled and self.pbar is not None:
            self.pbar.update(rows)
            if rows > 1:
                self.pbar.set_postfix(dives=self.dives)

    def close(self) -> None:
        if self.enabled and self.pbar is not None:
            self.pbar.close()
            self.pbar = None

    def __enter__(self) -> ProgressTracker:
        return self

    def __exit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        self.close()
