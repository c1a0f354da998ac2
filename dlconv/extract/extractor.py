from __future__ import annotations

import logging
from collections.abc import Callable, Mapping, Sequence

from dlconv.errors import ConversionError
from dlconv.models.dive_record import DiveRecord

from .layout import BLOCK_SPAN, DIVE_LAYOUT, SENTINEL, Coordinate

"""Record extraction: CSV rows -> DiveRecord list.

Scans the rows with a cursor. A row carrying the sentinel labels starts a
block; the whole block is decoded with DIVE_LAYOUT and skipped. Any other row
is skipped on its own. Input is trusted: a block whose coordinates fall
outside the data aborts the run instead of yielding a partial record.
"""

__all__ = [
    "MalformedBlockError",
    "extract_dives",
    "is_block_start",
]

logger = logging.getLogger(__name__)


class MalformedBlockError(ConversionError):
    """Raised when a coordinate points outside the available rows/columns."""


def _cell(rows: Sequence[Sequence[str]], start: int, name: str, coord: Coordinate) -> str:
    row_index = start + coord.row
    if row_index >= len(rows):
        raise MalformedBlockError(
            f"block at row {start}: field '{name}' needs row {row_index}, "
            f"input has {len(rows)} rows"
        )
    row = rows[row_index]
    if coord.column >= len(row):
        raise MalformedBlockError(
            f"block at row {start}: field '{name}' needs column {coord.column} "
            f"of row {row_index}, row has {len(row)} cells"
        )
    return row[coord.column]


def is_block_start(rows: Sequence[Sequence[str]], index: int) -> bool:
    """Return True when rows[index] carries every sentinel label."""
    return all(
        _cell(rows, index, f"sentinel {label!r}", coord) == label
        for label, coord in SENTINEL.items()
    )


def decode_block(
    rows: Sequence[Sequence[str]],
    start: int,
    layout: Mapping[str, Coordinate] = DIVE_LAYOUT,
) -> DiveRecord:
    values = {name: _cell(rows, start, name, coord) for name, coord in layout.items()}
    return DiveRecord(**values)


def extract_dives(
    rows: Sequence[Sequence[str]],
    on_advance: Callable[[int], None] | None = None,
) -> list[DiveRecord]:
    """Decode every row block in ``rows``, in input order.

    Args:
        rows: CSV rows as lists of cell strings
        on_advance: optional callback receiving the number of rows consumed
            at each cursor step (progress display)

    Returns:
        One DiveRecord per recognised block

    Raises:
        MalformedBlockError: a row is too short for the sentinel test or a
            block runs past the end of the input
    """
    dives: list[DiveRecord] = []
    i = 0
    while i < len(rows):
        step = 1
        if is_block_start(rows, i):
            dive = decode_block(rows, i)
            logger.debug(f"row {i}: dive no. {dive.cardinal} ({dive.site}, {dive.date})")
            dives.append(dive)
            step = BLOCK_SPAN
        if on_advance is not None:
            on_advance(min(step, len(rows) - i))
        i += step
    return dives
