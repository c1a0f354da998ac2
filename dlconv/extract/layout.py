from __future__ import annotations

from typing import NamedTuple

"""Fixed row-block layout of the dive-log CSV export.

One dive occupies BLOCK_SPAN consecutive rows. The first row of a block is
recognised by the "Site" and "Date" labels at fixed columns; every field is
read from a (row offset, column) coordinate relative to that first row.

The layout belongs to the export tool and is not self-describing, so it is
kept here as a fixed table rather than derived from header cells at runtime.
"""

__all__ = [
    "Coordinate",
    "BLOCK_SPAN",
    "SENTINEL",
    "DIVE_LAYOUT",
]


class Coordinate(NamedTuple):
    row: int  # offset from the block's first row
    column: int


BLOCK_SPAN = 23

# label -> position in the block's first row
SENTINEL: dict[str, Coordinate] = {
    "Site": Coordinate(0, 4),
    "Date": Coordinate(0, 9),
}

# DiveRecord field -> coordinate, in DiveRecord field order
DIVE_LAYOUT: dict[str, Coordinate] = {
    "cardinal": Coordinate(0, 1),
    "site": Coordinate(1, 4),
    "date": Coordinate(1, 9),
    "time": Coordinate(1, 12),
    "duration": Coordinate(4, 4),
    "max_depth": Coordinate(5, 4),
    "avg_depth": Coordinate(6, 4),
    "tank_pressure_start": Coordinate(7, 4),
    "tank_pressure_end": Coordinate(8, 4),
    "decompression_dive": Coordinate(9, 4),
    "gas": Coordinate(10, 4),
    "o2": Coordinate(11, 4),
    "cns": Coordinate(12, 4),
    "altitude": Coordinate(13, 4),
    "entry": Coordinate(14, 4),
    "operator": Coordinate(17, 1),
    "suit_type": Coordinate(4, 11),
    "suit_thickness": Coordinate(5, 11),
    "weights": Coordinate(6, 11),
    "tank_type": Coordinate(7, 11),
    "tank_volume": Coordinate(8, 11),
    "computer": Coordinate(9, 11),
    "deco_alg_p_factor": Coordinate(10, 11),
    "weather": Coordinate(13, 11),
    "air_temp": Coordinate(14, 11),
    "water_type": Coordinate(17, 11),
    "water_min_temp": Coordinate(18, 11),
    "water_visibility": Coordinate(19, 11),
    "drift_dive": Coordinate(20, 11),
}
