from __future__ import annotations

from dataclasses import dataclass, fields

"""DiveRecord model for the dive-log converter.

A DiveRecord holds one dive decoded from a row block of the export. Every value
is the verbatim cell string from the CSV; nothing is trimmed, parsed or coerced.
"""

__all__ = [
    "DiveRecord",
    "DIVE_FIELDS",
]


@dataclass(frozen=True)
class DiveRecord:
    """One dive as exported by the dive-log tool.

    The cardinal is the ordinal label of the dive in the source log. The
    deco_alg_p_factor is kept on the record but is not part of the rendered
    document.
    """
    cardinal: str
    site: str
    date: str
    time: str
    duration: str
    max_depth: str
    avg_depth: str
    tank_pressure_start: str
    tank_pressure_end: str
    decompression_dive: str
    gas: str
    o2: str
    cns: str
    altitude: str
    entry: str
    operator: str
    suit_type: str
    suit_thickness: str
    weights: str
    tank_type: str
    tank_volume: str
    computer: str
    deco_alg_p_factor: str
    weather: str
    air_temp: str
    water_type: str
    water_min_temp: str
    water_visibility: str
    drift_dive: str

    @property
    def anchor(self) -> str:
        """Link target of the dive section (``no-{cardinal}``)."""
        return f"no-{self.cardinal}"

    @property
    def heading(self) -> str:
        return f"No. {self.cardinal}: {self.site}, {self.date}."


# Field names in declaration order (cardinal first)
DIVE_FIELDS: tuple[str, ...] = tuple(f.name for f in fields(DiveRecord))
