from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

"""Conversion result model.

Aggregated metrics of a single conversion run, consumed by the SUMMARY line
renderer in dlconv.services.summary.
"""


@dataclass(frozen=True)
class ConversionResult:
    """Outcome of converting one CSV export into a Markdown document."""
    input_path: Path  # CSV export that was read
    output_path: Path  # Markdown document that was written
    rows_scanned: int  # CSV rows after blank-line skipping
    dives: int  # Extracted dive records
    start_time: datetime  # Run start (UTC)
    end_time: datetime  # Run end (UTC)
    elapsed_seconds: float  # end - start
