from __future__ import annotations

from ..models.conversion_result import ConversionResult

"""SUMMARY line rendering for the converter."""


def _format_seconds(seconds: float) -> str:
    if seconds == 0:
        return "0"
    if seconds == int(seconds):
        return str(int(seconds))
    if seconds < 0.01:
        # Avoid scientific notation for very small values
        return f"{seconds:.6f}".rstrip('0').rstrip('.')
    return f"{seconds:.3f}".rstrip('0').rstrip('.')


def render_summary_line(result: ConversionResult) -> str:
    """Render the SUMMARY line for a finished conversion.

    Format:
    SUMMARY dives={dives} rows={rows} output={path} elapsed_sec={elapsed}

    Examples:
        >>> from datetime import datetime, timezone
        >>> from pathlib import Path
        >>> t = datetime(2023, 1, 1, tzinfo=timezone.utc)
        >>> result = ConversionResult(
        ...     input_path=Path("log.csv"), output_path=Path("dive-log.md"),
        ...     rows_scanned=46, dives=2, start_time=t, end_time=t,
        ...     elapsed_seconds=0.0,
        ... )
        >>> render_summary_line(result)
        'SUMMARY dives=2 rows=46 output=dive-log.md elapsed_sec=0'
    """
    return (
        f"SUMMARY dives={result.dives} "
        f"rows={result.rows_scanned} "
        f"output={result.output_path} "
        f"elapsed_sec={_format_seconds(result.elapsed_seconds)}"
    )
