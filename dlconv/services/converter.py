from __future__ import annotations

import logging
from datetime import UTC, datetime
from pathlib import Path

from ..config.loader import ConvertConfig
from ..extract.extractor import extract_dives
from ..models.conversion_result import ConversionResult
from ..reader.csv_reader import read_csv_rows
from ..render.markdown import build_document, render_markdown, write_document
from .progress import ProgressTracker

logger = logging.getLogger(__name__)

"""Conversion service: CSV export -> Markdown dive log.

Runs the pipeline stages in order (read, extract, reverse + bind, render,
write). Each stage raises a ConversionError subclass on failure; nothing is
caught here, so the first failure aborts the run before any output is written
(or, for a write failure, while the output is being written).
"""


def convert(
    input_path: Path,
    config: ConvertConfig | None = None,
    *,
    now: datetime | None = None,
) -> ConversionResult:
    """Convert ``input_path`` and write the document to ``config.output_path``.

    Args:
        input_path: CSV export of the dive log
        config: title / output / front matter settings (defaults if None)
        now: generation time override (tests); defaults to the current time

    Returns:
        ConversionResult with row/dive counts and timing
    """
    cfg = config or ConvertConfig()
    start_time = datetime.now(UTC)

    rows = read_csv_rows(input_path)
    logger.info(f"read {len(rows)} rows from {input_path}")

    with ProgressTracker(len(rows)) as progress:
        dives = extract_dives(rows, on_advance=progress.advance)
    logger.info(f"extracted {len(dives)} dives")

    document = build_document(
        dives,
        cfg.title,
        now=now,
        created=cfg.created,
        comment=cfg.comment,
        tags=cfg.tags,
    )
    logger.debug(f"document modified={document.modified_time_utc}")
    text = render_markdown(document)

    output_path = write_document(cfg.output_path, text)
    logger.info(f"wrote {output_path}")

    end_time = datetime.now(UTC)
    return ConversionResult(
        input_path=input_path,
        output_path=output_path,
        rows_scanned=len(rows),
        dives=len(dives),
        start_time=start_time,
        end_time=end_time,
        elapsed_seconds=(end_time - start_time).total_seconds(),
    )
