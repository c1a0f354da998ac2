from __future__ import annotations

import logging
from collections.abc import MutableSequence
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

from dlconv.errors import ConversionError
from dlconv.models.dive_record import DiveRecord
from dlconv.models.document import Document

"""Markdown rendering of the dive log.

Output layout (front matter, index, one table per dive) is fixed; see the
*_TEMPLATE constants. Dives are rendered most recent first, so the extracted
list is reversed before it is bound to the Document.
"""

__all__ = [
    "TEMPLATE_NAME",
    "OUTPUT_FILE",
    "DRY_SUIT",
    "RenderError",
    "OutputWriteError",
    "reverse_in_place",
    "format_rfc3339",
    "build_document",
    "render_markdown",
    "write_document",
]

logger = logging.getLogger(__name__)

TEMPLATE_NAME = "dive-log"
OUTPUT_FILE = f"{TEMPLATE_NAME}.md"
RFC3339_FMT = "%Y-%m-%dT%H:%M:%SZ"
DRY_SUIT = "Dry suit"

FRONT_MATTER_TEMPLATE = """---
tags: [{tags}]
title: {title}
comment: '{comment}'
created: '{created}'
modified: '{modified}'
---

# {title}

## Index
"""

INDEX_ENTRY_TEMPLATE = "\n- **[{heading}](#{anchor})**"

DIVE_DATA_HEADER = "\n\n## Dive Data\n"

DIVE_SECTION_TEMPLATE = """
### <a id="{anchor}"></a>{heading}

| Parameter | Value |
| --------- | ----- |
| Time in | {time} |
| Duration | {duration} min |
| Max. depth | {max_depth} m |
| Avg. depth | {avg_depth} m |
| Tank pressure | {tank_pressure_start} bar - {tank_pressure_end} bar |
| Gas | {gas} {o2} % |
| Decompression | {decompression_dive} |
| CNS | {cns} % |
| Altitude | {altitude} m |
| Entry | {entry} |
| Operator | {operator} |
| Suit | {suit} |
| Weights | {weights} kg |
| Tank | {tank_type} {tank_volume} litres |
| Computer | {computer} |
| Weather | {weather} |
| Air temp. | {air_temp} °C |
| Water | {water_type} |
| Water temp. | {water_min_temp} °C |
| Visibility | {water_visibility} |
| Drift | {drift_dive} |
"""


class RenderError(ConversionError):
    """Raised when the document template cannot be rendered."""


class OutputWriteError(ConversionError):
    """Raised when the output file cannot be created or written."""


def reverse_in_place(items: MutableSequence[Any]) -> None:
    """Reverse ``items`` in place by swapping from both ends toward the centre."""
    i, j = 0, len(items) - 1
    while i < j:
        items[i], items[j] = items[j], items[i]
        i += 1
        j -= 1


def format_rfc3339(moment: datetime | None = None) -> str:
    """Format ``moment`` (default: now) in UTC as e.g. 2023-04-16T20:36:59Z.

    Naive datetimes are taken as local time, like datetime.astimezone() does.
    """
    if moment is None:
        moment = datetime.now(UTC)
    return moment.astimezone(UTC).strftime(RFC3339_FMT)


def build_document(
    dives: list[DiveRecord],
    title: str,
    *,
    now: datetime | None = None,
    **front_matter: Any,
) -> Document:
    """Reverse ``dives`` in place and bind them with the metadata into a Document.

    Extra keyword arguments (created, comment, tags) override the front
    matter defaults of Document.
    """
    reverse_in_place(dives)
    return Document(
        title=title,
        modified_time_utc=format_rfc3339(now),
        dives=dives,
        **front_matter,
    )


def _suit(dive: DiveRecord) -> str:
    # Dry suits have no meaningful thickness
    if dive.suit_type == DRY_SUIT:
        return dive.suit_type
    return f"{dive.suit_type} {dive.suit_thickness} mm"


def _render_section(dive: DiveRecord) -> str:
    values = {k: v for k, v in vars(dive).items() if k != "deco_alg_p_factor"}
    return DIVE_SECTION_TEMPLATE.format(
        anchor=dive.anchor,
        heading=dive.heading,
        suit=_suit(dive),
        **values,
    )


def render_markdown(document: Document) -> str:
    """Render the whole Markdown document for ``document``."""
    try:
        parts = [
            FRONT_MATTER_TEMPLATE.format(
                tags=", ".join(document.tags),
                title=document.title,
                comment=document.comment,
                created=document.created,
                modified=document.modified_time_utc,
            )
        ]
        parts.extend(
            INDEX_ENTRY_TEMPLATE.format(heading=d.heading, anchor=d.anchor) for d in document.dives
        )
        parts.append(DIVE_DATA_HEADER)
        parts.extend(_render_section(d) for d in document.dives)
        parts.append("\n")
    except (KeyError, IndexError, ValueError, AttributeError) as e:
        raise RenderError(f"failed to render template {TEMPLATE_NAME}: {e}") from e
    return "".join(parts)


def write_document(path: Path, text: str) -> Path:
    """Write ``text`` to ``path`` (UTF-8), replacing any existing content.

    Raw input bytes carried as surrogates are written back unchanged.
    """
    try:
        with path.open("w", encoding="utf-8", errors="surrogateescape") as f:
            f.write(text)
    except OSError as e:
        raise OutputWriteError(f"failed to open output file {path} for writing: {e}") from e
    logger.debug(f"wrote {len(text)} characters to {path}")
    return path
