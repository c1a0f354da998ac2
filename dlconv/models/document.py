from __future__ import annotations

from dataclasses import dataclass, field

from .dive_record import DiveRecord

"""Document model: everything the Markdown template is bound to."""

__all__ = [
    "Document",
    "DEFAULT_TAGS",
    "DEFAULT_CREATED",
    "DEFAULT_COMMENT",
]

DEFAULT_TAGS: tuple[str, ...] = ("diving", "my")
DEFAULT_CREATED = "2023-04-16T20:36:59.779Z"
DEFAULT_COMMENT = (
    "This document is auto-generated from the master dive log using "
    "https://github.com/cicovic-andrija/dlconv."
)


@dataclass(frozen=True)
class Document:
    """Template data for one rendered dive log.

    ``dives`` is in render order, i.e. already reversed (most recent dive
    first for a chronologically ascending export).
    """
    title: str
    modified_time_utc: str  # RFC3339, seconds precision, 'Z' suffix
    dives: list[DiveRecord] = field(default_factory=list)
    created: str = DEFAULT_CREATED
    comment: str = DEFAULT_COMMENT
    tags: tuple[str, ...] = DEFAULT_TAGS
