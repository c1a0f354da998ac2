"""Domain models for the dive-log CSV -> Markdown converter.

This package contains the record, document and result types that flow
through the conversion pipeline.
"""

from .conversion_result import ConversionResult
from .dive_record import DiveRecord
from .document import Document

__all__ = [
    # Extraction models
    "DiveRecord",
    # Rendering models
    "Document",
    # Processing models
    "ConversionResult",
]
