from __future__ import annotations

"""Exception base for the conversion pipeline.

Every stage raises a subclass of ConversionError so the CLI can report any
pipeline failure with a single handler. Configuration problems are reported
separately via dlconv.config.loader.ConfigError.
"""

__all__ = [
    "ConversionError",
]


class ConversionError(Exception):
    """Base exception for fatal conversion errors."""
    pass
