"""Command-line interface of the dive-log converter."""

from .app import EXIT_FATAL, EXIT_SUCCESS, main

__all__ = [
    "main",
    "EXIT_SUCCESS",
    "EXIT_FATAL",
]
