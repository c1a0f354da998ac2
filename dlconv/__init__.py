"""dlconv: convert a dive-log CSV export into a Markdown dive log."""

__version__ = "0.1.0"
