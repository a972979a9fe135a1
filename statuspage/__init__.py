"""Command-line client for a hosted status page."""

__version__ = "0.1.0"
