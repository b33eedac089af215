"""Model catalog summary generator."""

__version__ = "0.1.0"
