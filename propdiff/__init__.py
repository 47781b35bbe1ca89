"""propdiff - Spring configuration metadata deprecation collector."""

__version__ = "0.1.0"
