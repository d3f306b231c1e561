"""A terminal golf game drawn in ASCII art, with its ball-flight model and drawing helpers."""

__version__ = "1.0.0"