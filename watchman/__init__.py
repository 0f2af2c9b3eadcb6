"""Building blocks for sanctions list screening: name preparation, result tracking and search helpers."""

__version__ = "0.1.0"