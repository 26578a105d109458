"""devlog — a small personal developer journal."""

__version__ = "0.1.0"
