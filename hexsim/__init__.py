"""Per-tick simulation core for a hex-grid tactical game."""

__version__ = "0.1.0"
