"""Crop growth stage tracking."""

__version__ = "1.0.0"
