"""Automatic audio segmentation into ordered time tiers."""

__version__ = "0.1.0"
