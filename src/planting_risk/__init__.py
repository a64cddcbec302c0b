"""Rainy Day: flood-risk assessment for smart planting decisions."""

__version__ = "0.1.0"
