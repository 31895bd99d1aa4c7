"""Flare TVL Dashboard."""

__version__ = "0.1.0"
