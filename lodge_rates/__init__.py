"""Lodge Rates: public rates API for a single lodging property."""

__version__ = "1.0.0"
