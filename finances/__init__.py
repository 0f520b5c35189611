"""Multi-year savings account projections."""

__version__ = "0.1.0"
