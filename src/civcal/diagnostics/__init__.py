"""Diagnostics package.

Light-weight command line checks built on the public API.
"""

__all__ = ["pretty_month", "round_trip"]
