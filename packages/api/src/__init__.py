# This project was developed with assistance from AI tools.
"""Bidding checklist API."""

__version__ = "0.1.0"
