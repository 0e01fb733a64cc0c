"""
Hinta nyt - hourly electricity price terminal dashboard

Reads the day's hourly electricity prices from a MongoDB collection and
draws them once in the terminal: a banner, a bar chart of the hourly prices
and a short summary of the current, cheapest and most expensive hour.

Main components:
- Price store for reading raw price documents
- Price service for decoding, filtering and extracting hourly prices
- Price transformer for sub-unit conversion and summary statistics
- Dashboard renderer built on rich
- Domain exceptions for clear error handling
"""

__version__ = "1.0.0"
