"""
Database package for the price dashboard.
Contains the MongoDB price store.
"""

from .service import PriceStore

__all__ = [
    "PriceStore",
]
