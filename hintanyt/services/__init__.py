"""
Services package for the price dashboard.
Contains the price fetching service and the price transformations.
"""

from .price_service import PriceService
from .price_transformer import format_summary, summarize, to_sub_units

__all__ = [
    "PriceService",
    "format_summary",
    "summarize",
    "to_sub_units",
]
