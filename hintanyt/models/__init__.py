"""
Data models package for the price dashboard.
Contains Pydantic models for stored price documents and derived series.
"""

from .price import (
    HOURS_PER_DAY,
    HourlyPrice,
    Placeholder,
    PriceDocument,
    PriceMap,
    PriceSeries,
    PriceSummary,
    PriceWindow,
)

__all__ = [
    "HOURS_PER_DAY",
    "HourlyPrice",
    "Placeholder",
    "PriceDocument",
    "PriceMap",
    "PriceSeries",
    "PriceSummary",
    "PriceWindow",
]
