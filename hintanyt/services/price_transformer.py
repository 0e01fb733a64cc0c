"""
Price transformation - sub-unit conversion and summary statistics.
"""

from operator import itemgetter
from typing import List

from hintanyt.exceptions import IncompleteSeriesError
from hintanyt.models.price import HOURS_PER_DAY, PriceSeries, PriceSummary, PriceWindow

PRICE_UNIT = "c/kWh"


def to_sub_units(value: float) -> int:
    """
    Scale a fractional price by 100 and truncate toward zero.

    Works on the float product as stored, so 0.29 becomes 28.

    Examples:
        0.459 -> 45
        5.03 -> 503
        -0.459 -> -45
    """
    return int(value * 100)


def summarize(series: PriceSeries, hour: int) -> PriceSummary:
    """
    Current, cheapest and most expensive hour of a series.

    Args:
        series: Hourly prices, expected to hold all 24 hours.
        hour: Current wall-clock hour (0-23), used as an index into the series.

    Returns:
        PriceSummary. Ties for cheapest and most expensive go to the
        earliest index.

    Raises:
        ValueError: If hour is not a valid hour of the day.
        IncompleteSeriesError: If the series has no entry at index hour.
    """
    if not 0 <= hour < HOURS_PER_DAY:
        raise ValueError(f"Hour must be between 0 and {HOURS_PER_DAY - 1}, got {hour}")

    prices = series.prices()
    if hour >= len(prices):
        raise IncompleteSeriesError(
            f"No price for hour {hour}: series has only {len(prices)} of {HOURS_PER_DAY} hours"
        )

    # min and max keep the first of equal elements
    cheapest_index, cheapest_price = min(enumerate(prices), key=itemgetter(1))
    expensive_index, expensive_price = max(enumerate(prices), key=itemgetter(1))

    return PriceSummary(
        hour=hour,
        current_price=prices[hour],
        cheapest=PriceWindow(start_index=cheapest_index, price=cheapest_price),
        most_expensive=PriceWindow(start_index=expensive_index, price=expensive_price),
    )


def format_summary(summary: PriceSummary, unit: str = PRICE_UNIT) -> List[str]:
    """Summary lines as printed under the dashboard."""
    return [
        f"Hinta nyt: {summary.current_price} {unit}",
        f"Halvin tunti {summary.cheapest.label}: {summary.cheapest.price} {unit}",
        f"Kallein tunti {summary.most_expensive.label}: {summary.most_expensive.price} {unit}",
    ]
