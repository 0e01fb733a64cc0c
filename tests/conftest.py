"""
Test configuration and fixtures for the price dashboard tests.
Contains shared fixtures and stored-document builders.
"""

from io import StringIO
from typing import Any, Dict, Iterable, List, Optional
from unittest.mock import AsyncMock, MagicMock

import pytest
import structlog
from rich.console import Console

from hintanyt.config import Settings
from hintanyt.models.price import HourlyPrice, PriceSeries

TARGET_YEAR = "2025"

# Fractional prices (c/kWh) for a full day; sub-unit values are
# [89, 503, 314, 55, 27, 27, 26, 43, 6, 54, 12, 8, 5, 0, 0, 0, 0, 0, 38, 17, 0, 0, 0, 1]
DAY_PRICES = [
    0.89, 5.03, 3.14, 0.55, 0.27, 0.27, 0.26, 0.43, 0.06, 0.54, 0.12, 0.08,
    0.05, 0, 0, 0, 0, 0, 0.38, 0.17, 0, 0, 0, 0.01,
]

DAY_SUB_UNITS = [89, 503, 314, 55, 27, 27, 26, 43, 6, 54, 12, 8, 5, 0, 0, 0, 0, 0, 38, 17, 0, 0, 0, 1]


def make_raw_document(
    prices: Optional[List[float]] = None,
    year: str = TARGET_YEAR,
    placeholders: Iterable[int] = (),
    document_id: Any = None,
) -> Dict[str, Any]:
    """
    Build a stored price document the way the collection holds it.

    Hours listed in placeholders get the integer placeholder variant instead
    of a year->price map.
    """
    prices = DAY_PRICES if prices is None else prices
    skipped = set(placeholders)
    document: Dict[str, Any] = {"_id": document_id}
    for hour, price in enumerate(prices):
        key = f"klo {hour:02d}"
        if hour in skipped:
            document[key] = 0
        else:
            document[key] = {"2024": 9.99, year: price}
    return document


class FakeCursor:
    """Async iterable standing in for a pymongo AsyncCursor."""

    def __init__(self, documents: List[Dict[str, Any]], error: Optional[Exception] = None):
        self._documents = list(documents)
        self._error = error

    def __aiter__(self):
        return self

    async def __anext__(self):
        if self._documents:
            return self._documents.pop(0)
        if self._error is not None:
            raise self._error
        raise StopAsyncIteration


@pytest.fixture(autouse=True)
def reset_structlog():
    """
    Undo logging configuration done by entry points under test.
    """
    yield
    structlog.reset_defaults()


@pytest.fixture
def settings() -> Settings:
    """
    Settings with a fixed secret and target year, ignoring any local .env file.
    """
    return Settings(api_key="test-secret", target_year=TARGET_YEAR, _env_file=None)


@pytest.fixture
def positional_settings() -> Settings:
    return Settings(api_key="test-secret", target_year=TARGET_YEAR, record_filter="positional", _env_file=None)


@pytest.fixture
def day_series() -> PriceSeries:
    """
    Full 24-hour series of sub-unit prices.
    """
    return PriceSeries([
        HourlyPrice(hour=f"{hour:02d}", price=price)
        for hour, price in enumerate(DAY_SUB_UNITS)
    ])


@pytest.fixture
def mock_store():
    """
    Create a mock price store for testing.
    """
    store = MagicMock()
    store.fetch_documents = AsyncMock(return_value=[])
    store.close = AsyncMock()
    return store


@pytest.fixture
def console_factory():
    """
    Build non-terminal rich consoles that record into a StringIO.
    """
    def _factory(width: int = 120, height: int = 40) -> Console:
        return Console(file=StringIO(), width=width, height=height, force_terminal=False, color_system=None)

    return _factory
