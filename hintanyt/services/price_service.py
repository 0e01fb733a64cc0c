"""
Price service - reads stored documents and extracts the hourly price series.
Combines decoding, record filtering and per-hour extraction into one service.
"""

from typing import Any, Dict, Iterable, List, Optional

from pydantic import ValidationError

from hintanyt.config import Settings
from hintanyt.database.service import PriceStore
from hintanyt.exceptions import NoPriceDataError, RecordDecodeError
from hintanyt.logging_config import get_logger
from hintanyt.models.price import HOURS_PER_DAY, HourlyPrice, PriceDocument, PriceSeries
from hintanyt.services.price_transformer import to_sub_units

logger = get_logger(__name__)


def decode_document(raw: Dict[str, Any]) -> PriceDocument:
    """
    Decode one stored document.

    Raises:
        RecordDecodeError: If an hour slot is neither a year->price map nor an integer.
    """
    try:
        return PriceDocument.model_validate(raw)
    except ValidationError as e:
        raise RecordDecodeError(
            f"Record {raw.get('_id')!r} has {e.error_count()} invalid field(s): {e}"
        ) from e


def extract_hourly_prices(document: PriceDocument, year: str) -> List[HourlyPrice]:
    """
    Flatten one document into hourly prices for the given year.

    Hours whose slot is missing, is a placeholder, or has no price for the
    year are skipped.
    """
    prices = []
    for hour in range(HOURS_PER_DAY):
        price = document.price_for(hour, year)
        if price is None:
            continue
        prices.append(HourlyPrice(hour=f"{hour:02d}", price=to_sub_units(price)))
    return prices


def drop_leading_records(documents: List[PriceDocument]) -> List[PriceDocument]:
    """
    Positional filter: drop the first record, and one more if more than one remains.

    Example:
        [doc0, doc1, doc2, doc3] -> [doc2, doc3]
        [doc0, doc1] -> [doc1]
    """
    remaining = documents[1:]
    if len(remaining) > 1:
        remaining = remaining[1:]
    return remaining


class PriceService:
    """Service for fetching the day's hourly prices from the price store."""

    def __init__(self, settings: Settings, store: Optional[PriceStore] = None):
        self.settings = settings
        self.store = store if store is not None else PriceStore(settings)
        self.target_year = settings.resolved_target_year()

    async def fetch_hourly_prices(self) -> PriceSeries:
        """
        Fetch all stored documents and build the hourly price series.

        Raises:
            DatabaseError: If the store query fails.
            NoPriceDataError: If no hourly price could be extracted.
        """
        raw_documents = await self.store.fetch_documents()
        documents = self.filter_documents(self.decode_documents(raw_documents))

        entries: List[HourlyPrice] = []
        for document in documents:
            entries.extend(extract_hourly_prices(document, self.target_year))

        logger.info(
            "Extracted hourly prices",
            year=self.target_year,
            documents=len(documents),
            hours=len(entries),
        )

        if not entries:
            raise NoPriceDataError(f"No hourly prices found for year {self.target_year}")

        if len(entries) < HOURS_PER_DAY:
            logger.warning("Price series is incomplete", hours=len(entries))

        return PriceSeries(entries)

    def decode_documents(self, raw_documents: Iterable[Dict[str, Any]]) -> List[PriceDocument]:
        """Decode stored documents, skipping any record that does not decode."""
        documents = []
        for raw in raw_documents:
            try:
                documents.append(decode_document(raw))
            except RecordDecodeError as e:
                logger.warning("Skipping undecodable record", record_id=str(raw.get("_id")), error=str(e))
        return documents

    def filter_documents(self, documents: List[PriceDocument]) -> List[PriceDocument]:
        """
        Discard records that carry no prices, using the configured strategy.

        shape: keep records with prices for the target year, then drop the
        first of them when more than one remains.
        positional: drop_leading_records().
        """
        if self.settings.record_filter == "positional":
            kept = drop_leading_records(documents)
        else:
            kept = [document for document in documents if document.has_prices_for(self.target_year)]
            # the earlier of two or more priced records is the previous day
            if len(kept) > 1:
                kept = kept[1:]

        logger.debug(
            "Filtered price records",
            strategy=self.settings.record_filter,
            received=len(documents),
            kept=len(kept),
        )
        return kept
