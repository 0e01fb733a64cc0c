"""
Tests for the MongoDB price store with the client mocked out.
"""

from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pymongo.errors import OperationFailure, ServerSelectionTimeoutError

from hintanyt.database.service import PriceStore
from hintanyt.exceptions import DatabaseError
from tests.conftest import FakeCursor, make_raw_document


def _mock_client(collection):
    client = MagicMock()
    client.__getitem__.return_value.__getitem__.return_value = collection
    client.close = AsyncMock()
    return client


class TestPriceStore:
    """Tests for PriceStore."""

    @pytest.mark.asyncio
    async def test_fetch_documents_in_store_order(self, settings):
        documents = [make_raw_document(document_id=index) for index in range(3)]
        collection = MagicMock()
        collection.find.return_value = FakeCursor(documents)

        with patch("hintanyt.database.service.AsyncMongoClient", return_value=_mock_client(collection)) as mock_cls:
            store = PriceStore(settings)
            result = await store.fetch_documents()

        assert [d["_id"] for d in result] == [0, 1, 2]
        collection.find.assert_called_once_with({})
        mock_cls.assert_called_once_with(settings.mongo_url)
        client = mock_cls.return_value
        client.__getitem__.assert_called_once_with("electricity_data")
        client.__getitem__.return_value.__getitem__.assert_called_once_with("prices")

    @pytest.mark.asyncio
    async def test_fetch_documents_empty_collection(self, settings):
        collection = MagicMock()
        collection.find.return_value = FakeCursor([])

        with patch("hintanyt.database.service.AsyncMongoClient", return_value=_mock_client(collection)):
            result = await PriceStore(settings).fetch_documents()

        assert result == []

    @pytest.mark.asyncio
    async def test_connection_failure_raises_database_error(self, settings):
        collection = MagicMock()
        collection.find.return_value = FakeCursor([], error=ServerSelectionTimeoutError("no servers"))

        with patch("hintanyt.database.service.AsyncMongoClient", return_value=_mock_client(collection)):
            with pytest.raises(DatabaseError, match="no servers"):
                await PriceStore(settings).fetch_documents()

    @pytest.mark.asyncio
    async def test_failure_mid_scan_discards_partial_results(self, settings):
        collection = MagicMock()
        collection.find.return_value = FakeCursor(
            [make_raw_document()], error=OperationFailure("cursor killed")
        )

        with patch("hintanyt.database.service.AsyncMongoClient", return_value=_mock_client(collection)):
            with pytest.raises(DatabaseError, match="Price query failed"):
                await PriceStore(settings).fetch_documents()

    @pytest.mark.asyncio
    async def test_close_releases_client(self, settings):
        collection = MagicMock()
        collection.find.return_value = FakeCursor([])
        client = _mock_client(collection)

        with patch("hintanyt.database.service.AsyncMongoClient", return_value=client):
            store = PriceStore(settings)
            await store.fetch_documents()
            await store.close()
            await store.close()

        client.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_health_check(self, settings):
        client = _mock_client(MagicMock())
        client.admin.command = AsyncMock(return_value={"ok": 1.0})

        with patch("hintanyt.database.service.AsyncMongoClient", return_value=client):
            assert await PriceStore(settings).health_check() is True

        client.admin.command.assert_awaited_once_with("ping")

    @pytest.mark.asyncio
    async def test_health_check_failure(self, settings):
        client = _mock_client(MagicMock())
        client.admin.command = AsyncMock(side_effect=ServerSelectionTimeoutError("down"))

        with patch("hintanyt.database.service.AsyncMongoClient", return_value=client):
            assert await PriceStore(settings).health_check() is False
