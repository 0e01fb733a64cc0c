"""
Price store access using MongoDB with pymongo's asyncio client.
Handles the connection and the single collection scan in one place.
"""

from typing import Any, Dict, List, Optional

from pymongo import AsyncMongoClient
from pymongo.errors import PyMongoError

from hintanyt.config import Settings
from hintanyt.exceptions import DatabaseError
from hintanyt.logging_config import get_logger

logger = get_logger(__name__)


class PriceStore:
    """Read-only access to the stored price documents."""

    def __init__(self, settings: Settings):
        self.settings = settings
        self._client: Optional[AsyncMongoClient] = None

    def _get_client(self) -> AsyncMongoClient:
        """Get or create the MongoDB client."""
        if self._client is None:
            self._client = AsyncMongoClient(self.settings.mongo_url)
        return self._client

    async def close(self) -> None:
        """Close the MongoDB client."""
        if self._client is not None:
            await self._client.close()
            self._client = None

    async def fetch_documents(self) -> List[Dict[str, Any]]:
        """
        Fetch every document in the price collection.

        Documents are returned in the order the store yields them; no filter
        or sort is applied.

        Raises:
            DatabaseError: If the store is unreachable or rejects the query.
        """
        try:
            client = self._get_client()
            collection = client[self.settings.database_name][self.settings.collection_name]

            documents = []
            async for document in collection.find({}):
                documents.append(document)

            logger.info(
                "Fetched price documents",
                collection=self.settings.collection_name,
                count=len(documents),
            )
            return documents

        except PyMongoError as e:
            logger.error("Failed to fetch price documents", error=str(e))
            raise DatabaseError(f"Price query failed: {e}") from e

    async def health_check(self) -> bool:
        """Check that the store answers a ping."""
        try:
            client = self._get_client()
            await client.admin.command("ping")
            return True

        except PyMongoError as e:
            logger.error("Database health check failed", error=str(e))
            return False
