"""Read-only MongoDB access to stored order documents."""

from __future__ import annotations

from typing import Any, Dict, Optional

from pymongo import MongoClient
from pymongo.collection import Collection

from ..utils.config import Config
from ..utils.logging import get_logger

logger = get_logger(__name__)


class OrderRepository:
    """Order documents keyed by their public ``id``.

    Unset connection details fall back to ``DB_CONNECTION_URL``, ``DB_NAME``
    and ``COLLECTION_NAME`` from the given config.
    """

    def __init__(
        self,
        url: Optional[str] = None,
        db_name: Optional[str] = None,
        collection: Optional[str] = None,
        config: Optional[Config] = None,
    ) -> None:
        config = config or Config(".env")
        self._url = url or config.get("mongo_url")
        self._db = db_name or config.get("mongo_db")
        self._collection = collection or config.get("mongo_collection")
        if not self._url:
            raise ValueError("DB_CONNECTION_URL is required")
        self._client: Optional[MongoClient] = None

    def __enter__(self) -> "OrderRepository":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _orders(self) -> Collection:
        if self._client is None:
            logger.debug(f"Connecting to {self._db}.{self._collection}")
            self._client = MongoClient(self._url, serverSelectionTimeoutMS=5000)
        return self._client[self._db][self._collection]

    def close(self) -> None:
        if self._client is not None:
            self._client.close()
            self._client = None

    def get_order_by_id(self, order_id: str) -> Optional[Dict[str, Any]]:
        return self._orders().find_one({"id": order_id}, projection={"_id": False})
