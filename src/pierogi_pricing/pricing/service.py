"""Order pricing service: loads order documents and runs the pipeline."""

from __future__ import annotations

import os
from typing import Any, Dict, Mapping, Optional

from ..utils.config import Config
from ..utils.logging import get_logger
from .errors import OrderNotFoundError
from .models import Order, PricingContext
from .repository import OrderRepository
from .tax_rates import TaxRateLookup, default_rate_lookup
from .total import price_breakdown

logger = get_logger(__name__)


class PricingService:
    """High-level service for pricing stored or in-memory orders.

    Settings come from ``.env`` in the working directory unless a config is
    passed in; that includes the hot-item tax rate.
    """

    def __init__(
        self,
        db_name: Optional[str] = None,
        connection_url_env_key: Optional[str] = None,
        rate_lookup: Optional[TaxRateLookup] = None,
        config: Optional[Config] = None,
    ):
        self.config = config or Config(".env")
        self.db_name = db_name
        self.connection_url_env_key = connection_url_env_key
        self.rate_lookup = rate_lookup or default_rate_lookup(self.config)

    def _repository(self) -> OrderRepository:
        # Environment-specific key wins over the generic connection URL
        url = os.getenv(self.connection_url_env_key) if self.connection_url_env_key else None
        return OrderRepository(url=url, db_name=self.db_name, config=self.config)

    def fetch_document(self, order_id: str) -> Dict[str, Any]:
        """Load a stored order document, raising if it does not exist."""
        with self._repository() as repo:
            document = repo.get_order_by_id(order_id)
        if not document:
            raise OrderNotFoundError(order_id)
        return document

    def price_document(
        self, document: Mapping[str, Any], context: Optional[PricingContext] = None
    ) -> Dict[str, Any]:
        """Price an order document and return its breakdown in cents."""
        order = Order.from_dict(document)
        logger.info(f"Pricing order {order.id} ({len(order.items)} items)")
        return price_breakdown(order, context, self.rate_lookup).to_dict()

    def price_order_by_id(
        self, order_id: str, context: Optional[PricingContext] = None
    ) -> Dict[str, Any]:
        """Fetch an order from the order store and price it."""
        return self.price_document(self.fetch_document(order_id), context)
