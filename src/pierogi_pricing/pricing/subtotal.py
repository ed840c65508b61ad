"""Subtotal stage: item and add-on costs before any discount."""

from __future__ import annotations

from ..utils.logging import get_logger
from .models import ADD_ON_PRICES_CENTS, Order, OrderItem

logger = get_logger(__name__)


def add_on_cents(item: OrderItem) -> int:
    """Add-on cost of one item line, charged once per pack ordered."""
    total = 0
    for code in item.add_ons:
        price = ADD_ON_PRICES_CENTS.get(code)
        if price is None:
            logger.debug(f"Ignoring unknown add-on '{code}' on {item.sku}")
            continue
        total += price * item.qty
    return total


def subtotal(order: Order) -> int:
    return sum(item.line_cents + add_on_cents(item) for item in order.items)
