"""Aggregator: composes the four stages into the amount owed.

TOTAL = SUBTOTAL - DISCOUNTS + DELIVERY + TAX, clamped at zero.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, Optional

from ..utils.logging import get_logger
from .context import resolve_coupon, resolve_delivery, resolve_profile
from .delivery import delivery_fee
from .discounts import discounts
from .models import Order, PricingContext
from .subtotal import subtotal
from .tax import tax
from .tax_rates import TaxRateLookup

logger = get_logger(__name__)


@dataclass(frozen=True)
class PriceBreakdown:
    order_id: str
    subtotal: int
    discounts: int
    delivery: int
    tax: int
    total: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def price_breakdown(
    order: Order,
    context: Optional[PricingContext] = None,
    rate_lookup: Optional[TaxRateLookup] = None,
) -> PriceBreakdown:
    """Run every stage once with the resolved context and keep each figure."""
    profile = resolve_profile(context, order)
    delivery = resolve_delivery(context, order)
    coupon = resolve_coupon(context, order)

    order_subtotal = subtotal(order)
    order_discounts = discounts(order, profile, coupon)
    order_delivery = delivery_fee(order, delivery, profile)
    order_tax = tax(order, delivery, rate_lookup=rate_lookup, profile=profile)

    raw_total = order_subtotal - order_discounts + order_delivery + order_tax
    if raw_total < 0:
        logger.warning(f"Order {order.id}: negative total {raw_total} clamped to 0")

    breakdown = PriceBreakdown(
        order_id=order.id,
        subtotal=order_subtotal,
        discounts=order_discounts,
        delivery=order_delivery,
        tax=order_tax,
        total=max(0, raw_total),
    )
    logger.debug(f"Order {order.id}: {breakdown}")
    return breakdown


def total(
    order: Order,
    context: Optional[PricingContext] = None,
    rate_lookup: Optional[TaxRateLookup] = None,
) -> int:
    return price_breakdown(order, context, rate_lookup).total
