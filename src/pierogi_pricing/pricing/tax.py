"""Tax stage: sales tax on hot items."""

from __future__ import annotations

import math
from typing import Optional

from ..utils.logging import get_logger
from .context import resolve_delivery
from .delivery import delivery_fee
from .models import CustomerProfile, DeliveryInfo, Order, PricingContext
from .tax_rates import TaxRateLookup, default_rate_lookup

logger = get_logger(__name__)

TAXABLE_KINDS = frozenset({"hot"})

# Order documentation says delivery is taxable when the order holds hot
# items; the live pricing has never done so. Flip per call with tax_delivery.
DELIVERY_FEE_TAXABLE = False


def tax(
    order: Order,
    delivery: Optional[DeliveryInfo] = None,
    rate_lookup: Optional[TaxRateLookup] = None,
    profile: Optional[CustomerProfile] = None,
    tax_delivery: bool = DELIVERY_FEE_TAXABLE,
) -> int:
    """
    Tax owed on an order, in cents.

    Args:
        order: Order to price
        delivery: Delivery details; only consulted when taxing delivery
        rate_lookup: ``kind -> rate`` source; defaults to the configured table
        profile: Customer profile; only consulted when taxing delivery
        tax_delivery: Also tax the delivery fee at the hot-item rate

    Returns:
        Sum of floored per-item taxes. Lookup failures propagate.
    """
    lookup = rate_lookup or default_rate_lookup()

    total = 0
    has_taxable = False
    for item in order.items:
        if item.kind not in TAXABLE_KINDS:
            continue
        has_taxable = True
        total += math.floor(item.line_cents * lookup(item.kind))

    if tax_delivery and has_taxable:
        info = resolve_delivery(PricingContext(delivery=delivery), order)
        fee = delivery_fee(order, info, profile)
        total += math.floor(fee * lookup("hot"))

    logger.debug(f"Order {order.id}: tax={total}")
    return total
