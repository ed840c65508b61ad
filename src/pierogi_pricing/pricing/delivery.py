"""Delivery stage: zone fee, rush surcharge and free-delivery threshold."""

from __future__ import annotations

from typing import Dict, Optional

from ..utils.logging import get_logger
from .context import resolve_delivery, resolve_profile
from .discounts import volume_discount_for
from .models import DEFAULT_TIER, CustomerProfile, DeliveryInfo, Order, PricingContext

logger = get_logger(__name__)

# Discounted subtotal must be strictly above these for free delivery
FREE_DELIVERY_THRESHOLDS_CENTS: Dict[str, int] = {
    "guest": 5000,
    "regular": 4000,
    "vip": 3000,
}

ZONE_FEES_CENTS: Dict[str, int] = {
    "local": 399,
    "outer": 699,
}

RUSH_FEE_CENTS = 299

# Zone fee is charged once per item line, not once per order
PER_ITEM_ZONE_FEE = True


def free_delivery_threshold(tier: str) -> int:
    return FREE_DELIVERY_THRESHOLDS_CENTS.get(tier, FREE_DELIVERY_THRESHOLDS_CENTS[DEFAULT_TIER])


def discounted_subtotal(order: Order, tier: str) -> int:
    """Item subtotal net of volume discounts only.

    Add-ons and coupons are left out; this figure exists only to test
    free-delivery eligibility.
    """
    items_total = sum(item.line_cents for item in order.items)
    return items_total - volume_discount_for(order.items, tier)


def qualifies_for_free_delivery(order: Order, tier: str) -> bool:
    return discounted_subtotal(order, tier) > free_delivery_threshold(tier)


def zone_fee(order: Order, zone: str) -> int:
    per_unit = ZONE_FEES_CENTS.get(zone, 0)
    if PER_ITEM_ZONE_FEE:
        return per_unit * len(order.items)
    return per_unit if order.items else 0


def delivery_fee(
    order: Order,
    delivery: Optional[DeliveryInfo] = None,
    profile: Optional[CustomerProfile] = None,
) -> int:
    """
    Delivery fee in cents.

    When the order qualifies for free delivery the zone fee is waived and
    only the rush surcharge (if any) is charged.
    """
    context = PricingContext(profile=profile, delivery=delivery)
    info = resolve_delivery(context, order)
    tier = resolve_profile(context, order).tier

    rush = RUSH_FEE_CENTS if info.rush else 0
    if qualifies_for_free_delivery(order, tier):
        logger.debug(f"Order {order.id}: free delivery for tier {tier}, rush={info.rush}")
        return rush

    return zone_fee(order, info.zone) + rush
