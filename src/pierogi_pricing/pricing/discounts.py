"""Discount stage: per-item volume discounts plus at most one coupon.

Both sources work from pre-discount item totals and are added together;
neither cascades on the other.
"""

from __future__ import annotations

import math
from collections import OrderedDict
from typing import Dict, Iterable, List, Optional

from ..utils.logging import get_logger
from .context import resolve_coupon, resolve_profile
from .models import DEFAULT_TIER, UNSET, CustomerProfile, Order, OrderItem, PricingContext
from .subtotal import subtotal

logger = get_logger(__name__)

# tier -> {minimum pack quantity: rate}
VOLUME_DISCOUNT_RATES: Dict[str, Dict[int, float]] = {
    "guest": {12: 0.05, 24: 0.10},
    "regular": {12: 0.08, 24: 0.12},
    "vip": {12: 0.05, 24: 0.10},
}

FIRST10_MINIMUM_CENTS = 2000
FIRST10_RATE = 0.10
BOGO_PACK_QTY = 6
BOGO_RATE = 0.50


def volume_rate_for(qty: int, tier: str) -> float:
    rates = VOLUME_DISCOUNT_RATES.get(tier, VOLUME_DISCOUNT_RATES[DEFAULT_TIER])
    if qty >= 24:
        return rates[24]
    if qty >= 12:
        return rates[12]
    return 0.0


def volume_discount_for(items: Iterable[OrderItem], tier: str) -> int:
    """Sum of per-item volume discounts, each floored to whole cents.

    Shared by the discount stage and the free-delivery threshold test so
    both always agree on the figure.
    """
    total = 0
    for item in items:
        rate = volume_rate_for(item.qty, tier)
        if rate:
            total += math.floor(item.line_cents * rate)
    return total


def pair_bogo_items(items: Iterable[OrderItem]) -> List[OrderItem]:
    """Return the items discounted by PIEROGI-BOGO.

    Six-packs are grouped by filling, keeping input order within each
    group, and paired consecutively. The second item of every pair is the
    discounted one; a trailing unpaired six-pack gets nothing.
    """
    groups: "OrderedDict[str, List[OrderItem]]" = OrderedDict()
    for item in items:
        if item.qty != BOGO_PACK_QTY:
            continue
        groups.setdefault(item.filling, []).append(item)

    discounted: List[OrderItem] = []
    for group in groups.values():
        discounted.extend(group[1::2])
    return discounted


def coupon_discount(order: Order, coupon: Optional[str]) -> int:
    if coupon == "FIRST10":
        order_subtotal = subtotal(order)
        if order_subtotal >= FIRST10_MINIMUM_CENTS:
            return math.floor(order_subtotal * FIRST10_RATE)
        return 0
    if coupon == "PIEROGI-BOGO":
        return sum(math.floor(item.line_cents * BOGO_RATE) for item in pair_bogo_items(order.items))
    if coupon:
        logger.debug(f"Order {order.id}: coupon '{coupon}' not recognized, no discount")
    return 0


def discounts(
    order: Order,
    profile: Optional[CustomerProfile] = None,
    coupon: Optional[str] = UNSET,
) -> int:
    """
    Total discount for an order, in cents.

    Args:
        order: Order to price
        profile: Customer profile; defaults to the order's customer, then guest
        coupon: Coupon code; ``None`` means no coupon, omitted means the
            order's own coupon

    Returns:
        Volume plus coupon discount, never below 0 nor above the subtotal
    """
    context = PricingContext(profile=profile, coupon=coupon)
    tier = resolve_profile(context, order).tier
    code = resolve_coupon(context, order)

    volume = volume_discount_for(order.items, tier)
    from_coupon = coupon_discount(order, code)
    total = volume + from_coupon

    ceiling = subtotal(order)
    if total > ceiling:
        logger.warning(
            f"Order {order.id}: discount {total} exceeds subtotal {ceiling}, clamping"
        )
        total = ceiling
    logger.debug(f"Order {order.id}: volume={volume} coupon={from_coupon} tier={tier}")
    return max(0, total)
