"""Defaulting chain for the per-call pricing inputs.

Each field resolves independently: the call context first, then the value
embedded in the order, then the hard default.
"""

from __future__ import annotations

from typing import Optional

from .models import (
    DEFAULT_DELIVERY,
    DEFAULT_PROFILE,
    UNSET,
    CustomerProfile,
    DeliveryInfo,
    Order,
    PricingContext,
)


def resolve_profile(context: Optional[PricingContext], order: Order) -> CustomerProfile:
    if context is not None and context.profile is not None:
        return context.profile
    if order.customer is not None:
        return order.customer
    return DEFAULT_PROFILE


def resolve_delivery(context: Optional[PricingContext], order: Order) -> DeliveryInfo:
    if context is not None and context.delivery is not None:
        return context.delivery
    if order.delivery is not None:
        return order.delivery
    return DEFAULT_DELIVERY


def resolve_coupon(context: Optional[PricingContext], order: Order) -> Optional[str]:
    # An explicit None in the context removes the order's coupon
    if context is not None and context.coupon is not UNSET:
        return context.coupon
    return order.coupon or None
