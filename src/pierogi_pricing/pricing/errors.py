"""Exceptions raised by the pricing package.

Unrecognized tiers, zones, add-ons and coupons are pricing policy, not
faults: they fall back to defaults and never raise.
"""

from __future__ import annotations


class PricingError(Exception):
    """Base class for pricing failures."""


class TaxRateLookupError(PricingError, LookupError):
    """The tax rate source could not provide a rate for an item kind."""

    def __init__(self, kind: str, reason: str = "no rate configured"):
        self.kind = kind
        self.reason = reason
        super().__init__(f"Tax rate lookup failed for kind '{kind}': {reason}")


class OrderNotFoundError(PricingError, ValueError):
    """No order document exists for the requested ID."""

    def __init__(self, order_id: str):
        self.order_id = order_id
        super().__init__(f"Order with ID {order_id} not found")
