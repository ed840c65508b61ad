"""Pricing pipeline entry points."""

from .context import resolve_coupon, resolve_delivery, resolve_profile
from .delivery import delivery_fee
from .discounts import discounts, pair_bogo_items, volume_discount_for
from .errors import OrderNotFoundError, PricingError, TaxRateLookupError
from .models import (
    UNSET,
    CustomerProfile,
    DeliveryInfo,
    Order,
    OrderItem,
    PricingContext,
)
from .repository import OrderRepository
from .service import PricingService
from .subtotal import subtotal
from .tax import tax
from .tax_rates import StaticTaxRates, default_rate_lookup
from .total import PriceBreakdown, price_breakdown, total

__all__ = [
    "UNSET",
    "CustomerProfile",
    "DeliveryInfo",
    "Order",
    "OrderItem",
    "PricingContext",
    "PriceBreakdown",
    "PricingError",
    "TaxRateLookupError",
    "OrderNotFoundError",
    "OrderRepository",
    "PricingService",
    "StaticTaxRates",
    "default_rate_lookup",
    "subtotal",
    "discounts",
    "volume_discount_for",
    "pair_bogo_items",
    "delivery_fee",
    "tax",
    "total",
    "price_breakdown",
    "resolve_profile",
    "resolve_delivery",
    "resolve_coupon",
]
