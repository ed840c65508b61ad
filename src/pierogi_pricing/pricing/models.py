"""Order, item, delivery and customer records consumed by the pricing stages.

All records are frozen; stages read them and never mutate them. ``from_dict``
accepts the camelCase document shape produced by the ordering front end and
stored in the order collection.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

TIERS = ("guest", "regular", "vip")
ZONES = ("local", "outer")
KINDS = ("hot", "frozen")
COUPONS = ("PIEROGI-BOGO", "FIRST10")

DEFAULT_TIER = "guest"

# Add-ons are priced per pack of the parent item
ADD_ON_PRICES_CENTS: Dict[str, int] = {
    "sour-cream": 99,
    "fried-onion": 149,
    "bacon-bits": 199,
}


class _Unset:
    """Marker for a context field the caller did not supply."""

    _instance: Optional["_Unset"] = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()


@dataclass(frozen=True)
class OrderItem:
    sku: str
    kind: str
    title: str
    filling: str
    qty: int
    unit_price_cents: int
    add_ons: Tuple[str, ...] = ()

    @property
    def line_cents(self) -> int:
        """Item price times quantity, add-ons excluded."""
        return self.unit_price_cents * self.qty

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "OrderItem":
        return cls(
            sku=str(data.get("sku", "")),
            kind=str(data.get("kind", "")),
            title=str(data.get("title", "")),
            filling=str(data.get("filling", "")),
            qty=int(data.get("qty", 0)),
            unit_price_cents=int(data.get("unitPriceCents", 0)),
            add_ons=tuple(data.get("addOns") or ()),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "sku": self.sku,
            "kind": self.kind,
            "title": self.title,
            "filling": self.filling,
            "qty": self.qty,
            "unitPriceCents": self.unit_price_cents,
            "addOns": list(self.add_ons),
        }


@dataclass(frozen=True)
class DeliveryInfo:
    zone: str = "local"
    rush: bool = False
    # Informational only, no fee depends on it
    distance_km: float = 1

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "DeliveryInfo":
        return cls(
            zone=str(data.get("zone", "local")),
            rush=bool(data.get("rush", False)),
            distance_km=data.get("distanceKm", 1),
        )

    def to_dict(self) -> Dict[str, Any]:
        return {"zone": self.zone, "rush": self.rush, "distanceKm": self.distance_km}


@dataclass(frozen=True)
class CustomerProfile:
    tier: str = DEFAULT_TIER

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CustomerProfile":
        return cls(tier=str(data.get("tier", DEFAULT_TIER)))


DEFAULT_DELIVERY = DeliveryInfo()
DEFAULT_PROFILE = CustomerProfile()


@dataclass(frozen=True)
class Order:
    id: str
    items: Tuple[OrderItem, ...] = ()
    delivery: Optional[DeliveryInfo] = None
    customer: Optional[CustomerProfile] = None
    coupon: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "Order":
        """Build an order from its document form.

        Missing ``items`` is read as an empty order; absent ``delivery``,
        ``customer`` and ``coupon`` stay ``None`` so the defaulting chain in
        the aggregator can tell them apart from explicit values.
        """
        delivery = data.get("delivery")
        customer = data.get("customer")
        return cls(
            id=str(data.get("id", data.get("_id", ""))),
            items=tuple(OrderItem.from_dict(item) for item in data.get("items") or ()),
            delivery=DeliveryInfo.from_dict(delivery) if delivery else None,
            customer=CustomerProfile.from_dict(customer) if customer else None,
            coupon=data.get("coupon") or None,
        )


@dataclass(frozen=True)
class PricingContext:
    """Per-call overrides for the values embedded in an order.

    ``coupon=None`` means "no coupon" and wins over the order's coupon;
    leave it ``UNSET`` to fall back to the order.
    """

    profile: Optional[CustomerProfile] = None
    delivery: Optional[DeliveryInfo] = None
    coupon: Any = field(default=UNSET)
