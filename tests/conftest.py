"""Pytest configuration and shared order fixtures."""

import sys
from pathlib import Path

import pytest

# Add src to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from pierogi_pricing.pricing.models import (  # noqa: E402
    CustomerProfile,
    DeliveryInfo,
    Order,
    OrderItem,
)


def make_item(qty=6, unit_price_cents=500, kind="hot", filling="potato", add_ons=(), sku=None):
    return OrderItem(
        sku=sku or f"P{qty}-{filling.upper()}",
        kind=kind,
        title=f"{filling.title()} pierogi",
        filling=filling,
        qty=qty,
        unit_price_cents=unit_price_cents,
        add_ons=tuple(add_ons),
    )


def make_order(*items, tier=None, zone=None, rush=False, coupon=None, order_id="order-1"):
    return Order(
        id=order_id,
        items=tuple(items),
        delivery=DeliveryInfo(zone=zone, rush=rush) if zone else None,
        customer=CustomerProfile(tier) if tier else None,
        coupon=coupon,
    )


@pytest.fixture
def dozen_hot_order():
    """Guest, one hot 12-pack at $10.00 a unit, local, no rush, no coupon."""
    return make_order(make_item(qty=12, unit_price_cents=1000), tier="guest", zone="local")


@pytest.fixture
def outer_rush_frozen_order():
    """Guest, one frozen 6-pack at $5.00 a unit, outer zone with rush."""
    return make_order(
        make_item(qty=6, unit_price_cents=500, kind="frozen"),
        tier="guest",
        zone="outer",
        rush=True,
    )


@pytest.fixture
def order_document():
    """Order in its stored document form."""
    return {
        "id": "b7e0c2a4-1111-4c7e-9f00-000000000001",
        "items": [
            {
                "sku": "P6-POTATO",
                "kind": "hot",
                "title": "Potato & cheese",
                "filling": "potato",
                "qty": 6,
                "unitPriceCents": 600,
                "addOns": ["sour-cream"],
            },
            {
                "sku": "P6-POTATO",
                "kind": "hot",
                "title": "Potato & cheese",
                "filling": "potato",
                "qty": 6,
                "unitPriceCents": 600,
                "addOns": [],
            },
            {
                "sku": "P12-SAUER",
                "kind": "frozen",
                "title": "Sauerkraut",
                "filling": "sauerkraut",
                "qty": 12,
                "unitPriceCents": 500,
                "addOns": [],
            },
        ],
        "delivery": {"zone": "outer", "rush": False, "distanceKm": 14.5},
        "customer": {"tier": "regular"},
        "coupon": "PIEROGI-BOGO",
    }
