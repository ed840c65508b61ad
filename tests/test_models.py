"""Tests for order records."""

import dataclasses

import pytest

from pierogi_pricing.pricing.models import UNSET, CustomerProfile, DeliveryInfo, Order, OrderItem


class TestOrderFromDict:
    def test_document_fields(self, order_document):
        order = Order.from_dict(order_document)
        assert order.id == order_document["id"]
        assert len(order.items) == 3
        assert order.items[0].unit_price_cents == 600
        assert order.items[0].add_ons == ("sour-cream",)
        assert order.delivery == DeliveryInfo("outer", rush=False, distance_km=14.5)
        assert order.customer == CustomerProfile("regular")
        assert order.coupon == "PIEROGI-BOGO"

    def test_missing_sections(self):
        order = Order.from_dict({"id": "bare"})
        assert order.items == ()
        assert order.delivery is None
        assert order.customer is None
        assert order.coupon is None

    def test_null_coupon(self):
        assert Order.from_dict({"id": "x", "coupon": None}).coupon is None

    def test_item_round_trip(self, order_document):
        raw = order_document["items"][0]
        assert OrderItem.from_dict(raw).to_dict() == raw


class TestRecords:
    def test_items_are_frozen(self):
        item = OrderItem("P6", "hot", "Potato", "potato", 6, 500)
        with pytest.raises(dataclasses.FrozenInstanceError):
            item.qty = 12

    def test_line_cents_excludes_add_ons(self):
        item = OrderItem("P6", "hot", "Potato", "potato", 6, 500, ("bacon-bits",))
        assert item.line_cents == 3000

    def test_unset_marker(self):
        assert not UNSET
        assert repr(UNSET) == "UNSET"
        assert UNSET is not None
