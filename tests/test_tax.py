"""Tests for the tax stage and tax rate sources."""

import importlib
from unittest.mock import MagicMock

import pytest
from conftest import make_item, make_order

tax_module = importlib.import_module("pierogi_pricing.pricing.tax")
from pierogi_pricing.pricing.errors import TaxRateLookupError
from pierogi_pricing.pricing.models import DeliveryInfo
from pierogi_pricing.pricing.tax import tax
from pierogi_pricing.pricing.tax_rates import StaticTaxRates, default_rate_lookup
from pierogi_pricing.utils.config import Config


class TestTax:
    def test_hot_dozen(self, dozen_hot_order):
        assert tax(dozen_hot_order) == 960

    def test_frozen_items_are_exempt(self, outer_rush_frozen_order):
        assert tax(outer_rush_frozen_order) == 0

    def test_mixed_order_taxes_hot_only(self):
        """3330 * 8% = 266.4 floors to 266; the frozen item adds nothing."""
        order = make_order(
            make_item(qty=6, unit_price_cents=555, kind="hot"),
            make_item(qty=24, unit_price_cents=900, kind="frozen"),
        )
        assert tax(order) == 266

    def test_add_ons_are_not_taxed(self):
        order = make_order(make_item(qty=6, unit_price_cents=500, add_ons=["sour-cream"]))
        assert tax(order) == 240

    def test_lookup_only_consulted_for_hot_items(self):
        lookup = MagicMock(return_value=0.1)
        order = make_order(
            make_item(qty=6, unit_price_cents=500, kind="frozen"),
            make_item(qty=6, unit_price_cents=500, kind="hot"),
        )
        assert tax(order, rate_lookup=lookup) == 300
        lookup.assert_called_once_with("hot")

    def test_lookup_failure_propagates(self, dozen_hot_order):
        lookup = MagicMock(side_effect=TaxRateLookupError("hot", "service unavailable"))
        with pytest.raises(TaxRateLookupError, match="service unavailable"):
            tax(dozen_hot_order, rate_lookup=lookup)

    def test_empty_order(self):
        assert tax(make_order()) == 0


class TestDeliveryTaxation:
    def test_delivery_fee_is_not_taxed_by_default(self):
        assert tax_module.DELIVERY_FEE_TAXABLE is False
        order = make_order(make_item(qty=1, unit_price_cents=1000))
        assert tax(order, DeliveryInfo("local")) == 80
        assert tax(order, DeliveryInfo("outer", rush=True)) == 80

    def test_opt_in_taxes_delivery_at_hot_rate(self):
        """Local fee 399 taxed at 8% adds floor(31.92) = 31."""
        order = make_order(make_item(qty=1, unit_price_cents=1000))
        assert tax(order, DeliveryInfo("local"), tax_delivery=True) == 80 + 31

    def test_opt_in_ignores_orders_without_hot_items(self):
        order = make_order(make_item(qty=1, unit_price_cents=1000, kind="frozen"))
        assert tax(order, DeliveryInfo("outer", rush=True), tax_delivery=True) == 0


class TestStaticTaxRates:
    def test_default_rates(self):
        rates = StaticTaxRates()
        assert rates.lookup("hot") == 0.08
        assert rates("frozen") == 0.0

    def test_unknown_kind_raises(self):
        with pytest.raises(TaxRateLookupError) as exc_info:
            StaticTaxRates().lookup("chilled")
        assert exc_info.value.kind == "chilled"
        assert isinstance(exc_info.value, LookupError)

    def test_rate_must_be_fraction(self):
        with pytest.raises(ValueError):
            StaticTaxRates({"hot": 1.5})

    def test_default_lookup_without_env_file(self):
        assert default_rate_lookup().lookup("hot") == 0.08

    def test_hot_rate_from_config(self, tmp_path, monkeypatch):
        env_file = tmp_path / ".env"
        env_file.write_text("")
        monkeypatch.setenv("HOT_TAX_RATE", "0.1")

        lookup = default_rate_lookup(Config(str(env_file)))
        assert lookup.lookup("hot") == 0.1
        assert tax(make_order(make_item(qty=6, unit_price_cents=500)), rate_lookup=lookup) == 300
