"""Tests for shipping, tax and total calculations"""
from decimal import Decimal

import pytest

from core.pricing import DEFAULT_RULES, PricingRules, build_quote, calculate_shipping, calculate_tax
from core.services.money import discount_percent, format_inr, round_money


class TestCalculateShipping:
    def test_free_at_threshold(self):
        assert calculate_shipping(Decimal("50000")) == 0

    def test_free_above_threshold(self):
        assert calculate_shipping(Decimal("85000")) == 0

    def test_percentage_below_threshold(self):
        """5% of 20000 = 1000, above the 100 floor."""
        assert calculate_shipping(Decimal("20000")) == Decimal("1000.00")

    def test_minimum_fee_applies(self):
        """5% of 1000 = 50, raised to the 100 floor."""
        assert calculate_shipping(Decimal("1000")) == Decimal("100.00")

    def test_empty_cart_ships_free(self):
        assert calculate_shipping(Decimal("0")) == 0

    def test_flat_charge_replaces_percentage(self):
        rules = DEFAULT_RULES.with_overrides(flat_shipping_charge=Decimal("750"))
        assert calculate_shipping(Decimal("20000"), rules) == Decimal("750.00")

    def test_flat_charge_still_free_above_threshold(self):
        rules = DEFAULT_RULES.with_overrides(flat_shipping_charge=Decimal("750"))
        assert calculate_shipping(Decimal("60000"), rules) == 0


class TestCalculateTax:
    def test_default_five_percent(self):
        assert calculate_tax(Decimal("85000")) == Decimal("4250.00")

    def test_custom_rate(self):
        rules = PricingRules(tax_percent=Decimal("18"))
        assert calculate_tax(Decimal("1000"), rules) == Decimal("180.00")

    def test_rounds_half_up(self):
        rules = PricingRules(tax_percent=Decimal("5"))
        # 5% of 10.10 = 0.505
        assert calculate_tax(Decimal("10.10"), rules) == Decimal("0.51")


class TestBuildQuote:
    def test_above_free_shipping_threshold(self):
        """85000: free shipping, 4250 tax, 89250 total."""
        quote = build_quote(Decimal("85000"))

        assert quote.subtotal == Decimal("85000")
        assert quote.shipping == 0
        assert quote.tax == Decimal("4250")
        assert quote.total == Decimal("89250")
        assert quote.free_shipping is True

    def test_below_free_shipping_threshold(self):
        """20000: 1000 shipping, 1000 tax, 22000 total."""
        quote = build_quote(Decimal("20000"))

        assert quote.shipping == Decimal("1000")
        assert quote.tax == Decimal("1000")
        assert quote.total == Decimal("22000")
        assert quote.free_shipping is False

    def test_to_dict(self):
        data = build_quote(Decimal("20000")).to_dict()
        assert set(data) == {"subtotal", "shipping", "tax", "total", "free_shipping"}

    def test_overrides_ignore_none(self):
        rules = DEFAULT_RULES.with_overrides(tax_percent=None, shipping_percent=Decimal("10"))
        assert rules.tax_percent == DEFAULT_RULES.tax_percent
        assert rules.shipping_percent == Decimal("10")


class TestMoney:
    @pytest.mark.parametrize(
        "amount,expected",
        [
            (Decimal("89250"), "₹89,250"),
            (Decimal("125000"), "₹1,25,000"),
            (Decimal("999"), "₹999"),
            (Decimal("10000000"), "₹1,00,00,000"),
        ],
    )
    def test_format_inr_indian_grouping(self, amount, expected):
        assert format_inr(amount) == expected

    def test_round_money(self):
        assert round_money("2.345") == Decimal("2.35")
        assert round_money("2.5", to_int=True) == Decimal("3")

    def test_discount_percent(self):
        assert round_money(discount_percent(Decimal("30000"), Decimal("20000"))) == Decimal("33.33")

    def test_no_discount_when_original_not_higher(self):
        assert discount_percent(Decimal("20000"), Decimal("20000")) == 0
        assert discount_percent(Decimal("10000"), Decimal("20000")) == 0
