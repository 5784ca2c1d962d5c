"""Shipping, tax and order total calculations.

Pure functions of (subtotal, rules); no state, no I/O.
"""
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional

from core import config
from core.services.money import Numeric, ZERO, percent, round_money, to_decimal


@dataclass(frozen=True)
class PricingRules:
    """Rates and thresholds used to price a cart.

    Percentages are stored as percents (5 means 5%), matching how tax and
    shipping settings are configured in the admin console.
    """
    free_shipping_threshold: Decimal = config.DEFAULT_FREE_SHIPPING_THRESHOLD
    shipping_percent: Decimal = config.DEFAULT_SHIPPING_PERCENT
    minimum_shipping_fee: Decimal = config.DEFAULT_MINIMUM_SHIPPING_FEE
    tax_percent: Decimal = config.DEFAULT_TAX_PERCENT
    # Configured flat charge; replaces the percentage rule when set
    flat_shipping_charge: Optional[Decimal] = None

    def with_overrides(self, **changes) -> "PricingRules":
        return replace(self, **{k: v for k, v in changes.items() if v is not None})


DEFAULT_RULES = PricingRules()


@dataclass(frozen=True)
class PriceQuote:
    subtotal: Decimal
    shipping: Decimal
    tax: Decimal
    total: Decimal

    @property
    def free_shipping(self) -> bool:
        return self.shipping == 0

    def to_dict(self) -> dict:
        return {
            "subtotal": self.subtotal,
            "shipping": self.shipping,
            "tax": self.tax,
            "total": self.total,
            "free_shipping": self.free_shipping,
        }


def calculate_shipping(subtotal: Numeric, rules: PricingRules = DEFAULT_RULES) -> Decimal:
    """
    Shipping charge for a subtotal.

    - subtotal >= free_shipping_threshold: free
    - flat charge configured: that charge
    - otherwise: max(minimum_shipping_fee, subtotal * shipping_percent%)

    An empty cart (subtotal 0) has nothing to ship.
    """
    amount = to_decimal(subtotal)
    if amount <= 0:
        return ZERO
    if amount >= rules.free_shipping_threshold:
        return ZERO
    if rules.flat_shipping_charge is not None:
        return round_money(rules.flat_shipping_charge)
    return round_money(max(rules.minimum_shipping_fee, percent(amount, rules.shipping_percent)))


def calculate_tax(subtotal: Numeric, rules: PricingRules = DEFAULT_RULES) -> Decimal:
    """Tax on a subtotal at rules.tax_percent."""
    amount = to_decimal(subtotal)
    if amount <= 0:
        return ZERO
    return round_money(percent(amount, rules.tax_percent))


def build_quote(subtotal: Numeric, rules: PricingRules = DEFAULT_RULES) -> PriceQuote:
    """Subtotal + shipping + tax under a single rule set."""
    amount = round_money(subtotal)
    shipping = calculate_shipping(amount, rules)
    tax = calculate_tax(amount, rules)
    return PriceQuote(subtotal=amount, shipping=shipping, tax=tax, total=amount + shipping + tax)
