"""Pricing: shipping/tax rules and the settings-backed resolver."""
from .rules import (
    DEFAULT_RULES,
    PriceQuote,
    PricingRules,
    build_quote,
    calculate_shipping,
    calculate_tax,
)
from .resolver import PricingRuleResolver

__all__ = [
    "DEFAULT_RULES",
    "PriceQuote",
    "PricingRules",
    "PricingRuleResolver",
    "build_quote",
    "calculate_shipping",
    "calculate_tax",
]
