"""
Pricing Rule Resolver

Single authority for the tax and shipping rules applied to a cart.
Consumes the admin-configured tax_settings, shipping_settings and
global_settings rows.

Precedence for a product in a state (most specific wins):
    product + state  >  product (any state)  >  state (any product)
    >  is_default row  >  global settings  >  built-in defaults
"""
from decimal import Decimal, InvalidOperation
from typing import Iterable, Optional, Sequence, Union

from core.logging import get_logger
from core.services.models import GlobalSetting, ShippingSetting, TaxSetting
from core.services.money import ZERO, percent, round_money
from .rules import DEFAULT_RULES, PriceQuote, PricingRules, calculate_shipping

logger = get_logger(__name__)

# global_settings.setting_key -> PricingRules field
GLOBAL_SETTING_FIELDS = {
    "free_shipping_threshold": "free_shipping_threshold",
    "shipping_percentage": "shipping_percent",
    "minimum_shipping_charge": "minimum_shipping_fee",
    "default_tax_percentage": "tax_percent",
}

RANK_PRODUCT_STATE = 4
RANK_PRODUCT = 3
RANK_STATE = 2
RANK_DEFAULT = 1
NO_MATCH = 0

Setting = Union[TaxSetting, ShippingSetting]


def _norm_state(state: Optional[str]) -> str:
    return (state or "").strip().lower()


def match_rank(setting: Setting, product_id: Optional[str], state: Optional[str]) -> int:
    """How specifically a setting row applies to (product_id, state)."""
    row_state = _norm_state(setting.state)
    wanted_state = _norm_state(state)

    if setting.product_id:
        if setting.product_id == product_id:
            if row_state and row_state == wanted_state:
                return RANK_PRODUCT_STATE
            if not row_state:
                return RANK_PRODUCT
    elif row_state and row_state == wanted_state:
        return RANK_STATE

    if setting.is_default:
        return RANK_DEFAULT
    return NO_MATCH


def _best_matches(settings: Sequence[Setting], product_ids: Iterable[Optional[str]], state: Optional[str]) -> list:
    best_rank = NO_MATCH
    best: list = []
    for product_id in product_ids:
        for setting in settings:
            rank = match_rank(setting, product_id, state)
            if rank == NO_MATCH or rank < best_rank:
                continue
            if rank > best_rank:
                best_rank, best = rank, []
            if setting not in best:
                best.append(setting)
    return best


class PricingRuleResolver:
    """Resolves PricingRules from configured settings."""

    def __init__(
        self,
        tax_settings: Sequence[TaxSetting] = (),
        shipping_settings: Sequence[ShippingSetting] = (),
        global_settings: Sequence[GlobalSetting] = (),
        defaults: PricingRules = DEFAULT_RULES,
    ):
        self.tax_settings = list(tax_settings)
        self.shipping_settings = list(shipping_settings)
        self.base_rules = self._apply_global_settings(defaults, global_settings)

    @classmethod
    async def load(cls, settings_repo) -> "PricingRuleResolver":
        """Build a resolver from the settings tables.

        A table that cannot be read contributes no rows; the resolver then
        falls back to the next level of precedence.
        """
        tax = await settings_repo.list_tax_settings_safe()
        shipping = await settings_repo.list_shipping_settings_safe()
        global_settings = await settings_repo.list_global_settings_safe()
        return cls(tax, shipping, global_settings)

    @staticmethod
    def _apply_global_settings(defaults: PricingRules, settings: Sequence[GlobalSetting]) -> PricingRules:
        overrides = {}
        for setting in settings:
            field_name = GLOBAL_SETTING_FIELDS.get(setting.setting_key)
            if not field_name:
                continue
            try:
                value = Decimal(setting.setting_value.strip())
            except (InvalidOperation, AttributeError):
                logger.warning(f"Ignoring unparsable global setting {setting.setting_key}={setting.setting_value!r}")
                continue
            if value < 0:
                logger.warning(f"Ignoring negative global setting {setting.setting_key}={value}")
                continue
            overrides[field_name] = value
        return defaults.with_overrides(**overrides)

    # ==================== TAX ====================

    def tax_percent_for(self, product_id: Optional[str], state: Optional[str]) -> Decimal:
        matches = _best_matches(self.tax_settings, [product_id], state)
        if not matches:
            return self.base_rules.tax_percent
        # Same-rank ties: first configured row wins
        return matches[0].tax_percentage

    # ==================== SHIPPING ====================

    def shipping_rules_for(self, product_ids: Sequence[str], state: Optional[str]) -> PricingRules:
        """Shipping rules for a cart holding product_ids, delivered to state."""
        candidates = list(product_ids) or [None]
        matches = _best_matches(self.shipping_settings, candidates, state)
        if not matches:
            return self.base_rules
        chosen = max(matches, key=lambda s: s.shipping_charge)
        return self.base_rules.with_overrides(
            flat_shipping_charge=chosen.shipping_charge,
            free_shipping_threshold=chosen.free_shipping_threshold,
        )

    # ==================== QUOTES ====================

    def quote_cart(self, items, state: Optional[str] = None) -> PriceQuote:
        """
        Price a list of cart items for delivery to state.

        Tax is computed per line at that product's resolved rate; shipping
        uses the cart-level rule resolved across all products.
        """
        subtotal = ZERO
        tax = ZERO
        for item in items:
            line_total = item.total_price
            subtotal += line_total
            tax += percent(line_total, self.tax_percent_for(item.product_id, state))

        subtotal = round_money(subtotal)
        tax = round_money(tax)
        shipping_rules = self.shipping_rules_for([item.product_id for item in items], state)
        shipping = calculate_shipping(subtotal, shipping_rules)
        return PriceQuote(subtotal=subtotal, shipping=shipping, tax=tax, total=subtotal + shipping + tax)
