"""Storefront configuration read from the environment."""
import os
from decimal import Decimal


def _env_int(name: str, default: int) -> int:
    raw = os.environ.get(name)
    if not raw:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _env_decimal(name: str, default: str) -> Decimal:
    raw = os.environ.get(name) or default
    try:
        return Decimal(raw)
    except ArithmeticError:
        return Decimal(default)


# Admin console
ADMIN_PASSWORD = os.environ.get("ADMIN_PASSWORD", "")
ADMIN_SESSION_TTL_SECONDS = _env_int("ADMIN_SESSION_TTL_SECONDS", 43200)  # 12 hours

# Image storage
STORAGE_BUCKET = os.environ.get("STORAGE_BUCKET", "product-images")
MAX_UPLOAD_BYTES = _env_int("MAX_UPLOAD_BYTES", 5 * 1024 * 1024)

# Cart persistence
CART_TTL_SECONDS = _env_int("CART_TTL_SECONDS", 604800)  # 7 days

# Checkout
PAYMENT_DELAY_SECONDS = float(os.environ.get("PAYMENT_DELAY_SECONDS", "2") or 2)
COD_LIMIT = _env_decimal("COD_LIMIT", "50000")

# Pricing defaults (used when no tax/shipping settings are configured)
DEFAULT_FREE_SHIPPING_THRESHOLD = _env_decimal("DEFAULT_FREE_SHIPPING_THRESHOLD", "50000")
DEFAULT_SHIPPING_PERCENT = _env_decimal("DEFAULT_SHIPPING_PERCENT", "5")
DEFAULT_MINIMUM_SHIPPING_FEE = _env_decimal("DEFAULT_MINIMUM_SHIPPING_FEE", "100")
DEFAULT_TAX_PERCENT = _env_decimal("DEFAULT_TAX_PERCENT", "5")

# HTTP
ALLOWED_ORIGINS = [
    origin.strip()
    for origin in os.environ.get("ALLOWED_ORIGINS", "*").split(",")
    if origin.strip()
]
