"""
Common Error Constants and Exceptions

Centralized error messages to avoid string duplication, plus the few
exception types raised across services. Validation problems are plain
ValueError; not-found is signalled by returning None.
"""

# Catalog errors
ERROR_PRODUCT_NOT_FOUND = "Product not found"
ERROR_CATEGORY_NOT_FOUND = "Category not found"

# Cart / checkout errors
ERROR_CART_EMPTY = "Cart is empty"
ERROR_MISSING_FIELDS = "Please fill in all required fields"
ERROR_TERMS_REQUIRED = "Please agree to the terms and conditions"
ERROR_COD_LIMIT = "Cash on delivery is only available for orders under the COD limit"
ERROR_PAYMENT_FAILED = "Payment failed"
ERROR_ORDER_FAILED = "Failed to place order"

# Admin errors
ERROR_UNAUTHORIZED = "Unauthorized access"
ERROR_INVALID_CREDENTIALS = "Invalid credentials"

# Upload errors
ERROR_NOT_AN_IMAGE = "Please select an image file"
ERROR_IMAGE_TOO_LARGE = "Image size should be less than 5MB"

# Generic errors
ERROR_REMOTE = "Remote service unavailable"
ERROR_NOT_FOUND = "Not found"


class RemoteCallError(Exception):
    """A call to the remote table or storage API failed."""

    def __init__(self, operation: str, cause: Exception | None = None):
        self.operation = operation
        self.cause = cause
        super().__init__(f"{operation} failed: {cause}" if cause else f"{operation} failed")


class OrderPlacementError(Exception):
    """Order rows could not be written; partial writes were rolled back."""


class PaymentFailedError(Exception):
    """The payment gateway declined or failed to confirm a payment."""

    def __init__(self, order_number: str, reason: str = ERROR_PAYMENT_FAILED):
        self.order_number = order_number
        self.reason = reason
        super().__init__(f"{reason} (order {order_number})")


class ImageValidationError(ValueError):
    """Upload rejected before reaching storage."""
