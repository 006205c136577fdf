"""
Error taxonomy for the storefront core.

Every error carries a user-facing message; the session orchestrator turns
non-fatal errors into a corrective view with a navigation keyboard.
"""

from html import escape


class StorefrontError(Exception):
    """Base class for all storefront errors."""

    message = "Something went wrong."

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class UnknownProduct(StorefrontError):
    """Product id is not in the catalog."""

    message = "Invalid product selected."

    def __init__(self, product_id: str, message: str | None = None):
        self.product_id = product_id
        super().__init__(message)


class NotInCart(StorefrontError):
    """Product is not in the user's cart."""

    message = "Item not found in cart."

    def __init__(self, product_id: str, message: str | None = None):
        self.product_id = product_id
        super().__init__(message)


class EmptyCart(StorefrontError):
    """Checkout requested with an empty cart."""

    message = "Your cart is empty! Cannot checkout."


class InvalidPhone(StorefrontError):
    message = "Invalid phone number. Please provide a valid number (e.g., +1234567890)."


class InvalidAddress(StorefrontError):
    message = "Invalid shipping address. Please provide a valid address (at least 5 characters)."


class MalformedConfirmation(StorefrontError):
    """Confirmation input outside of the expected confirm/cancel choice."""

    message = "Something went wrong. Please start over by typing /start."


class ImageUnavailable(StorefrontError):
    """Product image could not be found or delivered."""

    def __init__(self, product_name: str, message: str | None = None):
        self.product_name = product_name
        super().__init__(
            message
            or f"Error: Image for {escape(product_name)} not found or could not be displayed."
        )


class MissingCredential(StorefrontError):
    """Bot token is not configured. Fatal at startup."""

    message = "Bot token not found in environment variables."
