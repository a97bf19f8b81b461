"""Typed rejections raised by the cart and checkout flow.

They extend Protean's ValidationError so callers can handle them alongside
every other domain rejection, and carry the same ``messages`` dict.
"""

from protean.exceptions import ValidationError


class CheckoutError(ValidationError):
    """Base class for cart and checkout rejections."""


class InsufficientStock(CheckoutError):
    """Requested quantity exceeds the product's current stock."""


class ProductExpired(CheckoutError):
    """The product is past its expiry date."""


class EmptyCart(CheckoutError):
    """Checkout was attempted on a cart without items."""


class InsufficientFunds(CheckoutError):
    """The customer's wallet cannot cover the order total."""
