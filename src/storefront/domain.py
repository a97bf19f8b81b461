"""Storefront bounded context — Products, Customers, Carts and Checkout.

Handles product stock and expiry, cart line items, shipping cost and the
checkout flow that charges a customer's wallet. All state lives in Protean's
in-memory providers.
"""

import structlog
from protean.domain import Domain

storefront = Domain(name="storefront")

logger = structlog.get_logger(__name__)
