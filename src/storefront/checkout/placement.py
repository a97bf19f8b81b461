"""Checkout placement — command and handler.

Loads the cart, the paying customer and every product in the cart, runs the
checkout and persists all of them in the handler's unit of work. A rejected
checkout raises before anything is written.
"""

import structlog
from protean import handle
from protean.fields import Date, Identifier
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.checkout.service import CheckoutService
from storefront.customer.customer import Customer
from storefront.domain import storefront
from storefront.product.product import Product
from storefront.utils.logging import add_context, clear_context

logger = structlog.get_logger(__name__)


@storefront.command(part_of="Cart")
class CheckoutCart:
    """Pay for everything in a cart from the customer's wallet."""

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    as_of = Date()  # Optional: defaults to today


@storefront.command_handler(part_of=Cart)
class CheckoutCartHandler:
    @handle(CheckoutCart)
    def checkout_cart(self, command):
        add_context(cart_id=str(command.cart_id))
        try:
            cart_repo = current_domain.repository_for(Cart)
            customer_repo = current_domain.repository_for(Customer)
            product_repo = current_domain.repository_for(Product)

            cart = cart_repo.get(command.cart_id)
            customer = customer_repo.get(command.customer_id)
            products = {item.product_name: product_repo.get(item.product_name) for item in cart.items}

            receipt = CheckoutService().checkout(customer, cart, products, as_of=command.as_of)

            for product in products.values():
                product_repo.add(product)
            customer_repo.add(customer)
            cart_repo.add(cart)

            logger.info("Cart checked out", customer_id=str(command.customer_id), total=receipt.total)
            return receipt
        finally:
            clear_context()
