"""Cart item management — command and handler."""

from protean import handle
from protean.fields import Date, Identifier, Integer, String
from protean.utils.globals import current_domain

from storefront.cart.cart import Cart
from storefront.domain import storefront
from storefront.product.product import Product


@storefront.command(part_of="Cart")
class AddToCart:
    cart_id = Identifier(required=True)
    product_name = String(required=True, max_length=100)
    quantity = Integer(required=True, min_value=1)
    as_of = Date()  # Optional: defaults to today


@storefront.command_handler(part_of=Cart)
class ManageCartItemsHandler:
    @handle(AddToCart)
    def add_to_cart(self, command):
        repo = current_domain.repository_for(Cart)
        cart = repo.get(command.cart_id)
        product = current_domain.repository_for(Product).get(command.product_name)
        cart.add_item(product, command.quantity, as_of=command.as_of)
        repo.add(cart)
