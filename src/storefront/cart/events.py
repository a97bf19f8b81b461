"""Domain events for the Cart aggregate."""

from protean.fields import Float, Identifier, Integer, String, Text

from storefront.domain import storefront


@storefront.event(part_of="Cart")
class CartItemAdded:
    """A product was added to the cart, or its line quantity increased."""

    cart_id = Identifier(required=True)
    product_name = String(required=True, max_length=100)
    quantity = Integer(required=True)
    line_quantity = Integer(required=True)


@storefront.event(part_of="Cart")
class CartCleared:
    """All line items were discarded without a purchase."""

    cart_id = Identifier(required=True)
    items_removed = Integer(required=True)


@storefront.event(part_of="Cart")
class CartCheckedOut:
    """The cart's contents were paid for and the cart was emptied."""

    cart_id = Identifier(required=True)
    customer_id = Identifier(required=True)
    items = Text(required=True)  # JSON: list of {product_name, quantity, line_total}
    subtotal = Float(required=True)
    shipping = Float(required=True)
    total = Float(required=True)
