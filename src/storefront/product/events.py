"""Domain events for the Product aggregate."""

from protean.fields import Integer, String

from storefront.domain import storefront


@storefront.event(part_of="Product")
class StockReduced:
    """Units of a product were taken out of stock by a checkout."""

    product_name = String(required=True, max_length=100)
    quantity = Integer(required=True)
    previous_stock = Integer(required=True)
    remaining_stock = Integer(required=True)
