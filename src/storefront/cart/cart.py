"""Cart aggregate — line items waiting to be checked out.

A cart holds one line per product, keyed by product name, in the order
products were first added. Stock and expiry are checked when items are
added, but stock is only taken at checkout.
"""

import json
from datetime import UTC, date, datetime

from protean.exceptions import ValidationError
from protean.fields import DateTime, Float, HasMany, Integer, String

from storefront.cart.events import CartCheckedOut, CartCleared, CartItemAdded
from storefront.domain import storefront
from storefront.exceptions import InsufficientStock, ProductExpired
from storefront.shipping.calculator import ShipmentLine


@storefront.entity(part_of="Cart")
class CartItem:
    product_name = String(required=True, max_length=100)
    unit_price = Float(required=True, min_value=0.0)
    unit_weight = Float(min_value=0.0)  # None for products that are not shipped
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


@storefront.aggregate
class Cart:
    items = HasMany(CartItem)
    created_at = DateTime()
    updated_at = DateTime()

    @classmethod
    def create(cls):
        now = datetime.now(UTC)
        return cls(created_at=now, updated_at=now)

    # -------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------
    def item_for(self, product_name):
        return next((i for i in self.items if i.product_name == product_name), None)

    def is_empty(self) -> bool:
        return not self.items

    def subtotal(self) -> float:
        return sum(item.line_total for item in self.items)

    def shippable_units(self) -> list[ShipmentLine]:
        """One shipment line per shipped product, carrying its full quantity."""
        return [
            ShipmentLine(
                product_name=item.product_name,
                quantity=item.quantity,
                unit_weight=item.unit_weight,
            )
            for item in self.items
            if item.unit_weight is not None
        ]

    # -------------------------------------------------------------------
    # Item management
    # -------------------------------------------------------------------
    def add_item(self, product, quantity, as_of: date | None = None):
        """Add ``quantity`` units of ``product`` (or grow its existing line)."""
        if quantity <= 0:
            raise ValidationError({"quantity": ["Quantity must be positive"]})
        if quantity > product.stock_quantity:
            raise InsufficientStock(
                {"quantity": [f"Only {product.stock_quantity} of {product.name} in stock, cannot add {quantity}"]}
            )
        if product.is_expired(as_of):
            raise ProductExpired({"product": [f"{product.name} expired on {product.expires_on.isoformat()}"]})

        existing = self.item_for(product.name)
        now = datetime.now(UTC)

        if existing:
            combined = existing.quantity + quantity
            if combined > product.stock_quantity:
                raise InsufficientStock(
                    {
                        "quantity": [
                            f"Cart already holds {existing.quantity} of {product.name}; "
                            f"{combined} exceeds the {product.stock_quantity} in stock"
                        ]
                    }
                )
            existing.quantity = combined
            line_quantity = combined
        else:
            self.add_items(
                CartItem(
                    product_name=product.name,
                    unit_price=product.price,
                    unit_weight=product.unit_weight() if product.needs_shipping else None,
                    quantity=quantity,
                    added_at=now,
                )
            )
            line_quantity = quantity

        self.updated_at = now

        self.raise_(
            CartItemAdded(
                cart_id=str(self.id),
                product_name=product.name,
                quantity=quantity,
                line_quantity=line_quantity,
            )
        )

    def _discard_items(self):
        removed = list(self.items)
        for item in removed:
            self.remove_items(item)
        self.updated_at = datetime.now(UTC)
        return len(removed)

    def clear(self):
        """Drop every line item. Product stock is not touched."""
        items_removed = self._discard_items()
        if items_removed:
            self.raise_(CartCleared(cart_id=str(self.id), items_removed=items_removed))

    # -------------------------------------------------------------------
    # Checkout
    # -------------------------------------------------------------------
    def check_out(self, customer_id, receipt):
        """Record a paid checkout and empty the cart."""
        if self.is_empty():
            raise ValidationError({"cart": ["Cannot check out an empty cart"]})

        self.raise_(
            CartCheckedOut(
                cart_id=str(self.id),
                customer_id=str(customer_id),
                items=json.dumps(
                    [
                        {
                            "product_name": line.product_name,
                            "quantity": line.quantity,
                            "line_total": line.line_total,
                        }
                        for line in receipt.lines
                    ]
                ),
                subtotal=receipt.subtotal,
                shipping=receipt.shipping_cost,
                total=receipt.total,
            )
        )
        self._discard_items()
