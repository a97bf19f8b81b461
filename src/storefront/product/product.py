"""Product aggregate — an item for sale with stock, price and kind-specific traits.

Products come in three kinds. Rather than a class per kind, the kind is a
tagged value resolved to a capability set:

    Perishable: expires after ``expires_on``, ships, has a weight
    Physical:   never expires, ships, has a weight
    Digital:    never expires, does not ship, has no weight

The product name is the aggregate's identity and the key under which carts
hold line items.
"""

from dataclasses import dataclass
from datetime import date
from enum import Enum

from protean import invariant
from protean.exceptions import ValidationError
from protean.fields import Date, Float, Integer, String

from storefront.domain import storefront
from storefront.exceptions import InsufficientStock
from storefront.product.events import StockReduced


class ProductKind(Enum):
    PERISHABLE = "Perishable"
    PHYSICAL = "Physical"
    DIGITAL = "Digital"


@dataclass(frozen=True)
class Capabilities:
    expires: bool
    shippable: bool


_CAPABILITIES = {
    ProductKind.PERISHABLE: Capabilities(expires=True, shippable=True),
    ProductKind.PHYSICAL: Capabilities(expires=False, shippable=True),
    ProductKind.DIGITAL: Capabilities(expires=False, shippable=False),
}


@storefront.aggregate
class Product:
    name = String(identifier=True, max_length=100)
    kind = String(required=True, choices=ProductKind)
    price = Float(required=True, min_value=0.0)
    stock_quantity = Integer(default=0, min_value=0)
    weight = Float(min_value=0.0)  # kg, per unit
    expires_on = Date()

    @invariant.post
    def expiry_date_only_for_expiring_products(self):
        if self.capabilities.expires and self.expires_on is None:
            raise ValidationError({"expires_on": [f"{self.kind} products need an expiry date"]})
        if not self.capabilities.expires and self.expires_on is not None:
            raise ValidationError({"expires_on": [f"{self.kind} products do not expire"]})

    @invariant.post
    def weight_only_for_shippable_products(self):
        if self.capabilities.shippable and not self.weight:
            raise ValidationError({"weight": [f"{self.kind} products need a positive weight"]})
        if not self.capabilities.shippable and self.weight is not None:
            raise ValidationError({"weight": [f"{self.kind} products are not shipped and carry no weight"]})

    # -------------------------------------------------------------------
    # Factories
    # -------------------------------------------------------------------
    @classmethod
    def register(cls, name, kind, price, stock_quantity=0, weight=None, expires_on=None):
        try:
            kind = ProductKind(kind)
        except ValueError:
            raise ValidationError({"kind": [f"Unknown product kind '{kind}'"]}) from None

        return cls(
            name=name,
            kind=kind.value,
            price=price,
            stock_quantity=stock_quantity,
            weight=weight,
            expires_on=expires_on,
        )

    @classmethod
    def perishable(cls, name, price, stock_quantity, expires_on, weight):
        return cls.register(name, ProductKind.PERISHABLE, price, stock_quantity, weight=weight, expires_on=expires_on)

    @classmethod
    def physical(cls, name, price, stock_quantity, weight):
        return cls.register(name, ProductKind.PHYSICAL, price, stock_quantity, weight=weight)

    @classmethod
    def digital(cls, name, price, stock_quantity):
        return cls.register(name, ProductKind.DIGITAL, price, stock_quantity)

    # -------------------------------------------------------------------
    # Capabilities
    # -------------------------------------------------------------------
    @property
    def capabilities(self) -> Capabilities:
        return _CAPABILITIES[ProductKind(self.kind)]

    @property
    def needs_shipping(self) -> bool:
        return self.capabilities.shippable

    def is_expired(self, as_of: date | None = None) -> bool:
        """A product is expired when ``as_of`` (default: today) is strictly after its expiry date."""
        if not self.capabilities.expires:
            return False
        return (as_of or date.today()) > self.expires_on

    def unit_weight(self) -> float:
        if not self.needs_shipping:
            raise ValidationError({"weight": [f"{self.name} is not shipped and has no weight"]})
        return self.weight

    # -------------------------------------------------------------------
    # Stock
    # -------------------------------------------------------------------
    def reduce_stock(self, amount):
        """Take ``amount`` units out of stock. Stock is left untouched on failure."""
        if amount <= 0:
            raise ValidationError({"amount": ["Amount must be positive"]})
        if amount > self.stock_quantity:
            raise InsufficientStock(
                {"stock_quantity": [f"Only {self.stock_quantity} of {self.name} left, cannot take {amount}"]}
            )

        previous = self.stock_quantity
        self.stock_quantity = previous - amount

        self.raise_(
            StockReduced(
                product_name=self.name,
                quantity=amount,
                previous_stock=previous,
                remaining_stock=self.stock_quantity,
            )
        )
