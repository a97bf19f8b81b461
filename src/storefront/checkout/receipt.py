"""Receipt — what a successful checkout charged and what is left in the wallet."""

from dataclasses import dataclass

from storefront.shipping.calculator import ShippingQuote


@dataclass(frozen=True)
class ReceiptLine:
    product_name: str
    quantity: int
    unit_price: float

    @property
    def line_total(self) -> float:
        return self.unit_price * self.quantity


@dataclass(frozen=True)
class Receipt:
    customer_name: str
    lines: tuple[ReceiptLine, ...]
    subtotal: float
    shipping: ShippingQuote
    total: float
    wallet_left: float

    @property
    def shipping_cost(self) -> float:
        return self.shipping.cost
