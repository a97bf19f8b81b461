"""Checkout — turns a cart into a paid purchase.

Flow:
    1. Validate: the cart has items; every product is still fresh and in stock
    2. Price:    subtotal + shipping on the cart's shipped units
    3. Afford:   the customer's wallet covers the total
    4. Commit:   take stock for every line, debit the wallet
    5. Report:   hand the shipment and receipt to the reporter
    6. Reset:    empty the cart

Steps 1-3 mutate nothing, so a rejection leaves cart, products and customer
exactly as they were. Stock and expiry are checked again here even though the
cart checked them on add: time passes and stock moves between the two.
"""

from datetime import date

import structlog
from protean.exceptions import ValidationError

from storefront.checkout.receipt import Receipt, ReceiptLine
from storefront.exceptions import EmptyCart, InsufficientFunds, InsufficientStock, ProductExpired
from storefront.reporting import get_reporter
from storefront.shipping import get_calculator

logger = structlog.get_logger(__name__)


class CheckoutService:
    def __init__(self, calculator=None, reporter=None):
        self.calculator = calculator or get_calculator()
        self.reporter = reporter or get_reporter()

    def checkout(self, customer, cart, products, as_of: date | None = None) -> Receipt:
        """Charge ``customer`` for everything in ``cart``.

        Args:
            customer: the paying Customer.
            cart: the Cart to check out.
            products: mapping of product name to Product for every line in the cart.
            as_of: date used for expiry checks; defaults to today.
        """
        self._validate(cart, products, as_of)

        subtotal = cart.subtotal()
        shipping = self.calculator.compute_cost(cart.shippable_units())
        total = subtotal + shipping.cost

        if not customer.can_afford(total):
            raise InsufficientFunds(
                {"wallet_balance": [f"Wallet balance {customer.wallet_balance:g} cannot cover {total:g}"]}
            )

        self._commit(customer, cart, products, total)

        receipt = Receipt(
            customer_name=customer.name,
            lines=tuple(
                ReceiptLine(product_name=item.product_name, quantity=item.quantity, unit_price=item.unit_price)
                for item in cart.items
            ),
            subtotal=subtotal,
            shipping=shipping,
            total=total,
            wallet_left=customer.wallet_balance,
        )

        if not shipping.is_empty:
            self.reporter.report_shipment(shipping)
        self.reporter.report_receipt(receipt)

        cart.check_out(customer.id, receipt)

        logger.info(
            "Checkout completed",
            customer_id=str(customer.id),
            subtotal=subtotal,
            shipping=shipping.cost,
            total=total,
        )
        return receipt

    def _validate(self, cart, products, as_of):
        if cart.is_empty():
            raise EmptyCart({"cart": ["Cart is empty"]})

        for item in cart.items:
            product = products.get(item.product_name)
            if product is None:
                raise ValidationError({"products": [f"No product supplied for cart line '{item.product_name}'"]})
            if product.is_expired(as_of):
                raise ProductExpired({"product": [f"{product.name} is expired"]})
            if product.stock_quantity < item.quantity:
                raise InsufficientStock(
                    {"stock_quantity": [f"Out of stock: {product.name} has {product.stock_quantity} left"]}
                )

    def _commit(self, customer, cart, products, total):
        """Take stock and debit the wallet together, restoring both if either fails.

        The restore also drops any ``StockReduced`` events raised before the
        failure, so persisting a product afterwards publishes nothing that
        did not happen.
        """
        names = [item.product_name for item in cart.items]
        stock_before = {name: products[name].stock_quantity for name in names}
        events_before = {name: len(products[name]._events) for name in names}
        balance_before = customer.wallet_balance

        try:
            for item in cart.items:
                products[item.product_name].reduce_stock(item.quantity)
            customer.pay(total)
        except Exception:
            for name, stock in stock_before.items():
                products[name].stock_quantity = stock
                del products[name]._events[events_before[name] :]
            customer.wallet_balance = balance_before
            logger.error("Checkout commit failed, stock and wallet restored", customer_id=str(customer.id))
            raise
