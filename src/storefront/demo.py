"""Demo: stock a small shop and walk one customer through a few checkouts.

Scenarios:
    1. Cheese, Biscuits and a Mobile Card: succeeds
    2. Three TVs: the wallet cannot cover them, cart is cleared
    3. Twenty Cheese: more than in stock, cart is cleared
    4. Checkout with nothing in the cart
    5. Yogurt that expired two days ago

Usage:
    storefront-demo
"""

from datetime import date, timedelta

from protean import current_domain

from storefront.cart.items import AddToCart
from storefront.cart.management import ClearCart, CreateCart
from storefront.checkout.placement import CheckoutCart
from storefront.customer.registration import RegisterCustomer
from storefront.exceptions import CheckoutError
from storefront.product.product import ProductKind
from storefront.product.registration import RegisterProduct
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


def _process(command):
    return current_domain.process(command, asynchronous=False)


def seed_catalogue(today: date) -> None:
    catalogue = [
        RegisterProduct(
            name="Cheese",
            kind=ProductKind.PERISHABLE.value,
            price=100,
            stock_quantity=5,
            expires_on=today + timedelta(days=3),
            weight=0.2,
        ),
        RegisterProduct(
            name="Biscuits",
            kind=ProductKind.PERISHABLE.value,
            price=150,
            stock_quantity=2,
            expires_on=today + timedelta(days=5),
            weight=0.7,
        ),
        RegisterProduct(name="TV", kind=ProductKind.PHYSICAL.value, price=5000, stock_quantity=3, weight=10),
        RegisterProduct(name="Mobile Card", kind=ProductKind.DIGITAL.value, price=50, stock_quantity=20),
        RegisterProduct(
            name="Old Yogurt",
            kind=ProductKind.PERISHABLE.value,
            price=30,
            stock_quantity=1,
            expires_on=today - timedelta(days=2),
            weight=0.2,
        ),
    ]
    for command in catalogue:
        _process(command)


def run_scenarios(today: date | None = None) -> list[tuple[str, str]]:
    """Run every scenario and return ``(scenario, outcome)`` pairs.

    The outcome is "ok" for a successful checkout, otherwise the name of the
    error that stopped the scenario.
    """
    today = today or date.today()
    seed_catalogue(today)
    customer_id = _process(RegisterCustomer(name="Abdulrahman Shalan", wallet_balance=10000))
    cart_id = _process(CreateCart())

    scenarios = [
        ("mixed basket", [("Cheese", 2), ("Biscuits", 1), ("Mobile Card", 1)], False),
        ("three TVs", [("TV", 3)], True),
        ("too much cheese", [("Cheese", 20)], True),
        ("empty cart", [], False),
        ("expired yogurt", [("Old Yogurt", 1)], False),
    ]

    outcomes = []
    for name, basket, clear_on_error in scenarios:
        try:
            for product_name, quantity in basket:
                _process(AddToCart(cart_id=cart_id, product_name=product_name, quantity=quantity, as_of=today))
            _process(CheckoutCart(cart_id=cart_id, customer_id=customer_id, as_of=today))
        except CheckoutError as exc:
            logger.warning("Scenario failed", scenario=name, error=type(exc).__name__, messages=exc.messages)
            outcomes.append((name, type(exc).__name__))
            if clear_on_error:
                _process(ClearCart(cart_id=cart_id))
        else:
            outcomes.append((name, "ok"))

    return outcomes


def main():
    from storefront.domain import storefront
    from storefront.reporting import set_reporter
    from storefront.reporting.console_adapter import ConsoleReporter
    from storefront.utils.logging import configure_logging

    configure_logging()
    storefront.init()
    set_reporter(ConsoleReporter())

    with storefront.domain_context():
        for scenario, outcome in run_scenarios():
            print(f"{scenario}: {outcome}")


if __name__ == "__main__":
    main()
