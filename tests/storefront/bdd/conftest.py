"""Shared BDD fixtures and step definitions for the storefront domain."""

from datetime import date, timedelta

import pytest
from pytest_bdd import given, parsers, then
from storefront.cart.cart import Cart
from storefront.customer.customer import Customer
from storefront.product.product import Product

TODAY = date(2026, 3, 10)


@pytest.fixture
def today():
    return TODAY


@pytest.fixture
def catalogue():
    return {}


@pytest.fixture
def cart():
    return Cart.create()


@pytest.fixture
def error():
    """Container for capturing errors raised in When steps."""
    return {}


@pytest.fixture
def outcome():
    """Container for the receipt of a successful checkout."""
    return {}


# ---------------------------------------------------------------------------
# Given steps
# ---------------------------------------------------------------------------
@given(
    parsers.cfparse(
        'a perishable product "{name}" priced {price:g} with {stock:d} in stock '
        "weighing {weight:g} kg expiring in {days:d} days"
    )
)
def perishable_product(catalogue, today, name, price, stock, weight, days):
    catalogue[name] = Product.perishable(name, price, stock, expires_on=today + timedelta(days=days), weight=weight)


@given(parsers.cfparse('a physical product "{name}" priced {price:g} with {stock:d} in stock weighing {weight:g} kg'))
def physical_product(catalogue, name, price, stock, weight):
    catalogue[name] = Product.physical(name, price, stock, weight=weight)


@given(parsers.cfparse('a digital product "{name}" priced {price:g} with {stock:d} in stock'))
def digital_product(catalogue, name, price, stock):
    catalogue[name] = Product.digital(name, price, stock)


@given(parsers.cfparse("a customer with {balance:g} in the wallet"), target_fixture="customer")
def customer_with_wallet(balance):
    return Customer(name="Abdulrahman Shalan", wallet_balance=balance)


# ---------------------------------------------------------------------------
# Then steps
# ---------------------------------------------------------------------------
@then(parsers.cfparse('it fails with "{error_name}"'))
def fails_with(error, error_name):
    assert "exc" in error, "Expected an error but none was raised"
    assert type(error["exc"]).__name__ == error_name


@then(parsers.cfparse("the wallet holds {balance:g}"))
def wallet_holds(customer, balance):
    assert customer.wallet_balance == pytest.approx(balance)


@then(parsers.cfparse('"{name}" has {stock:d} left in stock'))
def stock_left(catalogue, name, stock):
    assert catalogue[name].stock_quantity == stock


@then("the cart is empty")
def cart_is_empty(cart):
    assert cart.is_empty()


@then(parsers.cfparse('the cart holds {quantity:d} "{name}"'))
def cart_holds(cart, quantity, name):
    item = cart.item_for(name)
    assert item is not None
    assert item.quantity == quantity
