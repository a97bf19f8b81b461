"""Shipping cost calculation with a configurable per-kilogram rate."""

import os

from storefront.shipping.calculator import RATE_PER_KG, ShippingCalculator

_calculator_instance: ShippingCalculator | None = None


def get_calculator() -> ShippingCalculator:
    """Return the configured shipping calculator (singleton).

    The rate defaults to RATE_PER_KG and can be overridden with the
    SHIPPING_RATE_PER_KG environment variable.
    """
    global _calculator_instance
    if _calculator_instance is None:
        raw_rate = os.environ.get("SHIPPING_RATE_PER_KG")
        try:
            rate = float(raw_rate) if raw_rate else RATE_PER_KG
        except ValueError:
            raise ValueError(f"Invalid SHIPPING_RATE_PER_KG: {raw_rate}") from None
        _calculator_instance = ShippingCalculator(rate_per_kg=rate)
    return _calculator_instance


def reset_calculator() -> None:
    """Reset the calculator singleton (useful for testing)."""
    global _calculator_instance
    _calculator_instance = None
