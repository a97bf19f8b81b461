"""Receipt reporter port (abstract interface).

Checkout hands its shipment notice and receipt to a reporter instead of
printing them, so the outcome can be logged, printed or captured in tests.
"""

from abc import ABC, abstractmethod

from storefront.checkout.receipt import Receipt
from storefront.shipping.calculator import ShippingQuote


class ReceiptReporter(ABC):
    """Abstract receipt reporter interface."""

    @abstractmethod
    def report_shipment(self, quote: ShippingQuote) -> None:
        """Report the per-product weights and total weight of a shipment."""
        ...

    @abstractmethod
    def report_receipt(self, receipt: Receipt) -> None:
        """Report a completed checkout."""
        ...
