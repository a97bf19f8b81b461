"""Reporter that prints shipments and receipts as plain text.

The layout is informational and not meant to be parsed.
"""

import sys
from typing import TextIO

from storefront.checkout.receipt import Receipt
from storefront.reporting.port import ReceiptReporter
from storefront.shipping.calculator import ShippingQuote


def _number(value: float) -> str:
    """Render 205.0 as "205" and 0.45 as "0.45"."""
    return f"{value:.3f}".rstrip("0").rstrip(".")


class ConsoleReporter(ReceiptReporter):
    def __init__(self, stream: TextIO | None = None) -> None:
        self.stream = stream or sys.stdout

    def _write(self, text: str = "") -> None:
        self.stream.write(text + "\n")

    def report_shipment(self, quote: ShippingQuote) -> None:
        self._write()
        self._write("== Items to ship ==")
        for line in quote.lines:
            self._write(f"{line.quantity}x {line.product_name} {round(line.unit_weight * 1000)}g")
        self._write(f"Total weight to ship: {_number(quote.total_weight)}kg")

    def report_receipt(self, receipt: Receipt) -> None:
        self._write()
        self._write("== Receipt ==")
        for line in receipt.lines:
            self._write(f"{line.quantity}x {line.product_name} {_number(line.line_total)}")
        self._write(f"Subtotal: {_number(receipt.subtotal)}")
        self._write(f"Shipping: {_number(receipt.shipping_cost)}")
        self._write(f"Total Paid: {_number(receipt.total)}")
        self._write(f"Wallet Left: {_number(receipt.wallet_left)}")
        self._write("----")
