"""Recording reporter for tests.

Keeps every shipment and receipt it is handed so assertions can inspect
checkout output without capturing console text.
"""

from storefront.checkout.receipt import Receipt
from storefront.reporting.port import ReceiptReporter
from storefront.shipping.calculator import ShippingQuote


class FakeReporter(ReceiptReporter):
    def __init__(self) -> None:
        self.shipments: list[ShippingQuote] = []
        self.receipts: list[Receipt] = []

    def report_shipment(self, quote: ShippingQuote) -> None:
        self.shipments.append(quote)

    def report_receipt(self, receipt: Receipt) -> None:
        self.receipts.append(receipt)
