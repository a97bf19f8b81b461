"""Reporter that emits shipments and receipts as structured log events."""

import structlog

from storefront.checkout.receipt import Receipt
from storefront.reporting.port import ReceiptReporter
from storefront.shipping.calculator import ShippingQuote

logger = structlog.get_logger(__name__)


class LogReporter(ReceiptReporter):
    def report_shipment(self, quote: ShippingQuote) -> None:
        logger.info(
            "Items to ship",
            items=[
                {"product_name": line.product_name, "quantity": line.quantity, "unit_weight_kg": line.unit_weight}
                for line in quote.lines
            ],
            total_weight_kg=quote.total_weight,
        )

    def report_receipt(self, receipt: Receipt) -> None:
        logger.info(
            "Receipt",
            customer=receipt.customer_name,
            items=[
                {"product_name": line.product_name, "quantity": line.quantity, "line_total": line.line_total}
                for line in receipt.lines
            ],
            subtotal=receipt.subtotal,
            shipping=receipt.shipping_cost,
            total_paid=receipt.total,
            wallet_left=receipt.wallet_left,
        )
