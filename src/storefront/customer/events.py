"""Domain events for the Customer aggregate."""

from protean.fields import Float, Identifier

from storefront.domain import storefront


@storefront.event(part_of="Customer")
class WalletDebited:
    """A customer's wallet was charged for a checkout."""

    customer_id = Identifier(required=True)
    amount = Float(required=True)
    remaining_balance = Float(required=True)
