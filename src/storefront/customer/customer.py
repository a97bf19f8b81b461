"""Customer aggregate — a shopper and the wallet checkout charges."""

from protean.exceptions import ValidationError
from protean.fields import Float, String

from storefront.customer.events import WalletDebited
from storefront.domain import storefront
from storefront.exceptions import InsufficientFunds


@storefront.aggregate
class Customer:
    name = String(required=True, max_length=255)
    wallet_balance = Float(default=0.0, min_value=0.0)

    def can_afford(self, amount) -> bool:
        return self.wallet_balance >= amount

    def pay(self, amount):
        """Debit the wallet. No partial payment: the balance is untouched when it cannot cover ``amount``."""
        if amount < 0:
            raise ValidationError({"amount": ["Amount cannot be negative"]})
        if not self.can_afford(amount):
            raise InsufficientFunds(
                {"wallet_balance": [f"Wallet balance {self.wallet_balance:g} cannot cover {amount:g}"]}
            )

        self.wallet_balance -= amount

        self.raise_(
            WalletDebited(
                customer_id=str(self.id),
                amount=amount,
                remaining_balance=self.wallet_balance,
            )
        )
