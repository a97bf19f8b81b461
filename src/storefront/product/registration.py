"""Product registration — command and handler."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Date, Float, Integer, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.product.product import Product, ProductKind


@storefront.command(part_of="Product")
class RegisterProduct:
    """Put a new product up for sale."""

    name = String(required=True, max_length=100)
    kind = String(required=True, choices=ProductKind)
    price = Float(required=True, min_value=0.0)
    stock_quantity = Integer(default=0, min_value=0)
    weight = Float(min_value=0.0)
    expires_on = Date()


@storefront.command_handler(part_of=Product)
class RegisterProductHandler:
    @handle(RegisterProduct)
    def register_product(self, command):
        repo = current_domain.repository_for(Product)
        try:
            repo.get(command.name)
        except ObjectNotFoundError:
            pass
        else:
            raise ValidationError({"name": [f"Product '{command.name}' is already registered"]})

        product = Product.register(
            name=command.name,
            kind=command.kind,
            price=command.price,
            stock_quantity=command.stock_quantity,
            weight=command.weight,
            expires_on=command.expires_on,
        )
        repo.add(product)
        return product.name
