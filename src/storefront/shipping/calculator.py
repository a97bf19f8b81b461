"""Shipping cost calculator.

Shipping is charged on total weight: every shipped unit contributes its unit
weight, and the sum is billed at a flat rate per kilogram, rounded up to a
whole currency unit.
"""

import math
from dataclasses import dataclass, field

import structlog

logger = structlog.get_logger(__name__)

RATE_PER_KG = 12.0

# Digits kept before rounding up, so 0.3 kg * 10 (3.0000000000000004) bills 3, not 4
_PRECISION = 9


@dataclass(frozen=True)
class ShipmentLine:
    """All shipped units of one product."""

    product_name: str
    quantity: int
    unit_weight: float

    @property
    def weight(self) -> float:
        return self.quantity * self.unit_weight


@dataclass(frozen=True)
class ShippingQuote:
    """Per-product breakdown, total weight (kg) and cost of a shipment."""

    lines: tuple[ShipmentLine, ...] = field(default_factory=tuple)
    total_weight: float = 0.0
    cost: int = 0

    @property
    def is_empty(self) -> bool:
        return not self.lines


class ShippingCalculator:
    def __init__(self, rate_per_kg: float = RATE_PER_KG) -> None:
        if rate_per_kg < 0:
            raise ValueError(f"Shipping rate cannot be negative: {rate_per_kg}")
        self.rate_per_kg = rate_per_kg

    def compute_cost(self, lines) -> ShippingQuote:
        """Group ``lines`` by product and price the shipment.

        Lines for the same product are merged, keeping the order in which
        products first appear. An empty shipment costs nothing and is not
        reported.
        """
        grouped: dict[str, ShipmentLine] = {}
        for line in lines:
            existing = grouped.get(line.product_name)
            if existing is None:
                grouped[line.product_name] = line
            else:
                grouped[line.product_name] = ShipmentLine(
                    product_name=line.product_name,
                    quantity=existing.quantity + line.quantity,
                    unit_weight=existing.unit_weight,
                )

        if not grouped:
            return ShippingQuote()

        total_weight = sum(line.weight for line in grouped.values())
        cost = math.ceil(round(total_weight * self.rate_per_kg, _PRECISION))

        for line in grouped.values():
            logger.info(
                "Item to ship",
                product_name=line.product_name,
                quantity=line.quantity,
                unit_weight_grams=round(line.unit_weight * 1000),
            )
        logger.info("Shipment weighed", total_weight_kg=total_weight, cost=cost)

        return ShippingQuote(lines=tuple(grouped.values()), total_weight=total_weight, cost=cost)
