"""Tests for shipping cost calculation."""

import pytest
from storefront.shipping import get_calculator, reset_calculator
from storefront.shipping.calculator import RATE_PER_KG, ShipmentLine, ShippingCalculator, ShippingQuote
from structlog.testing import capture_logs


class TestComputeCost:
    def test_empty_shipment_is_free(self):
        quote = ShippingCalculator().compute_cost([])
        assert quote == ShippingQuote()
        assert quote.cost == 0
        assert quote.is_empty

    def test_empty_shipment_is_not_reported(self):
        with capture_logs() as logs:
            ShippingCalculator().compute_cost([])
        assert logs == []

    def test_cost_is_weight_times_rate_rounded_up(self):
        quote = ShippingCalculator().compute_cost([ShipmentLine("Cheese", 2, 0.2)])
        assert quote.total_weight == pytest.approx(0.4)
        assert quote.cost == 5

    def test_fractional_cost_rounds_up(self):
        quote = ShippingCalculator().compute_cost(
            [ShipmentLine("Cheese", 2, 0.2), ShipmentLine("Biscuits", 1, 0.7)]
        )
        assert quote.total_weight == pytest.approx(1.1)
        assert quote.cost == 14

    def test_whole_cost_is_not_bumped_by_float_noise(self):
        # 0.1 * 3 is 0.30000000000000004 in binary floating point
        quote = ShippingCalculator(rate_per_kg=10).compute_cost([ShipmentLine("Tea", 3, 0.1)])
        assert quote.cost == 3

    def test_lines_for_same_product_are_grouped(self):
        quote = ShippingCalculator().compute_cost(
            [
                ShipmentLine("Cheese", 1, 0.2),
                ShipmentLine("TV", 1, 10),
                ShipmentLine("Cheese", 1, 0.2),
            ]
        )
        assert [(line.product_name, line.quantity) for line in quote.lines] == [("Cheese", 2), ("TV", 1)]
        assert quote.total_weight == pytest.approx(10.4)
        assert quote.cost == 125

    def test_custom_rate(self):
        quote = ShippingCalculator(rate_per_kg=2.5).compute_cost([ShipmentLine("TV", 3, 10)])
        assert quote.cost == 75

    def test_negative_rate_is_rejected(self):
        with pytest.raises(ValueError):
            ShippingCalculator(rate_per_kg=-1)

    def test_shipment_is_reported(self):
        with capture_logs() as logs:
            ShippingCalculator().compute_cost([ShipmentLine("Cheese", 2, 0.2)])
        items = [entry for entry in logs if entry["event"] == "Item to ship"]
        assert items[0]["product_name"] == "Cheese"
        assert items[0]["quantity"] == 2
        assert items[0]["unit_weight_grams"] == 200
        totals = [entry for entry in logs if entry["event"] == "Shipment weighed"]
        assert totals[0]["cost"] == 5


class TestCalculatorFactory:
    def test_default_rate(self, monkeypatch):
        monkeypatch.delenv("SHIPPING_RATE_PER_KG", raising=False)
        reset_calculator()
        assert get_calculator().rate_per_kg == RATE_PER_KG == 12.0

    def test_rate_from_environment(self, monkeypatch):
        monkeypatch.setenv("SHIPPING_RATE_PER_KG", "20")
        reset_calculator()
        assert get_calculator().rate_per_kg == 20.0

    def test_invalid_rate_from_environment(self, monkeypatch):
        monkeypatch.setenv("SHIPPING_RATE_PER_KG", "cheap")
        reset_calculator()
        with pytest.raises(ValueError):
            get_calculator()

    def test_singleton(self, monkeypatch):
        monkeypatch.delenv("SHIPPING_RATE_PER_KG", raising=False)
        reset_calculator()
        assert get_calculator() is get_calculator()
