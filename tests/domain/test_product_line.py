"""Unit tests for ProductLine."""

import dataclasses

import pytest

from orderdesk.domain.model.product import ProductLine
from orderdesk.domain.model.value_objects import Money, Quantity


class TestProductLine:

    def test_line_total_is_price_times_quantity(self):
        line = ProductLine("Widget", Money.of("10.00"), Quantity(3))
        assert line.line_total == Money.of("30.00")

    def test_zero_quantity_gives_zero_total(self):
        line = ProductLine("Widget", Money.of("10.00"), Quantity(0))
        assert line.line_total == Money.zero()

    def test_total_follows_replacement(self):
        line = ProductLine("Widget", Money.of("10.00"), Quantity(3))
        edited = dataclasses.replace(line, quantity=Quantity(5))
        assert edited.line_total == Money.of("50.00")

    def test_lines_are_immutable(self):
        line = ProductLine("Widget", Money.of("10.00"), Quantity(3))
        with pytest.raises(dataclasses.FrozenInstanceError):
            line.name = "Gadget"
