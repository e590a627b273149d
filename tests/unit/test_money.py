"""
Unit tests for the Money value object
"""

from decimal import Decimal

import pytest

from spa_admin.domain.value_objects import Money, UpdateResult


class TestMoney:
    def test_rounds_half_up(self):
        assert Money("2.345").amount == Decimal("2.35")

    def test_negative_rejected(self):
        with pytest.raises(ValueError, match="negative"):
            Money(-1)

    def test_invalid_rejected(self):
        with pytest.raises(ValueError, match="Invalid amount"):
            Money("abc")

    def test_total(self):
        assert Money.total([0.1, 0.2, Money(1)]).amount == Decimal("1.30")
        assert Money.total([]) == Money.zero()

    def test_difference_can_be_negative(self):
        assert Money(5).difference(Money(7.5)) == Decimal("-2.50")

    def test_format(self):
        assert Money(1234.5).format("$") == "$1,234.50"
        assert str(Money(3)) == "3.00"
        assert float(Money("9.99")) == 9.99


class TestUpdateResult:
    def test_applied_flag(self):
        assert UpdateResult.APPLIED.applied
        assert not UpdateResult.NOT_FOUND_NOOP.applied
