"""Unit tests for Value Objects."""

import pytest

from beerstock.domain.exceptions import ValidationError
from beerstock.domain.model.value_objects import MAX_ADJUSTMENT, StockAmount


class TestStockAmount:

    def test_valid_amount(self):
        assert StockAmount(5).value == 5

    def test_zero_is_allowed(self):
        assert StockAmount(0).is_zero

    def test_ceiling_is_inclusive(self):
        assert StockAmount(MAX_ADJUSTMENT).value == 100

    def test_above_ceiling_rejected(self):
        with pytest.raises(ValidationError, match="at most 100"):
            StockAmount(101)

    def test_negative_rejected(self):
        with pytest.raises(ValidationError, match="must not be negative"):
            StockAmount(-1)

    def test_non_integer_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            StockAmount(2.5)

    def test_bool_rejected(self):
        with pytest.raises(ValidationError, match="must be an integer"):
            StockAmount(True)

    def test_violation_names_the_field(self):
        with pytest.raises(ValidationError) as excinfo:
            StockAmount(-3)
        assert [v.field for v in excinfo.value.violations] == ["amount"]

    def test_immutable(self):
        amount = StockAmount(3)
        with pytest.raises(AttributeError):
            amount.value = 4  # type: ignore[misc]
