"""Unit tests for domain exceptions."""

from beerstock.domain.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    StockExceededError,
    ValidationError,
    Violation,
)


class TestStatusCodes:

    def test_not_found_maps_to_404(self):
        assert EntityNotFoundError("gone").status_code == 404

    def test_client_errors_map_to_400(self):
        assert DuplicateNameError("Eisenbahn").status_code == 400
        assert StockExceededError(1, 20, 40, 50).status_code == 400
        assert ValidationError("bad").status_code == 400


class TestValidationError:

    def test_message_joins_violations(self):
        exc = ValidationError.from_violations([
            Violation("name", "is required"),
            Violation("max", "must not be negative"),
        ])
        assert str(exc) == "name: is required; max: must not be negative"
        assert [v.field for v in exc.violations] == ["name", "max"]


class TestStockExceededError:

    def test_message_for_adjustment(self):
        exc = StockExceededError(3, 20, 40, 50)
        assert str(exc) == "Stock exceeded for beer 3: adding 40 to 20 exceeds max capacity 50"

    def test_message_for_new_beer_has_no_id(self):
        exc = StockExceededError(None, 0, 6, 5)
        assert str(exc) == "Stock exceeded: initial quantity 6 exceeds max capacity 5"
        assert "None" not in str(exc)
