"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist.
"""

from __future__ import annotations

from dataclasses import dataclass

from beerstock.domain.exceptions import ValidationError, Violation

MAX_ADJUSTMENT = 100


@dataclass(frozen=True)
class StockAmount:
    """How many units a single stock adjustment moves.

    The ceiling applies per call and is independent of a beer's own
    capacity. Zero is allowed and means "no change".
    """

    value: int

    def __post_init__(self) -> None:
        # bool is an int subclass; True is not a quantity
        if not isinstance(self.value, int) or isinstance(self.value, bool):
            raise ValidationError.from_violations([
                Violation("amount", f"must be an integer, got {type(self.value).__name__}")
            ])
        if self.value < 0:
            raise ValidationError.from_violations([
                Violation("amount", "must not be negative")
            ])
        if self.value > MAX_ADJUSTMENT:
            raise ValidationError.from_violations([
                Violation("amount", f"must be at most {MAX_ADJUSTMENT}")
            ])

    @property
    def is_zero(self) -> bool:
        return self.value == 0
