"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the request layer can catch them uniformly. Each class carries the
transport status a request layer should answer with.
"""

from __future__ import annotations

from dataclasses import dataclass


class DomainException(Exception):
    """Base class for all domain errors."""

    status_code = 400


@dataclass(frozen=True)
class Violation:
    """A single broken field constraint."""

    field: str
    message: str

    def __str__(self) -> str:
        return f"{self.field}: {self.message}"


class ValidationError(DomainException):
    """Input failed one or more field constraints."""

    def __init__(self, message: str, violations: list[Violation] | None = None) -> None:
        super().__init__(message)
        self.violations = list(violations or [])

    @classmethod
    def from_violations(cls, violations: list[Violation]) -> ValidationError:
        return cls("; ".join(str(v) for v in violations), violations)


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""

    status_code = 404


class DuplicateNameError(DomainException):
    """A beer with the same name is already registered."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Beer with name '{name}' already registered")
        self.name = name


class DuplicateKeyError(DomainException):
    """A record with the same id is already stored."""

    status_code = 409


class StockExceededError(DomainException):
    """An adjustment would move quantity outside ``0 <= quantity <= max``."""

    def __init__(self, beer_id: int | None, quantity: int, amount: int, max: int) -> None:
        if beer_id is None:
            message = f"Stock exceeded: initial quantity {amount} exceeds max capacity {max}"
        elif amount >= 0:
            message = (
                f"Stock exceeded for beer {beer_id}: "
                f"adding {amount} to {quantity} exceeds max capacity {max}"
            )
        else:
            message = (
                f"Stock exceeded for beer {beer_id}: "
                f"removing {-amount} from {quantity} drops stock below zero"
            )
        super().__init__(message)
        self.beer_id = beer_id
        self.quantity = quantity
        self.amount = amount
        self.max = max
