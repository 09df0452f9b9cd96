"""Beer aggregate — a named stock record with a capacity ceiling.

Quantity only changes through ``increment`` and ``decrement``, which check
the inclusive bounds before touching any state.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass

from beerstock.domain.exceptions import StockExceededError


class BeerType(enum.Enum):
    LAGER = "LAGER"
    MALZBIER = "MALZBIER"
    WITBIER = "WITBIER"
    WEISS = "WEISS"
    ALE = "ALE"
    IPA = "IPA"
    STOUT = "STOUT"


@dataclass
class Beer:
    """Aggregate root for a beer and its stock.

    Invariants:
    - ``0 <= quantity <= max``
    - ``id`` never changes once assigned
    """

    id: int
    name: str
    brand: str
    type: BeerType
    max: int
    quantity: int = 0

    def increment(self, amount: int) -> None:
        """Add stock, refusing to go past ``max``.

        Raises StockExceededError and leaves the record untouched if the
        new quantity would exceed the capacity.
        """
        new_quantity = self.quantity + amount
        if new_quantity > self.max:
            raise StockExceededError(self.id, self.quantity, amount, self.max)
        self.quantity = new_quantity

    def decrement(self, amount: int) -> None:
        """Remove stock, refusing to go below zero."""
        new_quantity = self.quantity - amount
        if new_quantity < 0:
            raise StockExceededError(self.id, self.quantity, -amount, self.max)
        self.quantity = new_quantity
