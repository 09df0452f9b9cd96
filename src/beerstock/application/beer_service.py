"""Application service: beer stock use cases.

Every mutating operation runs its read-check-write sequence while holding
the lock for the record it touches: the beer's name for creation, its ID
for deletion and stock adjustments. Operations on different beers proceed
concurrently.
"""

from __future__ import annotations

import logging

from beerstock.application.dto import BeerSpec
from beerstock.application.locking import KeyedLocks
from beerstock.application.validation import validate_beer_spec
from beerstock.domain.exceptions import (
    DuplicateNameError,
    EntityNotFoundError,
    StockExceededError,
)
from beerstock.domain.model.beer import Beer
from beerstock.domain.model.value_objects import StockAmount
from beerstock.domain.repository.beer_repository import BeerRepository

logger = logging.getLogger(__name__)


class BeerService:

    def __init__(self, beer_repo: BeerRepository, locks: KeyedLocks | None = None) -> None:
        self._beer_repo = beer_repo
        self._locks = locks if locks is not None else KeyedLocks()

    # --- Commands ---------------------------------------------------------------

    def create_beer(self, spec: BeerSpec) -> Beer:
        """Register a new beer.

        Fields are validated before the repository is touched. The name
        check and the insert happen in one critical section, so two
        concurrent creations of the same name cannot both succeed.
        """
        spec = validate_beer_spec(spec)
        if spec.quantity > spec.max:
            raise StockExceededError(None, 0, spec.quantity, spec.max)

        with self._locks.hold(("name", spec.name)):
            if self._beer_repo.get_by_name(spec.name) is not None:
                logger.warning("Rejected duplicate beer name %r", spec.name)
                raise DuplicateNameError(spec.name)

            beer = Beer(
                id=self._beer_repo.next_id(),
                name=spec.name,
                brand=spec.brand,
                type=spec.type,
                max=spec.max,
                quantity=spec.quantity,
            )
            self._beer_repo.insert(beer)

        logger.info("Created beer #%d %r (%d/%d)", beer.id, beer.name, beer.quantity, beer.max)
        return beer

    def delete_by_id(self, beer_id: int) -> None:
        with self._locks.hold(("id", beer_id)):
            self._beer_repo.delete_by_id(beer_id)
        logger.info("Deleted beer #%d", beer_id)

    def increment(self, beer_id: int, amount: int) -> Beer:
        """Add ``amount`` units to a beer's stock.

        Raises StockExceededError, without writing anything, if the result
        would exceed the beer's capacity. ``amount`` of zero is a no-op.
        """
        step = StockAmount(amount)
        with self._locks.hold(("id", beer_id)):
            beer = self._load(beer_id)
            if step.is_zero:
                return beer
            try:
                beer.increment(step.value)
            except StockExceededError:
                logger.warning(
                    "Rejected increment of beer #%d by %d (%d/%d)",
                    beer_id, step.value, beer.quantity, beer.max,
                )
                raise
            self._beer_repo.replace(beer)

        logger.info("Incremented beer #%d by %d to %d", beer_id, step.value, beer.quantity)
        return beer

    def decrement(self, beer_id: int, amount: int) -> Beer:
        """Remove ``amount`` units from a beer's stock, never below zero."""
        step = StockAmount(amount)
        with self._locks.hold(("id", beer_id)):
            beer = self._load(beer_id)
            if step.is_zero:
                return beer
            try:
                beer.decrement(step.value)
            except StockExceededError:
                logger.warning(
                    "Rejected decrement of beer #%d by %d (%d/%d)",
                    beer_id, step.value, beer.quantity, beer.max,
                )
                raise
            self._beer_repo.replace(beer)

        logger.info("Decremented beer #%d by %d to %d", beer_id, step.value, beer.quantity)
        return beer

    # --- Queries ----------------------------------------------------------------

    def find_by_name(self, name: str) -> Beer:
        beer = self._beer_repo.get_by_name(name)
        if beer is None:
            raise EntityNotFoundError(f"Beer with name '{name}' not found")
        return beer

    def find_by_id(self, beer_id: int) -> Beer:
        return self._load(beer_id)

    def list_all(self) -> list[Beer]:
        return self._beer_repo.list_all()

    # --- Internal helpers -------------------------------------------------------

    def _load(self, beer_id: int) -> Beer:
        beer = self._beer_repo.get_by_id(beer_id)
        if beer is None:
            raise EntityNotFoundError(f"Beer with ID {beer_id} not found")
        return beer
