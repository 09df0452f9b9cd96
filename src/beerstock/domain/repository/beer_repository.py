"""Abstract repository for the Beer aggregate.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, SQL, in-memory)
live in the infrastructure layer.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from beerstock.domain.model.beer import Beer


class BeerRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Reserve the next unique beer ID. IDs are never handed out twice."""

    @abstractmethod
    def get_by_id(self, beer_id: int) -> Beer | None:
        """Return a beer by its ID, or None if not found."""

    @abstractmethod
    def get_by_name(self, name: str) -> Beer | None:
        """Return a beer by its exact (case-sensitive) name, or None."""

    @abstractmethod
    def list_all(self) -> list[Beer]:
        """Return every beer in insertion order."""

    @abstractmethod
    def insert(self, beer: Beer) -> None:
        """Store a new beer. Raises DuplicateKeyError if the ID is taken."""

    @abstractmethod
    def replace(self, beer: Beer) -> None:
        """Overwrite a stored beer. Raises EntityNotFoundError if absent."""

    @abstractmethod
    def delete_by_id(self, beer_id: int) -> None:
        """Remove a beer. Raises EntityNotFoundError if absent."""
