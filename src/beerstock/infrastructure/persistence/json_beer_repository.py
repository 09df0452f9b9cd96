"""JSON-file-backed implementation of BeerRepository.

The file holds the records in insertion order plus the ID sequence, so
IDs of deleted beers are never handed out again:

    {"next_id": 3, "beers": [{"id": 1, ...}, {"id": 2, ...}]}
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from beerstock.domain.exceptions import DuplicateKeyError, EntityNotFoundError
from beerstock.domain.model.beer import Beer, BeerType
from beerstock.domain.repository.beer_repository import BeerRepository

logger = logging.getLogger(__name__)


class JsonBeerRepository(BeerRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._lock = threading.RLock()
        self._ensure_file()

    # --- BeerRepository interface -----------------------------------------------

    def next_id(self) -> int:
        with self._lock:
            data = self._load_raw()
            beer_id = data["next_id"]
            data["next_id"] = beer_id + 1
            self._persist_raw(data)
            return beer_id

    def get_by_id(self, beer_id: int) -> Beer | None:
        with self._lock:
            for raw in self._load_raw()["beers"]:
                if raw["id"] == beer_id:
                    return self._to_domain(raw)
        return None

    def get_by_name(self, name: str) -> Beer | None:
        with self._lock:
            for raw in self._load_raw()["beers"]:
                if raw["name"] == name:
                    return self._to_domain(raw)
        return None

    def list_all(self) -> list[Beer]:
        with self._lock:
            return [self._to_domain(raw) for raw in self._load_raw()["beers"]]

    def insert(self, beer: Beer) -> None:
        with self._lock:
            data = self._load_raw()
            if any(raw["id"] == beer.id for raw in data["beers"]):
                raise DuplicateKeyError(f"Beer with ID {beer.id} already stored")
            data["beers"].append(self._to_raw(beer))
            data["next_id"] = max(data["next_id"], beer.id + 1)
            self._persist_raw(data)

    def replace(self, beer: Beer) -> None:
        with self._lock:
            data = self._load_raw()
            for i, raw in enumerate(data["beers"]):
                if raw["id"] == beer.id:
                    data["beers"][i] = self._to_raw(beer)
                    self._persist_raw(data)
                    return
        raise EntityNotFoundError(f"Beer with ID {beer.id} not found")

    def delete_by_id(self, beer_id: int) -> None:
        with self._lock:
            data = self._load_raw()
            remaining = [raw for raw in data["beers"] if raw["id"] != beer_id]
            if len(remaining) == len(data["beers"]):
                raise EntityNotFoundError(f"Beer with ID {beer_id} not found")
            data["beers"] = remaining
            self._persist_raw(data)

    # --- Serialization ----------------------------------------------------------

    @staticmethod
    def _to_raw(beer: Beer) -> dict:
        return {
            "id": beer.id,
            "name": beer.name,
            "brand": beer.brand,
            "type": beer.type.value,
            "max": beer.max,
            "quantity": beer.quantity,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Beer:
        return Beer(
            id=raw["id"],
            name=raw["name"],
            brand=raw["brand"],
            type=BeerType(raw["type"]),
            max=raw["max"],
            quantity=raw.get("quantity", 0),
        )

    # --- File helpers -----------------------------------------------------------

    def _load_raw(self) -> dict:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, data: dict) -> None:
        self._file_path.write_text(
            json.dumps(data, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._persist_raw({"next_id": 1, "beers": []})
            logger.debug("Initialized beer store at %s", self._file_path)
