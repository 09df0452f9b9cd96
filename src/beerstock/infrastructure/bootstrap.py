"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from beerstock.application.beer_service import BeerService
from beerstock.infrastructure.persistence.json_beer_repository import (
    JsonBeerRepository,
)

DATA_DIR_ENV = "BEERSTOCK_DATA_DIR"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get(DATA_DIR_ENV)
    return Path(override) if override else _DEFAULT_DATA_DIR


def beer_repository(directory: Path | None = None) -> JsonBeerRepository:
    return JsonBeerRepository((directory or data_dir()) / "beers.json")


def beer_service(directory: Path | None = None) -> BeerService:
    return BeerService(beer_repo=beer_repository(directory))
