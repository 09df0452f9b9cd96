"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class BeerSpec:
    """Input: the fields a caller supplies to register a beer.

    Values arrive straight from the request layer and are checked
    by ``validate_beer_spec``.
    """

    name: Any
    brand: Any
    type: Any
    max: Any
    quantity: Any
