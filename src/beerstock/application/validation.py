"""Field validation for incoming beer specs.

Each rule is a ``(field, check)`` pair; ``check`` returns an error message
or None. Every rule runs, so a ValidationError lists all broken fields at
once rather than only the first.
"""

from __future__ import annotations

from typing import Any, Callable

from beerstock.application.dto import BeerSpec
from beerstock.domain.exceptions import ValidationError, Violation
from beerstock.domain.model.beer import BeerType
from beerstock.domain.model.value_objects import MAX_ADJUSTMENT

NAME_MAX_LENGTH = 200
BRAND_MAX_LENGTH = 200
CAPACITY_CEILING = 500


def _text(max_length: int) -> Callable[[Any], str | None]:
    def check(value: Any) -> str | None:
        if value is None:
            return "is required"
        if not isinstance(value, str):
            return f"must be a string, got {type(value).__name__}"
        length = len(value.strip())
        if length < 1 or length > max_length:
            return f"size must be between 1 and {max_length}"
        return None
    return check


def _bounded_int(ceiling: int) -> Callable[[Any], str | None]:
    def check(value: Any) -> str | None:
        if value is None:
            return "is required"
        if not isinstance(value, int) or isinstance(value, bool):
            return f"must be an integer, got {type(value).__name__}"
        if value < 0:
            return "must not be negative"
        if value > ceiling:
            return f"must be less than or equal to {ceiling}"
        return None
    return check


def _beer_type(value: Any) -> str | None:
    if value is None:
        return "is required"
    if _coerce_type(value) is None:
        choices = ", ".join(t.value for t in BeerType)
        return f"must be one of {choices}"
    return None


def _coerce_type(value: Any) -> BeerType | None:
    if isinstance(value, BeerType):
        return value
    if isinstance(value, str):
        try:
            return BeerType[value.strip().upper()]
        except KeyError:
            return None
    return None


_RULES: list[tuple[str, Callable[[Any], str | None]]] = [
    ("name", _text(NAME_MAX_LENGTH)),
    ("brand", _text(BRAND_MAX_LENGTH)),
    ("type", _beer_type),
    ("max", _bounded_int(CAPACITY_CEILING)),
    ("quantity", _bounded_int(MAX_ADJUSTMENT)),
]


def validate_beer_spec(spec: BeerSpec) -> BeerSpec:
    """Check every field rule and return a normalized copy of ``spec``.

    The returned spec has stripped ``name``/``brand`` and a ``BeerType``
    in ``type``. Raises ValidationError listing every violation.
    """
    violations = []
    for field, check in _RULES:
        message = check(getattr(spec, field))
        if message is not None:
            violations.append(Violation(field, message))
    if violations:
        raise ValidationError.from_violations(violations)

    return BeerSpec(
        name=spec.name.strip(),
        brand=spec.brand.strip(),
        type=_coerce_type(spec.type),
        max=spec.max,
        quantity=spec.quantity,
    )
