"""Domain models for recipe ingredients and fridge stock."""

import re
from dataclasses import dataclass
from datetime import date, datetime

from recipe_finder.domain.units import UnitOfMeasure
from recipe_finder.errors import ValidationError

USE_BY_DATE_FORMAT = "%d/%m/%Y"

_INTEGER_PATTERN = re.compile(r"[+-]?(0|[1-9][0-9]*)")
_USE_BY_DATE_PATTERN = re.compile(r"[0-9]{2}/[0-9]{2}/[0-9]{4}")


@dataclass(frozen=True)
class Ingredient:
    """An amount of a named item in a given unit.

    ``amount`` may be supplied as text (as read from a file) and ``unit`` as a
    unit name; both are normalized on construction.
    """

    name: str
    amount: int
    unit: UnitOfMeasure

    def __post_init__(self) -> None:
        if not self.name:
            raise ValidationError("Item name cannot be empty.")
        object.__setattr__(self, "amount", _parse_amount(self.amount))
        object.__setattr__(self, "unit", _parse_unit(self.unit))


@dataclass(frozen=True)
class FridgeIngredient(Ingredient):
    """Ingredient stocked in the fridge with a use-by date."""

    use_by_date: date

    def __post_init__(self) -> None:
        super().__post_init__()
        object.__setattr__(self, "use_by_date", parse_use_by_date(self.use_by_date))

    def has_expired(self, today: date | None = None) -> bool:
        """Return True when the use-by date is before today."""
        if today is None:
            today = date.today()
        return self.use_by_date < today


def _parse_amount(value: object) -> int:
    """Return the integer held by value or raise a validation error."""
    if isinstance(value, bool):
        raise ValidationError("Item amount must be an integer value.")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if _INTEGER_PATTERN.fullmatch(text):
            return int(text)
    raise ValidationError("Item amount must be an integer value.")


def _parse_unit(value: object) -> UnitOfMeasure:
    if isinstance(value, UnitOfMeasure):
        return value
    if not UnitOfMeasure.has(value):
        raise ValidationError(f"Units of measure {value} is not supported.")
    return UnitOfMeasure.get(value)


def parse_use_by_date(value: object) -> date:
    """Parse a DD/MM/YYYY use-by date, truncating any time component."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and _USE_BY_DATE_PATTERN.fullmatch(value):
        try:
            return datetime.strptime(value, USE_BY_DATE_FORMAT).date()
        except ValueError as exc:
            raise ValidationError("Use by date format is not supported.") from exc
    raise ValidationError("Use by date format is not supported.")
