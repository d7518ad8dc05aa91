"""Units of measure supported for ingredients."""

from enum import Enum


class UnitOfMeasure(Enum):
    """Closed set of units an ingredient amount can be expressed in."""

    grams = 0
    ml = 1
    slices = 2

    @classmethod
    def has(cls, name: object) -> bool:
        """Return True when the name is one of the defined units."""
        return isinstance(name, str) and name in _UNITS_BY_NAME

    @classmethod
    def get(cls, name: str) -> "UnitOfMeasure":
        """Return the unit for a name; call `has` first for untrusted input."""
        return _UNITS_BY_NAME[name]


_UNITS_BY_NAME: dict[str, UnitOfMeasure] = {unit.name: unit for unit in UnitOfMeasure}
