"""Clock abstractions for expiry checks."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol


class Clock(Protocol):
    """Source of the current calendar date."""

    def today(self) -> date:
        """Return the current date."""


@dataclass
class SystemClock(Clock):
    """Clock backed by the local system date."""

    def today(self) -> date:
        """Return the local date at call time."""
        return date.today()


@dataclass(frozen=True)
class FixedClock(Clock):
    """Clock that always reports the same date."""

    current: date

    def today(self) -> date:
        """Return the pinned date."""
        return self.current
