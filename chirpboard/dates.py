"""Calendar dates and the application-wide notion of "today"."""

from __future__ import annotations

from dataclasses import dataclass
from functools import total_ordering


@total_ordering
@dataclass(frozen=True)
class Date:
    """A day/month/year triple ordered chronologically."""

    day: int = 0
    month: int = 0
    year: int = 0

    def _key(self) -> tuple[int, int, int]:
        return (self.year, self.month, self.day)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, Date):
            return NotImplemented
        return self._key() < other._key()

    @classmethod
    def parse(cls, text: str) -> Date:
        """Build a date from whitespace-separated ``day month year``."""
        parts = text.split()
        if len(parts) != 3:
            raise ValueError(f"expected 'day month year', got {text!r}")
        try:
            day, month, year = (int(part) for part in parts)
        except ValueError as exc:
            raise ValueError(f"date fields must be integers: {text!r}") from exc
        return cls(day, month, year)

    def __str__(self) -> str:
        return f"({self.day}/{self.month}/{self.year})"


@dataclass
class _Clock:
    today: Date


_clock = _Clock(Date())


def set_today(date: Date) -> None:
    """Set the date the application treats as today."""
    if not isinstance(date, Date):
        raise TypeError(f"expected a Date, got {type(date).__name__}")
    _clock.today = date


def get_today() -> Date:
    """Return the date the application treats as today."""
    return _clock.today