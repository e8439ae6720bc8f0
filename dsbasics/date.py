"""Calendar dates without leap years."""

from dataclasses import dataclass, replace
from functools import total_ordering

MONTHS = 12
DAYS_IN_MONTH = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)


@total_ordering
@dataclass(frozen=True)
class Date:
    """A day, month and year; February always has 28 days."""

    day: int = 0
    month: int = 0
    year: int = 0

    def is_valid(self):
        """True when the month exists and the day fits in it."""
        return 1 <= self.month <= MONTHS and 1 <= self.day <= DAYS_IN_MONTH[self.month - 1]

    def __add__(self, days):
        """Return the date that lies ``days`` days later."""
        if not isinstance(days, int):
            return NotImplemented
        if days <= 0:
            return replace(self)
        if not self.is_valid():
            raise ValueError(f"cannot add days to invalid date {self}")
        day, month, year = self.day, self.month, self.year
        while days > 0:
            month_length = DAYS_IN_MONTH[month - 1]
            if day + days > month_length:
                days -= month_length - day + 1
                day = 1
                month += 1
                if month > MONTHS:
                    month = 1
                    year += 1
            else:
                day += days
                days = 0
        return Date(day, month, year)

    def __lt__(self, other):
        if not isinstance(other, Date):
            return NotImplemented
        return (self.year, self.month, self.day) < (other.year, other.month, other.day)

    def __str__(self):
        return f"{self.day}/{self.month}/{self.year}"