"""Time sources for date validation. Tests pin today with FixedClock."""

from datetime import date, datetime, tzinfo
from typing import Protocol


class Clock(Protocol):
    """Answers what day it is."""

    def today(self) -> date: ...


class SystemClock:
    """Wall-clock today, in tz when given, else local time."""

    def __init__(self, tz: tzinfo | None = None) -> None:
        self._tz = tz

    def today(self) -> date:
        return datetime.now(self._tz).date()

    def __repr__(self) -> str:
        return f"SystemClock(tz={self._tz!r})"


class FixedClock:
    """Always returns the same day."""

    def __init__(self, day: date) -> None:
        self._day = day

    def today(self) -> date:
        return self._day

    def __repr__(self) -> str:
        return f"FixedClock({self._day.isoformat()})"
