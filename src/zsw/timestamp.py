"""Timetable time values in the ``YYYY-MM-DD HH:MM:SS`` layout of train files."""

import datetime as dt
from dataclasses import dataclass

from zsw.errors import DateOverflowError, ParseError


@dataclass(frozen=True, order=True)
class Timestamp:
    year: int
    month: int
    day: int
    hour: int
    minute: int
    second: int

    @classmethod
    def parse(cls, text: str) -> "Timestamp":
        parts = text.split(" ")
        if len(parts) != 2:
            raise ParseError(f"expected date and time separated by one space: {text!r}")
        date, time = parts

        date_fields = date.split("-")
        if len(date_fields) != 3:
            raise ParseError(f"date does not consist of three parts: {text!r}")
        time_fields = time.split(":")
        if len(time_fields) != 3:
            raise ParseError(f"time does not consist of three parts: {text!r}")

        for field in date_fields + time_fields:
            if not (field.isascii() and field.isdigit()):
                raise ParseError(f"invalid number {field!r} in {text!r}")

        try:
            stamp = cls(*(int(field) for field in date_fields + time_fields))
            stamp.to_datetime()
        except (ValueError, OverflowError) as exc:
            raise ParseError(f"invalid date or time: {text!r}") from exc
        return stamp

    @classmethod
    def from_datetime(cls, value: dt.datetime) -> "Timestamp":
        return cls(value.year, value.month, value.day, value.hour, value.minute, value.second)

    def to_datetime(self) -> dt.datetime:
        return dt.datetime(self.year, self.month, self.day, self.hour, self.minute, self.second)

    def add_seconds(self, seconds: int) -> "Timestamp":
        """
        Return a new value moved by ``seconds`` with full calendar carry.

        Negative values move the time backwards. Leaving the range
        0001-01-01 .. 9999-12-31 raises DateOverflowError.
        """
        try:
            moved = self.to_datetime() + dt.timedelta(seconds=seconds)
        except OverflowError as exc:
            raise DateOverflowError(f"{self} + {seconds}s is out of range") from exc
        return Timestamp.from_datetime(moved)

    def __sub__(self, other: "Timestamp") -> int:
        """Signed difference in whole seconds."""
        if not isinstance(other, Timestamp):
            return NotImplemented
        return int((self.to_datetime() - other.to_datetime()).total_seconds())

    def __str__(self) -> str:
        return (
            f"{self.year:04d}-{self.month:02d}-{self.day:02d} "
            f"{self.hour:02d}:{self.minute:02d}:{self.second:02d}"
        )
