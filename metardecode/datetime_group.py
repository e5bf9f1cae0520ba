"""METAR date-time group parsing (e.g. '220136Z')."""

import re
from dataclasses import dataclass, field
from datetime import datetime, time, timezone

from metardecode.errors import (
    InvalidDayError,
    InvalidFormatError,
    InvalidHourError,
    InvalidMinuteError,
    InvalidMonthError,
)

# [0-3]\d day of month, [0-2]\d hour, [0-5]\d minute, Z for zero UTC offset.
# Only checks the shape, the values are range checked after.
DATE_TIME_GROUP_PATTERN = re.compile(r'^[0-3]\d[0-2]\d[0-5]\dZ$', re.ASCII)


@dataclass(frozen=True)
class DateTimeGroup:
    """
    Day of month and UTC time of a report. No month or year is carried.

    Construction checks day (1-31), hour (0-23) and minute (0-59) in that
    order. display_time is always derived as HH:MM.
    """
    day_of_month: int
    hour: int
    minute: int
    display_time: str = field(init=False)

    def __post_init__(self):
        if self.day_of_month < 1 or self.day_of_month > 31:
            raise InvalidDayError(
                f"day of month must be between 1 and 31: {self.day_of_month}",
                field="day_of_month",
                value=self.day_of_month,
            )
        if self.hour < 0 or self.hour > 23:
            raise InvalidHourError(f"hour must be between 0 and 23: {self.hour}", field="hour", value=self.hour)
        if self.minute < 0 or self.minute > 59:
            raise InvalidMinuteError(
                f"minute must be between 0 and 59: {self.minute}", field="minute", value=self.minute
            )
        object.__setattr__(self, "display_time", time(self.hour, self.minute).strftime("%H:%M"))

    def to_datetime(self, year: int, month: int) -> datetime:
        """
        Build an aware UTC datetime using the caller's year and month.

        Raises:
            InvalidMonthError: month is not 1-12
            InvalidDayError: the day does not exist in that month
        """
        if month < 1 or month > 12:
            raise InvalidMonthError(f"month must be between 1 and 12: {month}", field="month", value=month)
        try:
            return datetime(year, month, self.day_of_month, self.hour, self.minute, tzinfo=timezone.utc)
        except ValueError as e:
            raise InvalidDayError(
                f"day {self.day_of_month} is not valid for {year:04d}-{month:02d}: {e}",
                field="day_of_month",
                value=self.day_of_month,
            ) from e

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "day_of_month": self.day_of_month,
            "hour": self.hour,
            "minute": self.minute,
            "display_time": self.display_time,
        }


def parse_date_time_group(group: str) -> DateTimeGroup:
    """
    Parse a METAR date-time group.

    The first two digits are the day of the month, the next two the hour and
    the next two the minutes. The trailing Z is the zero (Zulu) UTC offset.

    Raises:
        InvalidFormatError: not 7 characters or not in DDHHMMZ shape
        InvalidDayError, InvalidHourError, InvalidMinuteError: value out of range
    """
    if len(group) != 7 or not DATE_TIME_GROUP_PATTERN.match(group):
        raise InvalidFormatError(
            f"date-time group must be in DDHHMMZ format: {group!r}",
            field="date_time_group",
            value=group,
        )

    return DateTimeGroup(day_of_month=int(group[0:2]), hour=int(group[2:4]), minute=int(group[4:6]))
