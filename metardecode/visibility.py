"""Visibility values and visibility group decoding."""

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union

from metardecode.errors import InvalidFormatError, MinNotLessThanMaxError, NegativeVisibilityError
from metardecode.units import DistanceUnits

Number = Union[int, float]

# "9999", "0800" - always meters
METERS_PATTERN = re.compile(r'^(?P<meters>\d{4})$', re.ASCII)
# "10SM", "P6SM", "1/2SM", "M1/4SM", "1 1/2SM"
STATUTE_MILES_PATTERN = re.compile(
    r'^(?P<modifier>[MP])?(?:(?P<whole>\d{1,2})(?: (?P<num>\d{1,2})/(?P<den>\d{1,2}))?|(?P<frac_num>\d{1,2})/(?P<frac_den>\d{1,2}))SM$',
    re.ASCII,
)


class VisibilityModifier(Enum):
    LESS_THAN = "M"
    GREATER_THAN = "P"


class VisibilityTrend(Enum):
    INCREASING = "U"
    DECREASING = "D"
    NOT_CHANGING = "N"


def _check_not_negative(value: Number, field: str) -> None:
    if value < 0:
        raise NegativeVisibilityError(f"visibility cannot be negative: {value}", field=field, value=value)


@dataclass(frozen=True)
class Visibility:
    """A single visibility reading, optionally qualified as less/greater than the distance."""
    distance: Number
    unit: DistanceUnits
    modifier: Optional[VisibilityModifier] = None

    def __post_init__(self):
        _check_not_negative(self.distance, "distance")

    @property
    def is_variable(self) -> bool:
        return False

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "variable": False,
            "distance": self.distance,
            "unit": self.unit.value,
            "modifier": self.modifier.value if self.modifier else None,
        }


@dataclass(frozen=True)
class VariableVisibility:
    """A visibility range. The minimum must be strictly less than the maximum."""
    min_visibility: Number
    max_visibility: Number
    unit: DistanceUnits
    trend: Optional[VisibilityTrend] = None

    def __post_init__(self):
        _check_not_negative(self.min_visibility, "min_visibility")
        _check_not_negative(self.max_visibility, "max_visibility")
        if self.min_visibility >= self.max_visibility:
            raise MinNotLessThanMaxError(
                "min_visibility must be less than max_visibility",
                field="min_visibility",
                value=(self.min_visibility, self.max_visibility),
            )

    @property
    def is_variable(self) -> bool:
        return True

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "variable": True,
            "min_visibility": self.min_visibility,
            "max_visibility": self.max_visibility,
            "unit": self.unit.value,
            "trend": self.trend.value if self.trend else None,
        }


AnyVisibility = Union[Visibility, VariableVisibility]


def decode_visibility_group(group: str) -> Visibility:
    """
    Decode a prevailing visibility group.

    4 digits are meters ("9999" is reported as-is). Statute miles may be a whole
    number, a fraction or a whole number and a fraction separated by one space,
    with an optional M (less than) or P (greater than) prefix.

    Raises:
        InvalidFormatError: unrecognized group or zero denominator
    """
    match = METERS_PATTERN.match(group)
    if match:
        return Visibility(int(match.group("meters")), DistanceUnits.METERS)

    match = STATUTE_MILES_PATTERN.match(group)
    if not match:
        raise InvalidFormatError(f"invalid visibility group: {group!r}", field="visibility", value=group)

    modifier = VisibilityModifier(match.group("modifier")) if match.group("modifier") else None

    if match.group("frac_num") is not None:
        whole, num, den = 0, match.group("frac_num"), match.group("frac_den")
    else:
        whole, num, den = int(match.group("whole")), match.group("num"), match.group("den")

    if num is None:
        return Visibility(whole, DistanceUnits.STATUTE_MILES, modifier)

    if int(den) == 0:
        raise InvalidFormatError(
            f"visibility fraction has a zero denominator: {group!r}", field="visibility", value=group
        )
    return Visibility(whole + int(num) / int(den), DistanceUnits.STATUTE_MILES, modifier)
