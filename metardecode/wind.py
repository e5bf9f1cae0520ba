"""Wind value and wind group decoding."""

import re
from dataclasses import dataclass
from typing import Optional, Union

from metardecode.errors import (
    DirectionOutOfRangeError,
    IncompleteVariableRangeError,
    InvalidFormatError,
    NegativeGustSpeedError,
    NegativeSpeedError,
    VariableFromOutOfRangeError,
    VariableToOutOfRangeError,
)
from metardecode.units import SpeedUnits

Number = Union[int, float]

# e.g. "21012G17KT", "VRB03KT", "00000KT", "05010MPS"
WIND_GROUP_PATTERN = re.compile(
    r'^(?P<direction>\d{3}|VRB)(?P<speed>\d{2,3})(?:G(?P<gust>\d{2,3}))?(?P<unit>KT|MPS|KMH|MPH)$',
    re.ASCII,
)
# e.g. "180V240"
VARIABLE_WIND_PATTERN = re.compile(r'^(?P<from>\d{3})V(?P<to>\d{3})$', re.ASCII)


@dataclass(frozen=True)
class Wind:
    """
    Wind direction, speed and gust, with the variable direction range when reported.

    Construction validates the values, first failing check wins:
    speed, gust speed, direction, variable range completeness, variable from, variable to.

    Attributes:
        direction: Angle relative to true north (0-360), None for variable direction (VRB)
        speed: Sustained wind speed
        gust_speed: Gust speed
        speed_unit: Unit of both speeds
        variable_from: Minimum angle of a variable direction, requires variable_to
        variable_to: Maximum angle of a variable direction, requires variable_from
    """
    direction: Optional[Number]
    speed: Number
    gust_speed: Number
    speed_unit: SpeedUnits
    variable_from: Optional[Number] = None
    variable_to: Optional[Number] = None

    def __post_init__(self):
        if self.speed < 0:
            raise NegativeSpeedError(f"speed cannot be negative: {self.speed}", field="speed", value=self.speed)
        if self.gust_speed < 0:
            raise NegativeGustSpeedError(
                f"gust_speed cannot be negative: {self.gust_speed}", field="gust_speed", value=self.gust_speed
            )
        if self.direction is not None and (self.direction < 0 or self.direction > 360):
            raise DirectionOutOfRangeError(
                f"direction: {self.direction}, must be between 0 and 360 degrees",
                field="direction",
                value=self.direction,
            )
        if (self.variable_from is None) != (self.variable_to is None):
            given = "variable_from" if self.variable_from is not None else "variable_to"
            raise IncompleteVariableRangeError(
                "when using variable winds, both variable_from and variable_to must be given",
                field=given,
                value=self.variable_from if self.variable_from is not None else self.variable_to,
            )
        if self.variable_from is not None:
            if self.variable_from < 0 or self.variable_from > 360:
                raise VariableFromOutOfRangeError(
                    f"variable_from: {self.variable_from}, must be between 0 and 360 degrees",
                    field="variable_from",
                    value=self.variable_from,
                )
            if self.variable_to < 0 or self.variable_to > 360:
                raise VariableToOutOfRangeError(
                    f"variable_to: {self.variable_to}, must be between 0 and 360 degrees",
                    field="variable_to",
                    value=self.variable_to,
                )

    @property
    def is_variable(self) -> bool:
        return self.variable_from is not None

    def to_display_string(self) -> str:
        """Readable summary, e.g. 'Wind direction 210°, speed 12KT gusting 17KT'."""
        unit = self.speed_unit.value
        direction = "variable" if self.direction is None else f"{self.direction}°"
        text = f"Wind direction {direction}, speed {self.speed}{unit} gusting {self.gust_speed}{unit}"
        if self.is_variable:
            text += f", variable from {self.variable_from}° to {self.variable_to}°"
        return text

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "direction": self.direction,
            "speed": self.speed,
            "gust_speed": self.gust_speed,
            "speed_unit": self.speed_unit.value,
            "variable_from": self.variable_from,
            "variable_to": self.variable_to,
            "display": self.to_display_string(),
        }


def decode_wind_group(group: str, variable_group: Optional[str] = None) -> Wind:
    """
    Decode a wind group and an optional variable direction group.

    Without a gust the gust speed is the sustained speed.

    Args:
        group: e.g. "21012G17KT", "VRB03KT"
        variable_group: e.g. "180V240"

    Raises:
        InvalidFormatError: a group does not have the expected shape
        DecodeError: any validation error raised by Wind
    """
    match = WIND_GROUP_PATTERN.match(group)
    if not match:
        raise InvalidFormatError(f"invalid wind group: {group!r}", field="wind", value=group)

    dir_str = match.group("direction")
    direction = None if dir_str == "VRB" else int(dir_str)
    speed = int(match.group("speed"))
    gust_str = match.group("gust")
    gust_speed = int(gust_str) if gust_str else speed

    variable_from = variable_to = None
    if variable_group is not None:
        var_match = VARIABLE_WIND_PATTERN.match(variable_group)
        if not var_match:
            raise InvalidFormatError(
                f"invalid variable wind group: {variable_group!r}", field="variable_wind", value=variable_group
            )
        variable_from = int(var_match.group("from"))
        variable_to = int(var_match.group("to"))

    return Wind(
        direction=direction,
        speed=speed,
        gust_speed=gust_speed,
        speed_unit=SpeedUnits(match.group("unit")),
        variable_from=variable_from,
        variable_to=variable_to,
    )
