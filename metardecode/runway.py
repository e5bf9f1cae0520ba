"""Runway visual range (RVR) groups, e.g. 'R28L/0600V1000FT/U'."""

import re
from dataclasses import dataclass
from typing import Optional

from metardecode.errors import InvalidFormatError
from metardecode.units import DistanceUnits
from metardecode.visibility import (
    AnyVisibility,
    VariableVisibility,
    Visibility,
    VisibilityModifier,
    VisibilityTrend,
)

RUNWAY_PATTERN = re.compile(r'^(?P<number>\d{2})(?P<side>[LCR])?$', re.ASCII)
RVR_PATTERN = re.compile(
    r'^R(?P<runway>\d{2}[LCR]?)/'
    r'(?:(?P<min>\d{4})V(?P<max>\d{4})|(?P<modifier>[MP])?(?P<distance>\d{4}))'
    r'(?P<unit>FT)?(?:/(?P<trend>[UDN]))?$',
    re.ASCII,
)


def _check_runway(runway: str) -> None:
    match = RUNWAY_PATTERN.match(runway)
    if not match or not 1 <= int(match.group("number")) <= 36:
        raise InvalidFormatError(
            f"runway designator must be 01-36 with optional L/C/R: {runway!r}", field="runway", value=runway
        )


@dataclass(frozen=True)
class RunwayVisualRange:
    """Visual range reported for one runway."""
    runway: str
    visibility: AnyVisibility
    trend: Optional[VisibilityTrend] = None

    def __post_init__(self):
        _check_runway(self.runway)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "runway": self.runway,
            "visibility": self.visibility.to_dict(),
            "trend": self.trend.value if self.trend else None,
        }


def decode_runway_visual_range(group: str) -> RunwayVisualRange:
    """
    Decode an RVR group.

    Values are meters unless suffixed with FT. A V range gives a
    VariableVisibility that also carries the trend.

    Raises:
        InvalidFormatError: unrecognized group or runway designator
        DecodeError: any validation error raised by the visibility values
    """
    match = RVR_PATTERN.match(group)
    if not match:
        raise InvalidFormatError(f"invalid runway visual range group: {group!r}", field="rvr", value=group)

    unit = DistanceUnits.FEET if match.group("unit") else DistanceUnits.METERS
    trend = VisibilityTrend(match.group("trend")) if match.group("trend") else None

    if match.group("min") is not None:
        visibility = VariableVisibility(int(match.group("min")), int(match.group("max")), unit, trend)
    else:
        modifier = VisibilityModifier(match.group("modifier")) if match.group("modifier") else None
        visibility = Visibility(int(match.group("distance")), unit, modifier)

    return RunwayVisualRange(match.group("runway"), visibility, trend)
