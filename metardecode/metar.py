"""METAR/SPECI report aggregate and decoding of the report header groups.

Decodes the leading groups of a report (type, station, time, modifier, wind,
visibility and runway visual ranges). Sky condition, temperature, pressure
and remarks are left undecoded.
"""

import logging
import re
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple, Union

from metardecode.datetime_group import DateTimeGroup, parse_date_time_group
from metardecode.errors import InvalidFormatError
from metardecode.icao import IcaoIdentifier, parse_icao_identifier
from metardecode.runway import RVR_PATTERN, RunwayVisualRange, decode_runway_visual_range
from metardecode.units import DistanceUnits
from metardecode.visibility import (
    AnyVisibility,
    Visibility,
    VisibilityModifier,
    decode_visibility_group,
)
from metardecode.wind import VARIABLE_WIND_PATTERN, Wind, decode_wind_group

logger = logging.getLogger(__name__)

WHOLE_MILES_PATTERN = re.compile(r'^\d{1,2}$', re.ASCII)
FRACTION_MILES_PATTERN = re.compile(r'^\d{1,2}/\d{1,2}SM$', re.ASCII)


class MessageType(Enum):
    METAR = "METAR"  # routine weather report
    SPECI = "SPECI"  # special weather report, triggered by a weather change


class ReportModifier(Enum):
    AUTO = "AUTO"  # automatically generated
    COR = "COR"  # correction to a previous report


@dataclass(frozen=True)
class Metar:
    """A decoded METAR/SPECI report. Each part is validated before the report is built."""
    message_type: MessageType
    identifier: IcaoIdentifier
    issued_at: DateTimeGroup
    wind: Wind
    visibility: AnyVisibility
    modifier: Optional[ReportModifier] = None
    runway_visual_ranges: Tuple[RunwayVisualRange, ...] = ()

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "message_type": self.message_type.value,
            "identifier": self.identifier.to_dict(),
            "issued_at": self.issued_at.to_dict(),
            "modifier": self.modifier.value if self.modifier else None,
            "wind": self.wind.to_dict(),
            "visibility": self.visibility.to_dict(),
            "runway_visual_ranges": [rvr.to_dict() for rvr in self.runway_visual_ranges],
        }


class _Groups:
    """Cursor over the whitespace separated groups of a report."""

    def __init__(self, raw: str):
        self.tokens: List[str] = raw.split()
        self.pos = 0

    def peek(self) -> Optional[str]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def take(self, field: str) -> str:
        token = self.peek()
        if token is None:
            raise InvalidFormatError(f"report is missing the {field} group", field=field)
        self.pos += 1
        return token

    def remaining(self) -> List[str]:
        return self.tokens[self.pos:]


def _decode_visibility(groups: _Groups) -> Visibility:
    token = groups.take("visibility")
    if token == "CAVOK":
        # Ceiling and visibility OK: 10 km or more
        return Visibility(10, DistanceUnits.KILOMETERS, VisibilityModifier.GREATER_THAN)

    following = groups.peek()
    if WHOLE_MILES_PATTERN.match(token) and following and FRACTION_MILES_PATTERN.match(following):
        groups.pos += 1
        token = f"{token} {following}"
    return decode_visibility_group(token)


def decode_metar(raw: str, default_message_type: Union[MessageType, str] = MessageType.METAR) -> Metar:
    """
    Decode a raw METAR/SPECI report.

    Args:
        raw: e.g. "METAR KJFK 121151Z AUTO 21012G17KT 180V240 1 1/2SM R04R/2000FT/U BKN040 12/08 A2992"
        default_message_type: Used when the report does not start with METAR or SPECI

    Raises:
        InvalidFormatError: a required group is missing or unrecognized
        DecodeError: any error raised while decoding a group, unchanged
    """
    groups = _Groups(raw.strip().rstrip("="))
    if not groups.tokens:
        raise InvalidFormatError("report is empty", field="report", value=raw)

    first = groups.peek()
    if first in (MessageType.METAR.value, MessageType.SPECI.value):
        message_type = MessageType(groups.take("message_type"))
    else:
        message_type = MessageType(default_message_type)

    identifier = parse_icao_identifier(groups.take("identifier"))
    issued_at = parse_date_time_group(groups.take("date_time_group"))

    modifier = None
    if groups.peek() in (ReportModifier.AUTO.value, ReportModifier.COR.value):
        modifier = ReportModifier(groups.take("modifier"))

    wind_group = groups.take("wind")
    variable_group = None
    following = groups.peek()
    if following and VARIABLE_WIND_PATTERN.match(following):
        variable_group = groups.take("variable_wind")
    wind = decode_wind_group(wind_group, variable_group)

    visibility = _decode_visibility(groups)

    runway_visual_ranges = []
    while groups.peek() and RVR_PATTERN.match(groups.peek()):
        runway_visual_ranges.append(decode_runway_visual_range(groups.take("rvr")))

    remaining = groups.remaining()
    if remaining:
        logger.debug(f"{identifier.full_code}: {len(remaining)} groups left undecoded: {' '.join(remaining)}")

    return Metar(
        message_type=message_type,
        identifier=identifier,
        issued_at=issued_at,
        wind=wind,
        visibility=visibility,
        modifier=modifier,
        runway_visual_ranges=tuple(runway_visual_ranges),
    )
