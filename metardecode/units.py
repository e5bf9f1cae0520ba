"""Unit label sets with their official abbreviations."""

from enum import Enum


class SpeedUnits(Enum):
    KNOTS = "KT"
    KILOMETERS_PER_HR = "KMH"
    METERS_PER_SEC = "MPS"
    MILES_PER_HOUR = "MPH"


class DistanceUnits(Enum):
    STATUTE_MILES = "SM"
    FEET = "FT"
    KILOMETERS = "KM"
    METERS = "M"
