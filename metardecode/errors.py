"""Decode errors raised by the identifier, date-time group and weather decoders."""

from typing import Any, Optional


class DecodeError(ValueError):
    """Base class for every decode/validation failure."""

    kind = "DecodeError"

    def __init__(self, message: str, field: Optional[str] = None, value: Any = None):
        super().__init__(message)
        self.field = field
        self.value = value

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "kind": self.kind,
            "field": self.field,
            "value": self.value,
            "message": str(self),
        }


class FormatError(DecodeError):
    """Wrong length or pattern mismatch."""

    kind = "FormatError"


class RangeError(DecodeError):
    """Numeric field outside its legal domain."""

    kind = "RangeError"


class ConsistencyError(DecodeError):
    """Related optional fields given inconsistently."""

    kind = "ConsistencyError"


class InvalidLengthError(FormatError):
    kind = "InvalidLength"


class InvalidFormatError(FormatError):
    kind = "InvalidFormat"


class UnknownPrefixError(FormatError):
    kind = "UnknownPrefix"


class InvalidDayError(RangeError):
    kind = "InvalidDay"


class InvalidHourError(RangeError):
    kind = "InvalidHour"


class InvalidMinuteError(RangeError):
    kind = "InvalidMinute"


class InvalidMonthError(RangeError):
    kind = "InvalidMonth"


class DirectionOutOfRangeError(RangeError):
    kind = "DirectionOutOfRange"


class NegativeSpeedError(RangeError):
    kind = "NegativeSpeed"


class NegativeGustSpeedError(RangeError):
    kind = "NegativeGustSpeed"


class NegativeVisibilityError(RangeError):
    kind = "NegativeVisibility"


class VariableFromOutOfRangeError(RangeError):
    kind = "VariableFromOutOfRange"


class VariableToOutOfRangeError(RangeError):
    kind = "VariableToOutOfRange"


class IncompleteVariableRangeError(ConsistencyError):
    kind = "IncompleteVariableRange"


class MinNotLessThanMaxError(ConsistencyError):
    kind = "MinNotLessThanMax"
