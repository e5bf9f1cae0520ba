"""ICAO identifier parsing."""

from dataclasses import dataclass, replace
from typing import Optional

from metardecode.errors import InvalidFormatError, InvalidLengthError, UnknownPrefixError
from metardecode.icao_prefixes import IcaoPrefix, lookup


@dataclass(frozen=True)
class IcaoIdentifier:
    """A valid 4 letter ICAO identifier.

    Attributes:
        full_code: The 4 letter ICAO identifier, as given
        prefix: The matched prefix entry (shared with the prefix table)
        local_code: The remaining 2-3 letters after the prefix
        airport_name: Optionally, the airport name. Never filled by the parser.
    """
    full_code: str
    prefix: IcaoPrefix
    local_code: str
    airport_name: Optional[str] = None

    def __post_init__(self):
        if len(self.full_code) != 4:
            raise InvalidLengthError(
                f"ICAO identifier must be 4 characters: {self.full_code!r}",
                field="full_code",
                value=self.full_code,
            )
        if not self.full_code.startswith(self.prefix.code):
            raise UnknownPrefixError(
                f"prefix {self.prefix.code!r} does not start identifier {self.full_code!r}",
                field="prefix",
                value=self.prefix.code,
            )
        if self.local_code != self.full_code[len(self.prefix.code):]:
            raise InvalidFormatError(
                f"local code {self.local_code!r} must be what follows the prefix in {self.full_code!r}",
                field="local_code",
                value=self.local_code,
            )

    def with_airport_name(self, airport_name: str) -> "IcaoIdentifier":
        """Return a copy carrying the given airport name."""
        return replace(self, airport_name=airport_name)

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "full_code": self.full_code,
            "prefix": self.prefix.to_dict(),
            "local_code": self.local_code,
            "airport_name": self.airport_name,
        }


def parse_icao_identifier(identifier: str) -> IcaoIdentifier:
    """
    Parse a 4 letter ICAO identifier.

    Single letter prefixes are tried before two letter prefixes. The input is
    not normalized, it must already be uppercase.

    Raises:
        InvalidLengthError: identifier is not exactly 4 characters
        UnknownPrefixError: neither the first letter nor the first two letters
            are a known prefix
    """
    if len(identifier) != 4:
        raise InvalidLengthError(
            f"ICAO identifier must be 4 characters: {identifier!r}",
            field="identifier",
            value=identifier,
        )

    prefix = lookup(identifier[0])
    if prefix is not None:
        return IcaoIdentifier(identifier, prefix, identifier[1:])

    prefix = lookup(identifier[:2])
    if prefix is not None:
        return IcaoIdentifier(identifier, prefix, identifier[2:])

    raise UnknownPrefixError(
        f"no known ICAO prefix for identifier: {identifier!r}",
        field="identifier",
        value=identifier,
    )
