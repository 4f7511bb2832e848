"""
Card code codec.

A card code is the compact identifier of a card:

    SSRRNNN[AA]

- SS: two-digit set number ("01")
- RR: two-letter region abbreviation ("DE")
- NNN: three-digit number within the set ("012")
- AA: optional suffix of an associated card ("T1")

The region abbreviation goes through a fixed table of six regions. A token
outside the table does not fail parsing; it decodes to UNKNOWN_REGION, and
UNKNOWN_REGION encodes back as "UN". So format(parse(s)) == s only holds when
s carries one of the six known abbreviations.
"""

import re
from dataclasses import dataclass

from runeterra.models.enums import Region, Unknown

# =============================================================================
# REGION CODE TABLE
# =============================================================================

REGION_ABBREVIATION_TO_ID: dict[str, int] = {
    "DE": 0,
    "FR": 1,
    "IO": 2,
    "NX": 3,
    "PZ": 4,
    "SI": 5,
}

REGION_ID_TO_ABBREVIATION: dict[int, str] = {
    value: abbreviation for abbreviation, value in REGION_ABBREVIATION_TO_ID.items()
}

_REGION_BY_ID: dict[int, Region] = {
    0: Region.DEMACIA,
    1: Region.FRELJORD,
    2: Region.IONIA,
    3: Region.NOXUS,
    4: Region.PILTOVER_ZAUN,
    5: Region.SHADOW_ISLES,
}

_ID_BY_REGION: dict[Region, int] = {region: value for value, region in _REGION_BY_ID.items()}

UNKNOWN_REGION_ID = 99
UNKNOWN_REGION_ABBREVIATION = "UN"
UNKNOWN_REGION = Unknown(Region, "Unimplemented region")


def region_id(abbreviation: str) -> int:
    """Numeric id of a region abbreviation, UNKNOWN_REGION_ID if not in the table."""
    return REGION_ABBREVIATION_TO_ID.get(abbreviation, UNKNOWN_REGION_ID)


def region_abbreviation(value: int) -> str:
    """Abbreviation of a numeric region id, UNKNOWN_REGION_ABBREVIATION if not in the table."""
    return REGION_ID_TO_ABBREVIATION.get(value, UNKNOWN_REGION_ABBREVIATION)


def region_from_id(value: int) -> Region | Unknown:
    """Region for a numeric id. Ids outside the table decode to UNKNOWN_REGION."""
    return _REGION_BY_ID.get(value, UNKNOWN_REGION)


def region_to_id(region: Region | Unknown) -> int:
    """
    Numeric id of a region.

    Unknown regions and named regions without a code form (Neutral)
    map to UNKNOWN_REGION_ID.
    """
    if isinstance(region, Unknown):
        return UNKNOWN_REGION_ID
    return _ID_BY_REGION.get(region, UNKNOWN_REGION_ID)


# =============================================================================
# CARD CODE
# =============================================================================

SET_WIDTH = 2
NUMBER_WIDTH = 3
# Length of a code carrying an associated-card suffix
SUFFIXED_CODE_LENGTH = 9

_SET_PATTERN = re.compile(r"[0-9]{2}")
_NUMBER_PATTERN = re.compile(r"[0-9]{3}")


class MalformedCardCodeError(ValueError):
    """Raised when a numeric segment of a card code is not a valid integer."""

    def __init__(self, code: str, segment: str, value: str) -> None:
        self.code = code
        self.segment = segment
        self.value = value
        super().__init__(f"Malformed card code {code!r}: invalid {segment} segment {value!r}")


@dataclass(frozen=True, slots=True)
class CardCode:
    """
    Decoded card code.

    Attributes:
        set: Set number (1 for "01")
        region: Region decoded from the abbreviation
        number: Card number within the set
        associated_suffix: Suffix of associated cards ("T1"), empty otherwise
    """

    set: int
    region: Region | Unknown
    number: int
    associated_suffix: str = ""

    @classmethod
    def parse(cls, code: str) -> "CardCode":
        return parse_card_code(code)

    def to_code(self) -> str:
        return format_card_code(self)

    def __str__(self) -> str:
        return format_card_code(self)


def _parse_segment(
    code: str, segment: str, start: int, width: int, pattern: re.Pattern[str]
) -> int:
    value = code[start : start + width]
    if not pattern.fullmatch(value):
        raise MalformedCardCodeError(code, segment, value)
    return int(value)


def parse_card_code(code: str) -> CardCode:
    """
    Parse a card code string.

    Args:
        code: Card code, e.g. "01DE003" or "01DE003T1"

    Returns:
        Decoded CardCode. An unrecognized region token yields UNKNOWN_REGION.

    Raises:
        MalformedCardCodeError: If the set or number segment is not a
            zero-padded decimal integer of the expected width
    """
    set_number = _parse_segment(code, "set", 0, SET_WIDTH, _SET_PATTERN)
    region = region_from_id(region_id(code[2:4]))
    number = _parse_segment(code, "number", 4, NUMBER_WIDTH, _NUMBER_PATTERN)
    suffix = code[7:9] if len(code) == SUFFIXED_CODE_LENGTH else ""

    return CardCode(set=set_number, region=region, number=number, associated_suffix=suffix)


def format_card_code(card_code: CardCode) -> str:
    """
    Encode a CardCode back to its string form.

    Regions outside the code table are written as "UN".
    """
    abbreviation = region_abbreviation(region_to_id(card_code.region))
    return (
        f"{card_code.set:02d}{abbreviation}{card_code.number:03d}{card_code.associated_suffix}"
    )
