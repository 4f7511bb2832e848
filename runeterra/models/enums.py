"""
Closed enumerations for Legends of Runeterra card data.

Each enumeration's member values are the reference tokens used in the data
export. Parsing is total: a token that no member recognizes decodes to
Unknown(enum, text) holding the original text, so new game content never
fails to load.

INVARIANTS:
- parse() never raises
- Unknown keeps the input text verbatim
- format(Unknown(enum, text)) == text
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, TypeVar

E = TypeVar("E", bound=Enum)


@dataclass(frozen=True, slots=True)
class Unknown:
    """
    Catch-all value of a closed enumeration.

    Attributes:
        enum: The enumeration the text failed to match
        text: The original, unrecognized input
    """

    enum: type[Enum]
    text: str

    def __str__(self) -> str:
        return self.text


class Region(str, Enum):
    """A card's faction."""

    NEUTRAL = "Neutral"
    DEMACIA = "Demacia"
    FRELJORD = "Freljord"
    IONIA = "Ionia"
    NOXUS = "Noxus"
    PILTOVER_ZAUN = "PiltoverZaun"
    SHADOW_ISLES = "ShadowIsles"


class Rarity(str, Enum):
    COMMON = "Common"
    RARE = "Rare"
    EPIC = "Epic"
    CHAMPION = "Champion"
    NONE = "None"


class SpellSpeed(str, Enum):
    SLOW = "Slow"
    FAST = "Fast"
    BURST = "Burst"


class CardType(str, Enum):
    ABILITY = "Ability"
    SPELL = "Spell"
    TRAP = "Trap"
    UNIT = "Unit"


class Subtype(str, Enum):
    """Unit tribe. Cards without one carry an empty string."""

    NONE = ""
    ELITE = "Elite"
    ELNUK = "Elnuk"
    PORO = "Poro"
    SPIDER = "Spider"
    TECH = "Tech"
    YETI = "Yeti"


class Supertype(str, Enum):
    NONE = ""
    CHAMPION = "Champion"


class KeywordType(str, Enum):
    """Keyword reference ids (the nameRef field of the keyword table)."""

    OBLITERATE = "Obliterate"
    SKILL = "Skill"
    DOUBLE_STRIKE = "DoubleStrike"
    WEAKEST = "Weakest"
    ELUSIVE = "Elusive"
    DRAIN = "Drain"
    STUN = "Stun"
    AUTOPLAY = "Autoplay"
    SPELL_OVERWHELM = "SpellOverwhelm"
    BARRIER = "Barrier"
    CAPTURE = "Capture"
    FROSTBITE = "Frostbite"
    BURST = "Burst"
    FLEETING = "Fleeting"
    FAST = "Fast"
    OVERWHELM = "Overwhelm"
    QUICK_STRIKE = "QuickStrike"
    TOUGH = "Tough"
    RECALL = "Recall"
    IONIA = "Ionia"
    REGENERATION = "Regeneration"
    LIFESTEAL = "Lifesteal"
    ENLIGHTENED = "Enlightened"
    SLOW = "Slow"
    EPHEMERAL = "Ephemeral"
    LAST_BREATH = "LastBreath"
    CHALLENGER = "Challenger"
    IMBUE = "Imbue"
    FEARSOME = "Fearsome"
    CANT_BLOCK = "CantBlock"


# =============================================================================
# DISPLAY NAMES
# =============================================================================

# Members whose human-readable name differs from their reference token.
# Only the region names are also accepted when parsing; keyword display
# names decode to Unknown like any other unrecognized text.
DISPLAY_NAMES: dict[Enum, str] = {
    Region.PILTOVER_ZAUN: "Piltover & Zaun",
    Region.SHADOW_ISLES: "Shadow Isles",
    KeywordType.DOUBLE_STRIKE: "Double Attack",
    KeywordType.AUTOPLAY: "Trap",
    KeywordType.SPELL_OVERWHELM: "Overwhelm",
    KeywordType.QUICK_STRIKE: "Quick Attack",
    KeywordType.LAST_BREATH: "Last Breath",
    KeywordType.CANT_BLOCK: "Can't Block",
}


class ClosedEnumCodec(Generic[E]):
    """
    Parse and format one closed enumeration.

    Recognized tokens are the member values plus any extra aliases.
    Matching is exact and case-sensitive.
    """

    def __init__(self, enum: type[E], aliases: dict[str, E] | None = None) -> None:
        self.enum = enum
        self._tokens: dict[str, E] = {member.value: member for member in enum}
        for alias, member in (aliases or {}).items():
            self._tokens.setdefault(alias, member)

    @property
    def tokens(self) -> frozenset[str]:
        """Every text that parses to a named member."""
        return frozenset(self._tokens)

    def parse(self, text: str) -> E | Unknown:
        """Decode text to a member, or Unknown(enum, text) if unrecognized."""
        member = self._tokens.get(text)
        if member is None:
            return Unknown(self.enum, text)
        return member

    def format(self, value: E | Unknown) -> str:
        """Encode a member to its reference token; Unknown keeps its text."""
        if isinstance(value, Unknown):
            return value.text
        return str(value.value)


def _display_aliases(enum: type[E]) -> dict[str, E]:
    return {
        name: member  # type: ignore[misc]
        for member, name in DISPLAY_NAMES.items()
        if isinstance(member, enum)
    }


REGION_CODEC: ClosedEnumCodec[Region] = ClosedEnumCodec(Region, _display_aliases(Region))
RARITY_CODEC: ClosedEnumCodec[Rarity] = ClosedEnumCodec(Rarity)
SPELL_SPEED_CODEC: ClosedEnumCodec[SpellSpeed] = ClosedEnumCodec(SpellSpeed)
CARD_TYPE_CODEC: ClosedEnumCodec[CardType] = ClosedEnumCodec(CardType)
SUBTYPE_CODEC: ClosedEnumCodec[Subtype] = ClosedEnumCodec(Subtype)
SUPERTYPE_CODEC: ClosedEnumCodec[Supertype] = ClosedEnumCodec(Supertype)
KEYWORD_TYPE_CODEC: ClosedEnumCodec[KeywordType] = ClosedEnumCodec(KeywordType)

CODECS: dict[type[Enum], ClosedEnumCodec] = {
    codec.enum: codec
    for codec in (
        REGION_CODEC,
        RARITY_CODEC,
        SPELL_SPEED_CODEC,
        CARD_TYPE_CODEC,
        SUBTYPE_CODEC,
        SUPERTYPE_CODEC,
        KEYWORD_TYPE_CODEC,
    )
}


def parse_region(text: str) -> Region | Unknown:
    return REGION_CODEC.parse(text)


def parse_rarity(text: str) -> Rarity | Unknown:
    return RARITY_CODEC.parse(text)


def parse_spell_speed(text: str) -> SpellSpeed | Unknown:
    return SPELL_SPEED_CODEC.parse(text)


def parse_card_type(text: str) -> CardType | Unknown:
    return CARD_TYPE_CODEC.parse(text)


def parse_subtype(text: str) -> Subtype | Unknown:
    return SUBTYPE_CODEC.parse(text)


def parse_supertype(text: str) -> Supertype | Unknown:
    return SUPERTYPE_CODEC.parse(text)


def parse_keyword_type(text: str) -> KeywordType | Unknown:
    return KEYWORD_TYPE_CODEC.parse(text)


def format_value(value: Enum | Unknown) -> str:
    """Encode any enumeration value back to its token."""
    if isinstance(value, Unknown):
        return value.text
    return CODECS[type(value)].format(value)


def display_name(value: Enum | Unknown) -> str:
    """Built-in human-readable name, e.g. "Piltover & Zaun"."""
    if isinstance(value, Unknown):
        return value.text
    if value in DISPLAY_NAMES:
        return DISPLAY_NAMES[value]
    return str(value.value)
