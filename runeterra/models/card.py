"""
Typed card models.

A Card is built from one CardRecord by runeterra.services.card_builder.
Its text fields are the record's own string objects; nothing is copied.
All models are frozen.
"""

from dataclasses import dataclass

from runeterra.models.card_code import CardCode
from runeterra.models.enums import (
    CardType,
    KeywordType,
    Rarity,
    Region,
    SpellSpeed,
    Subtype,
    Supertype,
    Unknown,
)


@dataclass(frozen=True, slots=True)
class Asset:
    """
    Card art paths.

    Attributes:
        game_absolute_path: Path inside the game client
        full_absolute_path: Path of the full-size art
    """

    game_absolute_path: str
    full_absolute_path: str


@dataclass(frozen=True, slots=True)
class Keyword:
    """
    A keyword resolved against the globals keyword table.

    Attributes:
        name: Display name ("Quick Attack")
        keyword_type: Decoded reference id
        description: Rules text of the keyword
    """

    name: str
    keyword_type: KeywordType | Unknown
    description: str


@dataclass(frozen=True, slots=True)
class Card:
    """
    A fully typed card.

    Attributes:
        card_code: Decoded card code
        raw_code: Card code exactly as stored in the dataset
        name: Card name
        region: Card faction
        attack: Attack stat (units only)
        cost: Mana cost
        health: Health stat (units only)
        description: Rendered card text
        levelup_description: Champion level-up condition, empty otherwise
        flavor_text: Flavor text
        artist_name: Credited artist
        keywords: Resolved keywords, in record order
        assets: Art paths
        associated_cards: Codes of tokens, spells and level-ups this card links to
        associated_card_refs: The same codes exactly as stored in the dataset
        spell_speed: Spell speed (spells only)
        rarity: Rarity
        type: Card type
        subtype: Unit tribe
        supertype: Champion or none
        collectible: True if the card can be put in a deck
    """

    card_code: CardCode
    raw_code: str
    name: str
    region: Region | Unknown
    attack: int
    cost: int
    health: int
    description: str
    levelup_description: str
    flavor_text: str
    artist_name: str
    keywords: tuple[Keyword, ...]
    assets: tuple[Asset, ...]
    associated_cards: tuple[CardCode, ...]
    associated_card_refs: tuple[str, ...]
    spell_speed: SpellSpeed | Unknown
    rarity: Rarity | Unknown
    type: CardType | Unknown
    subtype: Subtype | Unknown
    supertype: Supertype | Unknown
    collectible: bool

    @property
    def code(self) -> str:
        """
        Card code as text.

        This is the stored code, not card_code re-encoded: regions outside
        the code table would come back as "UN".
        """
        return self.raw_code

    @property
    def is_champion(self) -> bool:
        return self.supertype == Supertype.CHAMPION

    def has_keyword(self, keyword_type: KeywordType) -> bool:
        # str-valued members of different enums compare equal ("Fast")
        if not isinstance(keyword_type, KeywordType):
            return False
        return any(
            isinstance(k.keyword_type, KeywordType) and k.keyword_type == keyword_type
            for k in self.keywords
        )
