"""
Raw data export models.

These mirror the JSON shipped with the game data dragon exactly: camelCase
field names, free-text reference fields, nothing decoded. They are the
UNTRUSTED side of the boundary; runeterra.services.card_builder turns a
CardRecord into a typed Card.
"""

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# Stats are stored in a single byte by the game client
MAX_STAT_VALUE = 255


class ExportModel(BaseModel):
    """Base for export records: camelCase aliases, immutable."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class RegionEntry(ExportModel):
    abbreviation: str
    icon_absolute_path: str = ""
    name: str
    name_ref: str


class KeywordEntry(ExportModel):
    description: str
    name: str
    name_ref: str


class SpellSpeedEntry(ExportModel):
    name: str
    name_ref: str


class RarityEntry(ExportModel):
    name: str
    name_ref: str


class GlobalsData(ExportModel):
    """The globals file: reference tables shared by every card set."""

    regions: tuple[RegionEntry, ...] = ()
    keywords: tuple[KeywordEntry, ...] = ()
    spell_speeds: tuple[SpellSpeedEntry, ...] = ()
    rarities: tuple[RarityEntry, ...] = ()

    def find_keyword(self, name_ref: str) -> KeywordEntry | None:
        """Keyword table entry with an exact nameRef match."""
        return next((k for k in self.keywords if k.name_ref == name_ref), None)


class AssetRecord(ExportModel):
    game_absolute_path: str
    full_absolute_path: str


class CardRecord(ExportModel):
    """One card as it appears in a set file."""

    associated_cards: tuple[str, ...] = ()
    associated_card_refs: tuple[str, ...] = ()
    assets: tuple[AssetRecord, ...] = ()
    region: str = ""
    region_ref: str = ""
    attack: int = Field(default=0, ge=0, le=MAX_STAT_VALUE)
    cost: int = Field(default=0, ge=0, le=MAX_STAT_VALUE)
    health: int = Field(default=0, ge=0, le=MAX_STAT_VALUE)
    description: str = ""
    description_raw: str = ""
    levelup_description: str = ""
    levelup_description_raw: str = ""
    flavor_text: str = ""
    artist_name: str = ""
    name: str
    card_code: str
    keywords: tuple[str, ...] = ()
    keyword_refs: tuple[str, ...] = ()
    spell_speed: str = ""
    spell_speed_ref: str = ""
    rarity: str = ""
    rarity_ref: str = ""
    subtype: str = ""
    supertype: str = ""
    type: str = ""
    collectible: bool = False
