from runeterra.models.card import Asset, Card, Keyword
from runeterra.models.card_code import (
    UNKNOWN_REGION,
    UNKNOWN_REGION_ABBREVIATION,
    UNKNOWN_REGION_ID,
    CardCode,
    MalformedCardCodeError,
    format_card_code,
    parse_card_code,
    region_abbreviation,
    region_from_id,
    region_id,
    region_to_id,
)
from runeterra.models.collection import Collection
from runeterra.models.enums import (
    CardType,
    ClosedEnumCodec,
    KeywordType,
    Rarity,
    Region,
    SpellSpeed,
    Subtype,
    Supertype,
    Unknown,
    display_name,
    format_value,
    parse_card_type,
    parse_keyword_type,
    parse_rarity,
    parse_region,
    parse_spell_speed,
    parse_subtype,
    parse_supertype,
)
from runeterra.models.reference import (
    AssetRecord,
    CardRecord,
    GlobalsData,
    KeywordEntry,
    RarityEntry,
    RegionEntry,
    SpellSpeedEntry,
)

__all__ = [
    "Asset",
    "AssetRecord",
    "Card",
    "CardCode",
    "CardRecord",
    "CardType",
    "ClosedEnumCodec",
    "Collection",
    "GlobalsData",
    "Keyword",
    "KeywordEntry",
    "KeywordType",
    "MalformedCardCodeError",
    "Rarity",
    "RarityEntry",
    "Region",
    "RegionEntry",
    "SpellSpeed",
    "SpellSpeedEntry",
    "Subtype",
    "Supertype",
    "UNKNOWN_REGION",
    "UNKNOWN_REGION_ABBREVIATION",
    "UNKNOWN_REGION_ID",
    "Unknown",
    "display_name",
    "format_card_code",
    "format_value",
    "parse_card_code",
    "parse_card_type",
    "parse_keyword_type",
    "parse_rarity",
    "parse_region",
    "parse_spell_speed",
    "parse_subtype",
    "parse_supertype",
    "region_abbreviation",
    "region_from_id",
    "region_id",
    "region_to_id",
]
