"""
Card model builder.

Turns one raw CardRecord into a typed Card:

1. Decode the card code (fails fast with MalformedCardCodeError)
2. Decode associated card codes in order (first failure propagates)
3. Decode the six enumerations (never fail, unknown text -> Unknown)
4. Resolve keywords (never fail, missing reference -> placeholder)
5. Copy stats, flags and text fields as-is

No partial results: a record either becomes a Card or raises.
"""

from runeterra.models.card import Asset, Card
from runeterra.models.card_code import parse_card_code
from runeterra.models.enums import (
    parse_card_type,
    parse_rarity,
    parse_region,
    parse_spell_speed,
    parse_subtype,
    parse_supertype,
)
from runeterra.models.reference import AssetRecord, CardRecord, GlobalsData
from runeterra.services.card_database import CardDatabase, get_database
from runeterra.services.keyword_resolver import resolve_keywords


def build_asset(record: AssetRecord) -> Asset:
    return Asset(
        game_absolute_path=record.game_absolute_path,
        full_absolute_path=record.full_absolute_path,
    )


def build_card(record: CardRecord, globals_data: GlobalsData) -> Card:
    """
    Build a typed Card from a raw record.

    Args:
        record: Raw card record
        globals_data: Reference tables used to resolve keywords

    Returns:
        The typed Card

    Raises:
        MalformedCardCodeError: If the card code or any associated card
            code is malformed. Only the first failure is reported.
    """
    card_code = parse_card_code(record.card_code)
    associated_cards = tuple(parse_card_code(code) for code in record.associated_card_refs)

    return Card(
        card_code=card_code,
        raw_code=record.card_code,
        name=record.name,
        region=parse_region(record.region_ref),
        attack=record.attack,
        cost=record.cost,
        health=record.health,
        description=record.description,
        levelup_description=record.levelup_description,
        flavor_text=record.flavor_text,
        artist_name=record.artist_name,
        keywords=resolve_keywords(record.keyword_refs, globals_data),
        assets=tuple(build_asset(asset) for asset in record.assets),
        associated_cards=associated_cards,
        associated_card_refs=record.associated_card_refs,
        spell_speed=parse_spell_speed(record.spell_speed_ref),
        rarity=parse_rarity(record.rarity_ref),
        type=parse_card_type(record.type),
        subtype=parse_subtype(record.subtype),
        supertype=parse_supertype(record.supertype),
        collectible=record.collectible,
    )


def get_card(card_code: str, database: CardDatabase | None = None) -> Card:
    """
    Look a card up by its code and build it.

    Args:
        card_code: Card code exactly as stored in the dataset
        database: Dataset to search. Defaults to the process-wide database.

    Raises:
        CardNotFoundError: If the dataset has no such card
        MalformedCardCodeError: If the stored record has a malformed code
    """
    if database is None:
        database = get_database()
    return build_card(database.get_record(card_code), database.globals)


def get_associated_cards(card: Card, database: CardDatabase | None = None) -> list[Card]:
    """
    Resolve every associated card code of a card to a full Card.

    Lookups use the codes as stored, so cards of regions outside the code
    table resolve too.

    Raises:
        CardNotFoundError: If an associated card is missing from the dataset
    """
    if database is None:
        database = get_database()
    return [get_card(code, database) for code in card.associated_card_refs]
