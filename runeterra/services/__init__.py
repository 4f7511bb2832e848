"""
Runeterra services.

Loading the card dataset and building typed cards from it.
"""

from runeterra.services.card_builder import (
    build_asset,
    build_card,
    get_associated_cards,
    get_card,
)
from runeterra.services.card_database import (
    CardDatabase,
    CardNotFoundError,
    DatabaseLoadError,
    get_database,
    load_card_set,
    load_database,
    load_globals,
    reset_database,
)
from runeterra.services.collection import build_collection, get_collection, reset_collection
from runeterra.services.display_names import rarity_name, region_name, spell_speed_name
from runeterra.services.keyword_resolver import (
    KEYWORD_NOT_IMPLEMENTED,
    resolve_keyword,
    resolve_keywords,
)

__all__ = [
    # Dataset
    "CardDatabase",
    "CardNotFoundError",
    "DatabaseLoadError",
    "get_database",
    "load_card_set",
    "load_database",
    "load_globals",
    "reset_database",
    # Card building
    "build_asset",
    "build_card",
    "get_associated_cards",
    "get_card",
    # Collection
    "build_collection",
    "get_collection",
    "reset_collection",
    # Keywords and display names
    "KEYWORD_NOT_IMPLEMENTED",
    "resolve_keyword",
    "resolve_keywords",
    "rarity_name",
    "region_name",
    "spell_speed_name",
]
