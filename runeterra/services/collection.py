"""
Collection service.

Builds the typed Collection of every card in the dataset and keeps the
process-wide copy.
"""

import logging
import threading

from runeterra.models.collection import Collection
from runeterra.services.card_builder import build_card
from runeterra.services.card_database import CardDatabase, get_database

logger = logging.getLogger(__name__)


def build_collection(database: CardDatabase | None = None) -> Collection:
    """
    Build a typed Card for every record of the dataset.

    Args:
        database: Dataset to build from. Defaults to the process-wide database.

    Raises:
        MalformedCardCodeError: If any record has a malformed card code.
            The dataset is trusted, so this is not recovered from.
    """
    if database is None:
        database = get_database()

    cards = tuple(build_card(record, database.globals) for record in database.cards)
    logger.info("Built collection of %d cards", len(cards))
    return Collection(cards=cards)


_collection: Collection | None = None
_collection_lock = threading.Lock()


def get_collection() -> Collection:
    """Get the process-wide collection, building it on first call."""
    global _collection
    if _collection is None:
        with _collection_lock:
            if _collection is None:
                _collection = build_collection()
    return _collection


def reset_collection() -> None:
    """Drop the process-wide collection so the next access rebuilds it."""
    global _collection
    with _collection_lock:
        _collection = None
