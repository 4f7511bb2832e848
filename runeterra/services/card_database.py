"""
Card database service.

Loads the globals file and the card set files of one locale, and holds the
process-wide copy of that data.

The dataset is static and trusted: it is loaded once, lazily, and is
immutable afterwards, so any number of threads may read it without locking.
"""

import json
import logging
import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from pydantic import ValidationError

from runeterra.config import PACKAGE_DATA_DIR, settings
from runeterra.models.reference import CardRecord, GlobalsData

logger = logging.getLogger(__name__)


class DatabaseLoadError(Exception):
    """Raised when a data file is not valid JSON or does not match its schema."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        self.reason = reason
        super().__init__(f"Card data file {path} is corrupted: {reason}")


class CardNotFoundError(LookupError):
    """
    Raised when a card code has no record in the dataset.

    The dataset is internally consistent, so this signals a broken
    installation rather than bad user input.
    """

    def __init__(self, card_code: str) -> None:
        self.card_code = card_code
        super().__init__(f"Card {card_code!r} does not exist in the database")


@dataclass(frozen=True)
class CardDatabase:
    """
    Reference tables plus every raw card record.

    Attributes:
        globals: Region, keyword, spell speed and rarity tables
        cards: Card records in file order
    """

    globals: GlobalsData
    cards: tuple[CardRecord, ...]
    _by_code: dict[str, CardRecord] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        by_code: dict[str, CardRecord] = {}
        for record in self.cards:
            by_code.setdefault(record.card_code, record)
        object.__setattr__(self, "_by_code", by_code)

    def find_record(self, card_code: str) -> CardRecord | None:
        """Raw record whose cardCode equals card_code exactly."""
        return self._by_code.get(card_code)

    def get_record(self, card_code: str) -> CardRecord:
        """
        Raw record for a card code.

        Raises:
            CardNotFoundError: If no record has that code
        """
        record = self.find_record(card_code)
        if record is None:
            raise CardNotFoundError(card_code)
        return record


def default_data_dir() -> Path:
    """Configured data directory, or the bundled data for the configured locale."""
    if settings.data_dir is not None:
        return settings.data_dir
    return PACKAGE_DATA_DIR / settings.locale


def _read_json(path: Path) -> Any:
    if not path.exists():
        raise FileNotFoundError(f"Card data file not found at {path}")

    try:
        with open(path, encoding="utf-8") as f:
            return json.load(f)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        raise DatabaseLoadError(path, str(e)) from e


def load_globals(path: Path) -> GlobalsData:
    """
    Load a globals file.

    Raises:
        FileNotFoundError: If the file doesn't exist
        DatabaseLoadError: If the file is not valid globals JSON
    """
    data = _read_json(path)
    try:
        return GlobalsData.model_validate(data)
    except ValidationError as e:
        raise DatabaseLoadError(path, str(e)) from e


def load_card_set(path: Path) -> tuple[CardRecord, ...]:
    """
    Load one card set file (a JSON array of card records).

    Raises:
        FileNotFoundError: If the file doesn't exist
        DatabaseLoadError: If the file is not a valid card set
    """
    data = _read_json(path)
    if not isinstance(data, list):
        raise DatabaseLoadError(path, "expected a JSON array of cards")

    try:
        return tuple(CardRecord.model_validate(card) for card in data)
    except ValidationError as e:
        raise DatabaseLoadError(path, str(e)) from e


def load_database(data_dir: Path | None = None, locale: str | None = None) -> CardDatabase:
    """
    Load globals and every card set of a locale.

    Args:
        data_dir: Directory with globals-<locale>.json and set*-<locale>.json.
            Defaults to default_data_dir().
        locale: Locale suffix of the files. Defaults to settings.locale.

    Returns:
        CardDatabase with card records of all sets, in set order.

    Raises:
        FileNotFoundError: If the globals file or every set file is missing
        DatabaseLoadError: If a file is corrupted
    """
    if data_dir is None:
        data_dir = default_data_dir()
    if locale is None:
        locale = settings.locale

    globals_data = load_globals(data_dir / f"globals-{locale}.json")

    set_paths = sorted(data_dir.glob(f"set*-{locale}.json"))
    if not set_paths:
        raise FileNotFoundError(f"No card set files for locale {locale!r} in {data_dir}")

    cards: list[CardRecord] = []
    for path in set_paths:
        records = load_card_set(path)
        logger.debug("Loaded %d cards from %s", len(records), path.name)
        cards.extend(records)

    logger.info("Loaded card database: %d cards from %d sets", len(cards), len(set_paths))
    return CardDatabase(globals=globals_data, cards=tuple(cards))


# Process-wide database, populated on first access
_database: CardDatabase | None = None
_database_lock = threading.Lock()


def get_database() -> CardDatabase:
    """
    Get the process-wide card database.

    Loaded exactly once, on first call, even when called from many threads.

    Raises:
        FileNotFoundError: If the data files are missing
        DatabaseLoadError: If a data file is corrupted
    """
    global _database
    if _database is None:
        with _database_lock:
            if _database is None:
                _database = load_database()
    return _database


def reset_database() -> None:
    """Drop the process-wide database so the next access reloads it."""
    global _database
    with _database_lock:
        _database = None
