"""
Look up cards by card code.

    python -m runeterra.jobs.lookup_card 01DE012 01IO009T1
"""

import argparse
import logging
import sys
from pathlib import Path

from runeterra.config import settings
from runeterra.models.card import Card
from runeterra.models.card_code import MalformedCardCodeError, parse_card_code
from runeterra.models.enums import display_name
from runeterra.models.reference import GlobalsData
from runeterra.services.card_builder import get_card
from runeterra.services.card_database import (
    CardDatabase,
    CardNotFoundError,
    DatabaseLoadError,
    load_database,
)
from runeterra.services.display_names import rarity_name, region_name

logger = logging.getLogger(__name__)


def format_card(card: Card, globals_data: GlobalsData) -> str:
    """One-paragraph summary of a card."""
    lines = [
        f"{card.name} ({card.code})",
        f"  Region: {region_name(card.region, globals_data)}",
        f"  Type: {display_name(card.type)}  Rarity: {rarity_name(card.rarity, globals_data)}",
        f"  Cost: {card.cost}  Attack: {card.attack}  Health: {card.health}",
    ]
    if card.keywords:
        lines.append("  Keywords: " + ", ".join(k.name for k in card.keywords))
    if card.description:
        lines.append(f"  {card.description}")
    if card.associated_cards:
        lines.append("  Associated: " + ", ".join(card.associated_card_refs))
    return "\n".join(lines)


def lookup(codes: list[str], database: CardDatabase) -> int:
    """
    Print each card. Returns the number of codes that failed.

    A malformed code is reported and skipped. A well-formed code missing
    from the dataset is reported too, since it came from the command line
    rather than from the dataset itself.
    """
    failures = 0
    for code in codes:
        try:
            parse_card_code(code)
            card = get_card(code, database)
        except MalformedCardCodeError as e:
            logger.error("%s", e)
            failures += 1
            continue
        except CardNotFoundError:
            logger.error("No card with code %s", code)
            failures += 1
            continue

        print(format_card(card, database.globals))
    return failures


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Look up cards by card code")
    parser.add_argument("codes", nargs="+", help="Card codes (e.g., 01DE012)")
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=None,
        help="Directory with globals and set files (default: bundled data)",
    )
    parser.add_argument(
        "--locale",
        default=settings.locale,
        help=f"Data file locale (default: {settings.locale})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )

    try:
        database = load_database(args.data_dir, args.locale)
    except (FileNotFoundError, DatabaseLoadError) as e:
        logger.error("Failed to load card data: %s", e)
        sys.exit(1)

    sys.exit(1 if lookup(args.codes, database) else 0)


if __name__ == "__main__":
    main()
