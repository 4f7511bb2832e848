"""
Keyword resolution.

Cards list their keywords as reference ids ("QuickStrike"). The globals
keyword table turns those into a display name and rules text. A reference
missing from the table still resolves, to a placeholder keyword, so new
game content loads without errors.
"""

import logging
from collections.abc import Sequence

from runeterra.models.card import Keyword
from runeterra.models.enums import parse_keyword_type
from runeterra.models.reference import GlobalsData

logger = logging.getLogger(__name__)

KEYWORD_NOT_IMPLEMENTED = "Keyword not implemented yet"


def resolve_keyword(reference: str, globals_data: GlobalsData) -> Keyword:
    """
    Resolve a keyword reference id.

    Args:
        reference: Keyword reference id from a card record
        globals_data: Reference tables holding the keyword table

    Returns:
        The table's name and description on an exact nameRef match.
        Otherwise a Keyword named after the reference itself, with the
        KEYWORD_NOT_IMPLEMENTED description. The keyword type is parsed
        either way, so an unrecognized reference carries Unknown.
    """
    entry = globals_data.find_keyword(reference)
    if entry is None:
        logger.debug("Keyword %r not in keyword table", reference)
        return Keyword(
            name=reference,
            keyword_type=parse_keyword_type(reference),
            description=KEYWORD_NOT_IMPLEMENTED,
        )

    return Keyword(
        name=entry.name,
        keyword_type=parse_keyword_type(entry.name_ref),
        description=entry.description,
    )


def resolve_keywords(
    references: Sequence[str], globals_data: GlobalsData
) -> tuple[Keyword, ...]:
    """Resolve keyword references, keeping their order."""
    return tuple(resolve_keyword(reference, globals_data) for reference in references)
