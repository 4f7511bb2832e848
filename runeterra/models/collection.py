from collections.abc import Iterator
from dataclasses import dataclass, field

from runeterra.models.card import Card
from runeterra.models.card_code import CardCode, format_card_code
from runeterra.models.enums import Region, Unknown


@dataclass(frozen=True)
class Collection:
    """
    Every card of the dataset, in export order.

    Read-only: built once from the full card set.
    """

    cards: tuple[Card, ...] = ()
    _by_code: dict[str, Card] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        # Keyed by stored code text: every region outside the code table
        # decodes to the same CardCode region.
        # First occurrence wins if a code is duplicated across set files.
        by_code: dict[str, Card] = {}
        for card in self.cards:
            by_code.setdefault(card.raw_code, card)
        object.__setattr__(self, "_by_code", by_code)

    def __len__(self) -> int:
        return len(self.cards)

    def __iter__(self) -> Iterator[Card]:
        return iter(self.cards)

    def find(self, card_code: str | CardCode) -> Card | None:
        """
        Card with the given code, or None.

        Text is matched exactly against the stored codes. A CardCode is
        encoded first, so one with a region outside the code table finds
        nothing.
        """
        if isinstance(card_code, CardCode):
            card_code = format_card_code(card_code)
        return self._by_code.get(card_code)

    def collectible(self) -> list[Card]:
        """Cards that can be put in a deck."""
        return [card for card in self.cards if card.collectible]

    def by_region(self, region: Region | Unknown) -> list[Card]:
        """Cards of one region."""
        return [
            card
            for card in self.cards
            if type(card.region) is type(region) and card.region == region
        ]
