"""
Localized display names for enumeration values.

The globals file carries the display name of each region, rarity and spell
speed for its locale. Values missing from the table fall back to the
built-in English name.
"""

from collections.abc import Iterable

from runeterra.models.enums import Rarity, Region, SpellSpeed, Unknown, display_name
from runeterra.models.reference import GlobalsData, RarityEntry, RegionEntry, SpellSpeedEntry


def _lookup(
    value: Region | Rarity | SpellSpeed | Unknown,
    entries: Iterable[RegionEntry | RarityEntry | SpellSpeedEntry],
) -> str:
    if isinstance(value, Unknown):
        return value.text
    for entry in entries:
        if entry.name_ref == value.value:
            return entry.name
    return display_name(value)


def region_name(region: Region | Unknown, globals_data: GlobalsData) -> str:
    """Display name of a region, e.g. "Piltover & Zaun"."""
    return _lookup(region, globals_data.regions)


def rarity_name(rarity: Rarity | Unknown, globals_data: GlobalsData) -> str:
    """Display name of a rarity, e.g. "COMMON"."""
    return _lookup(rarity, globals_data.rarities)


def spell_speed_name(spell_speed: SpellSpeed | Unknown, globals_data: GlobalsData) -> str:
    """Display name of a spell speed."""
    return _lookup(spell_speed, globals_data.spell_speeds)
