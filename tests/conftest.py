import json
from pathlib import Path
from typing import Any

import pytest

from runeterra.models.reference import CardRecord, GlobalsData
from runeterra.services import card_database as card_database_module
from runeterra.services import collection as collection_module
from runeterra.services.card_database import CardDatabase


@pytest.fixture(autouse=True)
def reset_singletons():
    """Drop the process-wide database and collection between tests."""
    card_database_module.reset_database()
    collection_module.reset_collection()
    yield
    card_database_module.reset_database()
    collection_module.reset_collection()


@pytest.fixture
def globals_json() -> dict[str, Any]:
    """Globals file with a few entries per table."""
    return {
        "keywords": [
            {
                "description": "While attacking, it strikes before its blocker.",
                "name": "Quick Attack",
                "nameRef": "QuickStrike",
            },
            {
                "description": "Takes 1 less damage from all sources.",
                "name": "Tough",
                "nameRef": "Tough",
            },
            {
                "description": "Heals fully at the start of each round.",
                "name": "Regeneration",
                "nameRef": "Regeneration",
            },
        ],
        "regions": [
            {
                "abbreviation": "DE",
                "iconAbsolutePath": "http://dd.b.pvp.net/img/regions/icon-demacia.png",
                "name": "Demacia",
                "nameRef": "Demacia",
            },
            {
                "abbreviation": "PZ",
                "iconAbsolutePath": "http://dd.b.pvp.net/img/regions/icon-piltoverzaun.png",
                "name": "Piltover & Zaun",
                "nameRef": "PiltoverZaun",
            },
        ],
        "spellSpeeds": [
            {"name": "Slow", "nameRef": "Slow"},
            {"name": "Burst", "nameRef": "Burst"},
        ],
        "rarities": [
            {"name": "COMMON", "nameRef": "Common"},
            {"name": "Champion", "nameRef": "Champion"},
        ],
    }


@pytest.fixture
def globals_data(globals_json: dict[str, Any]) -> GlobalsData:
    return GlobalsData.model_validate(globals_json)


def make_card_json(**overrides: Any) -> dict[str, Any]:
    """A complete card record in export format."""
    card: dict[str, Any] = {
        "associatedCards": [],
        "associatedCardRefs": [],
        "assets": [
            {
                "gameAbsolutePath": "http://dd.b.pvp.net/set1/img/cards/01DE003.png",
                "fullAbsolutePath": "http://dd.b.pvp.net/set1/img/cards/01DE003-full.png",
            }
        ],
        "region": "Demacia",
        "regionRef": "Demacia",
        "attack": 2,
        "cost": 2,
        "health": 2,
        "description": "",
        "descriptionRaw": "",
        "levelupDescription": "",
        "levelupDescriptionRaw": "",
        "flavorText": "Stand fast.",
        "artistName": "Kudos Productions",
        "name": "Vanguard Sergeant",
        "cardCode": "01DE003",
        "keywords": ["Tough"],
        "keywordRefs": ["Tough"],
        "spellSpeed": "",
        "spellSpeedRef": "",
        "rarity": "COMMON",
        "rarityRef": "Common",
        "subtype": "",
        "supertype": "",
        "type": "Unit",
        "collectible": True,
    }
    card.update(overrides)
    return card


@pytest.fixture
def card_json() -> dict[str, Any]:
    return make_card_json()


@pytest.fixture
def card_record(card_json: dict[str, Any]) -> CardRecord:
    return CardRecord.model_validate(card_json)


@pytest.fixture
def champion_json() -> dict[str, Any]:
    """Champion with a level-up and a linked spell."""
    return make_card_json(
        name="Garen",
        cardCode="01DE012",
        associatedCardRefs=["01DE012T1", "01DE012T2"],
        attack=5,
        cost=5,
        health=5,
        keywords=["Regeneration"],
        keywordRefs=["Regeneration"],
        levelupDescription="I've struck twice.",
        rarity="Champion",
        rarityRef="Champion",
        supertype="Champion",
    )


@pytest.fixture
def set_json(champion_json: dict[str, Any], card_json: dict[str, Any]) -> list[dict[str, Any]]:
    """A card set holding a champion, its associated cards and a follower."""
    return [
        champion_json,
        make_card_json(
            name="Garen",
            cardCode="01DE012T1",
            associatedCardRefs=["01DE012", "01DE012T2"],
            attack=6,
            cost=5,
            health=6,
            rarityRef="None",
            supertype="Champion",
            collectible=False,
        ),
        make_card_json(
            name="Garen's Judgment",
            cardCode="01DE012T2",
            attack=0,
            health=0,
            cost=3,
            keywords=["Burst"],
            keywordRefs=["Burst"],
            spellSpeed="Burst",
            spellSpeedRef="Burst",
            rarityRef="None",
            type="Spell",
            collectible=False,
        ),
        card_json,
        make_card_json(
            name="Mystic Shot",
            cardCode="01PZ052",
            region="Piltover & Zaun",
            regionRef="PiltoverZaun",
            attack=0,
            health=0,
            keywords=[],
            keywordRefs=[],
            spellSpeed="Fast",
            spellSpeedRef="Fast",
            type="Spell",
        ),
    ]


@pytest.fixture
def data_dir(
    tmp_path: Path, globals_json: dict[str, Any], set_json: list[dict[str, Any]]
) -> Path:
    """Directory with one globals file and one set file."""
    (tmp_path / "globals-en_us.json").write_text(json.dumps(globals_json), encoding="utf-8")
    (tmp_path / "set1-en_us.json").write_text(json.dumps(set_json), encoding="utf-8")
    return tmp_path


@pytest.fixture
def database(globals_data: GlobalsData, set_json: list[dict[str, Any]]) -> CardDatabase:
    return CardDatabase(
        globals=globals_data,
        cards=tuple(CardRecord.model_validate(card) for card in set_json),
    )


@pytest.fixture
def make_card():
    """Factory for card records in export format."""
    return make_card_json
