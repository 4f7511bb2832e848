"""Tests for the command line jobs."""

import logging
import sys
from pathlib import Path
from unittest.mock import patch

import httpx
import pytest
import respx

from runeterra.game_api import GameClient, GameClientHTTPError, GameResult
from runeterra.jobs.lookup_card import format_card, lookup
from runeterra.jobs.lookup_card import main as lookup_main
from runeterra.jobs.poll_game_client import poll_once
from runeterra.services.card_builder import get_card
from runeterra.services.card_database import CardDatabase

BASE_URL = "http://localhost:21337"


class TestPollOnce:
    @respx.mock
    async def test_collects_results_and_errors(self, caplog: pytest.LogCaptureFixture) -> None:
        respx.get(f"{BASE_URL}/static-decklist").mock(
            return_value=httpx.Response(200, json={"DeckCode": None, "CardsInDeck": None})
        )
        respx.get(f"{BASE_URL}/positional-rectangles").mock(
            side_effect=httpx.ConnectError("refused")
        )
        respx.get(f"{BASE_URL}/expeditions-state").mock(return_value=httpx.Response(404))
        respx.get(f"{BASE_URL}/game-result").mock(
            return_value=httpx.Response(200, json={"GameID": 7, "LocalPlayerWon": True})
        )

        with caplog.at_level(logging.INFO):
            outcome = await poll_once(GameClient(base_url=BASE_URL))

        assert outcome["game_result"] == GameResult(game_id=7, local_player_won=True)
        assert outcome["static_decklist"].deck_code is None
        assert isinstance(outcome["positional_rectangles"], GameClientHTTPError)
        assert isinstance(outcome["expeditions_state"], GameClientHTTPError)
        assert "Failed to fetch positional_rectangles" in caplog.text


class TestFormatCard:
    def test_summary(self, database: CardDatabase) -> None:
        text = format_card(get_card("01DE012", database), database.globals)

        assert text.startswith("Garen (01DE012)")
        assert "Region: Demacia" in text
        assert "Cost: 5  Attack: 5  Health: 5" in text
        assert "Keywords: Regeneration" in text
        assert "Associated: 01DE012T1, 01DE012T2" in text

    def test_uses_localized_region_name(self, database: CardDatabase) -> None:
        text = format_card(get_card("01PZ052", database), database.globals)

        assert "Region: Piltover & Zaun" in text


class TestLookup:
    def test_prints_found_cards(
        self, database: CardDatabase, capsys: pytest.CaptureFixture[str]
    ) -> None:
        failures = lookup(["01DE003", "01PZ052"], database)

        out = capsys.readouterr().out
        assert failures == 0
        assert "Vanguard Sergeant" in out
        assert "Mystic Shot" in out

    def test_counts_failures(
        self, database: CardDatabase, caplog: pytest.LogCaptureFixture
    ) -> None:
        failures = lookup(["XX01007", "01DE999", "01DE003"], database)

        assert failures == 2
        assert "Malformed card code" in caplog.text
        assert "No card with code 01DE999" in caplog.text

    def test_main_exit_code(self, data_dir: Path) -> None:
        argv = ["lookup_card", "01DE003", "01DE999", "--data-dir", str(data_dir)]

        with patch.object(sys, "argv", argv), pytest.raises(SystemExit) as exc_info:
            lookup_main()

        assert exc_info.value.code == 1

    def test_main_reports_missing_data(
        self, tmp_path: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        """An unusable data directory is logged, not raised."""
        argv = ["lookup_card", "01DE003", "--data-dir", str(tmp_path)]

        with patch.object(sys, "argv", argv), pytest.raises(SystemExit) as exc_info:
            lookup_main()

        assert exc_info.value.code == 1
        assert "Failed to load card data" in caplog.text

    def test_main_reports_corrupted_data(
        self, data_dir: Path, caplog: pytest.LogCaptureFixture
    ) -> None:
        (data_dir / "set1-en_us.json").write_text("not json", encoding="utf-8")
        argv = ["lookup_card", "01DE003", "--data-dir", str(data_dir)]

        with patch.object(sys, "argv", argv), pytest.raises(SystemExit) as exc_info:
            lookup_main()

        assert exc_info.value.code == 1
        assert "corrupted" in caplog.text
