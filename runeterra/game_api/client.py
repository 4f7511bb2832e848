"""
Game client API proxy.

Calls the local HTTP API that a running Legends of Runeterra client serves.
Every call is a single GET with no retry and no caching; calls share no
state and may run concurrently.
"""

import logging
from typing import TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from runeterra.config import settings
from runeterra.game_api.errors import GameClientHTTPError, GameClientResponseError
from runeterra.game_api.models import (
    ExpeditionsState,
    GameResult,
    PositionalRectangles,
    StaticDecklist,
)

logger = logging.getLogger(__name__)

M = TypeVar("M", bound=BaseModel)

STATIC_DECKLIST_PATH = "/static-decklist"
POSITIONAL_RECTANGLES_PATH = "/positional-rectangles"
EXPEDITIONS_STATE_PATH = "/expeditions-state"
GAME_RESULT_PATH = "/game-result"


class GameClient:
    """
    Client for the local game client API.

    Each request opens its own httpx.AsyncClient, so one GameClient can be
    shared between tasks.
    """

    def __init__(self, base_url: str | None = None, timeout: float | None = None) -> None:
        """
        Initialize the game client proxy.

        Args:
            base_url: API base URL. Defaults to settings.game_client_url.
            timeout: Request timeout in seconds. Defaults to
                settings.game_client_timeout, or httpx's default if unset.
        """
        self.base_url = (base_url or settings.game_client_url).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.game_client_timeout

    def _client(self) -> httpx.AsyncClient:
        if self.timeout is None:
            return httpx.AsyncClient()
        return httpx.AsyncClient(timeout=self.timeout)

    async def _get(self, path: str, model: type[M]) -> M:
        url = f"{self.base_url}{path}"

        try:
            async with self._client() as client:
                response = await client.get(url)
                response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise GameClientHTTPError(path, f"HTTP {e.response.status_code}") from e
        except httpx.RequestError as e:
            raise GameClientHTTPError(path, f"request failed: {e}") from e

        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            logger.warning("Unexpected response from %s", path, extra={"body": response.text[:200]})
            raise GameClientResponseError(path, f"invalid response body: {e}") from e

    async def get_static_decklist(self) -> StaticDecklist:
        """
        Get the player's current deck.

        Raises:
            GameClientHTTPError: If the request fails
            GameClientResponseError: If the body can't be parsed
        """
        return await self._get(STATIC_DECKLIST_PATH, StaticDecklist)

    async def get_positional_rectangles(self) -> PositionalRectangles:
        """
        Get the on-screen positions of cards.

        Raises:
            GameClientHTTPError: If the request fails
            GameClientResponseError: If the body can't be parsed
        """
        return await self._get(POSITIONAL_RECTANGLES_PATH, PositionalRectangles)

    async def get_expeditions_state(self) -> ExpeditionsState:
        """
        Get the player's Expedition state.

        Raises:
            GameClientHTTPError: If the request fails
            GameClientResponseError: If the body can't be parsed
        """
        return await self._get(EXPEDITIONS_STATE_PATH, ExpeditionsState)

    async def get_game_result(self) -> GameResult:
        """
        Get the result of the most recent game.

        Raises:
            GameClientHTTPError: If the request fails
            GameClientResponseError: If the body can't be parsed
        """
        return await self._get(GAME_RESULT_PATH, GameResult)
