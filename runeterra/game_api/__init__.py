"""
Proxy for the Legends of Runeterra game client API.

Example:
    client = GameClient()
    decklist = await client.get_static_decklist()
"""

from runeterra.game_api.client import GameClient
from runeterra.game_api.errors import (
    GameClientError,
    GameClientHTTPError,
    GameClientResponseError,
)
from runeterra.game_api.models import (
    ExpeditionsState,
    GameResult,
    PositionalRectangles,
    Rectangle,
    Screen,
    StaticDecklist,
)

__all__ = [
    "ExpeditionsState",
    "GameClient",
    "GameClientError",
    "GameClientHTTPError",
    "GameClientResponseError",
    "GameResult",
    "PositionalRectangles",
    "Rectangle",
    "Screen",
    "StaticDecklist",
]
