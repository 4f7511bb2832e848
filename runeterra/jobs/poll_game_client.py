"""
Poll the game client API once.

Queries all four endpoints concurrently and logs what the client answers.
Run while Legends of Runeterra is open.
"""

import argparse
import asyncio
import logging
from typing import Any

from runeterra.config import settings
from runeterra.game_api import GameClient, GameClientError

logger = logging.getLogger(__name__)


async def poll_once(client: GameClient) -> dict[str, Any]:
    """
    Query every endpoint concurrently.

    Returns:
        Dict mapping endpoint name to its response model, or to the
        GameClientError it raised
    """
    names = ["static_decklist", "positional_rectangles", "expeditions_state", "game_result"]
    results = await asyncio.gather(
        client.get_static_decklist(),
        client.get_positional_rectangles(),
        client.get_expeditions_state(),
        client.get_game_result(),
        return_exceptions=True,
    )

    outcome: dict[str, Any] = {}
    for name, result in zip(names, results, strict=True):
        if isinstance(result, GameClientError):
            logger.error("Failed to fetch %s: %s", name, result)
        elif isinstance(result, BaseException):
            raise result
        else:
            logger.info("%s: %s", name, result.model_dump_json(by_alias=True))
        outcome[name] = result

    return outcome


def main() -> None:
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Query the local game client API")
    parser.add_argument(
        "--url",
        default=settings.game_client_url,
        help=f"Game client API base URL (default: {settings.game_client_url})",
    )
    args = parser.parse_args()

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    asyncio.run(poll_once(GameClient(base_url=args.url)))


if __name__ == "__main__":
    main()
