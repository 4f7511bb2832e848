"""
Response models of the Legends of Runeterra game client API.

The client serves PascalCase JSON on localhost.
See https://developer.riotgames.com/docs/lor#game-client-api
"""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_pascal


class GameClientModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_pascal,
        populate_by_name=True,
        frozen=True,
    )


class StaticDecklist(GameClientModel):
    """The player's current deck in an active game."""

    deck_code: str | None = None
    # card code -> copies
    cards_in_deck: dict[str, int] | None = None


class Screen(GameClientModel):
    screen_width: int
    screen_height: int


class Rectangle(GameClientModel):
    """A card on screen, in pixels."""

    card_id: int = Field(
        alias="CardID",
        validation_alias=AliasChoices("CardID", "GameID"),
    )
    card_code: str
    top_left_x: int
    top_left_y: int
    width: int
    height: int
    local_player: bool


class PositionalRectangles(GameClientModel):
    """Position of the cards in the collection, deck builder, Expedition drafts and games."""

    player_name: str | None = None
    opponent_name: str | None = None
    game_state: str
    screen: Screen
    rectangles: list[Rectangle] = Field(default_factory=list)


class ExpeditionsState(GameClientModel):
    """The player's Expedition run."""

    is_active: bool
    state: str
    record: list[str] | None = None
    draft_picks: list[str] | None = None
    deck: list[str] | None = None
    games: int
    wins: int
    losses: int


class GameResult(GameClientModel):
    """Result of the player's most recently completed game."""

    game_id: int = Field(alias="GameID")
    local_player_won: bool
