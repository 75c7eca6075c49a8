"""Board persistence."""

import logging
from typing import TYPE_CHECKING, Sequence

from pydantic import BaseModel

from mars_board.data.models import Player, PlayerId, SpaceBonus, SpaceType, Tile
from .space import Space, SpaceId

if TYPE_CHECKING:
    from .board import Board

logger = logging.getLogger(__name__)


class SerializedSpace(BaseModel):
    """A space, with the player replaced by their ID."""

    id: SpaceId
    space_type: SpaceType
    tile: Tile | None = None
    player: PlayerId | None = None
    bonus: list[SpaceBonus] = []
    adjacency: list[SpaceId] | None = None
    x: int
    y: int


class SerializedBoard(BaseModel):
    """All spaces of a board.

    Dump with `model_dump(mode="json", exclude_none=True)` so that unset
    fields stay unset when loaded back.
    """

    spaces: list[SerializedSpace]


def serialize_space(space: Space) -> SerializedSpace:
    """Convert a space to its serialized form."""
    return SerializedSpace(
        id=space.id,
        space_type=space.space_type,
        tile=None if space.tile is None else space.tile.model_copy(),
        player=None if space.player is None else space.player.id,
        bonus=list(space.bonus),
        adjacency=None if space.adjacency is None else list(space.adjacency),
        x=space.x,
        y=space.y,
    )


def serialize_board(board: "Board") -> SerializedBoard:
    """Convert all spaces of a board to their serialized form."""
    return SerializedBoard(spaces=[serialize_space(space) for space in board.spaces])


def deserialize_space(serialized: SerializedSpace, players: Sequence[Player]) -> Space:
    """Create a live space, resolving the player ID against `players`.

    A player ID that matches nobody is dropped.
    """
    space = Space(
        id=serialized.id,
        space_type=serialized.space_type,
        bonus=list(serialized.bonus),
        tile=None if serialized.tile is None else serialized.tile.model_copy(),
        x=serialized.x,
        y=serialized.y,
    )
    if serialized.player is not None:
        player = next((p for p in players if p.id == serialized.player), None)
        if player is not None:
            space.player = player
        else:
            logger.debug(
                f"Dropping unknown player {serialized.player!r} on space {space.id}"
            )
    if serialized.adjacency is not None:
        space.adjacency = list(serialized.adjacency)
    return space


def deserialize_spaces(
    spaces: Sequence[SerializedSpace], players: Sequence[Player]
) -> list[Space]:
    """Create live spaces from their serialized forms."""
    return [deserialize_space(space, players) for space in spaces]
