"""Board spaces."""

from typing import Any

from typing_extensions import Annotated
from pydantic import BaseModel, Field

from mars_board.data.models import Player, SpaceBonus, SpaceType, Tile
from mars_board.data.tile_types import is_hazard_tile
from mars_board.errors import SpaceOccupiedError

SpaceId = str
Coord = tuple[int, int]


class Space(BaseModel):
    """A single space of the board, on the grid or off it (colonies).

    Only `tile` and `player` change during a game.
    """

    id: Annotated[SpaceId, Field(frozen=True)]
    space_type: Annotated[SpaceType, Field(frozen=True)]
    x: Annotated[int, Field(frozen=True)]
    y: Annotated[int, Field(frozen=True)]
    bonus: list[SpaceBonus] = []
    tile: Tile | None = None
    player: Player | None = None
    adjacency: list[SpaceId] | None = None

    @property
    def coord(self) -> Coord:
        """Grid coordinates (meaningless for colonies)."""
        return (self.x, self.y)

    @property
    def is_empty(self) -> bool:
        """Whether no tile is on this space."""
        return self.tile is None

    def has_bonus(self, bonus: SpaceBonus) -> bool:
        """Whether the bonus is printed on this space."""
        return bonus in self.bonus

    def is_reserved_for(self, player: Player | None) -> bool:
        """Free for anyone, or reserved for this player."""
        if self.player is None:
            return True
        return player is not None and self.player.id == player.id

    def reserve(self, player: Player) -> None:
        """Put the player's marker on this space."""
        self.player = player

    def place_tile(self, tile: Tile, player: Player | None = None) -> None:
        """Place a tile, optionally marking the space as owned by the player.

        Only unprotected hazards may be covered.
        """
        self.tile = tile
        if player is not None:
            self.player = player

    def __setattr__(self, name: str, value: Any) -> None:
        # Assigning `tile` directly goes through the same check as `place_tile`
        if name == "tile":
            current = self.tile
            if current is not None:
                if not is_hazard_tile(current.tile_type) or current.protected_hazard:
                    raise SpaceOccupiedError(
                        f"Space {self.id} already has a {current.tile_type.value} tile"
                    )
        super().__setattr__(name, value)

    def __repr__(self) -> str:
        return f"Space({self.id!r}, {self.space_type.value}, x={self.x}, y={self.y})"
