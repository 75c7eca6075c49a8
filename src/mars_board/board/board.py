"""Board with tile placement rules."""

import logging
from typing import Any, Literal, Sequence

from mars_board.data.models import (
    GameOptions,
    Player,
    SpaceBonus,
    SpaceType,
    TileType,
)
from mars_board.data.tile_types import OCEAN_UPGRADE_TILES
from mars_board.errors import NoSpaceAvailableError, StructuralError, UnknownSpaceError
from .adjacency import AdjacencyIndex
from .placement import (
    PlacementType,
    SpacePredicate,
    has_hazard_tile,
    is_city_space,
    is_ocean_space,
    next_to_no_other_tile_fn,
    space_owned_by,
)
from .serializer import SerializedBoard, deserialize_spaces, serialize_board
from .space import Space, SpaceId

logger = logging.getLogger(__name__)

DEFAULT_OPTIONS = GameOptions()


class Board:
    """A hex board (e.g. Tharsis), plus off-grid colony spaces.

    The set of spaces is fixed at construction. Only the tiles and player
    markers on them change, and that is done by the caller, not the board.
    """

    def __init__(
        self,
        spaces: Sequence[Space],
        *,
        name: str = "custom",
        volcanic_space_ids: Sequence[SpaceId] = (),
        noctis_city_space_id: SpaceId | None = None,
    ):
        self.name = name
        self.spaces: tuple[Space, ...] = tuple(spaces)
        self._map: dict[SpaceId, Space] = {}
        for space in self.spaces:
            if space.id in self._map:
                raise StructuralError(f"Duplicate space id: {space.id!r}")
            self._map[space.id] = space
        self._volcanic_space_ids = tuple(volcanic_space_ids)
        self._noctis_city_space_id = noctis_city_space_id
        self._adjacency = AdjacencyIndex(self.spaces)
        logger.debug(f"Created board {name!r} with {len(self.spaces)} spaces")

    def __repr__(self) -> str:
        return f"Board(name={self.name!r}, spaces={len(self.spaces)})"

    # Space lookup

    def get_volcanic_space_ids(self) -> tuple[SpaceId, ...]:
        """Volcanic spaces of this board (empty if there are none)."""
        return self._volcanic_space_ids

    def get_noctis_city_space_id(self) -> SpaceId | None:
        """The space reserved for Noctis City, if the board has one."""
        return self._noctis_city_space_id

    def get_space(self, space_id: SpaceId) -> Space:
        """Get a space by ID."""
        space = self._map.get(space_id)
        if space is None:
            raise UnknownSpaceError(space_id)
        return space

    def __getitem__(self, space_id: SpaceId) -> Space:
        """Get a space by ID (dict style)."""
        return self.get_space(space_id)

    def __contains__(self, space_id: object) -> bool:
        return space_id in self._map

    def get_adjacent_spaces(self, space: Space) -> tuple[Space, ...]:
        """Adjacent spaces, in clockwise order starting from the top left."""
        return self._adjacency.neighbors(space.id)

    def get_space_by_tile_card(self, card: str) -> Space | None:
        """The space holding the tile placed by the given card."""
        for space in self.spaces:
            if space.tile is not None and space.tile.card == card:
                return space
        return None

    def get_spaces(self, space_type: SpaceType) -> tuple[Space, ...]:
        """All spaces of the given type."""
        return tuple(space for space in self.spaces if space.space_type == space_type)

    def get_empty_spaces(self) -> tuple[Space, ...]:
        """All spaces without a tile."""
        return tuple(space for space in self.spaces if space.tile is None)

    # Oceans

    def get_ocean_spaces(
        self, *, upgraded_oceans: bool = True, wetlands: bool = False
    ) -> tuple[Space, ...]:
        """Spaces with ocean tiles.

        The defaults select the oceans that count toward the global parameter:
        upgraded oceans are included, Wetlands is not.
        """

        def _include(space: Space) -> bool:
            if space.tile is None or not is_ocean_space(space):
                return False
            tile_type = space.tile.tile_type
            if tile_type in OCEAN_UPGRADE_TILES:
                return upgraded_oceans
            if tile_type == TileType.WETLANDS:
                return wetlands
            return True

        return tuple(space for space in self.spaces if _include(space))

    def get_ocean_count(
        self, *, upgraded_oceans: bool = True, wetlands: bool = False
    ) -> int:
        """Number of oceans on the board (see `get_ocean_spaces`)."""
        return len(
            self.get_ocean_spaces(upgraded_oceans=upgraded_oceans, wetlands=wetlands)
        )

    # Placement

    def get_available_spaces_for_type(
        self,
        player: Player,
        placement_type: PlacementType | str,
        options: GameOptions = DEFAULT_OPTIONS,
    ) -> tuple[Space, ...]:
        """Spaces where the player may place a tile of the given placement type."""
        try:
            placement_type = PlacementType(placement_type)
        except ValueError:
            raise ValueError(f"Unknown placement type: {placement_type!r}") from None
        if placement_type == PlacementType.LAND:
            return self.get_available_spaces_on_land(player)
        elif placement_type == PlacementType.OCEAN:
            return self.get_available_spaces_for_ocean(player)
        elif placement_type == PlacementType.GREENERY:
            return self.get_available_spaces_for_greenery(player, options)
        elif placement_type == PlacementType.CITY:
            return self.get_available_spaces_for_city(player)
        elif placement_type == PlacementType.ISOLATED:
            return self.get_available_isolated_spaces(player)
        elif placement_type == PlacementType.VOLCANIC:
            return self.get_available_volcanic_spaces(player)
        # PlacementType.UPGRADEABLE_OCEAN
        return self.get_ocean_spaces(upgraded_oceans=False)

    def get_available_spaces_on_land(self, player: Player) -> tuple[Space, ...]:
        """Land spaces where the player may place a tile."""

        def _available(space: Space) -> bool:
            # Restricted spaces never take tiles
            if space.has_bonus(SpaceBonus.RESTRICTED):
                return False
            if not space.is_reserved_for(player):
                return False
            # Hazards may be covered, unless they are protected
            if space.tile is None:
                return True
            return has_hazard_tile(space) and space.tile.protected_hazard is not True

        land_spaces = self.get_spaces(SpaceType.LAND)
        return tuple(space for space in land_spaces if _available(space))

    def get_available_spaces_for_ocean(self, player: Player) -> tuple[Space, ...]:
        """Ocean spaces where the player may place an ocean."""
        return tuple(
            space
            for space in self.get_spaces(SpaceType.OCEAN)
            if space.tile is None and space.is_reserved_for(player)
        )

    def get_available_spaces_for_city(self, player: Player) -> tuple[Space, ...]:
        """Land spaces where the player may place a city."""
        spaces_on_land = self.get_available_spaces_on_land(player)
        if player.ignores_placement_restrictions:
            return spaces_on_land
        # A city cannot be adjacent to another city
        return tuple(
            space
            for space in spaces_on_land
            if not any(is_city_space(adj) for adj in self.get_adjacent_spaces(space))
        )

    def get_available_spaces_for_greenery(
        self, player: Player, options: GameOptions = DEFAULT_OPTIONS
    ) -> tuple[Space, ...]:
        """Land spaces where the player may place a greenery.

        Greeneries go next to the player's own tiles, or anywhere if the
        player has no land tile with a free space next to it.
        """
        spaces_on_land = self.get_available_spaces_on_land(player)
        if player.ignores_placement_restrictions:
            return spaces_on_land
        if options.pathfinders_expansion:
            # Spaces next to the Red City are never available
            spaces_on_land = tuple(
                space
                for space in spaces_on_land
                if not any(
                    adj.tile is not None and adj.tile.tile_type == TileType.RED_CITY
                    for adj in self.get_adjacent_spaces(space)
                )
            )

        def _next_to_own_tile(space: Space) -> bool:
            return any(
                adj.tile is not None
                and adj.tile.tile_type != TileType.OCEAN
                and space_owned_by(adj, player)
                for adj in self.get_adjacent_spaces(space)
            )

        spaces_for_greenery = tuple(
            space for space in spaces_on_land if _next_to_own_tile(space)
        )
        if len(spaces_for_greenery) > 0:
            return spaces_for_greenery
        return spaces_on_land

    def get_available_isolated_spaces(self, player: Player) -> tuple[Space, ...]:
        """Land spaces with no tiles next to them."""
        isolated = next_to_no_other_tile_fn(self)
        spaces = self.get_available_spaces_on_land(player)
        return tuple(space for space in spaces if isolated(space))

    def get_available_volcanic_spaces(self, player: Player) -> tuple[Space, ...]:
        """Volcanic land spaces (any land space, if the board has no volcanoes)."""
        volcanic_space_ids = self.get_volcanic_space_ids()
        spaces = self.get_available_spaces_on_land(player)
        if len(volcanic_space_ids) > 0:
            return tuple(space for space in spaces if space.id in volcanic_space_ids)
        return spaces

    def get_non_reserved_land_spaces(self) -> tuple[Space, ...]:
        """Like `get_available_spaces_on_land`, but for no player in particular."""
        return tuple(
            space
            for space in self.spaces
            if space.space_type in (SpaceType.LAND, SpaceType.COVE)
            and (space.tile is None or has_hazard_tile(space))
            and space.player is None
        )

    def get_nth_available_land_space(
        self,
        distance: int,
        direction: Literal[-1, 1],
        player: Player | None = None,
        predicate: SpacePredicate | None = None,
    ) -> Space:
        """Pick an available land space by counting along the board.

        `distance` is the number of eligible spaces to skip: 0 is the first
        one. With `direction=1` counting starts at the top left, with -1 it
        starts at the bottom right. Only spaces without a player marker (or
        with `player`'s marker) are eligible; `predicate` filters further.
        """
        if type(direction) is not int or direction not in (-1, 1):
            raise ValueError(f"Direction must be 1 or -1, got: {direction!r}")
        spaces = [
            space
            for space in self.spaces
            if self.can_place_tile(space) and space.is_reserved_for(player)
        ]
        if predicate is not None:
            spaces = [space for space in spaces if predicate(space)]
        if len(spaces) == 0:
            raise NoSpaceAvailableError("No spaces available")
        idx = distance if direction == 1 else len(spaces) - (distance + 1)
        while idx < 0:
            idx += len(spaces)
        while idx >= len(spaces):
            idx -= len(spaces)
        return spaces[idx]

    def can_place_tile(self, space: Space) -> bool:
        """Empty, unrestricted land space."""
        return (
            space.tile is None
            and space.space_type == SpaceType.LAND
            and not space.has_bonus(SpaceBonus.RESTRICTED)
        )

    # Persistence

    def serialize(self) -> SerializedBoard:
        """Snapshot of all spaces, with players replaced by their IDs."""
        return serialize_board(self)

    @classmethod
    def deserialize(
        cls,
        serialized: SerializedBoard | dict[str, Any],
        players: Sequence[Player],
        **kwargs: Any,
    ) -> "Board":
        """Restore a board from a snapshot and the game's players.

        Extra keyword arguments are passed to the constructor.
        """
        if not isinstance(serialized, SerializedBoard):
            serialized = SerializedBoard.model_validate(serialized)
        return cls(deserialize_spaces(serialized.spaces, players), **kwargs)
