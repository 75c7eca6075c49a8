"""Placement types and space predicates."""

from enum import Enum
from typing import TYPE_CHECKING, Callable

from mars_board.data.models import Player, TileType
from mars_board.data.tile_types import (
    CITY_TILES,
    GREENERY_TILES,
    HAZARD_TILES,
    NON_SPECIAL_TILES,
    OCEAN_TILES,
    UNCOVERED_OCEAN_TILES,
)
from .space import Space

if TYPE_CHECKING:
    from .board import Board

SpacePredicate = Callable[[Space], bool]


class PlacementType(str, Enum):
    """Named set of placement rules."""

    LAND = "land"
    OCEAN = "ocean"
    CITY = "city"
    GREENERY = "greenery"
    ISOLATED = "isolated"
    VOLCANIC = "volcanic"
    UPGRADEABLE_OCEAN = "upgradeable-ocean"


def _tile_in(space: Space, tile_types: frozenset[TileType]) -> bool:
    return space.tile is not None and space.tile.tile_type in tile_types


def is_city_space(space: Space) -> bool:
    """Space has a city (of any kind)."""
    return _tile_in(space, CITY_TILES)


def is_ocean_space(space: Space) -> bool:
    """Space has an ocean tile or any tile derived from one (ocean city, wetlands)."""
    return _tile_in(space, OCEAN_TILES)


def is_uncovered_ocean_space(space: Space) -> bool:
    """Space has an ocean tile that does not cover another ocean."""
    return _tile_in(space, UNCOVERED_OCEAN_TILES)


def is_greenery_space(space: Space) -> bool:
    """Space has a greenery (of any kind)."""
    return _tile_in(space, GREENERY_TILES)


def has_hazard_tile(space: Space) -> bool:
    """Space has a hazard tile."""
    return _tile_in(space, HAZARD_TILES)


def is_special_tile(space: Space) -> bool:
    """Space has a special tile.

    Hazards are special in name only, so they don't count.
    """
    return space.tile is not None and space.tile.tile_type not in NON_SPECIAL_TILES


def space_owned_by(space: Space, player: Player) -> bool:
    """Space belongs to the player."""
    return space.player is not None and space.player.id == player.id


def owned_by(player: Player) -> SpacePredicate:
    """Predicate for spaces belonging to the player."""
    return lambda space: space_owned_by(space, player)


def next_to_no_other_tile_fn(board: "Board") -> SpacePredicate:
    """Predicate for spaces whose neighbors are all empty."""
    return lambda space: all(
        adj.tile is None for adj in board.get_adjacent_spaces(space)
    )
