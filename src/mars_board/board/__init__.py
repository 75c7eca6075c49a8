"""Board topology and placement rules."""

from .adjacency import AdjacencyIndex, neighbor_coords
from .board import Board
from .helper import BoardHelper
from .layout import BoardLayout, SpaceSpec, YamlBoardLayout
from .placement import (
    PlacementType,
    has_hazard_tile,
    is_city_space,
    is_greenery_space,
    is_ocean_space,
    is_special_tile,
    is_uncovered_ocean_space,
    next_to_no_other_tile_fn,
    owned_by,
    space_owned_by,
)
from .serializer import (
    SerializedBoard,
    SerializedSpace,
    deserialize_space,
    deserialize_spaces,
    serialize_board,
)
from .space import Space, SpaceId

__all__ = [
    "AdjacencyIndex",
    "neighbor_coords",
    "Board",
    "BoardHelper",
    "BoardLayout",
    "SpaceSpec",
    "YamlBoardLayout",
    "PlacementType",
    "has_hazard_tile",
    "is_city_space",
    "is_greenery_space",
    "is_ocean_space",
    "is_special_tile",
    "is_uncovered_ocean_space",
    "next_to_no_other_tile_fn",
    "owned_by",
    "space_owned_by",
    "SerializedBoard",
    "SerializedSpace",
    "deserialize_space",
    "deserialize_spaces",
    "serialize_board",
    "Space",
    "SpaceId",
]
