"""Board topology and tile placement rules for Mars hex boards."""

from .board import Board, BoardHelper, PlacementType, SerializedBoard, Space
from .data.models import (
    Ability,
    GameOptions,
    Player,
    SpaceBonus,
    SpaceType,
    Tile,
    TileType,
)
from .errors import (
    BoardError,
    NoSpaceAvailableError,
    SpaceOccupiedError,
    StructuralError,
    UnknownSpaceError,
)

__version__ = "0.1.0"

__all__ = [
    "Board",
    "BoardHelper",
    "PlacementType",
    "SerializedBoard",
    "Space",
    "Ability",
    "GameOptions",
    "Player",
    "SpaceBonus",
    "SpaceType",
    "Tile",
    "TileType",
    "BoardError",
    "NoSpaceAvailableError",
    "SpaceOccupiedError",
    "StructuralError",
    "UnknownSpaceError",
]
