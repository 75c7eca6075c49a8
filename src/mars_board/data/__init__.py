"""Set up the data."""

from pathlib import Path

from .models import (
    Ability,
    GameOptions,
    Player,
    PlayerId,
    SpaceBonus,
    SpaceType,
    Tile,
    TileType,
)

__all__ = [
    "data_path",
    "boards_path",
    "Ability",
    "GameOptions",
    "Player",
    "PlayerId",
    "SpaceBonus",
    "SpaceType",
    "Tile",
    "TileType",
]

data_path = Path(__file__).parent

boards_path = data_path / "boards"
