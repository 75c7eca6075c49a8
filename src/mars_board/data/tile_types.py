"""Tile type taxonomy."""

from .models import TileType

CITY_TILES: frozenset[TileType] = frozenset(
    {TileType.CITY, TileType.CAPITAL, TileType.OCEAN_CITY, TileType.RED_CITY}
)
"""Tiles that count as cities."""

OCEAN_UPGRADE_TILES: frozenset[TileType] = frozenset(
    {TileType.OCEAN_CITY, TileType.OCEAN_FARM, TileType.OCEAN_SANCTUARY}
)
"""Tiles placed on top of an existing ocean."""

UNCOVERED_OCEAN_TILES: frozenset[TileType] = frozenset(
    {TileType.OCEAN, TileType.WETLANDS}
)
"""Ocean tiles that do not cover another ocean."""

OCEAN_TILES: frozenset[TileType] = UNCOVERED_OCEAN_TILES | OCEAN_UPGRADE_TILES
"""Ocean tiles and everything derived from them."""

GREENERY_TILES: frozenset[TileType] = frozenset(
    {TileType.GREENERY, TileType.WETLANDS}
)
"""Tiles that count as greeneries."""

HAZARD_TILES: frozenset[TileType] = frozenset(
    {
        TileType.DUST_STORM_MILD,
        TileType.DUST_STORM_SEVERE,
        TileType.EROSION_MILD,
        TileType.EROSION_SEVERE,
    }
)
"""Hazards, which other tiles may cover."""

NON_SPECIAL_TILES: frozenset[TileType] = (
    frozenset(
        {
            TileType.GREENERY,
            TileType.OCEAN,
            TileType.CITY,
            TileType.MOON_HABITAT,
            TileType.MOON_MINE,
            TileType.MOON_ROAD,
        }
    )
    | HAZARD_TILES
)
"""Tiles that are never special (hazards included)."""


def is_hazard_tile(tile_type: TileType) -> bool:
    """Whether the tile type is a hazard."""
    return tile_type in HAZARD_TILES
