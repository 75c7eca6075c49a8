"""
Tests for spaces.

Tests:
- Tile placement and hazard covering
- Reservation markers
- Immutable fields
"""

import pytest
from pydantic import ValidationError

from mars_board.board import Space
from mars_board.data.models import SpaceBonus, SpaceType, Tile, TileType
from mars_board.errors import SpaceOccupiedError


@pytest.fixture
def space() -> Space:
    return Space(id="05", space_type=SpaceType.LAND, x=2, y=0, bonus=[SpaceBonus.STEEL])


class TestPlaceTile:
    """Tiles stay once placed."""

    def test_place(self, space, alice):
        space.place_tile(Tile(tile_type=TileType.CITY), alice)
        assert space.tile == Tile(tile_type=TileType.CITY)
        assert space.player is alice
        assert not space.is_empty

    def test_place_without_owner(self, space):
        space.place_tile(Tile(tile_type=TileType.OCEAN))
        assert space.player is None

    def test_no_overwrite(self, space):
        space.place_tile(Tile(tile_type=TileType.GREENERY))
        with pytest.raises(SpaceOccupiedError):
            space.place_tile(Tile(tile_type=TileType.CITY))
        assert space.tile.tile_type == TileType.GREENERY

    def test_cover_hazard(self, space, alice):
        space.place_tile(Tile(tile_type=TileType.DUST_STORM_MILD))
        space.place_tile(Tile(tile_type=TileType.CITY), alice)
        assert space.tile.tile_type == TileType.CITY

    def test_protected_hazard(self, space):
        space.place_tile(Tile(tile_type=TileType.EROSION_MILD, protected_hazard=True))
        with pytest.raises(SpaceOccupiedError):
            space.place_tile(Tile(tile_type=TileType.CITY))

    def test_no_overwrite_by_assignment(self, space):
        """Setting `tile` directly follows the same rule as `place_tile`."""
        space.place_tile(Tile(tile_type=TileType.CITY))
        with pytest.raises(SpaceOccupiedError):
            space.tile = Tile(tile_type=TileType.GREENERY)
        assert space.tile.tile_type == TileType.CITY

    def test_cover_hazard_by_assignment(self, space):
        space.place_tile(Tile(tile_type=TileType.EROSION_SEVERE))
        space.tile = Tile(tile_type=TileType.GREENERY)
        assert space.tile.tile_type == TileType.GREENERY

    def test_created_with_tile(self):
        space = Space(
            id="05",
            space_type=SpaceType.LAND,
            x=2,
            y=0,
            tile=Tile(tile_type=TileType.CITY),
        )
        assert space.tile.tile_type == TileType.CITY
        with pytest.raises(SpaceOccupiedError):
            space.place_tile(Tile(tile_type=TileType.GREENERY))


class TestReservation:
    """Player markers without tiles."""

    def test_unreserved(self, space, alice):
        assert space.is_reserved_for(alice)
        assert space.is_reserved_for(None)

    def test_reserved(self, space, alice, bob):
        space.reserve(alice)
        assert space.is_reserved_for(alice)
        assert not space.is_reserved_for(bob)
        assert not space.is_reserved_for(None)
        assert space.tile is None


class TestFrozenFields:
    """Identity, category and coordinates never change."""

    @pytest.mark.parametrize(
        "field, value",
        [("id", "06"), ("space_type", SpaceType.OCEAN), ("x", 3), ("y", 1)],
    )
    def test_frozen(self, space, field, value):
        with pytest.raises(ValidationError):
            setattr(space, field, value)

    def test_bonus_membership(self, space):
        assert space.has_bonus(SpaceBonus.STEEL)
        assert not space.has_bonus(SpaceBonus.RESTRICTED)
