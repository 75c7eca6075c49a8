"""
Tests for adjacency between spaces.

Tests:
- Neighbor coordinates on each side of the middle row
- Adjacency on the Tharsis board (order, symmetry, colonies)
- Explicit adjacency lists
- Malformed boards
"""

import pytest

from mars_board.board import Board, Space, neighbor_coords
from mars_board.data.models import SpaceType
from mars_board.errors import StructuralError, UnknownSpaceError


def _ids(spaces) -> list[str]:
    return [space.id for space in spaces]


class TestNeighborCoords:
    """Tests for the offset scheme."""

    def test_above_middle(self):
        """Upper rows shift the bottom left and top right."""
        assert neighbor_coords(4, 2, 8) == (
            (4, 1),
            (5, 1),
            (5, 2),
            (4, 3),
            (3, 3),
            (3, 2),
        )

    def test_middle_row(self):
        """The middle row shifts both right-hand neighbors."""
        assert neighbor_coords(4, 4, 8) == (
            (4, 3),
            (5, 3),
            (5, 4),
            (5, 5),
            (4, 5),
            (3, 4),
        )

    def test_below_middle(self):
        """Lower rows shift the top left and bottom right."""
        assert neighbor_coords(4, 6, 8) == (
            (3, 5),
            (4, 5),
            (5, 6),
            (5, 7),
            (4, 7),
            (3, 6),
        )


class TestTharsisAdjacency:
    """Adjacency on the base board."""

    def test_top_corner(self, tharsis):
        """First grid space touches its right and lower neighbors."""
        assert _ids(tharsis.get_adjacent_spaces(tharsis["03"])) == ["04", "09", "08"]

    def test_middle_row_left_edge(self, tharsis):
        assert _ids(tharsis.get_adjacent_spaces(tharsis["29"])) == ["21", "30", "38"]

    def test_inner_space_clockwise(self, tharsis):
        """Inner spaces have six neighbors, clockwise from the top left."""
        neighbors = _ids(tharsis.get_adjacent_spaces(tharsis["17"]))
        assert neighbors == ["10", "11", "18", "25", "24", "16"]

    def test_middle_row_inner(self, tharsis):
        neighbors = _ids(tharsis.get_adjacent_spaces(tharsis["33"]))
        assert neighbors == ["24", "25", "34", "42", "41", "32"]

    def test_bottom_corner(self, tharsis):
        assert _ids(tharsis.get_adjacent_spaces(tharsis["63"])) == ["57", "58", "62"]

    def test_colonies_have_no_neighbors(self, tharsis):
        for colony in tharsis.get_spaces(SpaceType.COLONY):
            assert tharsis.get_adjacent_spaces(colony) == ()

    def test_colonies_are_nobodys_neighbor(self, tharsis):
        colony_ids = {space.id for space in tharsis.get_spaces(SpaceType.COLONY)}
        for space in tharsis.spaces:
            assert colony_ids.isdisjoint(_ids(tharsis.get_adjacent_spaces(space)))

    def test_symmetric(self, tharsis):
        """If A is next to B, B is next to A."""
        for space in tharsis.spaces:
            for adj in tharsis.get_adjacent_spaces(space):
                assert space.id in _ids(tharsis.get_adjacent_spaces(adj))

    def test_bounded_and_unique(self, tharsis):
        """At most six neighbors, no repeats, never the space itself."""
        for space in tharsis.spaces:
            neighbors = _ids(tharsis.get_adjacent_spaces(space))
            assert len(neighbors) <= 6
            assert len(set(neighbors)) == len(neighbors)
            assert space.id not in neighbors

    def test_memoized(self, tharsis):
        """Repeated queries return the same neighbors."""
        space = tharsis["17"]
        assert tharsis.get_adjacent_spaces(space) is tharsis.get_adjacent_spaces(space)

    def test_unknown_space(self, tharsis):
        stranger = Space(id="99", space_type=SpaceType.LAND, x=0, y=0)
        with pytest.raises(UnknownSpaceError):
            tharsis.get_adjacent_spaces(stranger)


class TestSmallBoard:
    """A board with a single full hexagon."""

    def test_center_has_six_neighbors(self, small_board):
        center = small_board["04"]
        assert _ids(small_board.get_adjacent_spaces(center)) == [
            "01",
            "02",
            "05",
            "07",
            "06",
            "03",
        ]

    def test_edges_have_three_neighbors(self, small_board):
        for space_id in ["01", "02", "03", "05", "06", "07"]:
            assert len(small_board.get_adjacent_spaces(small_board[space_id])) == 3


class TestExplicitAdjacency:
    """Adjacency lists given with the spaces."""

    def _spaces(self, **adjacency) -> list[Space]:
        coords = {"a": (0, 0), "b": (1, 0), "c": (5, 0)}
        return [
            Space(
                id=space_id,
                space_type=SpaceType.LAND,
                x=x,
                y=y,
                adjacency=adjacency.get(space_id),
            )
            for space_id, (x, y) in coords.items()
        ]

    def test_override_replaces_geometry(self):
        board = Board(self._spaces(a=["c"]))
        assert _ids(board.get_adjacent_spaces(board["a"])) == ["c"]
        # Others still use geometry
        assert _ids(board.get_adjacent_spaces(board["b"])) == ["a"]
        assert _ids(board.get_adjacent_spaces(board["c"])) == []

    def test_override_keeps_order(self):
        board = Board(self._spaces(a=["c", "b"]))
        assert _ids(board.get_adjacent_spaces(board["a"])) == ["c", "b"]

    def test_unknown_neighbor(self):
        with pytest.raises(StructuralError, match="unknown neighbor"):
            Board(self._spaces(a=["zzz"]))

    def test_self_reference(self):
        with pytest.raises(StructuralError, match="itself"):
            Board(self._spaces(a=["a"]))

    def test_duplicates(self):
        with pytest.raises(StructuralError, match="twice"):
            Board(self._spaces(a=["b", "b"]))


class TestMalformedBoards:
    """Structural faults at construction time."""

    def test_negative_coordinate(self):
        spaces = [
            Space(id="a", space_type=SpaceType.LAND, x=0, y=0),
            Space(id="b", space_type=SpaceType.LAND, x=-1, y=0),
        ]
        with pytest.raises(StructuralError, match="x value"):
            Board(spaces)

    def test_negative_colony_is_fine(self):
        spaces = [
            Space(id="a", space_type=SpaceType.COLONY, x=-1, y=-1),
            Space(id="b", space_type=SpaceType.LAND, x=0, y=0),
        ]
        board = Board(spaces)
        assert board.get_adjacent_spaces(board["a"]) == ()

    def test_duplicate_ids(self):
        spaces = [
            Space(id="a", space_type=SpaceType.LAND, x=0, y=0),
            Space(id="a", space_type=SpaceType.LAND, x=1, y=0),
        ]
        with pytest.raises(StructuralError, match="Duplicate"):
            Board(spaces)

    def test_no_spaces(self):
        with pytest.raises(StructuralError):
            Board([])
