"""Adjacency between board spaces.

The grid is a hexagon stored in offset coordinates: every row is numbered
from the left edge of the widest (middle) row, so the x coordinate of the
upper and lower neighbors shifts depending on which side of the middle row a
space is on.
"""

import logging
from typing import Sequence

from mars_board.data.models import SpaceType
from mars_board.errors import StructuralError, UnknownSpaceError
from .space import Coord, Space, SpaceId

logger = logging.getLogger(__name__)

MAX_NEIGHBORS = 6


def neighbor_coords(x: int, y: int, max_y: int) -> tuple[Coord, ...]:
    """Coordinates around (x, y), clockwise from the top left.

    Order: top left, top right, right, bottom right, bottom left, left.
    """
    middle_row = max_y / 2
    top_left = [x, y - 1]
    top_right = [x, y - 1]
    bottom_right = [x, y + 1]
    bottom_left = [x, y + 1]
    if y < middle_row:
        bottom_left[0] -= 1
        top_right[0] += 1
    elif y == middle_row:
        bottom_right[0] += 1
        top_right[0] += 1
    else:
        bottom_right[0] += 1
        top_left[0] -= 1
    return (
        (top_left[0], top_left[1]),
        (top_right[0], top_right[1]),
        (x + 1, y),
        (bottom_right[0], bottom_right[1]),
        (bottom_left[0], bottom_left[1]),
        (x - 1, y),
    )


class AdjacencyIndex:
    """Neighbors of every space, computed once."""

    def __init__(self, spaces: Sequence[Space]):
        if len(spaces) == 0:
            raise StructuralError("Can't build adjacency for a board with no spaces.")
        self.max_x = max(space.x for space in spaces)
        self.max_y = max(space.y for space in spaces)

        # First space at a coordinate wins; colonies are never neighbors
        self._by_coord: dict[Coord, Space] = {}
        self._by_id: dict[SpaceId, Space] = {}
        for space in spaces:
            self._by_id.setdefault(space.id, space)
            if space.space_type != SpaceType.COLONY:
                self._by_coord.setdefault(space.coord, space)

        self._neighbors: dict[SpaceId, tuple[Space, ...]] = {}
        for space in spaces:
            if space.adjacency is not None:
                self._neighbors[space.id] = self._resolve_override(space)
            else:
                self._neighbors[space.id] = self._compute(space)
        logger.debug(
            f"Computed adjacency for {len(self._neighbors)} spaces "
            f"(max_x={self.max_x}, max_y={self.max_y})"
        )

    def _check_bounds(self, space: Space) -> None:
        """Ensure a grid space lies within the board."""
        if space.y < 0 or space.y > self.max_y:
            raise StructuralError(f"Unexpected space y value: {space.y} ({space.id})")
        if space.x < 0 or space.x > self.max_x:
            raise StructuralError(f"Unexpected space x value: {space.x} ({space.id})")

    def _compute(self, space: Space) -> tuple[Space, ...]:
        """Derive neighbors from grid coordinates."""
        if space.space_type == SpaceType.COLONY:
            return ()
        self._check_bounds(space)
        res: list[Space] = []
        for coord in neighbor_coords(space.x, space.y, self.max_y):
            adj = self._by_coord.get(coord)
            if adj is not None and adj is not space:
                res.append(adj)
        return tuple(res)

    def _resolve_override(self, space: Space) -> tuple[Space, ...]:
        """Resolve an explicit neighbor list, keeping its order."""
        ids = space.adjacency or []
        if space.space_type != SpaceType.COLONY:
            self._check_bounds(space)
        if len(ids) > MAX_NEIGHBORS:
            raise StructuralError(
                f"Space {space.id} lists {len(ids)} neighbors, at most {MAX_NEIGHBORS}"
            )
        if len(set(ids)) != len(ids):
            raise StructuralError(f"Space {space.id} lists a neighbor twice: {ids}")
        if space.id in ids:
            raise StructuralError(f"Space {space.id} lists itself as a neighbor")
        res: list[Space] = []
        for adj_id in ids:
            adj = self._by_id.get(adj_id)
            if adj is None:
                raise StructuralError(
                    f"Space {space.id} lists unknown neighbor {adj_id!r}"
                )
            res.append(adj)
        return tuple(res)

    def neighbors(self, space_id: SpaceId) -> tuple[Space, ...]:
        """Neighbors of a space, clockwise from the top left."""
        try:
            return self._neighbors[space_id]
        except KeyError:
            raise UnknownSpaceError(space_id) from None

    def __len__(self) -> int:
        return len(self._neighbors)
