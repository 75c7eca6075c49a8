"""Board errors."""


class BoardError(Exception):
    """Base class for board errors."""


class StructuralError(BoardError, ValueError):
    """Malformed board data (bad coordinates, ids or adjacency)."""


class UnknownSpaceError(StructuralError, KeyError):
    """No space exists with the requested id."""

    def __init__(self, space_id: str):
        self.space_id = space_id
        super().__init__(f"Can't find space with id {space_id!r}")

    def __str__(self) -> str:
        # KeyError would otherwise quote the whole message
        return str(self.args[0])


class NoSpaceAvailableError(BoardError):
    """No space satisfies the request."""


class SpaceOccupiedError(BoardError):
    """A tile was placed on a space that already holds one."""
