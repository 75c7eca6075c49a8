"""Board layouts (to build boards from)."""

from typing_extensions import Annotated
from pydantic import BaseModel, Field, ValidationInfo, field_validator

from mars_board.data.models import SpaceBonus, SpaceType
from .board import Board
from .space import Space, SpaceId

COLONY_COORD = -1


class SpaceSpec(BaseModel):
    """Definition of a single space."""

    id: SpaceId
    space_type: SpaceType
    x: int = COLONY_COORD
    y: int = COLONY_COORD
    bonus: list[SpaceBonus] = []
    adjacency: list[SpaceId] | None = None

    def to_space(self) -> Space:
        """Create a new (empty) space."""
        return Space(
            id=self.id,
            space_type=self.space_type,
            x=self.x,
            y=self.y,
            bonus=list(self.bonus),
            adjacency=None if self.adjacency is None else list(self.adjacency),
        )


class BoardLayout(BaseModel):
    """Layout definition, with proper types."""

    name: str
    spaces: list[SpaceSpec]
    volcanic_space_ids: list[SpaceId] = []
    noctis_city_space_id: SpaceId | None = None

    @field_validator("spaces", mode="after")
    @classmethod
    def _check_unique_ids(cls, v: list[SpaceSpec]) -> list[SpaceSpec]:
        """Ensure space IDs are unique."""
        seen: set[SpaceId] = set()
        for spec in v:
            if spec.id in seen:
                raise ValueError(f"Duplicate space id: {spec.id!r}")
            seen.add(spec.id)
        return v

    @field_validator("volcanic_space_ids", mode="after")
    @classmethod
    def _check_volcanic(cls, v: list[SpaceId], info: ValidationInfo) -> list[SpaceId]:
        """Ensure volcanic spaces are land spaces of this layout."""
        specs = {spec.id: spec for spec in info.data.get("spaces", [])}
        for space_id in v:
            spec = specs.get(space_id)
            if spec is None or spec.space_type != SpaceType.LAND:
                raise ValueError(f"Volcanic space is not a land space: {space_id!r}")
        return v

    @field_validator("noctis_city_space_id", mode="after")
    @classmethod
    def _check_noctis(cls, v: SpaceId | None, info: ValidationInfo) -> SpaceId | None:
        """Ensure the Noctis City space exists."""
        if v is not None:
            ids = {spec.id for spec in info.data.get("spaces", [])}
            if v not in ids:
                raise ValueError(f"Unknown Noctis City space: {v!r}")
        return v

    def to_board(self) -> Board:
        """Create a new, empty board."""
        return Board(
            [spec.to_space() for spec in self.spaces],
            name=self.name,
            volcanic_space_ids=self.volcanic_space_ids,
            noctis_city_space_id=self.noctis_city_space_id,
        )


def parse_space_entry(entry: str) -> tuple[SpaceType, list[SpaceBonus]]:
    """Parse compact notation like 'land STEEL STEEL'."""
    tokens = entry.split()
    if len(tokens) == 0:
        raise ValueError("Empty space entry.")
    space_type = SpaceType(tokens[0].upper())
    bonus = [SpaceBonus(tok.upper()) for tok in tokens[1:]]
    return space_type, bonus


def format_space_id(num: int) -> SpaceId:
    """Space IDs are zero-padded numbers: '01', '02', ..."""
    return f"{num:02d}"


class YamlBoardLayout(BaseModel):
    """Layout definition in YAML.

    Rows list spaces from the top of the board down, each as a space type
    followed by its bonuses. Rows are aligned to the right edge of the widest
    row. Colony spaces are numbered before the grid.
    """

    name: str
    colonies: Annotated[int, Field(ge=0)] = 0
    rows: Annotated[list[list[str]], Field(min_length=1)]
    volcanic_spaces: list[SpaceId] = []
    noctis_city: SpaceId | None = None
    adjacency: dict[SpaceId, list[SpaceId]] = {}

    @field_validator("rows", mode="after")
    @classmethod
    def _check_rows(cls, v: list[list[str]]) -> list[list[str]]:
        """Ensure every entry parses."""
        for i, row in enumerate(v):
            if len(row) == 0:
                raise ValueError(f"Row {i} is empty")
            for entry in row:
                space_type, _ = parse_space_entry(entry)
                if space_type == SpaceType.COLONY:
                    raise ValueError(f"Colonies can't be placed on the grid (row {i})")
        return v

    @field_validator("adjacency", mode="after")
    @classmethod
    def _check_adjacency(
        cls, v: dict[SpaceId, list[SpaceId]], info: ValidationInfo
    ) -> dict[SpaceId, list[SpaceId]]:
        """Ensure overrides are keyed by spaces of this layout."""
        rows = info.data.get("rows")
        if rows is None:
            return v
        n_spaces = info.data.get("colonies", 0) + sum(len(row) for row in rows)
        ids = {format_space_id(num) for num in range(1, n_spaces + 1)}
        for space_id in v:
            if space_id not in ids:
                raise ValueError(f"Adjacency given for unknown space: {space_id!r}")
        return v

    def fix_layout(self) -> BoardLayout:
        """Convert to proper layout."""
        specs: list[SpaceSpec] = []
        for _ in range(self.colonies):
            space_id = format_space_id(len(specs) + 1)
            specs.append(
                SpaceSpec(
                    id=space_id,
                    space_type=SpaceType.COLONY,
                    adjacency=self.adjacency.get(space_id),
                )
            )
        widest = max(len(row) for row in self.rows)
        for y, row in enumerate(self.rows):
            x_offset = widest - len(row)
            for i, entry in enumerate(row):
                space_type, bonus = parse_space_entry(entry)
                space_id = format_space_id(len(specs) + 1)
                specs.append(
                    SpaceSpec(
                        id=space_id,
                        space_type=space_type,
                        x=x_offset + i,
                        y=y,
                        bonus=bonus,
                        adjacency=self.adjacency.get(space_id),
                    )
                )
        return BoardLayout(
            name=self.name,
            spaces=specs,
            volcanic_space_ids=self.volcanic_spaces,
            noctis_city_space_id=self.noctis_city,
        )
