"""Helper for loading layouts and creating boards."""

import logging
from pathlib import Path
from typing import Any, Sequence

from pydantic import BaseModel
from pydantic_yaml import parse_yaml_file_as

from mars_board.data import boards_path
from mars_board.data.models import Player
from .board import Board
from .layout import BoardLayout, YamlBoardLayout
from .serializer import SerializedBoard

logger = logging.getLogger(__name__)


class BoardHelper(BaseModel):
    """Board creation helper object."""

    path_layouts: Path = boards_path

    def load_available_layouts(self) -> list[BoardLayout]:
        """Load all available layouts."""
        res: list[BoardLayout] = []
        for yml_path in sorted(self.path_layouts.rglob("*.yaml")):
            try:
                layout_i = parse_yaml_file_as(YamlBoardLayout, yml_path).fix_layout()
                res.append(layout_i)
            except Exception:
                logger.warning(f"Failed to load file as layout: {yml_path!s}")
        return res

    def load_layout(self, name: str) -> BoardLayout:
        """Load a layout with a given name."""
        path = self.path_layouts / f"{name}.yaml"
        if not path.is_file():
            raise FileNotFoundError(f"No layout named {name!r} in {self.path_layouts}")
        raw = parse_yaml_file_as(YamlBoardLayout, path)
        return raw.fix_layout()

    def new_board(self, name: str) -> Board:
        """Create an empty board from the named layout."""
        return self.load_layout(name).to_board()

    def restore_board(
        self,
        name: str,
        serialized: SerializedBoard | dict[str, Any],
        players: Sequence[Player],
    ) -> Board:
        """Restore a saved board, taking board properties from the named layout."""
        layout = self.load_layout(name)
        return Board.deserialize(
            serialized,
            players,
            name=layout.name,
            volcanic_space_ids=layout.volcanic_space_ids,
            noctis_city_space_id=layout.noctis_city_space_id,
        )
