"""
Pytest fixtures for board tests.
"""

import pytest

from mars_board.board import Board, BoardHelper, YamlBoardLayout
from mars_board.data.models import Ability, Player


@pytest.fixture
def helper() -> BoardHelper:
    """Helper using the bundled layouts."""
    return BoardHelper()


@pytest.fixture
def tharsis(helper: BoardHelper) -> Board:
    """A fresh Tharsis board."""
    return helper.new_board("tharsis")


@pytest.fixture
def small_board() -> Board:
    """Seven land spaces in a hexagon, '04' in the middle.

    Row 0: 01 02
    Row 1: 03 04 05
    Row 2: 06 07
    """
    layout = YamlBoardLayout(
        name="small",
        rows=[["land", "land"], ["land", "land", "land"], ["land", "land"]],
    )
    return layout.fix_layout().to_board()


@pytest.fixture
def alice() -> Player:
    return Player(id="p-alice", name="Alice")


@pytest.fixture
def bob() -> Player:
    return Player(id="p-bob", name="Bob")


@pytest.fixture
def gordon() -> Player:
    """Player who ignores city and greenery placement restrictions."""
    return Player(
        id="p-gordon",
        name="Gordon",
        abilities=frozenset({Ability.IGNORE_PLACEMENT_RESTRICTIONS}),
    )
