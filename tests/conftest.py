"""
Shared pytest fixtures for the Hex tests.

Game fixtures are function-scoped so every test gets a fresh board.
"""

import pytest

from config import MANUAL
from engine import Grid, HexGame


def grid_from_picture(*rows):
    """Builds a Grid from rows such as 'X..', '.O.'."""
    return Grid.from_rows(list(rows))


@pytest.fixture
def make_grid():
    return grid_from_picture


@pytest.fixture
def game_3x3():
    """A fresh 3x3 game between two automatic players."""
    return HexGame(3, 3)


@pytest.fixture
def manual_game():
    """A fresh 4x5 game between two manual players."""
    return HexGame(4, 5, player_types=(MANUAL, MANUAL))
