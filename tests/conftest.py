import matplotlib

matplotlib.use("Agg")

import pytest

from grid import Grid
from io_utils import parse_grid

ROBOTNAV_TEXT = """\
[5,11]
(0,1)
(7,0) | (10,3)
(2,0,2,2)
(8,0,1,2)
(10,0,1,1)
(2,3,1,2)
(3,4,3,1)
(9,3,1,1)
(8,4,2,1)
"""

ROBOTNAV_RENDER = "\n".join([
    "  XX   TX X",
    "I XX    X  ",
    "           ",
    "  X      XT",
    "  XXXX  XX ",
])


@pytest.fixture
def robotnav_text():
    return ROBOTNAV_TEXT


@pytest.fixture
def robotnav_render():
    return ROBOTNAV_RENDER


@pytest.fixture
def robotnav():
    return parse_grid(ROBOTNAV_TEXT)


@pytest.fixture
def open_grid():
    """Factory for wall-free grids."""
    def make(rows, cols, initial, targets):
        return Grid.create(rows, cols, initial, targets)
    return make
