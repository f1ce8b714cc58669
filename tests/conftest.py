"""
Pytest configuration and shared fixtures.
"""
import pytest
import sys
from pathlib import Path

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from minesweeper import (
    Board,
    BoardConfig,
    Cell,
    PythonRandomSource,
    ScriptedRandomSource,
)


# ============================================================================
# Board Fixtures
# ============================================================================

@pytest.fixture
def default_board() -> Board:
    """Create a default 10x10 board with 5 mines."""
    return Board(random_source=PythonRandomSource(1234))


@pytest.fixture
def row_board() -> Board:
    """3x1 board with a single mine at (2, 0): [0][1][*]."""
    return Board.new(3, 1, 1, ScriptedRandomSource([2, 0]))


@pytest.fixture
def split_row_board() -> Board:
    """5x1 board with a mine in the middle: [0][1][*][1][0]."""
    return Board.new(5, 1, 1, ScriptedRandomSource([2, 0]))


@pytest.fixture
def corner_mines_board() -> Board:
    """3x3 board with mines at (0, 0) and (2, 2)."""
    return Board.new(3, 3, 2, ScriptedRandomSource([0, 0, 2, 2]))


@pytest.fixture
def ends_board() -> Board:
    """4x1 board with mines at both ends: [*][1][1][*]."""
    return Board.new(4, 1, 2, ScriptedRandomSource([0, 0, 3, 0]))


@pytest.fixture
def empty_board() -> Board:
    """Create a board with no mines for cascade testing."""
    return Board(BoardConfig(5, 5, 0))


# ============================================================================
# Cell Fixtures
# ============================================================================

@pytest.fixture
def hidden_cell() -> Cell:
    """Create a hidden cell."""
    return Cell()


@pytest.fixture
def mine_cell() -> Cell:
    """Create a cell containing a mine."""
    return Cell(is_mine=True)


# ============================================================================
# Configuration Fixtures
# ============================================================================

@pytest.fixture
def valid_config() -> BoardConfig:
    """Create a valid board configuration."""
    return BoardConfig(9, 9, 10)
