"""
Minesweeper game engine.

Provides the board state machine, random sources for mine placement,
text rendering and host bindings (session API and Gymnasium env).
"""
from .cell import Cell, CellState
from .errors import MinesweeperError, InvalidConfigurationError, OutOfBoundsError
from .random_source import (
    RandomSource,
    PythonRandomSource,
    NumpyRandomSource,
    ScriptedRandomSource,
)
from .render import Symbols, ASCII_SYMBOLS, EMOJI_SYMBOLS
from .board import (
    Board,
    BoardConfig,
    GameState,
    OpenOutcome,
    OpenResult,
    Position,
)
from .session import GameSession
from .environment import MinesweeperEnv, make_vec_env

__all__ = [
    "Cell",
    "CellState",
    "MinesweeperError",
    "InvalidConfigurationError",
    "OutOfBoundsError",
    "RandomSource",
    "PythonRandomSource",
    "NumpyRandomSource",
    "ScriptedRandomSource",
    "Symbols",
    "ASCII_SYMBOLS",
    "EMOJI_SYMBOLS",
    "Board",
    "BoardConfig",
    "GameState",
    "OpenOutcome",
    "OpenResult",
    "Position",
    "GameSession",
    "MinesweeperEnv",
    "make_vec_env",
]
