"""
Board module for Minesweeper game.

Implements the game board with mine placement, cell revealing
(flood fill and chording), flagging and game state management.

Coordinates are zero-based ``(x, y)`` tuples: ``x`` is the column,
``y`` the row.
"""
import logging
import operator
from collections import deque
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import FrozenSet, Iterable, List, Optional, Set, Tuple

import numpy as np

from .cell import Cell
from .errors import InvalidConfigurationError, OutOfBoundsError
from .random_source import PythonRandomSource, RandomSource
from .render import ASCII_SYMBOLS, Symbols, render_board

logger = logging.getLogger(__name__)

Position = Tuple[int, int]


# ============================================================================
# Constants
# ============================================================================

class GameState(Enum):
    """Possible states of the game."""

    PLAYING = auto()
    WON = auto()
    LOST = auto()


class OpenOutcome(Enum):
    """What an open request did."""

    MINE = auto()
    EMPTY = auto()
    NO_OP = auto()


@dataclass(frozen=True)
class OpenResult:
    """
    Result of ``Board.open``.

    Attributes:
        outcome: Whether a mine was hit, a safe cell opened, or nothing
            happened.
        adjacent_mines: Mine count of the requested cell for EMPTY
            results, 0 otherwise.
    """

    outcome: OpenOutcome
    adjacent_mines: int = 0

    @classmethod
    def mine(cls) -> "OpenResult":
        return cls(OpenOutcome.MINE)

    @classmethod
    def empty(cls, adjacent_mines: int) -> "OpenResult":
        return cls(OpenOutcome.EMPTY, adjacent_mines)

    @classmethod
    def no_op(cls) -> "OpenResult":
        return cls(OpenOutcome.NO_OP)

    @property
    def is_mine(self) -> bool:
        """Check if a mine was opened."""
        return self.outcome == OpenOutcome.MINE

    @property
    def is_no_op(self) -> bool:
        """Check if nothing changed."""
        return self.outcome == OpenOutcome.NO_OP


@dataclass
class BoardConfig:
    """
    Configuration for a Minesweeper board.

    Attributes:
        width: Number of columns.
        height: Number of rows.
        num_mines: Total mines to place.
    """

    width: int = 10
    height: int = 10
    num_mines: int = 5

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self._validate()

    def _validate(self) -> None:
        """Ensure configuration values are valid."""
        if self.width < 1 or self.height < 1:
            raise InvalidConfigurationError("Board dimensions must be positive")
        if self.num_mines < 0:
            raise InvalidConfigurationError("Number of mines cannot be negative")
        max_mines = self.total_cells - 1
        if self.num_mines > max_mines:
            raise InvalidConfigurationError(f"Too many mines (max {max_mines})")

    @property
    def total_cells(self) -> int:
        """Get number of cells on the board."""
        return self.width * self.height

    @property
    def safe_cells(self) -> int:
        """Number of cells that must be opened to win."""
        return self.total_cells - self.num_mines


# ============================================================================
# Board Class
# ============================================================================

@dataclass
class Board:
    """
    Minesweeper game board.

    Mines are placed at construction by drawing coordinates from the
    random source. The board is mutated only by ``open`` and
    ``toggle_flag`` and freezes once the game is won or lost.

    Not thread-safe; callers must serialize access (see GameSession).
    """

    config: BoardConfig = field(default_factory=BoardConfig)
    random_source: Optional[RandomSource] = field(default=None, repr=False)
    _grid: List[List[Cell]] = field(default_factory=list, init=False, repr=False)
    _game_state: GameState = field(default=GameState.PLAYING, init=False)
    _cells_revealed: int = field(default=0, init=False)

    def __post_init__(self) -> None:
        """Build the grid and place mines."""
        if self.random_source is None:
            self.random_source = PythonRandomSource()
        self._init_grid()
        self._place_mines()
        self._calculate_adjacent_mines()

    @classmethod
    def new(
        cls,
        width: int,
        height: int,
        mine_count: int,
        random_source: Optional[RandomSource] = None,
    ) -> "Board":
        """
        Create a board from raw dimensions.

        Raises:
            InvalidConfigurationError: If the dimensions are not positive
                or ``mine_count >= width * height``.
        """
        return cls(BoardConfig(width, height, mine_count), random_source)

    # ========================================================================
    # Grid Initialization (Low-level)
    # ========================================================================

    def _init_grid(self) -> None:
        """Create empty grid of cells, indexed as grid[y][x]."""
        self._grid = [
            [Cell() for _ in range(self.config.width)]
            for _ in range(self.config.height)
        ]

    def _place_mines(self) -> None:
        """
        Draw random coordinates until the mine set is full.

        Duplicate draws are discarded, so the loop runs on the set size
        rather than a fixed number of iterations. BoardConfig guarantees
        at least one free cell, so it always terminates.
        """
        mines: Set[Position] = set()
        while len(mines) < self.config.num_mines:
            x = self.random_source.next_int(0, self.config.width)
            y = self.random_source.next_int(0, self.config.height)
            mines.add((x, y))

        for x, y in mines:
            self._grid[y][x].is_mine = True

        logger.debug(
            "Placed %d mines on %dx%d board",
            len(mines), self.config.width, self.config.height,
        )

    def _calculate_adjacent_mines(self) -> None:
        """Calculate adjacent mine counts for all cells."""
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                cell.adjacent_mines = self._count_adjacent_mines((x, y))

    def _count_adjacent_mines(self, pos: Position) -> int:
        return sum(
            1 for x, y in self._neighbors(pos) if self._grid[y][x].is_mine
        )

    # ========================================================================
    # Neighbor Utilities (Low-level)
    # ========================================================================

    def in_bounds(self, pos: Position) -> bool:
        """Check if position is within board bounds."""
        x, y = pos
        return 0 <= x < self.config.width and 0 <= y < self.config.height

    def _check_bounds(self, pos: Position) -> Position:
        """Normalize ``pos`` to integer (x, y), raising if it is off the board."""
        try:
            x, y = (operator.index(value) for value in pos)
        except (TypeError, ValueError):
            raise OutOfBoundsError(
                pos, self.config.width, self.config.height
            ) from None
        if not self.in_bounds((x, y)):
            raise OutOfBoundsError(pos, self.config.width, self.config.height)
        return x, y

    def _cell_at(self, pos: Position) -> Cell:
        x, y = self._check_bounds(pos)
        return self._grid[y][x]

    def _neighbors(self, pos: Position) -> List[Position]:
        x, y = pos
        neighbors = []
        for delta_y in (-1, 0, 1):
            for delta_x in (-1, 0, 1):
                if delta_x == 0 and delta_y == 0:
                    continue
                neighbor = (x + delta_x, y + delta_y)
                if self.in_bounds(neighbor):
                    neighbors.append(neighbor)
        return neighbors

    def neighbors(self, pos: Position) -> List[Position]:
        """
        Get the 8-connected neighbors of a cell, clipped to the board.

        Args:
            pos: (x, y) of the center cell.

        Returns:
            List of (x, y) tuples, never including ``pos`` itself.

        Raises:
            OutOfBoundsError: If ``pos`` is outside the board.
        """
        return self._neighbors(self._check_bounds(pos))

    def neighboring_mine_count(self, pos: Position) -> int:
        """Number of mines among the neighbors of ``pos`` (0-8)."""
        return self._cell_at(pos).adjacent_mines

    def _count_adjacent_flags(self, pos: Position) -> int:
        return sum(
            1 for x, y in self._neighbors(pos) if self._grid[y][x].is_flagged
        )

    def _hidden_neighbors(self, pos: Position) -> List[Position]:
        return [
            (x, y) for x, y in self._neighbors(pos)
            if self._grid[y][x].is_hidden
        ]

    # ========================================================================
    # Game Actions (Mid-level)
    # ========================================================================

    def open(self, pos: Position) -> OpenResult:
        """
        Open a cell.

        A flagged cell, or any cell once the game is over, is left
        alone. Opening an already revealed cell chords: if its flagged
        neighbors match its mine count, every hidden neighbor is opened.
        Opening a cell with no adjacent mines floods outward until the
        region is bordered by numbered cells.

        Args:
            pos: (x, y) of the cell to open.

        Returns:
            OpenResult describing the outcome.

        Raises:
            OutOfBoundsError: If ``pos`` is outside the board.
        """
        pos = self._check_bounds(pos)
        cell = self._cell_at(pos)
        if not self.is_playing or cell.is_flagged:
            return OpenResult.no_op()

        if cell.is_revealed:
            return self._chord(pos)

        if self._reveal_cascade([pos]):
            return OpenResult.mine()
        return OpenResult.empty(cell.adjacent_mines)

    def _chord(self, pos: Position) -> OpenResult:
        """Open all hidden neighbors if the flag count matches."""
        cell = self._cell_at(pos)
        if self._count_adjacent_flags(pos) != cell.adjacent_mines:
            return OpenResult.no_op()

        targets = self._hidden_neighbors(pos)
        if not targets:
            return OpenResult.no_op()

        if self._reveal_cascade(targets):
            return OpenResult.mine()
        return OpenResult.empty(cell.adjacent_mines)

    def _reveal_cascade(self, start: Iterable[Position]) -> bool:
        """
        Reveal cells from a worklist, flooding out of zero-count cells.

        Only hidden cells are pushed and each cell is marked revealed
        when popped, so every cell is processed at most once.

        Returns:
            True if a mine was revealed.
        """
        pending = deque(start)
        while pending:
            x, y = pending.popleft()
            cell = self._grid[y][x]
            if not cell.reveal():
                continue

            self._cells_revealed += 1

            if cell.is_mine:
                self._game_state = GameState.LOST
                logger.info("Mine opened at %s, game lost", (x, y))
                return True

            if cell.adjacent_mines == 0:
                pending.extend(self._hidden_neighbors((x, y)))

        self._check_win_condition()
        return False

    def _check_win_condition(self) -> None:
        """Check if all non-mine cells are revealed."""
        if self._cells_revealed >= self.config.safe_cells:
            self._game_state = GameState.WON
            logger.info("All safe cells opened, game won")

    def toggle_flag(self, pos: Position) -> bool:
        """
        Toggle flag on a cell.

        Args:
            pos: (x, y) of the cell.

        Returns:
            True if flag was toggled, False if the cell is revealed or
            the game is over.

        Raises:
            OutOfBoundsError: If ``pos`` is outside the board.
        """
        cell = self._cell_at(pos)
        if not self.is_playing:
            return False
        return cell.toggle_flag()

    # ========================================================================
    # State Accessors (High-level)
    # ========================================================================

    @property
    def width(self) -> int:
        """Get number of columns."""
        return self.config.width

    @property
    def height(self) -> int:
        """Get number of rows."""
        return self.config.height

    @property
    def mine_count(self) -> int:
        """Get total number of mines."""
        return self.config.num_mines

    @property
    def game_state(self) -> GameState:
        """Get current game state."""
        return self._game_state

    @property
    def is_playing(self) -> bool:
        """Check if game is still in progress."""
        return self._game_state == GameState.PLAYING

    @property
    def is_won(self) -> bool:
        """Check if game was won."""
        return self._game_state == GameState.WON

    @property
    def is_lost(self) -> bool:
        """Check if game was lost."""
        return self._game_state == GameState.LOST

    @property
    def lost(self) -> bool:
        """Alias of is_lost."""
        return self.is_lost

    @property
    def cells_revealed(self) -> int:
        """Get number of revealed cells."""
        return self._cells_revealed

    @property
    def remaining_flags(self) -> int:
        """Mines minus placed flags; negative when over-flagged."""
        return self.config.num_mines - len(self.flagged)

    def _positions_where(self, predicate) -> FrozenSet[Position]:
        return frozenset(
            (x, y)
            for y, row in enumerate(self._grid)
            for x, cell in enumerate(row)
            if predicate(cell)
        )

    @property
    def mines(self) -> FrozenSet[Position]:
        """Get positions of all mines."""
        return self._positions_where(lambda cell: cell.is_mine)

    @property
    def revealed(self) -> FrozenSet[Position]:
        """Get positions of revealed cells."""
        return self._positions_where(lambda cell: cell.is_revealed)

    @property
    def flagged(self) -> FrozenSet[Position]:
        """Get positions of flagged cells."""
        return self._positions_where(lambda cell: cell.is_flagged)

    def get_cell(self, pos: Position) -> Cell:
        """
        Get cell at position.

        Raises:
            OutOfBoundsError: If ``pos`` is outside the board.
        """
        return self._cell_at(pos)

    def get_observation(self) -> np.ndarray:
        """
        Get board state as a numpy array indexed [y, x].

        Returns:
            2D int8 array where:
                -1 = hidden
                -2 = flagged
                0-8 = revealed with adjacent count
                9 = revealed mine
        """
        obs = np.zeros((self.config.height, self.config.width), dtype=np.int8)
        for y, row in enumerate(self._grid):
            for x, cell in enumerate(row):
                obs[y, x] = cell.to_observation()
        return obs

    def get_valid_actions(self) -> List[Position]:
        """
        Get hidden, unflagged cells in row-major order.

        Returns:
            List of (x, y) positions that can be opened.
        """
        return [
            (x, y)
            for y, row in enumerate(self._grid)
            for x, cell in enumerate(row)
            if cell.is_hidden
        ]

    def render(self, symbols: Symbols = ASCII_SYMBOLS) -> str:
        """Render the board as text, one line per row."""
        return render_board(self._grid, self.is_lost, symbols)

    def __str__(self) -> str:
        return self.render()
