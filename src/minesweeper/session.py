"""
Host binding for a single running game.

Exposes the small surface a host environment drives: read the rendered
state, open a field, toggle a flag, start a new game. Calls are
serialized with a lock because the board itself is not thread-safe.
"""
import logging
import threading
from typing import Optional

from .board import Board, BoardConfig, GameState, OpenResult
from .random_source import RandomSource
from .render import EMOJI_SYMBOLS, Symbols

logger = logging.getLogger(__name__)


# ============================================================================
# Game Session
# ============================================================================

class GameSession:
    """
    Owns the current board and forwards host calls to it.

    Errors from the board (InvalidConfigurationError, OutOfBoundsError)
    propagate to the caller unchanged.
    """

    def __init__(
        self,
        width: int = 10,
        height: int = 10,
        mine_count: int = 5,
        random_source: Optional[RandomSource] = None,
        symbols: Symbols = EMOJI_SYMBOLS,
    ) -> None:
        self.symbols = symbols
        self._random_source = random_source
        self._lock = threading.Lock()
        self._board = self._make_board(BoardConfig(width, height, mine_count))

    def _make_board(self, config: BoardConfig) -> Board:
        logger.debug(
            "Starting %dx%d game with %d mines",
            config.width, config.height, config.num_mines,
        )
        return Board(config, self._random_source)

    @property
    def board(self) -> Board:
        """
        Get the live board.

        Reads through this bypass the lock; use it only from a single
        thread, or prefer the locked accessors below.
        """
        return self._board

    @property
    def game_state(self) -> GameState:
        """Get the current game state under the lock."""
        with self._lock:
            return self._board.game_state

    @property
    def remaining_flags(self) -> int:
        """Get mines minus placed flags under the lock."""
        with self._lock:
            return self._board.remaining_flags

    def get_state(self) -> str:
        """Render the current board, one line per row."""
        with self._lock:
            return self._board.render(self.symbols)

    def open_field(self, x: int, y: int) -> OpenResult:
        with self._lock:
            return self._board.open((x, y))

    def toggle_flag(self, x: int, y: int) -> bool:
        with self._lock:
            return self._board.toggle_flag((x, y))

    def new_game(
        self,
        width: Optional[int] = None,
        height: Optional[int] = None,
        mine_count: Optional[int] = None,
    ) -> Board:
        """
        Replace the board with a fresh one.

        Omitted parameters keep the current board's values. On an
        invalid configuration the current board is kept.
        """
        with self._lock:
            current = self._board.config
            config = BoardConfig(
                current.width if width is None else width,
                current.height if height is None else height,
                current.num_mines if mine_count is None else mine_count,
            )
            self._board = self._make_board(config)
            return self._board


# ============================================================================
# Module-level Binding
# ============================================================================

_default_session: Optional[GameSession] = None
_default_lock = threading.Lock()


def default_session() -> GameSession:
    """Get the process-wide session, creating a 10x10 game on first use."""
    global _default_session
    with _default_lock:
        if _default_session is None:
            _default_session = GameSession()
        return _default_session


def get_state() -> str:
    return default_session().get_state()


def open_field(x: int, y: int) -> OpenResult:
    return default_session().open_field(x, y)


def toggle_flag(x: int, y: int) -> bool:
    return default_session().toggle_flag(x, y)


def new_game(
    width: Optional[int] = None,
    height: Optional[int] = None,
    mine_count: Optional[int] = None,
) -> Board:
    return default_session().new_game(width, height, mine_count)
