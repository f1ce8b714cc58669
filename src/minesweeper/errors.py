"""
Error types raised by the Minesweeper engine.

Every error is raised at the boundary of a request (bad configuration,
bad coordinate); valid requests never fail.
"""


class MinesweeperError(Exception):
    """Base class for all engine errors."""


class InvalidConfigurationError(MinesweeperError, ValueError):
    """Board dimensions or mine count cannot form a playable board."""


class OutOfBoundsError(MinesweeperError, IndexError):
    """A coordinate lies outside the board."""

    def __init__(self, position, width: int, height: int) -> None:
        self.position = position
        self.width = width
        self.height = height
        super().__init__(
            f"Position {position} is outside the {width}x{height} board"
        )
