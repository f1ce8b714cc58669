"""
Text rendering of a board.

Rendering is a read-only projection: it looks at cell tags, mine bits
and the lost flag, and never mutates anything.
"""
from dataclasses import dataclass
from typing import List, Sequence

from .cell import Cell


@dataclass(frozen=True)
class Symbols:
    """Marker set used to draw cells."""

    hidden: str
    flag: str
    mine: str
    blank: str
    separator: str = " "

    def for_cell(self, cell: Cell, lost: bool) -> str:
        """Pick the marker for one cell."""
        if not cell.is_revealed:
            if lost and cell.is_mine:
                return self.mine
            if cell.is_flagged:
                return self.flag
            return self.hidden
        if cell.is_mine:
            return self.mine
        if cell.adjacent_mines > 0:
            return str(cell.adjacent_mines)
        return self.blank


ASCII_SYMBOLS = Symbols(hidden=".", flag="F", mine="*", blank=" ")
EMOJI_SYMBOLS = Symbols(hidden="🟪", flag="🚩", mine="💣", blank="⬜")


def render_rows(
    grid: Sequence[Sequence[Cell]], lost: bool, symbols: Symbols
) -> List[str]:
    """Render each grid row (y outer, x inner) to a line."""
    return [
        symbols.separator.join(symbols.for_cell(cell, lost) for cell in row)
        for row in grid
    ]


def render_board(
    grid: Sequence[Sequence[Cell]],
    lost: bool,
    symbols: Symbols = ASCII_SYMBOLS,
) -> str:
    """Render the whole grid, one line per row."""
    return "\n".join(render_rows(grid, lost, symbols))
