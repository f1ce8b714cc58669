"""
Unit tests for the terminal game commands.
"""
import pytest
from minesweeper import ASCII_SYMBOLS, GameSession, ScriptedRandomSource

from main import HELP, handle_command, play


@pytest.fixture
def row_session() -> GameSession:
    """3x1 session with the mine at (2, 0)."""
    return GameSession(
        3, 1, 1,
        random_source=ScriptedRandomSource([2, 0]),
        symbols=ASCII_SYMBOLS,
    )


class TestHandleCommand:
    """Test command parsing and dispatch."""

    def test_open_command(self, row_session: GameSession) -> None:
        """o X Y opens a cell."""
        assert handle_command(row_session, "o 1 0") == "EMPTY"
        assert row_session.board.revealed == {(1, 0)}

    def test_flag_command(self, row_session: GameSession) -> None:
        """f X Y toggles a flag."""
        assert handle_command(row_session, "f 2 0") == "FLAG"
        assert row_session.board.flagged == {(2, 0)}

    def test_quit_command(self, row_session: GameSession) -> None:
        """q quits."""
        assert handle_command(row_session, "q") is None

    @pytest.mark.parametrize("line", ["", "x 1 1", "o 1"])
    def test_unknown_command_shows_help(
        self, row_session: GameSession, line: str
    ) -> None:
        """Malformed commands print the help text."""
        assert handle_command(row_session, line) == HELP

    def test_non_integer_coordinates(self, row_session: GameSession) -> None:
        """Coordinates must parse as integers."""
        assert "integers" in handle_command(row_session, "o a b")

    def test_out_of_bounds_reported(self, row_session: GameSession) -> None:
        """Bounds errors are reported, not raised."""
        message = handle_command(row_session, "o 5 0")
        assert message.startswith("Error:")
        assert row_session.board.revealed == frozenset()


class TestPlay:
    """Test the prompt loop."""

    def test_play_until_loss(self, row_session: GameSession, capsys) -> None:
        """Loop stops once the game is over."""
        commands = iter(["o 2 0"])
        play(row_session, read=lambda prompt: next(commands))
        output = capsys.readouterr().out
        assert "LOST" in output
        assert ". . *" in output

    def test_play_stops_on_eof(self, row_session: GameSession) -> None:
        """End of input ends the loop."""
        def read(prompt):
            raise EOFError

        play(row_session, read=read)
        assert row_session.board.is_playing is True
