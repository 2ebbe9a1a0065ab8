"""Board visualization utilities and formatters."""

from abc import ABC, abstractmethod
from typing import Iterable, List, Sequence, Tuple

import click

from ..core.board import Board
from ..core.models import EMPTY, Outcome, Player


class BoardFormatter(ABC):
    """Abstract base class for board formatters."""

    marks: Tuple[str, ...] = ()

    def bind_players(self, players: List[Player]) -> None:
        """Remember the player order so marks can be told apart by seat."""
        self.marks = tuple(player.mark for player in players)

    @abstractmethod
    def format_board(self, board: Board) -> str:
        """Format board for display."""
        pass

    def format_board_with_highlights(self, board: Board, highlights: Sequence[Tuple[int, int]]) -> str:
        """Format board with highlighted positions."""
        # Default implementation - subclasses can override
        return self.format_board(board)


class GridBoardFormatter(BoardFormatter):
    """Column header, '|' between cells and dashed dividers between rows.

       0   1   2
    0  X |   | O
      -----------
    1    | X |
    """

    def _cell_width(self, board: Board) -> int:
        return max(3, len(str(board.size - 1)) + 2)

    def _render_cell(self, mark, width: int, highlighted: bool) -> str:
        return (mark if mark is not EMPTY else "").center(width)

    def _render(self, board: Board, highlights: Iterable[Tuple[int, int]]) -> str:
        highlights = set(highlights)
        width = self._cell_width(board)
        label_width = len(str(board.size - 1))

        lines = [" " * (label_width + 1) + "".join(str(col).center(width + 1) for col in range(board.size)).rstrip()]
        divider = " " * (label_width + 1) + "-" * ((width + 1) * board.size - 1)
        for row in range(board.size):
            cells = [
                self._render_cell(board.cells[row][col], width, (row, col) in highlights)
                for col in range(board.size)
            ]
            lines.append(f"{row:>{label_width}} " + "|".join(cells))
            if row != board.size - 1:
                lines.append(divider)
        return "\n".join(lines) + "\n"

    def format_board(self, board: Board) -> str:
        return self._render(board, ())

    def format_board_with_highlights(self, board: Board, highlights: Sequence[Tuple[int, int]]) -> str:
        return self._render(board, highlights)


class SimpleBoardFormatter(BoardFormatter):
    """Simple text-based board formatter."""

    def format_board(self, board: Board) -> str:
        """Format board for display."""
        return self.format_board_with_highlights(board, [])

    def format_board_with_highlights(self, board: Board, highlights: Sequence[Tuple[int, int]]) -> str:
        """Format board with highlighted positions (simple version)."""
        result = "   "
        for col in range(board.size):
            result += f"{col:2} "
        result += "\n"

        for row in range(board.size):
            result += f"{row:2} "
            for col in range(board.size):
                piece = board.cells[row][col]
                piece = "." if piece is EMPTY else piece
                if (row, col) in highlights:
                    result += f"[{piece}]"
                else:
                    result += f" {piece} "
            result += "\n"

        return result


class ColorBoardFormatter(GridBoardFormatter):
    """Grid formatter that colors the winning cells, one color per seat."""

    def __init__(self, colors: Tuple[str, str] = ("red", "green")):
        self.colors = colors

    def _color_for(self, mark: str) -> str:
        # Unbound formatters fall back to the first seat's color.
        seat = self.marks.index(mark) if mark in self.marks else 0
        return self.colors[seat % len(self.colors)]

    def _render_cell(self, mark, width: int, highlighted: bool) -> str:
        text = super()._render_cell(mark, width, highlighted)
        if not highlighted or mark is EMPTY:
            return text
        return click.style(text, fg=self._color_for(mark), bold=True)

    def format_board_with_highlights(self, board: Board, highlights: Sequence[Tuple[int, int]]) -> str:
        result = super().format_board_with_highlights(board, highlights)
        if highlights:
            result += "\n" + click.style("Winning sequence highlighted in color!", fg="yellow") + "\n"
        return result


def create_formatter(format_type: str = "grid") -> BoardFormatter:
    """Create a board formatter of the specified type."""
    formatters = {
        "grid": GridBoardFormatter,
        "simple": SimpleBoardFormatter,
        "color": ColorBoardFormatter,
    }

    if format_type not in formatters:
        raise ValueError(f"Unknown format type: {format_type}. Available: {list(formatters.keys())}")

    return formatters[format_type]()


def format_outcome(outcome: Outcome) -> str:
    """Message announcing the result, empty while the game goes on."""
    if outcome.is_win:
        return f"Player {outcome.winning_mark} wins!"
    if outcome.is_draw:
        return "The game is tied!"
    return ""


def format_standings(players: List[Player]) -> str:
    """Report block with every player's total wins."""
    lines = ["<----------------------------->", "Report for Players Total Wins"]
    lines.extend(f"Player {player.mark}: {player.total_wins}" for player in players)
    lines.append("<----------------------------->")
    return "\n".join(lines)
