"""Linearizations of a board along the four principal directions.

Each transform turns the 2-D board into a list of 1-D sequences so that a run
of K marks in any direction becomes a run of K consecutive values in one
sequence. The ``*_lines`` helpers return the (row, col) coordinates of each
sequence in the same order, which lets a run found in a sequence be mapped
back to board cells.
"""

from typing import Callable, List, Optional, Tuple

from .board import Board

Line = List[Tuple[int, int]]
Sequence = List[Optional[str]]


def row_lines(size: int) -> List[Line]:
    """Horizontal lines, top to bottom."""
    return [[(r, c) for c in range(size)] for r in range(size)]


def column_lines(size: int) -> List[Line]:
    """Vertical lines, left to right."""
    return [[(r, c) for r in range(size)] for c in range(size)]


def diagonal_lines(size: int) -> List[Line]:
    """Top-left to bottom-right lines.

    Line d holds the cells with col - row == size - 1 - d, so d = 0 is the
    top-right corner, d = size - 1 the main diagonal and d = 2 * size - 2 the
    bottom-left corner.
    """
    lines = []
    for d in range(2 * size - 1):
        offset = size - 1 - d
        lines.append([(r, r + offset) for r in range(size) if 0 <= r + offset < size])
    return lines


def anti_diagonal_lines(size: int) -> List[Line]:
    """Top-right to bottom-left lines.

    Line d holds the cells with row + col == d, for r in
    [max(0, d - size + 1), min(d, size - 1)].
    """
    lines = []
    for d in range(2 * size - 1):
        lines.append([(r, d - r) for r in range(max(0, d - size + 1), min(d, size - 1) + 1)])
    return lines


def _values(board: Board, lines: List[Line]) -> List[Sequence]:
    cells = board.cells
    return [[cells[r][c] for r, c in line] for line in lines]


def rows(board: Board) -> List[Sequence]:
    return [row[:] for row in board.cells]


def columns(board: Board) -> List[Sequence]:
    return [list(column) for column in zip(*board.cells)]


def diagonals(board: Board) -> List[Sequence]:
    return _values(board, diagonal_lines(board.size))


def anti_diagonals(board: Board) -> List[Sequence]:
    return _values(board, anti_diagonal_lines(board.size))


# Fixed check order: rows, columns, diagonals, anti-diagonals.
LINEARIZATIONS: List[Tuple[str, Callable[[Board], List[Sequence]], Callable[[int], List[Line]]]] = [
    ("rows", rows, row_lines),
    ("columns", columns, column_lines),
    ("diagonals", diagonals, diagonal_lines),
    ("anti_diagonals", anti_diagonals, anti_diagonal_lines),
]
