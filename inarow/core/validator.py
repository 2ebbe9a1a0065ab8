"""Move parsing and validation.

A move is valid when it meets three conditions, checked in order:

1. the raw input is not malformed (two integers separated by a comma),
2. the coordinates are inside the board,
3. the target cell has not been taken yet.

The first failing check raises the matching MoveError subclass. Validation
never mutates the board.
"""

import re
from typing import Tuple

from .board import Board
from .errors import CellTakenError, MalformedMoveError, OutOfBoundsError
from .models import Move

# ASCII digits only. The sign is accepted so that "-1,0" is reported as out of bounds.
_MOVE_PATTERN = re.compile(r"^\s*(-?[0-9]+)\s*,\s*(-?[0-9]+)\s*$")


def parse_move(raw: str) -> Tuple[int, int]:
    """Convert raw "row,col" text to a pair of integers."""
    if not isinstance(raw, str):
        raise MalformedMoveError()
    match = _MOVE_PATTERN.match(raw)
    if match is None:
        raise MalformedMoveError()
    try:
        return int(match.group(1)), int(match.group(2))
    except ValueError as e:
        # Numbers past the interpreter's integer-string length limit.
        raise MalformedMoveError() from e


def validate_position(row: int, col: int, board: Board) -> Move:
    """Bounds and occupancy checks for numeric coordinates."""
    if not board.in_bounds(row, col):
        raise OutOfBoundsError()
    if not board.is_empty(row, col):
        raise CellTakenError()
    return Move(row, col)


def validate_move(raw: str, board: Board) -> Move:
    """Parse and validate raw player input against the board."""
    row, col = parse_move(raw)
    return validate_position(row, col, board)
