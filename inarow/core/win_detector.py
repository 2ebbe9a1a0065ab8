"""Win detection over the board linearizations."""

import logging
from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence, Tuple

from .board import Board
from .geometry import LINEARIZATIONS
from .models import EMPTY, Outcome

if TYPE_CHECKING:
    from .game_logic import GameSession

logger = logging.getLogger(__name__)


def _run_end(sequence: Sequence[Optional[str]], mark: str, k: int) -> int:
    """Index just past the first run of k marks in sequence, or -1."""
    count = 0
    for i, cell in enumerate(sequence):
        if cell == mark:
            count += 1
            if count >= k:
                return i + 1
        else:
            count = 0
    return -1


def has_run(sequences: Iterable[Sequence[Optional[str]]], mark: str, k: int) -> bool:
    """True if any sequence holds k or more consecutive cells equal to mark."""
    if mark is EMPTY:
        return False
    return any(len(sequence) >= k and _run_end(sequence, mark, k) != -1 for sequence in sequences)


def find_run(board: Board, mark: str, k: int) -> List[Tuple[int, int]]:
    """Coordinates of the first run of k marks, in the fixed transform order."""
    if mark is EMPTY:
        return []
    for name, transform, lines_for in LINEARIZATIONS:
        sequences = transform(board)
        if not has_run(sequences, mark, k):
            continue
        for sequence, line in zip(sequences, lines_for(board.size)):
            end = _run_end(sequence, mark, k)
            if end != -1:
                logger.debug(f"Run of {k} '{mark}' found in {name}")
                return line[end - k:end]
    return []


def check_for_win(session: "GameSession") -> Outcome:
    """Outcome of the last placement, evaluated for the player who made it.

    A win bumps the mover's total_wins once, however many lines match.
    """
    mover = session.last_mover
    if mover is None:
        return Outcome.in_progress()

    winning_sequence = find_run(session.board, mover.mark, session.win_length)
    if winning_sequence:
        mover.total_wins += 1
        return Outcome.win(mover, winning_sequence)

    if session.remaining_empty_cells == 0:
        return Outcome.draw()

    return Outcome.in_progress()
