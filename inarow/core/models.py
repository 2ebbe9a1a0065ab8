"""Core data models for N-in-a-row games."""

from typing import List, Tuple, Optional
from dataclasses import dataclass, field
from enum import Enum

# Value of an unoccupied cell. Never a valid mark, so it cannot be confused with one.
EMPTY = None


@dataclass
class Player:
    """A player identified by a single-character mark."""

    mark: str
    total_wins: int = 0

    def __str__(self) -> str:
        return self.mark


def default_players() -> List[Player]:
    """X moves first, O second."""
    return [Player("X"), Player("O")]


class GameResult(Enum):
    IN_PROGRESS = "in_progress"  # No result yet, keep playing
    WIN = "win"                  # The mover completed a run of K
    DRAW = "draw"                # Board full without a run


class SessionState(Enum):
    AWAITING_MOVE = "awaiting_move"
    CHECKING = "checking"
    FINISHED = "finished"


@dataclass(frozen=True)
class Move:
    row: int
    col: int


@dataclass(frozen=True)
class Outcome:
    """Result of the win check run after a placement."""

    result: GameResult
    winner: Optional[Player] = None
    winning_sequence: List[Tuple[int, int]] = field(default_factory=list)

    @classmethod
    def in_progress(cls) -> "Outcome":
        return cls(GameResult.IN_PROGRESS)

    @classmethod
    def draw(cls) -> "Outcome":
        return cls(GameResult.DRAW)

    @classmethod
    def win(cls, winner: Player, winning_sequence: List[Tuple[int, int]]) -> "Outcome":
        return cls(GameResult.WIN, winner, list(winning_sequence))

    @property
    def is_win(self) -> bool:
        return self.result is GameResult.WIN

    @property
    def is_draw(self) -> bool:
        return self.result is GameResult.DRAW

    @property
    def is_over(self) -> bool:
        """True once the game has been won or drawn."""
        return self.result is not GameResult.IN_PROGRESS

    @property
    def winning_mark(self) -> Optional[str]:
        return self.winner.mark if self.winner is not None else None
