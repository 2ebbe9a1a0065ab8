"""Game type presets and configuration validation."""

from dataclasses import dataclass, replace
from typing import Dict, Optional

from .errors import InvalidSizeError, InvalidWinLengthError

TIC_TAC_TOE = "tic-tac-toe"
GOMOKU = "gomoku"


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


@dataclass(frozen=True)
class GameConfig:
    """Board size and win length for one game type."""

    name: str
    board_size: int
    win_length: int
    title: str = ""

    def validate(self) -> "GameConfig":
        """Raise a ConfigurationError unless 1 <= win_length <= board_size."""
        if not _is_int(self.board_size) or self.board_size < 1:
            raise InvalidSizeError(f"Board size must be a positive integer, got {self.board_size!r}")
        if not _is_int(self.win_length) or not 1 <= self.win_length <= self.board_size:
            raise InvalidWinLengthError(
                f"Win length must be between 1 and {self.board_size}, got {self.win_length!r}"
            )
        return self

    def with_overrides(self, board_size: Optional[int] = None, win_length: Optional[int] = None) -> "GameConfig":
        """Copy with the given fields replaced; the copy is validated."""
        changes = {}
        if board_size is not None:
            changes["board_size"] = board_size
        if win_length is not None:
            changes["win_length"] = win_length
        return replace(self, **changes).validate()


GAME_TYPES: Dict[str, GameConfig] = {
    TIC_TAC_TOE: GameConfig(TIC_TAC_TOE, board_size=3, win_length=3, title="Happy Playing Tic-Tac-Toe!"),
    # Five in a row horizontally, vertically or diagonally wins.
    GOMOKU: GameConfig(GOMOKU, board_size=10, win_length=5, title="Happy Playing Gomoku!"),
}


def get_game_config(name: str) -> GameConfig:
    """Look up a preset by name."""
    if name not in GAME_TYPES:
        raise ValueError(f"Unknown game type: {name}. Available: {list(GAME_TYPES.keys())}")
    return GAME_TYPES[name]
