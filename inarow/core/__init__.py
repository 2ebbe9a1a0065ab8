from .models import EMPTY, Player, Move, GameResult, Outcome, SessionState, default_players
from .errors import (
    GameError,
    ConfigurationError,
    InvalidSizeError,
    InvalidWinLengthError,
    InvalidPlayersError,
    MoveError,
    MalformedMoveError,
    OutOfBoundsError,
    CellTakenError,
    GameFinishedError,
    AgentExhaustedError,
)
from .board import Board
from .config import GameConfig, GAME_TYPES, TIC_TAC_TOE, GOMOKU, get_game_config
from .validator import parse_move, validate_move, validate_position
from .geometry import rows, columns, diagonals, anti_diagonals, LINEARIZATIONS
from .win_detector import has_run, find_run, check_for_win
from .game_logic import GameSession

__all__ = [
    "EMPTY",
    "Player",
    "Move",
    "GameResult",
    "Outcome",
    "SessionState",
    "default_players",
    "GameError",
    "ConfigurationError",
    "InvalidSizeError",
    "InvalidWinLengthError",
    "InvalidPlayersError",
    "MoveError",
    "MalformedMoveError",
    "OutOfBoundsError",
    "CellTakenError",
    "GameFinishedError",
    "AgentExhaustedError",
    "Board",
    "GameConfig",
    "GAME_TYPES",
    "TIC_TAC_TOE",
    "GOMOKU",
    "get_game_config",
    "parse_move",
    "validate_move",
    "validate_position",
    "rows",
    "columns",
    "diagonals",
    "anti_diagonals",
    "LINEARIZATIONS",
    "has_run",
    "find_run",
    "check_for_win",
    "GameSession",
]
