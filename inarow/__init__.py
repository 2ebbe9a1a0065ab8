"""
inarow - two-player N-in-a-row board games (tic-tac-toe, gomoku and friends).

The engine models a square board, validates moves typed as "row,col", and
detects K marks in a row horizontally, vertically or along either diagonal.

Quick Start:
    >>> from inarow import GameSession
    >>>
    >>> session = GameSession(board_size=3, win_length=3)
    >>> for raw in ["0,0", "1,1", "0,1", "1,0", "0,2"]:
    ...     outcome = session.play(raw)
    >>> outcome.winning_mark
    'X'

Main Components:
    - core: board, move validator, linearizations, win detector, game session
    - agents: move sources (console prompt, scripted moves)
    - arena: game runner with a cross-game scoreboard
    - utils: board formatters and report text
"""

from .core import (
    Player,
    Move,
    GameResult,
    Outcome,
    Board,
    GameSession,
    GameConfig,
    GAME_TYPES,
    get_game_config,
    validate_move,
    has_run,
    check_for_win,
    GameError,
    MoveError,
    MalformedMoveError,
    OutOfBoundsError,
    CellTakenError,
    ConfigurationError,
    InvalidSizeError,
    InvalidWinLengthError,
)
from .agents import Agent, ConsoleAgent, ScriptedAgent
from .arena import GameArena
from .utils import BoardFormatter, GridBoardFormatter, SimpleBoardFormatter, ColorBoardFormatter

# fmt: off
__all__ = [
    # Core classes
    'Player', 'Move', 'GameResult', 'Outcome', 'Board', 'GameSession',
    'GameConfig', 'GAME_TYPES', 'get_game_config',
    'validate_move', 'has_run', 'check_for_win',

    # Errors
    'GameError', 'MoveError', 'MalformedMoveError', 'OutOfBoundsError', 'CellTakenError',
    'ConfigurationError', 'InvalidSizeError', 'InvalidWinLengthError',

    # Agents
    'Agent', 'ConsoleAgent', 'ScriptedAgent',

    # Arena
    'GameArena',

    # Utilities
    'BoardFormatter', 'GridBoardFormatter', 'SimpleBoardFormatter', 'ColorBoardFormatter',
]
# fmt: on
