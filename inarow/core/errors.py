"""Exception hierarchy for the game engine."""

from typing import Optional


class GameError(Exception):
    """Base class for every error raised by the engine."""


# Configuration errors are fatal: they prevent a session from being created.


class ConfigurationError(GameError, ValueError):
    """Invalid game configuration."""


class InvalidSizeError(ConfigurationError):
    """Board size is not a positive integer."""


class InvalidWinLengthError(ConfigurationError):
    """Win length is outside [1, board size]."""


class InvalidPlayersError(ConfigurationError):
    """Players are not exactly two with distinct single-character marks."""


# Move errors are recoverable: the driver re-prompts and the session is untouched.


class MoveError(GameError):
    """A candidate move was rejected."""

    message = "Invalid move"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.message)


class MalformedMoveError(MoveError):
    message = "Invalid input. A valid input should look like this x,y."


class OutOfBoundsError(MoveError, IndexError):
    message = "Input out of bound"


class CellTakenError(MoveError):
    message = "This cell has already been placed"


class GameFinishedError(GameError):
    """A move was submitted to a session that has already finished."""


class AgentExhaustedError(GameError):
    """A scripted agent was asked for more moves than it was given."""
