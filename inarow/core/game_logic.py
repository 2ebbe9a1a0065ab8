"""Game session: board, players, turn order and outcome."""

import logging
from typing import List, Optional

from .board import Board
from .config import GameConfig
from .errors import GameFinishedError, InvalidPlayersError, InvalidWinLengthError
from .models import Move, Outcome, Player, SessionState, default_players
from .validator import validate_move, validate_position
from .win_detector import check_for_win

logger = logging.getLogger(__name__)


def _check_players(players: List[Player]) -> None:
    if len(players) != 2:
        raise InvalidPlayersError(f"Exactly two players are required, got {len(players)}")
    for player in players:
        mark = player.mark
        if not isinstance(mark, str) or len(mark) != 1 or mark.isspace():
            raise InvalidPlayersError(f"Player mark must be a single visible character, got {mark!r}")
    if players[0].mark == players[1].mark:
        raise InvalidPlayersError(f"Players must have different marks, both are {players[0].mark!r}")


class GameSession:
    """One game between two players.

    Moves go through validate() (or play()) before apply_move(), so a rejected
    move never changes the session. A new session is needed to play again;
    passing the same Player objects keeps their win counts.
    """

    def __init__(self, players: Optional[List[Player]] = None, board_size: int = 3, win_length: int = 3):
        self.board = Board(board_size)
        if isinstance(win_length, bool) or not isinstance(win_length, int) or not 1 <= win_length <= board_size:
            raise InvalidWinLengthError(f"Win length must be between 1 and {board_size}, got {win_length!r}")
        players = list(players) if players is not None else default_players()
        _check_players(players)

        self.players = players
        self.win_length = win_length
        self.turn = 0
        self.state = SessionState.AWAITING_MOVE
        self.move_count = 0
        self._last_mover: Optional[Player] = None

        logger.info(
            f"New session: {board_size}x{board_size} board, {win_length} in a row, "
            f"players {players[0].mark} and {players[1].mark}"
        )

    @classmethod
    def from_config(cls, config: GameConfig, players: Optional[List[Player]] = None) -> "GameSession":
        config.validate()
        return cls(players, board_size=config.board_size, win_length=config.win_length)

    @property
    def current_player(self) -> Player:
        """The player who moves next."""
        return self.players[self.turn]

    @property
    def last_mover(self) -> Optional[Player]:
        """The player who made the most recent placement."""
        return self._last_mover

    @property
    def remaining_empty_cells(self) -> int:
        return self.board.empty_cells

    @property
    def is_finished(self) -> bool:
        return self.state is SessionState.FINISHED

    def _ensure_open(self) -> None:
        if self.is_finished:
            raise GameFinishedError("The game is over. Start a new session to play again.")

    def validate(self, raw: str) -> Move:
        """Check raw input against this board without changing anything."""
        self._ensure_open()
        return validate_move(raw, self.board)

    def apply_move(self, move: Move) -> Outcome:
        """Place the current player's mark and evaluate the result."""
        self._ensure_open()
        validate_position(move.row, move.col, self.board)

        # The mover is captured before the turn flips; the win check is about them.
        mover = self.current_player
        self.board.place(move.row, move.col, mover.mark)
        self.move_count += 1
        self._last_mover = mover
        self.turn = 1 - self.turn
        logger.debug(f"{mover.mark} placed at ({move.row}, {move.col}), {self.remaining_empty_cells} cells left")

        self.state = SessionState.CHECKING
        outcome = check_for_win(self)
        if outcome.is_over:
            self.state = SessionState.FINISHED
            if outcome.is_win:
                logger.info(f"Player {mover.mark} wins after {self.move_count} moves")
            else:
                logger.info(f"Draw after {self.move_count} moves")
        else:
            self.state = SessionState.AWAITING_MOVE
        return outcome

    def play(self, raw: str) -> Outcome:
        """Validate raw input, then commit it."""
        return self.apply_move(self.validate(raw))
