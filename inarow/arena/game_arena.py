"""Game arena for running games and keeping the scoreboard."""

import logging
import time
from typing import Callable, Dict, List, Optional

import click

from ..agents.base import Agent
from ..core.config import GameConfig
from ..core.errors import MoveError
from ..core.game_logic import GameSession
from ..core.models import GameResult, Player, default_players
from ..utils.visualization import BoardFormatter, GridBoardFormatter, format_outcome, format_standings

logger = logging.getLogger(__name__)


class GameArena:
    """Runs games of one type between two agents.

    The arena owns the Player objects and hands the same ones to every new
    session, so win counts accumulate across replays.
    """

    def __init__(
        self,
        config: GameConfig,
        players: Optional[List[Player]] = None,
        formatter: Optional[BoardFormatter] = None,
        echo: Callable[[str], None] = click.echo,
    ):
        self.config = config.validate()
        self.players = players if players is not None else default_players()
        self.formatter = formatter or GridBoardFormatter()
        self.formatter.bind_players(self.players)
        self.echo = echo
        self.games_played = 0
        self.draws = 0

    def new_session(self) -> GameSession:
        """Fresh board, same players."""
        return GameSession.from_config(self.config, self.players)

    def board_to_string(self, session: GameSession) -> str:
        return self.formatter.format_board(session.board)

    def run_game(self, agent1: Agent, agent2: Agent, verbose: bool = True) -> Dict:
        """Run a complete game; agent1 plays the first player."""
        session = self.new_session()
        agent1.player, agent2.player = session.players
        agents = {id(session.players[0]): agent1, id(session.players[1]): agent2}
        start_time = time.time()
        rejected = 0

        while True:
            current_agent = agents[id(session.current_player)]

            if verbose:
                self.echo(self.board_to_string(session))
                self.echo(f"Player {session.current_player.mark}'s turn. Pick a cell.")

            raw = current_agent.get_move(session)
            try:
                move = session.validate(raw)
            except MoveError as e:
                logger.warning(f"Rejected move {raw!r} from {current_agent.agent_id}: {e}")
                rejected += 1
                current_agent.on_invalid_move(e)
                continue

            outcome = session.apply_move(move)
            if outcome.is_over:
                break

        self.games_played += 1
        if outcome.is_draw:
            self.draws += 1

        if verbose:
            # Show how the game is won.
            self.echo(self.formatter.format_board_with_highlights(session.board, outcome.winning_sequence))
            self.echo(format_outcome(outcome))
            self.echo(self.report())

        return {
            "winner": outcome.winning_mark,
            "winner_agent": agents[id(outcome.winner)].agent_id if outcome.winner is not None else None,
            "result": outcome.result,
            "reason": f"{self.config.win_length} in a row" if outcome.result is GameResult.WIN else "Board full",
            "moves": session.move_count,
            "rejected_moves": rejected,
            "final_board": [row[:] for row in session.board.cells],
            "winning_sequence": outcome.winning_sequence,
            "total_time": time.time() - start_time,
        }

    def standings(self) -> Dict[str, int]:
        """Total wins per mark."""
        return {player.mark: player.total_wins for player in self.players}

    def report(self) -> str:
        return format_standings(self.players)
