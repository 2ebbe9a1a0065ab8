"""Agent that replays a fixed list of moves."""

from typing import Iterable, List

from ..core.errors import AgentExhaustedError, MoveError
from ..core.game_logic import GameSession
from .base import Agent


class ScriptedAgent(Agent):
    """Plays the given raw moves in order - handy for demos and tests."""

    def __init__(self, agent_id: str, moves: Iterable[str]):
        self._moves: List[str] = list(moves)
        self.rejected: List[MoveError] = []
        super().__init__(agent_id)

    def _setup(self):
        self._next = 0

    @property
    def remaining(self) -> int:
        return len(self._moves) - self._next

    def get_move(self, session: GameSession) -> str:
        if self._next >= len(self._moves):
            raise AgentExhaustedError(f"Agent {self.agent_id} has no moves left")
        move = self._moves[self._next]
        self._next += 1
        return move

    def on_invalid_move(self, error: MoveError) -> None:
        self.rejected.append(error)
