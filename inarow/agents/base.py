"""Base agent class."""

from abc import ABC, abstractmethod
from typing import Optional

from ..core.errors import MoveError
from ..core.game_logic import GameSession
from ..core.models import Player


class Agent(ABC):
    """Abstract base class for anything that supplies moves for a player."""

    def __init__(self, agent_id: str):
        self.agent_id = agent_id
        self.player: Optional[Player] = None  # Will be set when game starts
        self._setup()  # Each agent handles its own setup

    def _setup(self):
        """Internal setup method - override in subclasses if needed."""
        pass

    @abstractmethod
    def get_move(self, session: GameSession) -> str:
        """Return raw move text such as "1,2"."""
        pass

    def on_invalid_move(self, error: MoveError) -> None:
        """Called when the last move was rejected; get_move() is asked again."""
        pass
