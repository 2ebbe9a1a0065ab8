from typing import List

import pytest

from inarow.core.game_logic import GameSession
from inarow.core.models import Player


@pytest.fixture
def players() -> List[Player]:
    return [Player("X"), Player("O")]


@pytest.fixture
def tic_tac_toe(players: List[Player]) -> GameSession:
    return GameSession(players, board_size=3, win_length=3)


@pytest.fixture
def gomoku(players: List[Player]) -> GameSession:
    return GameSession(players, board_size=10, win_length=5)


class EchoRecorder:
    """Collects everything the arena would print."""

    def __init__(self) -> None:
        self.lines: List[str] = []

    def __call__(self, message: str = "") -> None:
        self.lines.append(message)

    @property
    def text(self) -> str:
        return "\n".join(self.lines)


@pytest.fixture
def echo() -> EchoRecorder:
    return EchoRecorder()
