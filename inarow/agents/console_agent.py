"""Agent that reads moves from the terminal."""

import click

from ..core.errors import MoveError
from ..core.game_logic import GameSession
from .base import Agent


class ConsoleAgent(Agent):
    """Human player typing "row,col" at a prompt."""

    def get_move(self, session: GameSession) -> str:
        return click.prompt("(row, col)", prompt_suffix=": ", default="", show_default=False)

    def on_invalid_move(self, error: MoveError) -> None:
        click.echo(f"{error}...Please try it again...")
