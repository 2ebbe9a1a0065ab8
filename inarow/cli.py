"""Command-line interface: pick a game type, play, and replay."""

import argparse
import logging
import sys
from typing import List, Optional

import click

from .agents import ConsoleAgent
from .arena.game_arena import GameArena
from .core.config import GAME_TYPES, GOMOKU, TIC_TAC_TOE, GameConfig, get_game_config
from .core.errors import ConfigurationError
from .utils.visualization import create_formatter

logger = logging.getLogger(__name__)

GAME_TYPE_MENU = """Which type of board game would you like to create?
1) Tic-Tac-Toe
2) Gomoku (a.k.a. Gobang)
Your choice (type either 1 or 2): """

MENU_CHOICES = {"1": TIC_TAC_TOE, "2": GOMOKU}


def create_parser():
    """Create the argument parser."""
    parser = argparse.ArgumentParser(description="Two-player N-in-a-row board games")

    parser.add_argument(
        "--game",
        choices=sorted(GAME_TYPES.keys()),
        help="Game type (asked interactively when omitted)"
    )
    parser.add_argument(
        "--board-size",
        type=int,
        help="Override the board size of the chosen game type"
    )
    parser.add_argument(
        "--win-length",
        type=int,
        help="Override how many marks in a row win"
    )
    parser.add_argument(
        "--formatter",
        choices=("grid", "simple", "color"),
        default="grid",
        help="Board display style (default: grid)"
    )
    parser.add_argument(
        "--log-level",
        choices=("DEBUG", "INFO", "WARNING", "ERROR"),
        default="WARNING",
        help="Logging level (default: WARNING)"
    )

    return parser


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )


def prompt_for_game_type() -> str:
    """Ask until the answer is 1 or 2."""
    while True:
        choice = click.prompt(GAME_TYPE_MENU, prompt_suffix="", default="", show_default=False)
        if choice.strip() in MENU_CHOICES:
            return MENU_CHOICES[choice.strip()]


def prompt_for_replay() -> bool:
    """Ask until the answer is yes or no."""
    while True:
        answer = click.prompt(
            "Would you like to play again? (yes/no)", prompt_suffix=": ", default="", show_default=False
        )
        if answer == "yes":
            return True
        if answer == "no":
            return False


def build_config(args) -> GameConfig:
    """Preset for the chosen game type with command-line overrides applied."""
    game_type = args.game or prompt_for_game_type()
    return get_game_config(game_type).with_overrides(board_size=args.board_size, win_length=args.win_length)


def play(config: GameConfig, formatter: str = "grid") -> None:
    """Play games of one type until the players stop."""
    arena = GameArena(config, formatter=create_formatter(formatter))
    player_x, player_o = arena.players

    while True:
        click.echo(config.title)
        result = arena.run_game(ConsoleAgent(f"Player {player_x.mark}"), ConsoleAgent(f"Player {player_o.mark}"))
        logger.info(f"Game {arena.games_played} finished: {result['result'].value}, winner {result['winner']}")
        if not prompt_for_replay():
            break

    click.echo("Thanks for playing the game!")


def main(argv: Optional[List[str]] = None) -> int:
    """Main CLI entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)
    configure_logging(args.log_level)

    try:
        config = build_config(args)
    except ConfigurationError as e:
        click.echo(f"Error: {e}", err=True)
        return 2
    except click.Abort:
        click.echo()
        return 1

    try:
        play(config, args.formatter)
    except click.Abort:
        click.echo()
        click.echo("Thanks for playing the game!")
        return 1

    return 0


def run() -> None:
    """Console script entry point."""
    sys.exit(main())


if __name__ == "__main__":
    run()
