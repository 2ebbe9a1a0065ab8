"""
Scripted games showing the engine without a terminal prompt.

Plays one tic-tac-toe game (top row for X) and one gomoku game (five across
row 2 for X) through the arena, reusing the same players so the report at the
end shows the accumulated wins.
"""

from inarow import GameArena, ScriptedAgent, get_game_config
from inarow.utils import ColorBoardFormatter


def main():
    print("=== TIC-TAC-TOE ===\n")
    arena = GameArena(get_game_config("tic-tac-toe"), formatter=ColorBoardFormatter())
    result = arena.run_game(
        ScriptedAgent("Player X", ["0,0", "0,1", "0,2"]),
        ScriptedAgent("Player O", ["1,1", "oops", "1,1", "1,0"]),
    )
    print(f"Winner: {result['winner']} in {result['moves']} moves ({result['rejected_moves']} rejected)")

    print("\n=== GOMOKU ===\n")
    gomoku = GameArena(get_game_config("gomoku"), players=arena.players, formatter=ColorBoardFormatter())
    result = gomoku.run_game(
        ScriptedAgent("Player X", ["2,2", "2,3", "2,4", "2,5", "2,6"]),
        ScriptedAgent("Player O", ["7,7", "7,8", "8,8", "9,9"]),
        verbose=False,
    )
    print(f"Winner: {result['winner']} via {result['winning_sequence']}")
    print(gomoku.report())


if __name__ == "__main__":
    main()
