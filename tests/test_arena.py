import pytest

from inarow.agents import ScriptedAgent
from inarow.arena import GameArena
from inarow.core.config import GameConfig, get_game_config
from inarow.core.errors import AgentExhaustedError, CellTakenError, InvalidWinLengthError, MalformedMoveError
from inarow.core.models import GameResult, Player
from inarow.utils.visualization import ColorBoardFormatter, SimpleBoardFormatter


class TestRunGame:
    """Games driven by scripted agents."""

    def test_tic_tac_toe_win(self, echo) -> None:
        arena = GameArena(get_game_config("tic-tac-toe"), echo=echo)
        result = arena.run_game(
            ScriptedAgent("alice", ["0,0", "0,1", "0,2"]),
            ScriptedAgent("bob", ["1,1", "1,0"]),
        )
        assert result["winner"] == "X"
        assert result["winner_agent"] == "alice"
        assert result["result"] is GameResult.WIN
        assert result["moves"] == 5
        assert result["winning_sequence"] == [(0, 0), (0, 1), (0, 2)]
        assert result["final_board"][0] == ["X", "X", "X"]
        assert "Player X's turn. Pick a cell." in echo.lines
        assert "Player O's turn. Pick a cell." in echo.lines
        assert "Player X wins!" in echo.lines
        assert "Player X: 1" in echo.text

    def test_rejected_moves_are_retried(self, echo) -> None:
        arena = GameArena(get_game_config("tic-tac-toe"), echo=echo)
        bob = ScriptedAgent("bob", ["abc", "0,0", "1,1", "1,0"])
        result = arena.run_game(ScriptedAgent("alice", ["0,0", "0,1", "0,2"]), bob)
        assert result["rejected_moves"] == 2
        assert [type(e) for e in bob.rejected] == [MalformedMoveError, CellTakenError]
        assert result["moves"] == 5
        assert result["winner"] == "X"
        assert bob.remaining == 0

    def test_huge_number_is_retried(self, echo) -> None:
        arena = GameArena(get_game_config("tic-tac-toe"), echo=echo)
        alice = ScriptedAgent("alice", ["9" * 5000 + ",1", "0,0", "0,1", "0,2", "2,2"])
        result = arena.run_game(alice, ScriptedAgent("bob", ["1,1", "1,0"]))
        assert result["rejected_moves"] == 1
        assert len(alice.rejected) == 1
        assert result["winner"] == "X"
        assert alice.remaining == 1

    def test_draw_is_counted(self, echo) -> None:
        arena = GameArena(get_game_config("tic-tac-toe"), echo=echo)
        result = arena.run_game(
            ScriptedAgent("alice", ["0,0", "0,2", "1,0", "2,1", "2,2"]),
            ScriptedAgent("bob", ["0,1", "1,1", "1,2", "2,0"]),
        )
        assert result["winner"] is None
        assert result["result"] is GameResult.DRAW
        assert result["reason"] == "Board full"
        assert arena.draws == 1
        assert arena.games_played == 1
        assert "The game is tied!" in echo.lines

    def test_quiet_game_prints_nothing(self, echo) -> None:
        arena = GameArena(get_game_config("gomoku"), echo=echo)
        result = arena.run_game(
            ScriptedAgent("alice", ["2,2", "2,3", "2,4", "2,5", "2,6"]),
            ScriptedAgent("bob", ["7,7", "7,8", "8,8", "9,9"]),
            verbose=False,
        )
        assert result["winner"] == "X"
        assert result["reason"] == "5 in a row"
        assert echo.lines == []

    def test_exhausted_agent(self, echo) -> None:
        arena = GameArena(get_game_config("tic-tac-toe"), echo=echo)
        with pytest.raises(AgentExhaustedError):
            arena.run_game(ScriptedAgent("alice", ["0,0"]), ScriptedAgent("bob", []), verbose=False)


class TestScoreboard:
    """Wins carried across replays."""

    def test_replays_reuse_players(self, echo) -> None:
        players = [Player("X"), Player("O")]
        arena = GameArena(get_game_config("tic-tac-toe"), players=players, formatter=SimpleBoardFormatter(), echo=echo)
        for _ in range(2):
            arena.run_game(ScriptedAgent("a", ["0,0", "0,1", "0,2"]), ScriptedAgent("b", ["1,1", "1,0"]), verbose=False)
        arena.run_game(ScriptedAgent("a", ["0,0", "0,1", "2,2"]), ScriptedAgent("b", ["1,0", "1,1", "1,2"]), verbose=False)
        assert arena.standings() == {"X": 2, "O": 1}
        assert arena.games_played == 3
        assert players[0].total_wins == 2
        assert "Player O: 1" in arena.report()

    def test_new_session_has_fresh_board(self) -> None:
        arena = GameArena(get_game_config("gomoku"))
        first = arena.new_session()
        first.play("0,0")
        second = arena.new_session()
        assert second.remaining_empty_cells == 100
        assert all(a is b for a, b in zip(second.players, arena.players))

    def test_formatter_knows_player_order(self) -> None:
        formatter = ColorBoardFormatter()
        GameArena(get_game_config("tic-tac-toe"), players=[Player("@"), Player("#")], formatter=formatter)
        assert formatter.marks == ("@", "#")

    def test_invalid_config_rejected(self) -> None:
        with pytest.raises(InvalidWinLengthError):
            GameArena(GameConfig("bad", board_size=3, win_length=4))
