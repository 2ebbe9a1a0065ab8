import pytest

from inarow.core.board import Board
from inarow.core.errors import CellTakenError, MalformedMoveError, MoveError, OutOfBoundsError
from inarow.core.models import Move
from inarow.core.validator import parse_move, validate_move, validate_position


class TestParseMove:
    """Raw text to coordinates."""

    @pytest.mark.parametrize(
        "raw, expected",
        [("1,2", (1, 2)), (" 1, 2 ", (1, 2)), ("1 ,2", (1, 2)), ("\t0,\t0\n", (0, 0)), ("10,7", (10, 7))],
    )
    def test_well_formed(self, raw: str, expected) -> None:
        assert parse_move(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        ["abc", "", "1", "1,", ",1", "1,2,3", "1 2", "1.5,2", "a,b", "1;2", "١,٢", "１,２"],
    )
    def test_malformed(self, raw: str) -> None:
        with pytest.raises(MalformedMoveError):
            parse_move(raw)

    def test_non_string_is_malformed(self) -> None:
        with pytest.raises(MalformedMoveError):
            parse_move(None)

    def test_oversized_number_is_rejected(self) -> None:
        """Digits beyond the integer conversion limit still end as a move error."""
        with pytest.raises(MoveError):
            validate_move("1" * 5000 + ",0", Board(3))


class TestValidateMove:
    """The three checks and their order."""

    def test_valid_move(self) -> None:
        board = Board(3)
        assert validate_move("2,1", board) == Move(2, 1)

    def test_garbage_is_malformed(self) -> None:
        with pytest.raises(MalformedMoveError, match="x,y"):
            validate_move("abc", Board(3))

    @pytest.mark.parametrize("raw", ["-1,0", "0,-1", "3,0", "0,3"])
    def test_out_of_bounds(self, raw: str) -> None:
        with pytest.raises(OutOfBoundsError, match="out of bound"):
            validate_move(raw, Board(3))

    def test_cell_taken(self) -> None:
        board = Board(3)
        board.place(1, 1, "X")
        with pytest.raises(CellTakenError, match="already been placed"):
            validate_move("1,1", board)

    def test_errors_share_a_base_class(self) -> None:
        board = Board(3)
        board.place(0, 0, "X")
        for raw in ("nope", "9,9", "0,0"):
            with pytest.raises(MoveError):
                validate_move(raw, board)

    def test_validation_does_not_mutate(self) -> None:
        board = Board(3)
        validate_move("0,0", board)
        assert board.empty_cells == 9
        assert board.get(0, 0) is None

    def test_bounds_checked_before_occupancy(self) -> None:
        board = Board(1)
        board.place(0, 0, "X")
        with pytest.raises(OutOfBoundsError):
            validate_position(1, 0, board)
