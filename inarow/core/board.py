"""Square game board with emptiness accounting."""

from typing import List, Optional

from .errors import InvalidSizeError, OutOfBoundsError
from .models import EMPTY


class Board:
    """A fixed N x N grid of cells, each holding a mark or EMPTY."""

    def __init__(self, size: int):
        if isinstance(size, bool) or not isinstance(size, int) or size < 1:
            raise InvalidSizeError(f"Board size must be a positive integer, got {size!r}")
        self._size = size
        self._cells: List[List[Optional[str]]] = [[EMPTY for _ in range(size)] for _ in range(size)]
        self._empty_cells = size * size

    @classmethod
    def create(cls, size: int) -> "Board":
        """Create an empty board of the given size."""
        return cls(size)

    @property
    def size(self) -> int:
        return self._size

    @property
    def cells(self) -> List[List[Optional[str]]]:
        """Row-major grid. Treat as read-only; mutate through place()."""
        return self._cells

    @property
    def empty_cells(self) -> int:
        return self._empty_cells

    def in_bounds(self, row: int, col: int) -> bool:
        return 0 <= row < self._size and 0 <= col < self._size

    def get(self, row: int, col: int) -> Optional[str]:
        """Return the mark at (row, col), or EMPTY."""
        if not self.in_bounds(row, col):
            raise OutOfBoundsError(f"({row}, {col}) is outside a {self._size}x{self._size} board")
        return self._cells[row][col]

    def is_empty(self, row: int, col: int) -> bool:
        return self.get(row, col) is EMPTY

    def place(self, row: int, col: int, mark: str) -> None:
        """Put mark at (row, col).

        Occupancy is the validator's job; the empty count only drops when an
        empty cell gets filled.
        """
        if self.is_empty(row, col):
            self._empty_cells -= 1
        self._cells[row][col] = mark

    def is_full(self) -> bool:
        return self._empty_cells == 0

    def __repr__(self) -> str:
        return f"Board(size={self._size}, empty_cells={self._empty_cells})"
