"""
Tic-Tac-Toe Board Implementation

A square n x n board for generalized tic-tac-toe. A player wins by filling a
full line of n cells horizontally, vertically, or diagonally.
"""

from typing import List, Union
from enum import Enum
import numpy as np


DEFAULT_DIMENSION = 3
MAX_DIMENSION = 32

# The 8 compass directions as (row delta, column delta)
DIRECTIONS = [
    (-1, 0), (-1, 1), (0, 1), (1, 1),
    (1, 0), (1, -1), (0, -1), (-1, -1),
]


class Token(Enum):
    """Enumeration for the marks a cell can hold."""
    EMPTY = 0
    O = 1
    X = 2

    def __str__(self) -> str:
        return "" if self is Token.EMPTY else self.name


class MoveResult(Enum):
    """Enumeration for the result of dropping a token on the board."""
    SUCCESS = "success"
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"


class Cell:
    """
    A single cell of the board.

    The cell does not copy its value: it reads and writes the board's
    matrix at its own coordinates, so a change made through a Cell is
    visible on the board and vice versa.
    """

    def __init__(self, board: np.ndarray, row: int, col: int):
        self._board = board
        self.row = row
        self.col = col

    @property
    def value(self) -> Token:
        return Token(int(self._board[self.row, self.col]))

    @value.setter
    def value(self, token: Token) -> None:
        self._board[self.row, self.col] = token.value

    def is_empty(self) -> bool:
        return self.value is Token.EMPTY

    def __repr__(self) -> str:
        return f"Cell(row={self.row}, col={self.col}, value={self.value.name})"


class Board:
    """
    Square game board.

    The board is stored as a numpy integer matrix holding Token values:
    - 0 represents an empty cell
    - 1 represents an O
    - 2 represents an X

    Attributes:
        dimension (int): Number of rows and columns, and the run length needed to win
        board (np.ndarray): The (dimension, dimension) matrix of token values
    """

    def __init__(self, dimension: int = DEFAULT_DIMENSION):
        """
        Initialize an empty board.

        Args:
            dimension (int): Size of the board (default: 3)

        Raises:
            ValueError: If dimension is not an integer between 1 and MAX_DIMENSION
        """
        if isinstance(dimension, bool) or not isinstance(dimension, (int, np.integer)):
            raise ValueError("Board dimension must be an integer")
        if dimension < 1:
            raise ValueError("Board dimension must be at least 1")
        if dimension > MAX_DIMENSION:
            raise ValueError(f"Board dimension cannot exceed {MAX_DIMENSION}")

        self.dimension = int(dimension)
        self.board = np.zeros((self.dimension, self.dimension), dtype=int)

    def in_bounds(self, row: int, col: int) -> bool:
        """
        Check whether (row, col) lies on the board.

        Non-integer coordinates are never on the board.
        """
        for value in (row, col):
            if isinstance(value, bool) or not isinstance(value, (int, np.integer)):
                return False
        return 0 <= row < self.dimension and 0 <= col < self.dimension

    def get_cell(self, row: int, col: int) -> Union[Cell, MoveResult]:
        """
        Get the cell at (row, col).

        Returns:
            Union[Cell, MoveResult]: The cell, or MoveResult.OUT_OF_BOUNDS
        """
        if not self.in_bounds(row, col):
            return MoveResult.OUT_OF_BOUNDS
        return Cell(self.board, int(row), int(col))

    def drop_token(self, row: int, col: int, token: Token) -> MoveResult:
        """
        Place a token in the cell at (row, col).

        The board is left untouched unless the move succeeds.

        Args:
            row (int): Row index (0-based)
            col (int): Column index (0-based)
            token (Token): The mark to place

        Returns:
            MoveResult: SUCCESS, OUT_OF_BOUNDS or CELL_OCCUPIED

        Raises:
            ValueError: If token is Token.EMPTY
        """
        if token is Token.EMPTY:
            raise ValueError("Cannot drop an empty token")

        cell = self.get_cell(row, col)
        if cell is MoveResult.OUT_OF_BOUNDS:
            return MoveResult.OUT_OF_BOUNDS
        if not cell.is_empty():
            return MoveResult.CELL_OCCUPIED

        cell.value = token
        return MoveResult.SUCCESS

    def check_win(self, token: Token) -> bool:
        """
        Check if token holds a full line of the board.

        Every cell holding the token is used as a starting point and walked
        in all 8 directions. Runs are found several times over from different
        starting cells, which is fine for boards this small.

        Args:
            token (Token): The mark to check

        Returns:
            bool: True if a run of length >= dimension exists, False otherwise
        """
        if token is Token.EMPTY:
            return False

        for r, c in zip(*np.nonzero(self.board == token.value)):
            for dr, dc in DIRECTIONS:
                if self._run_length(int(r), int(c), token, dr, dc) >= self.dimension:
                    return True
        return False

    def _run_length(self, row: int, col: int, token: Token, dr: int, dc: int) -> int:
        """Count consecutive cells holding token from (row, col) along (dr, dc)."""
        count = 0
        r, c = row, col
        while (count < self.dimension and 0 <= r < self.dimension and
               0 <= c < self.dimension and self.board[r, c] == token.value):
            count += 1
            r, c = r + dr, c + dc
        return count

    def is_full(self) -> bool:
        """Check if no empty cell is left."""
        return not np.any(self.board == Token.EMPTY.value)

    def clear(self) -> None:
        """Reset every cell to empty."""
        self.board.fill(Token.EMPTY.value)

    def get_board(self) -> List[List[Token]]:
        """
        Get a copy of the current board state.

        Returns:
            List[List[Token]]: A copy of the board
        """
        return [[Token(value) for value in row] for row in self.board.tolist()]

    def __str__(self) -> str:
        """
        String representation of the board.

        Returns:
            str: Visual representation of the board
        """
        result = []

        col_numbers = " ".join(str(i % 10) for i in range(self.dimension))
        result.append(f" {col_numbers}")
        result.append("+" + "-" * (2 * self.dimension - 1) + "+")

        for row in self.board:
            row_str = "|"
            for cell in row:
                row_str += Token(int(cell)).name if cell else " "
                row_str += "|"
            result.append(row_str)

        result.append("+" + "-" * (2 * self.dimension - 1) + "+")
        return "\n".join(result)
