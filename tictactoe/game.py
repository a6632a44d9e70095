"""
Tic-Tac-Toe Game Controller

Runs a two-player game on a Board: validates each move, checks for a win or
a draw after it, and hands the turn to the other player.
"""

from typing import List, Optional, Union
from dataclasses import dataclass
from enum import Enum
import logging

from .board import Board, Cell, MoveResult, Token, DEFAULT_DIMENSION


@dataclass(frozen=True)
class Player:
    """A player and the token they place."""
    name: str
    token: Token


class GameState(Enum):
    """Enumeration for game states."""
    IN_PROGRESS = "in_progress"
    OVER = "over"


class MoveStatus(Enum):
    """Enumeration for what a round led to."""
    CONTINUE = "continue"
    WIN = "win"
    DRAW = "draw"
    REJECTED = "rejected"


class RejectReason(Enum):
    """Enumeration for why a move was declined."""
    OUT_OF_BOUNDS = "out_of_bounds"
    CELL_OCCUPIED = "cell_occupied"
    GAME_OVER = "game_over"


@dataclass(frozen=True)
class MoveOutcome:
    """
    Result of a single call to GameController.play_round.

    Attributes:
        status (MoveStatus): What the round led to
        player (Player): The player who moved, or whose move was declined
        reason (Optional[RejectReason]): Why the move was declined, if it was
    """
    status: MoveStatus
    player: Player
    reason: Optional[RejectReason] = None

    @property
    def accepted(self) -> bool:
        return self.status is not MoveStatus.REJECTED

    @property
    def winner(self) -> Optional[Player]:
        return self.player if self.status is MoveStatus.WIN else None


class GameController:
    """
    Two-player game on a square board.

    Attributes:
        players (tuple): The two players, first mover first
        active_player (Player): The player whose move is expected
        game_state (GameState): Current state of the game
        move_count (int): Number of tokens placed since the last reset
    """

    def __init__(self, player_one: str = "Player 1", player_two: str = "Player 2",
                 dimension: int = DEFAULT_DIMENSION, first_token: Token = Token.O,
                 logger: Optional[logging.Logger] = None):
        """
        Initialize a new game.

        Args:
            player_one (str): Name of the first player (default: "Player 1")
            player_two (str): Name of the second player (default: "Player 2")
            dimension (int): Size of the board (default: 3)
            first_token (Token): Token of the first player; the second player gets the other one
            logger (Optional[logging.Logger]): Logger for move and result messages

        Raises:
            ValueError: If the board dimension is invalid or first_token is Token.EMPTY
        """
        if first_token is Token.EMPTY:
            raise ValueError("Players cannot use the empty token")

        second_token = Token.X if first_token is Token.O else Token.O
        self._board = Board(dimension)
        self.players = (Player(player_one, first_token), Player(player_two, second_token))
        self.active_player = self.players[0]
        self.game_state = GameState.IN_PROGRESS
        self.move_count = 0
        self._winner: Optional[Player] = None
        self.logger = logger if logger is not None else logging.getLogger(__name__)

    @property
    def dimension(self) -> int:
        return self._board.dimension

    def get_board_snapshot(self) -> List[List[Token]]:
        """Get a copy of the board for rendering."""
        return self._board.get_board()

    def get_active_player(self) -> Player:
        return self.active_player

    def get_game_state(self) -> GameState:
        return self.game_state

    def get_winner(self) -> Optional[Player]:
        """
        Get the winner of the game.

        Returns:
            Optional[Player]: The winning player, or None if no winner yet or the game was a draw
        """
        return self._winner

    def get_cell(self, row: int, col: int) -> Union[Cell, MoveResult]:
        return self._board.get_cell(row, col)

    def is_game_over(self) -> bool:
        return self.game_state is GameState.OVER

    def is_draw(self) -> bool:
        return self.is_game_over() and self._winner is None

    def _switch_player(self) -> None:
        self.active_player = self.players[1] if self.active_player is self.players[0] else self.players[0]

    def play_round(self, row: int, col: int) -> MoveOutcome:
        """
        Play the active player's token at (row, col).

        A declined move changes nothing. After a winning move or a draw the
        active player is not switched, so the winner stays the active player.

        Args:
            row (int): Row index (0-based)
            col (int): Column index (0-based)

        Returns:
            MoveOutcome: What the round led to
        """
        player = self.active_player

        if self.is_game_over():
            self.logger.debug("Move (%s, %s) by %s rejected: game is over", row, col, player.name)
            return MoveOutcome(MoveStatus.REJECTED, player, RejectReason.GAME_OVER)

        result = self._board.drop_token(row, col, player.token)
        if result is not MoveResult.SUCCESS:
            reason = RejectReason(result.value)
            self.logger.debug("Move (%s, %s) by %s rejected: %s", row, col, player.name, reason.value)
            return MoveOutcome(MoveStatus.REJECTED, player, reason)

        self.move_count += 1
        self.logger.debug("%s placed %s at (%s, %s)\n%s", player.name, player.token.name, row, col, self._board)

        if self._board.check_win(player.token):
            self.game_state = GameState.OVER
            self._winner = player
            self.logger.info("%s (%s) wins after %d moves", player.name, player.token.name, self.move_count)
            return MoveOutcome(MoveStatus.WIN, player)

        if self._board.is_full():
            self.game_state = GameState.OVER
            self.logger.info("Game ended in a draw after %d moves", self.move_count)
            return MoveOutcome(MoveStatus.DRAW, player)

        self._switch_player()
        return MoveOutcome(MoveStatus.CONTINUE, player)

    def reset(self) -> None:
        """Reset the game to initial state."""
        self.active_player = self.players[0]
        self.game_state = GameState.IN_PROGRESS
        self.move_count = 0
        self._winner = None
        self._board.clear()
        self.logger.info("Game reset, %s to move", self.active_player.name)

    def status_text(self) -> str:
        """Text for the turn / result banner."""
        if self.is_draw():
            return "It's a draw!"
        if self.is_game_over():
            return f"Player {self.active_player.token.name} wins!"
        return f"Player {self.active_player.token.name}'s turn"

    def __str__(self) -> str:
        """
        String representation of the game.

        Returns:
            str: The board followed by the turn or result
        """
        return f"{self._board}\n{self.status_text()}"
