"""
Test suite for the tic-tac-toe GameController.

Covers turn handling, rejected moves, wins, draws, reset, and logging.
"""

import logging

import pytest
from tictactoe.board import Token
from tictactoe.game import GameController, GameState, MoveStatus, Player, RejectReason


DRAW_MOVES = [(0, 0), (0, 1), (0, 2), (1, 1), (1, 0), (1, 2), (2, 1), (2, 0), (2, 2)]


def play(game, moves):
    return [game.play_round(row, col) for row, col in moves]


class TestGameInitialization:
    """Test GameController initialization and basic properties."""

    def test_default_initialization(self):
        game = GameController()
        assert game.dimension == 3
        assert game.get_game_state() == GameState.IN_PROGRESS
        assert game.get_active_player() == Player("Player 1", Token.O)
        assert game.players[1] == Player("Player 2", Token.X)
        assert game.get_winner() is None
        assert game.move_count == 0

    def test_custom_initialization(self):
        game = GameController("Ada", "Grace", dimension=5, first_token=Token.X)
        assert game.dimension == 5
        assert game.players[0] == Player("Ada", Token.X)
        assert game.players[1] == Player("Grace", Token.O)
        assert len(game.get_board_snapshot()) == 5

    def test_invalid_initialization(self):
        with pytest.raises(ValueError):
            GameController(dimension=0)

        with pytest.raises(ValueError):
            GameController(first_token=Token.EMPTY)

    def test_players_are_immutable(self):
        game = GameController()
        with pytest.raises(AttributeError):
            game.players[0].name = "Someone else"


class TestPlayingRounds:
    """Test move execution and turn switching."""

    def test_simple_move(self):
        game = GameController()
        outcome = game.play_round(1, 1)

        assert outcome.status == MoveStatus.CONTINUE
        assert outcome.accepted is True
        assert outcome.player.token is Token.O
        assert game.get_board_snapshot()[1][1] is Token.O
        assert game.get_active_player().token is Token.X
        assert game.move_count == 1

    def test_players_alternate(self):
        game = GameController()
        play(game, [(0, 0), (1, 1), (2, 2)])

        snapshot = game.get_board_snapshot()
        assert snapshot[0][0] is Token.O
        assert snapshot[1][1] is Token.X
        assert snapshot[2][2] is Token.O
        assert game.get_active_player().token is Token.X

    def test_occupied_cell_rejected(self):
        game = GameController()
        game.play_round(0, 0)

        outcome = game.play_round(0, 0)

        assert outcome.status == MoveStatus.REJECTED
        assert outcome.reason == RejectReason.CELL_OCCUPIED
        assert outcome.accepted is False
        assert game.get_active_player().token is Token.X
        assert game.get_board_snapshot()[0][0] is Token.O
        assert game.move_count == 1

    @pytest.mark.parametrize("row, col", [(-1, 0), (0, 3), (3, 3), (None, 1), ("1", "1"), (0.5, 0)])
    def test_bad_coordinates_rejected(self, row, col):
        game = GameController()
        before = game.get_board_snapshot()

        outcome = game.play_round(row, col)

        assert outcome.status == MoveStatus.REJECTED
        assert outcome.reason == RejectReason.OUT_OF_BOUNDS
        assert game.get_active_player().token is Token.O
        assert game.get_board_snapshot() == before
        assert game.get_game_state() == GameState.IN_PROGRESS

    def test_get_cell(self):
        game = GameController()
        game.play_round(2, 0)
        assert game.get_cell(2, 0).value is Token.O


class TestGameEnd:
    """Test wins, draws, and the terminal state."""

    def test_win_keeps_winner_active(self):
        game = GameController()
        outcomes = play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])

        assert [o.status for o in outcomes] == [MoveStatus.CONTINUE] * 4 + [MoveStatus.WIN]
        assert outcomes[-1].winner == game.players[0]
        assert game.get_game_state() == GameState.OVER
        assert game.is_game_over() is True
        assert game.get_winner() == game.players[0]
        assert game.get_active_player() == game.players[0]
        assert game.status_text() == "Player O wins!"

    def test_second_player_wins_diagonal(self):
        game = GameController()
        play(game, [(0, 1), (0, 0), (0, 2), (1, 1), (1, 0), (2, 2)])

        assert game.get_winner() == game.players[1]
        assert game.get_active_player().token is Token.X

    def test_move_after_win_rejected(self):
        game = GameController()
        play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])
        before = game.get_board_snapshot()

        outcome = game.play_round(2, 2)

        assert outcome.status == MoveStatus.REJECTED
        assert outcome.reason == RejectReason.GAME_OVER
        assert game.get_game_state() == GameState.OVER
        assert game.get_active_player() == game.players[0]
        assert game.get_winner() == game.players[0]
        assert game.get_board_snapshot() == before

    def test_draw(self):
        game = GameController()
        outcomes = play(game, DRAW_MOVES)

        assert outcomes[-1].status == MoveStatus.DRAW
        assert outcomes[-1].winner is None
        assert all(o.status == MoveStatus.CONTINUE for o in outcomes[:-1])
        assert game.get_game_state() == GameState.OVER
        assert game.get_winner() is None
        assert game.is_draw() is True
        assert game.status_text() == "It's a draw!"

    def test_move_after_draw_rejected(self):
        game = GameController()
        play(game, DRAW_MOVES)
        outcome = game.play_round(0, 0)
        assert outcome.reason == RejectReason.GAME_OVER

    def test_win_on_last_cell_is_not_a_draw(self):
        game = GameController()
        # O completes the main diagonal with the ninth token, which also fills the board
        outcomes = play(game, [(0, 0), (0, 1), (0, 2), (2, 0), (1, 1), (1, 0), (2, 1), (1, 2), (2, 2)])

        assert [o.status for o in outcomes] == [MoveStatus.CONTINUE] * 8 + [MoveStatus.WIN]
        assert game.move_count == 9
        assert all(cell is not Token.EMPTY for row in game.get_board_snapshot() for cell in row)
        assert game.get_winner() == game.players[0]
        assert game.is_draw() is False
        assert game.status_text() == "Player O wins!"

    def test_single_cell_board(self):
        game = GameController(dimension=1)
        outcome = game.play_round(0, 0)
        assert outcome.status == MoveStatus.WIN
        assert game.get_winner() == game.players[0]


class TestReset:
    """Test game reset."""

    def test_reset_functionality(self):
        game = GameController()
        play(game, [(0, 0), (1, 0), (0, 1), (1, 1), (0, 2)])

        game.reset()

        assert game.get_active_player() == game.players[0]
        assert game.get_game_state() == GameState.IN_PROGRESS
        assert game.get_winner() is None
        assert game.move_count == 0
        assert all(cell is Token.EMPTY for row in game.get_board_snapshot() for cell in row)
        assert game.play_round(0, 0).status == MoveStatus.CONTINUE

    def test_reset_is_idempotent(self):
        game = GameController()
        play(game, [(0, 0), (1, 1)])

        game.reset()
        once = (game.get_board_snapshot(), game.get_active_player(), game.get_game_state(), game.get_winner())
        game.reset()
        twice = (game.get_board_snapshot(), game.get_active_player(), game.get_game_state(), game.get_winner())

        assert once == twice


class TestLogging:
    """Test the logging hooks."""

    def test_injected_logger_receives_results(self, caplog):
        log = logging.getLogger("tictactoe.tests.injected")
        game = GameController(logger=log)

        with caplog.at_level(logging.DEBUG, logger="tictactoe.tests.injected"):
            game.play_round(0, 0)
            game.play_round(0, 0)
            play(game, [(1, 0), (0, 1), (1, 1), (0, 2)])

        records = [r for r in caplog.records if r.name == "tictactoe.tests.injected"]
        messages = [r.getMessage() for r in records]
        assert any("rejected: cell_occupied" in m for m in messages)
        assert any("Player 1 (O) wins after 5 moves" in m for m in messages)

    def test_default_logger(self, caplog):
        game = GameController()
        with caplog.at_level(logging.INFO, logger="tictactoe.game"):
            game.reset()
        assert "Game reset, Player 1 to move" in caplog.text

    def test_string_representation(self):
        game = GameController()
        game.play_round(0, 0)
        text = str(game)
        assert "|O| | |" in text
        assert text.endswith("Player X's turn")
