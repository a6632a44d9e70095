"""
Tic-Tac-Toe Web Interface

A Flask web application for playing tic-tac-toe on configurable board sizes.
"""

import os
import logging
import secrets
from flask import Flask, render_template, request, jsonify, session
from typing import Dict, Any, Optional

from tictactoe import GameController, Player, Token, MoveStatus, DEFAULT_DIMENSION, MAX_DIMENSION

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

app = Flask(__name__)
app.secret_key = os.environ.get('TICTACTOE_SECRET_KEY', 'tictactoe_secret_key_change_in_production')

# Global storage for game instances, one per browser session
games: Dict[str, GameController] = {}


def new_game_id() -> str:
    return secrets.token_hex(8)


def get_game() -> GameController:
    """Get or create a game instance from the session."""
    if 'game_id' not in session or session['game_id'] not in games:
        game_id = new_game_id()
        games[game_id] = GameController(dimension=DEFAULT_DIMENSION)
        session['game_id'] = game_id
        logger.info("Created game %s", game_id)
    return games[session['game_id']]


def serialize_player(player: Optional[Player]) -> Optional[Dict[str, str]]:
    if player is None:
        return None
    return {'name': player.name, 'token': str(player.token)}


def serialize_game_state(game: GameController) -> Dict[str, Any]:
    """Convert game state to JSON-serializable format."""
    return {
        'board': [[str(token) for token in row] for row in game.get_board_snapshot()],
        'dimension': game.dimension,
        'active_player': serialize_player(game.get_active_player()),
        'game_state': game.get_game_state().value,
        'winner': serialize_player(game.get_winner()),
        'is_game_over': game.is_game_over(),
        'status_text': game.status_text(),
    }


@app.route('/')
def index():
    """Main game page."""
    return render_template('index.html')


@app.route('/api/game/state')
def get_game_state():
    """Get current game state."""
    return jsonify(serialize_game_state(get_game()))


@app.route('/api/game/move', methods=['POST'])
def make_move():
    """Make a move in the game."""
    data = request.get_json(silent=True) or {}
    row = data.get('row')
    col = data.get('col')

    if row is None or col is None:
        return jsonify({'error': 'Row and column must be specified'}), 400

    game = get_game()
    outcome = game.play_round(row, col)

    if outcome.status == MoveStatus.REJECTED:
        response = serialize_game_state(game)
        response['error'] = f'Invalid move: {outcome.reason.value}'
        return jsonify(response), 400

    response = serialize_game_state(game)
    response['outcome'] = outcome.status.value
    return jsonify(response)


@app.route('/api/game/reset', methods=['POST'])
def reset_game():
    """Reset the current game."""
    game = get_game()
    game.reset()
    return jsonify(serialize_game_state(game))


@app.route('/api/game/new', methods=['POST'])
def new_game():
    """Create a new game with specified settings."""
    data = request.get_json(silent=True) or {}

    dimension = data.get('dimension', DEFAULT_DIMENSION)
    player_one = data.get('player_one', 'Player 1')
    player_two = data.get('player_two', 'Player 2')

    if not isinstance(dimension, int) or not (1 <= dimension <= MAX_DIMENSION):
        return jsonify({'error': f'Board dimension must be between 1 and {MAX_DIMENSION}'}), 400

    if not isinstance(player_one, str) or not isinstance(player_two, str):
        return jsonify({'error': 'Player names must be strings'}), 400

    try:
        game = GameController(player_one, player_two, dimension=dimension, first_token=Token.O)
    except ValueError as e:
        return jsonify({'error': str(e)}), 400

    old_game_id = session.get('game_id')
    if old_game_id is not None:
        games.pop(old_game_id, None)

    game_id = new_game_id()
    games[game_id] = game
    session['game_id'] = game_id
    logger.info("Created %dx%d game %s", dimension, dimension, game_id)

    return jsonify(serialize_game_state(game))


def main():
    """Run the development server, one request at a time."""
    app.run(debug=True, host='0.0.0.0', port=5000, threaded=False)


if __name__ == '__main__':
    main()
