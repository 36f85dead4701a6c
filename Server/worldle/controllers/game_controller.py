"""
Game Controller

Handles the game's HTTP endpoints: the page itself, the keypad layout and a
health check. Play happens over Socket.IO.
"""

from flask import Blueprint, jsonify, render_template, request

from ..config.game_settings import MAX_ROUNDS, WORD_LENGTH
from ..models.keypad import Keypad
from ..services.game_service import get_game_service
from ..utils.game_logger import game_logger

game_bp = Blueprint('game', __name__)

_keypad = Keypad()


@game_bp.route('/', methods=['GET'])
def index():
    """Serve the game page."""
    return render_template(
        'index.html',
        rows=MAX_ROUNDS,
        columns=WORD_LENGTH,
        keypad=_keypad,
    )


@game_bp.route('/api/keypad', methods=['GET'])
def keypad_layout():
    """Keypad layout for clients that draw their own keys."""
    return jsonify({'success': True, 'keypad': _keypad.to_dict()})


@game_bp.route('/api/health', methods=['GET'])
def health_check():
    """Health check endpoint."""
    try:
        game_service = get_game_service()

        game_logger.log_user_action(request, 'health_check')

        response_data = {
            'status': 'healthy' if game_service else 'degraded',
            'active_games': len(game_service.games) if game_service else 0,
            'log_stats': game_logger.get_log_stats(),
        }

        game_logger.log_server_response(request, 'health_check', True, response_data)
        return jsonify(response_data)

    except Exception as e:
        game_logger.log_error(request, e, 'health_check')
        error_response = {
            'status': 'error',
            'error': str(e)
        }
        game_logger.log_server_response(request, 'health_check', False, error_response)
        return jsonify(error_response), 500
