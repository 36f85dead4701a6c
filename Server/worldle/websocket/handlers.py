"""
WebSocket Event Handlers

Each browser tab is one Socket.IO session and plays one game. Key presses
arrive as events; everything the engine has to say goes back through a
SocketIORenderer.
"""

from flask import request
from flask_socketio import emit

from ..config.game_settings import MSG_GAME_UNAVAILABLE, UNAVAILABLE_DURATION_MS
from ..models.game import SubmitResult
from ..services.exceptions import SolutionUnavailableError
from ..services.game_service import get_game_service
from ..services.input_router import from_keyboard, from_keypad
from ..utils.game_logger import game_logger
from ..utils.helpers import board_payload
from .renderer import SocketIORenderer


def _event_data(data) -> dict:
    if isinstance(data, dict):
        return data
    if isinstance(data, str):
        return {'key': data}
    return {}


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def route_input(action, command, **details):
        game_service = get_game_service()
        sid = request.sid
        game_logger.log_user_action(request, action, **details)

        if not game_service or game_service.get_game(sid) is None:
            emit('notice', {'text': MSG_GAME_UNAVAILABLE, 'duration_ms': UNAVAILABLE_DURATION_MS})
            return

        result = game_service.handle_input(sid, command)
        if isinstance(result, SubmitResult):
            response_data = {'result': result.value, **board_payload(game_service.get_game(sid))}
            game_logger.log_server_response(
                request, 'submit_row', result != SubmitResult.IGNORED, response_data
            )

    @socketio.on('connect')
    def handle_connect():
        """Start today's game for the new session."""
        game_service = get_game_service()
        game_logger.log_user_action(request, 'connect')

        if not game_service:
            emit('startup_failed', {'message': MSG_GAME_UNAVAILABLE})
            return

        try:
            engine = game_service.create_game(request.sid, SocketIORenderer(socketio, request.sid))
        except SolutionUnavailableError as e:
            game_logger.log_error(request, e, 'connect')
            emit('startup_failed', {'message': MSG_GAME_UNAVAILABLE})
            return

        game_logger.log_game_event(request.sid, 'game_started')
        emit('board', board_payload(engine))

    @socketio.on('disconnect')
    def handle_disconnect(reason=None):
        """Drop the session's game; the page is gone."""
        game_service = get_game_service()
        if game_service and game_service.end_game(request.sid):
            game_logger.log_game_event(request.sid, 'game_closed', reason=str(reason) if reason else None)

    @socketio.on('key')
    def handle_key(data=None):
        """Physical keyboard: {'key': ..., 'code': ...} from a KeyboardEvent."""
        data = _event_data(data)
        command = from_keyboard(key=data.get('key'), code=data.get('code'))
        route_input('key', command, key=data.get('key'), code=data.get('code'))

    @socketio.on('keypad')
    def handle_keypad(data=None):
        """On-screen keypad: {'key': 'GO' | 'DEL' | 'A'..'Z'}."""
        data = _event_data(data)
        route_input('keypad', from_keypad(data.get('key')), key=data.get('key'))

    @socketio.on('state')
    def handle_state(data=None):
        """Resend the whole board, e.g. after the page regains focus."""
        game_service = get_game_service()
        engine = game_service.get_game(request.sid) if game_service else None
        if engine is None:
            emit('startup_failed', {'message': MSG_GAME_UNAVAILABLE})
            return
        emit('board', board_payload(engine))
