"""
Hello Worldle Application Package

A daily five-letter word puzzle. Flask serves the page, and each browser tab
plays its own game over Socket.IO.
"""

from flask import Flask
from flask_cors import CORS
from flask_socketio import SocketIO
from .config import Config


def create_app(config_class=Config, word_provider=None, validator=None):
    """
    Application factory pattern for creating Flask app instances.

    Args:
        config_class: Configuration class to use
        word_provider: WordProvider to use instead of the configured one
        validator: DictionaryValidator to use instead of the configured one

    Returns:
        Flask application instance and its SocketIO extension
    """
    from .services.dictionary import create_dictionary_validator
    from .services.game_service import initialize_game_service
    from .services.word_provider import create_word_provider

    app = Flask(__name__)
    app.config.from_object(config_class)

    # Initialize extensions
    CORS(app)
    socketio = SocketIO(app, cors_allowed_origins="*", async_mode='threading', async_handlers=False,
                        logger=False, engineio_logger=False)

    # Game service with its two external collaborators
    initialize_game_service(
        word_provider or create_word_provider(app.config),
        validator or create_dictionary_validator(app.config),
    )

    # Register blueprints
    from .controllers.game_controller import game_bp
    app.register_blueprint(game_bp)

    # Register WebSocket handlers
    from .websocket.handlers import register_websocket_handlers
    register_websocket_handlers(socketio)

    # Store socketio instance for use in other modules
    app.socketio = socketio

    return app, socketio
