"""
Hello Worldle Server - Main Entry Point

This is the main entry point for the game server.
It checks the configuration, creates the Flask-SocketIO application and
starts serving.
"""

from worldle import create_app
from worldle.config import Config, validate_word_list_integrity
from worldle.services.exceptions import SolutionUnavailableError
from worldle.services.word_provider import create_word_provider
from worldle.utils.game_logger import game_logger


def check_todays_word(app):
    """Warn at startup if no word is scheduled for today; clients would get an error page."""
    try:
        create_word_provider(app.config).get_solution()
        return True
    except SolutionUnavailableError as e:
        game_logger.logger.warning(f"Today's word is unavailable: {e}")
        return False


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        if Config.DICTIONARY_BACKEND == 'wordlist':
            validate_word_list_integrity()
            print("✓ Offline word list validated")

        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        if check_todays_word(app):
            print("✓ Today's word resolved")
        else:
            print("✗ Today's word could not be resolved; players will see an error")

        game_logger.logger.info("Hello Worldle server starting")

        print(f"\nStarting Hello Worldle on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Dictionary backend: {Config.DICTIONARY_BACKEND}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG,
                     allow_unsafe_werkzeug=True)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Hello Worldle server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
