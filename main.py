"""
Word Game Server - Main Entry Point

Initializes the game service, validates the bundled word pool and starts the
Flask-SocketIO application.
"""

from wordl import create_app
from wordl.config import Config, get_word_statistics, validate_word_pool_integrity
from wordl.services.game_service import initialize_game_service
from wordl.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        # The pool must cover every supported length before any game starts
        validate_word_pool_integrity()
        print(f"✓ Word pool validated: {get_word_statistics()['words_by_length']}")

        initialize_game_service()
        print("✓ Game service initialized successfully")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word game server starting")

        print(f"\nStarting word game server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Daily seed: {Config.DAILY_SEED or 'off'}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word game server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
