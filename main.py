"""
Word Chain Game Server - Main Entry Point

This is the main entry point for the word chain game server.
It initializes the game service and starts the Flask-SocketIO application.
"""

from wordchain import create_app
from wordchain.config import Config, validate_word_list_integrity, get_word_statistics
from wordchain.services.game_service import initialize_game_service
from wordchain.utils.game_logger import game_logger


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        validate_word_list_integrity()
        stats = get_word_statistics()
        print(f"✓ Dictionary loaded: {stats['total_words']} words")
        if stats['dead_end_letters']:
            game_logger.logger.warning(f"Letters no word starts with: {stats['dead_end_letters']}")

        game_service = initialize_game_service(
            scoring_enabled=Config.SCORING_ENABLED,
            seed_opening_word=Config.SEED_OPENING_WORD,
        )
        if game_service:
            print("✓ Game service initialized successfully")
        else:
            print("✗ Failed to initialize game service")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Chain Server Starting")

        print(f"\nStarting Word Chain Game Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Scoring: {Config.SCORING_ENABLED}, opening word: {Config.SEED_OPENING_WORD}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Chain Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
