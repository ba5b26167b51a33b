"""
Word Scramble Game Server - Main Entry Point

This is the main entry point for the word scramble server.
It initializes the round service and starts the Flask-SocketIO application.
"""

from word_scramble import create_app
from word_scramble.config import Config, get_start_word_statistics, validate_start_words
from word_scramble.errors import WordListUnavailableError
from word_scramble.services.dictionary import WordfreqDictionaryChecker
from word_scramble.services.round_service import initialize_round_service
from word_scramble.services.word_sources import FileWordListSource
from word_scramble.utils.game_logger import game_logger


def check_start_words(word_source):
    """Report problems with the start word list without refusing to start."""
    try:
        words = [word.strip() for word in word_source.load() if word.strip()]
        validate_start_words(words)
        stats = get_start_word_statistics(words)
        print(f"✓ Start word list loaded: {stats['total_words']} words")
    except (WordListUnavailableError, ValueError) as e:
        print(f"✗ Start word list problem, rounds may use the fallback word: {e}")
        game_logger.logger.warning(f"Start word list problem: {e}")


def main():
    """Main function to initialize services and start the server."""
    try:
        print("Initializing services...")

        word_source = FileWordListSource(Config.START_WORDS_FILE)
        check_start_words(word_source)

        round_service = initialize_round_service(
            word_source,
            WordfreqDictionaryChecker(Config.MIN_WORD_ZIPF),
            language=Config.DICTIONARY_LANGUAGE
        )
        if round_service:
            print("✓ Round service initialized successfully")
        else:
            print("✗ Failed to initialize round service")

        print("Creating Flask application...")
        app, socketio = create_app(Config)
        print("✓ Flask application created successfully")

        game_logger.logger.info("Word Scramble Server Starting")

        print(f"\nStarting Word Scramble Server on {Config.HOST}:{Config.PORT}")
        print(f"Debug mode: {Config.DEBUG}")
        print(f"Dictionary language: {Config.DICTIONARY_LANGUAGE}")
        print("=" * 50)

        socketio.run(app, host=Config.HOST, port=Config.PORT, debug=Config.DEBUG)

    except KeyboardInterrupt:
        print("\nServer shutting down...")
        game_logger.logger.info("Word Scramble Server shutting down (KeyboardInterrupt)")
    except Exception as e:
        print(f"Error starting server: {e}")
        game_logger.logger.error(f"Error starting server: {e}")
        raise


if __name__ == '__main__':
    main()
