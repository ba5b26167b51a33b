"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules and constants (business logic)
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DEFAULT_LANGUAGE, FALLBACK_ROOT_WORD, MIN_WORD_LENGTH, START_WORDS_PATH,
    get_start_word_statistics, validate_start_words
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'DEFAULT_LANGUAGE', 'FALLBACK_ROOT_WORD', 'MIN_WORD_LENGTH', 'START_WORDS_PATH',
    'get_start_word_statistics', 'validate_start_words'
]
