"""
Configuration Package

Contains all configuration-related files and settings.

This package separates three types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, modes, dictionary and constants (business logic)
- messages.py: The fixed player-facing message set
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    CHAR_EQUIVALENTS,
    DEFAULT_TIME_LIMIT,
    GAME_MODES,
    MAX_ROUNDS,
    WORD_LIST,
    get_word_statistics,
    validate_word_list_integrity,
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'CHAR_EQUIVALENTS', 'DEFAULT_TIME_LIMIT', 'GAME_MODES', 'MAX_ROUNDS', 'WORD_LIST',
    'validate_word_list_integrity', 'get_word_statistics'
]
