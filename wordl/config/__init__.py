"""
Configuration Package

Contains all configuration-related files and settings.

This package separates two types of configuration:
- app_config.py: Flask application configuration (environment-based)
- game_settings.py: Game rules, constants and the bundled word lists
"""

from .app_config import Config, DevelopmentConfig, ProductionConfig, TestingConfig, config
from .game_settings import (
    DICTIONARY, DICTIONARY_SET, TARGET_POOL, MAX_GUESSES, MIN_WORD_LENGTH, MAX_WORD_LENGTH,
    DEFAULT_WORD_LENGTH, WILDCARD, limit_length, validate_word_pool_integrity, get_word_statistics
)

__all__ = [
    # App configuration
    'Config', 'DevelopmentConfig', 'ProductionConfig', 'TestingConfig', 'config',
    # Game rules
    'DICTIONARY', 'DICTIONARY_SET', 'TARGET_POOL', 'MAX_GUESSES', 'MIN_WORD_LENGTH',
    'MAX_WORD_LENGTH', 'DEFAULT_WORD_LENGTH', 'WILDCARD', 'limit_length',
    'validate_word_pool_integrity', 'get_word_statistics'
]
