"""
Configuration Management Module

Centralized configuration management following the 12-factor app methodology.
All configuration is loaded from environment variables with sensible defaults.
"""

import os
from dotenv import load_dotenv

# Load environment variables from config.env next to this module
load_dotenv(os.path.join(os.path.dirname(os.path.abspath(__file__)), 'config.env'))


def _optional_int(name):
    value = os.getenv(name)
    if value is None or value.strip() == '':
        return None
    return int(value)


class Config:
    """Base configuration class with all settings."""

    # Flask Settings
    SECRET_KEY = os.getenv('SECRET_KEY', 'dev-secret-key-change-in-production')
    DEBUG = os.getenv('DEBUG', 'False').lower() == 'true'
    TESTING = False

    # Server Settings
    HOST = os.getenv('HOST', '127.0.0.1')
    PORT = int(os.getenv('PORT', 5000))

    # Game Settings
    MAX_GUESSES = int(os.getenv('MAX_GUESSES', 6))
    WORD_LENGTH = int(os.getenv('WORD_LENGTH', 5))
    DIFFICULTY = os.getenv('DIFFICULTY', 'normal')
    COLOR_BLIND = os.getenv('COLOR_BLIND', 'False').lower() == 'true'
    GAME_NAME = os.getenv('GAME_NAME', 'hello wordl')

    # Shared daily puzzle: when set, target selection is reproducible
    DAILY_SEED = _optional_int('DAILY_SEED')

    # Links handed out for challenges and seeded games
    BASE_URL = os.getenv('BASE_URL', 'http://127.0.0.1:5000/')

    # Logging Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    LOG_DIR = os.getenv('LOG_DIR', 'logs')


class DevelopmentConfig(Config):
    """Development configuration."""
    DEBUG = True


class ProductionConfig(Config):
    """Production configuration."""
    DEBUG = False


class TestingConfig(Config):
    """Testing configuration."""
    TESTING = True
    DEBUG = True
    DAILY_SEED = None


# Configuration mapping
config = {
    'development': DevelopmentConfig,
    'production': ProductionConfig,
    'testing': TestingConfig,
    'default': DevelopmentConfig
}
