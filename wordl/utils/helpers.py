"""
Helper Functions

Contains utility functions used throughout the application.
"""

from typing import Dict, Optional
from flask import request

from ..models.game import Difficulty, GameConfig


def get_user_identity(request_obj=None) -> Dict[str, str]:
    """Extract user identity information from request."""
    if request_obj is None:
        request_obj = request

    return {
        'user_ip': request_obj.remote_addr or 'unknown',
    }


def build_game_config(data: Dict, app_config) -> GameConfig:
    """
    Builds session settings from a request payload, falling back to app config.

    Raises:
        ValueError: If difficulty or max_guesses is invalid
    """
    max_guesses = int(data.get('max_guesses', app_config.get('MAX_GUESSES', 6)))
    if max_guesses < 1:
        raise ValueError("max_guesses must be at least 1")

    return GameConfig(
        max_guesses=max_guesses,
        word_length=data.get('word_length', app_config.get('WORD_LENGTH', 5)),
        difficulty=Difficulty.parse(data.get('difficulty', app_config.get('DIFFICULTY', 'normal'))),
        color_blind=bool(data.get('color_blind', app_config.get('COLOR_BLIND', False))),
        game_name=app_config.get('GAME_NAME', 'hello wordl'),
        base_url=app_config.get('BASE_URL', 'http://127.0.0.1:5000/'),
    )


def parse_seed(value) -> Optional[int]:
    """Reads an optional integer seed; missing or zero means session-random."""
    if value in (None, ''):
        return None
    seed = int(value)
    return seed or None
