"""
Utilities Package

Contains utility functions, decorators, and helper modules.
"""

from .decorators import with_session, websocket_session_required
from .helpers import get_user_identity, build_game_config, parse_seed
from .game_logger import game_logger

__all__ = ['with_session', 'websocket_session_required', 'get_user_identity',
           'build_game_config', 'parse_seed', 'game_logger']
