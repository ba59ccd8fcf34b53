"""
Services Package

Contains all game logic and service classes.
"""

from .challenge_codec import ChallengeDecodeError, decode_challenge, encode_challenge
from .clue_service import best_clues, compute_clue, describe_clue, first_violation, violation
from .game_service import GameService, GameSession, get_game_service, initialize_game_service
from .target_service import TargetSelector, WordPoolExhaustedError

__all__ = [
    'ChallengeDecodeError', 'decode_challenge', 'encode_challenge',
    'best_clues', 'compute_clue', 'describe_clue', 'first_violation', 'violation',
    'GameService', 'GameSession', 'get_game_service', 'initialize_game_service',
    'TargetSelector', 'WordPoolExhaustedError'
]
