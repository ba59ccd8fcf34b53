"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import Clue, CluedLetter, Difficulty, GameConfig, GamePhase, GameState, PublishOutcome

__all__ = ['Clue', 'CluedLetter', 'Difficulty', 'GameConfig', 'GamePhase', 'GameState', 'PublishOutcome']
