"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Clue(Enum):
    """Per-letter verdict from comparing a guess to the target."""
    ABSENT = "ABSENT"
    PRESENT = "PRESENT"
    CORRECT = "CORRECT"

    @property
    def rank(self) -> int:
        return _CLUE_RANK[self]

    def __lt__(self, other):
        if not isinstance(other, Clue):
            return NotImplemented
        return self.rank < other.rank

    def __le__(self, other):
        if not isinstance(other, Clue):
            return NotImplemented
        return self.rank <= other.rank

    def __gt__(self, other):
        if not isinstance(other, Clue):
            return NotImplemented
        return self.rank > other.rank

    def __ge__(self, other):
        if not isinstance(other, Clue):
            return NotImplemented
        return self.rank >= other.rank


# Severity order used for keyboard highlighting: ABSENT < PRESENT < CORRECT
_CLUE_RANK: Dict[Clue, int] = {
    Clue.ABSENT: 0,
    Clue.PRESENT: 1,
    Clue.CORRECT: 2,
}


@dataclass(frozen=True)
class CluedLetter:
    """A single letter of a guess together with its clue (None past the target's end)."""
    letter: str
    clue: Optional[Clue]


class Difficulty(Enum):
    """Difficulty modes. EASY and NORMAL impose no constraint across guesses."""
    EASY = "easy"
    NORMAL = "normal"
    HARD = "hard"

    @classmethod
    def parse(cls, value) -> "Difficulty":
        if isinstance(value, Difficulty):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            raise ValueError(f"Invalid difficulty '{value}'. Must be one of: easy, normal, hard")


class GamePhase(Enum):
    """Session phase. WON and LOST are terminal."""
    PLAYING = "PLAYING"
    WON = "WON"
    LOST = "LOST"


class PublishOutcome(Enum):
    """Result reported by a share/clipboard collaborator."""
    SHARED = "SHARED"
    COPIED = "COPIED"
    FAILED = "FAILED"


@dataclass
class GameConfig:
    """Settings a session is constructed with."""
    max_guesses: int = 6
    word_length: int = 5
    difficulty: Difficulty = Difficulty.NORMAL
    color_blind: bool = False
    game_name: str = "hello wordl"
    base_url: str = "http://localhost:5000/"


@dataclass
class GameState:
    """Serializable snapshot of a session handed to the presentation layer."""
    game_id: str
    phase: str
    game_number: int
    word_length: int
    max_guesses: int
    difficulty: str
    guesses: List[str]
    current_guess: str
    rows: List[List[Tuple[str, Optional[str]]]]  # Clue as string for JSON serialization
    letter_info: Dict[str, str]
    hint: str
    spoken_feedback: str = ""
    answer: Optional[str] = None  # Only included once the game is over
    seeded: bool = False
    challenge: bool = False
    emoji_grid: Optional[str] = None
