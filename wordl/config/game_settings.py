"""
Game Configuration Constants Module

Defines the game rules and loads the word pool and dictionary shipped with
the package. All game parameters are centralized here.
"""

import json
import os
from typing import Dict, Final, FrozenSet, List, Optional

MIN_WORD_LENGTH: Final[int] = 4
MAX_WORD_LENGTH: Final[int] = 11
DEFAULT_WORD_LENGTH: Final[int] = 5

MAX_GUESSES: Final[int] = 6
"""
Default number of guess attempts allowed per game.
"""

MAX_GAME_NUMBER: Final[int] = 1000

# Marks pool entries that may never be picked as a target
WILDCARD: Final[str] = "*"

# Targets are ordered by frequency; nothing rarer than this word is picked
TARGET_CUTOFF_WORD: Final[str] = "murky"


def limit_length(n) -> int:
    """Clamps a requested word length to the supported range, falling back to the default."""
    try:
        n = int(n)
    except (TypeError, ValueError):
        return DEFAULT_WORD_LENGTH
    return n if MIN_WORD_LENGTH <= n <= MAX_WORD_LENGTH else DEFAULT_WORD_LENGTH


def _load_json_words(filename: str) -> List[str]:
    """
    Load a word array from a JSON file next to this module.

    Returns:
        List[str]: Lowercase words in file order

    Raises:
        FileNotFoundError: If the file is not found
        ValueError: If the file is malformed, empty or not an array of strings
    """
    config_dir = os.path.dirname(os.path.abspath(__file__))
    json_file_path = os.path.join(config_dir, filename)

    try:
        with open(json_file_path, 'r', encoding='utf-8') as f:
            words = json.load(f)
    except FileNotFoundError:
        raise FileNotFoundError(f"Word list file not found: {json_file_path}")
    except json.JSONDecodeError as e:
        raise ValueError(f"Invalid JSON in {filename}: {e}")

    if not isinstance(words, list):
        raise ValueError(f"{filename} must contain an array of words")

    if not words:
        raise ValueError(f"{filename} cannot be empty")

    if not all(isinstance(word, str) for word in words):
        raise ValueError(f"{filename} must only contain strings")

    return [word.strip().lower() for word in words]


def _load_target_pool(cutoff: str = TARGET_CUTOFF_WORD) -> List[str]:
    targets = _load_json_words('targets.json')
    if cutoff in targets:
        targets = targets[:targets.index(cutoff) + 1]
    return targets


TARGET_POOL: Final[List[str]] = _load_target_pool()
DICTIONARY: Final[List[str]] = _load_json_words('dictionary.json')
DICTIONARY_SET: Final[FrozenSet[str]] = frozenset(DICTIONARY)


def validate_word_pool_integrity(pool: Optional[List[str]] = None, dictionary=None) -> bool:
    """
    Validates the target pool against the dictionary.

    This function checks:
    1. Character validation: only lowercase letters (plus the wildcard marker)
    2. Playability: every non-wildcard target is a valid guess
    3. Coverage: every supported word length has at least one pickable target

    Returns:
        bool: True if the pool passes all checks

    Raises:
        ValueError: If any validation check fails with detailed error message
    """
    pool = TARGET_POOL if pool is None else pool
    dictionary = DICTIONARY_SET if dictionary is None else dictionary

    if not pool:
        raise ValueError("Target pool cannot be empty")

    for index, word in enumerate(pool):
        letters = word.replace(WILDCARD, "")
        if not letters.isalpha() or not letters.islower():
            raise ValueError(f"Target at index {index} '{word}' contains invalid characters")
        if WILDCARD not in word and word not in dictionary:
            raise ValueError(f"Target at index {index} '{word}' is not in the dictionary")

    for length in range(MIN_WORD_LENGTH, MAX_WORD_LENGTH + 1):
        if not any(len(word) == length and WILDCARD not in word for word in pool):
            raise ValueError(f"No pickable target of length {length}")

    return True


def get_word_statistics(pool: Optional[List[str]] = None) -> dict:
    """
    Summarizes the target pool for game balancing.

    Returns:
        dict: total_words, words_by_length and wildcard_entries
    """
    pool = TARGET_POOL if pool is None else pool
    words_by_length: Dict[int, int] = {}
    for word in pool:
        if WILDCARD not in word:
            words_by_length[len(word)] = words_by_length.get(len(word), 0) + 1

    return {
        "total_words": len(pool),
        "dictionary_size": len(DICTIONARY_SET),
        "words_by_length": words_by_length,
        "wildcard_entries": sum(1 for word in pool if WILDCARD in word),
    }


if __name__ == "__main__":

    try:
        validate_word_pool_integrity()
        print(" Word pool validation passed")
        print(f" Game statistics: {get_word_statistics()}")
    except ValueError as config_error:
        print(f" Configuration validation failed: {config_error}")
        exit(1)
