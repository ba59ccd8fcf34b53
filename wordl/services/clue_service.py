"""
Clue Service

Scores guesses against the target, describes clues in words, and enforces
hard-mode consistency between a new guess and the clues already revealed.
"""

from collections import Counter
from typing import Dict, Iterable, List, Optional

from ..models.game import Clue, CluedLetter, Difficulty

# Emoji per clue for the shareable result grid
EMOJI = {
    Clue.ABSENT: "⬛",
    Clue.PRESENT: "🟨",
    Clue.CORRECT: "🟩",
}
COLOR_BLIND_EMOJI = {
    Clue.ABSENT: "⬛",
    Clue.PRESENT: "🟦",
    Clue.CORRECT: "🟧",
}


def compute_clue(guess: str, target: str) -> List[CluedLetter]:
    """
    Implements the two-pass letter evaluation.

    Exact matches are marked first and consume their letter from the target's
    letter counts, so a letter occurring k times in the target yields at most
    k non-absent marks in the guess, with CORRECT preferred over PRESENT.

    Args:
        guess: Guess (may be shorter than the target while being typed)
        target: Target word

    Returns:
        One CluedLetter per letter of the guess
    """
    remaining = Counter(target)
    clues: List[Optional[Clue]] = [None] * len(guess)

    # First pass: exact position matches
    for i, letter in enumerate(guess):
        if i < len(target) and letter == target[i]:
            clues[i] = Clue.CORRECT
            remaining[letter] -= 1

    # Second pass: present elsewhere, or absent
    for i, letter in enumerate(guess):
        if clues[i] is not None or i >= len(target):
            continue
        if remaining[letter] > 0:
            clues[i] = Clue.PRESENT
            remaining[letter] -= 1
        else:
            clues[i] = Clue.ABSENT

    return [CluedLetter(letter, clue) for letter, clue in zip(guess, clues)]


def describe_clue(clues: Iterable[CluedLetter]) -> str:
    """Summarize a clue sequence in words for audio feedback."""
    groups: Dict[Clue, List[str]] = {Clue.CORRECT: [], Clue.PRESENT: [], Clue.ABSENT: []}
    for cl in clues:
        if cl.clue is not None:
            groups[cl.clue].append(cl.letter.upper())

    parts = []
    if groups[Clue.CORRECT]:
        parts.append(", ".join(groups[Clue.CORRECT]) + " correct.")
    if groups[Clue.PRESENT]:
        parts.append(", ".join(groups[Clue.PRESENT]) + " elsewhere.")
    if groups[Clue.ABSENT]:
        parts.append(", ".join(groups[Clue.ABSENT]) + " not in word.")
    return " ".join(parts)


def ordinal(n: int) -> str:
    if 10 <= n % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(n % 10, "th")
    return f"{n}{suffix}"


def violation(difficulty: Difficulty, clues: List[CluedLetter], guess: str) -> Optional[str]:
    """
    Checks a new guess against the clues of one earlier guess.

    Only HARD mode constrains: every CORRECT letter must be reused in place and
    every PRESENT letter must appear somewhere in the guess.

    Returns:
        Reason string for the first unmet constraint, or None
    """
    if difficulty != Difficulty.HARD:
        return None

    for i, cl in enumerate(clues):
        if cl.clue == Clue.CORRECT and (i >= len(guess) or guess[i] != cl.letter):
            return f"{ordinal(i + 1)} letter must be {cl.letter.upper()}"

    for cl in clues:
        if cl.clue == Clue.PRESENT and cl.letter not in guess:
            return f"Guess must contain {cl.letter.upper()}"

    return None


def first_violation(difficulty: Difficulty, target: str, guesses: Iterable[str], guess: str) -> Optional[str]:
    """Runs the validator against every prior guess in order, stopping at the first reason."""
    for prior in guesses:
        reason = violation(difficulty, compute_clue(prior, target), guess)
        if reason:
            return reason
    return None


def best_clues(target: str, guesses: Iterable[str]) -> Dict[str, Clue]:
    """Folds locked-in guesses into the highest clue seen per letter."""
    letter_info: Dict[str, Clue] = {}
    for guess in guesses:
        for cl in compute_clue(guess, target):
            if cl.clue is None:
                break
            old = letter_info.get(cl.letter)
            if old is None or cl.clue > old:
                letter_info[cl.letter] = cl.clue
    return letter_info


def emoji_row(clues: Iterable[CluedLetter], color_blind: bool = False) -> str:
    palette = COLOR_BLIND_EMOJI if color_blind else EMOJI
    return "".join(palette[cl.clue or Clue.ABSENT] for cl in clues)
