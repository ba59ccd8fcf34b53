"""
Game Service

Contains the turn-based session controller and the registry of live sessions.
"""

import uuid
from typing import Callable, Dict, FrozenSet, List, Optional, Tuple
from urllib.parse import urlencode

from ..config.game_settings import (
    DICTIONARY_SET, MAX_GAME_NUMBER, TARGET_POOL, limit_length
)
from ..models.game import Clue, CluedLetter, Difficulty, GameConfig, GamePhase, GameState, PublishOutcome
from ..utils.game_logger import game_logger
from .challenge_codec import ChallengeDecodeError, decode_challenge, encode_challenge
from .clue_service import best_clues, compute_clue, describe_clue, emoji_row, first_violation
from .target_service import TargetSelector

FIRST_GUESS_HINT = "Make your first guess!"
INVALID_CHALLENGE_HINT = "Invalid challenge string, playing random game."
RESULT_COPIED_HINT = "Result copied to clipboard!"
LINK_COPIED_HINT = "Link copied to clipboard!"

Publisher = Callable[[str], PublishOutcome]


def parse_game_number(value) -> int:
    """Accepts a game number from a link parameter, falling back to 1."""
    try:
        game_number = int(value)
    except (TypeError, ValueError):
        return 1
    return game_number if 1 <= game_number <= MAX_GAME_NUMBER else 1


class GameSession:
    """
    State machine for one player's run of games.

    A session starts PLAYING with no guesses. Accepted guesses move it to WON
    when the target is hit, to LOST when the guess budget runs out, and keep
    it PLAYING otherwise. WON and LOST are terminal until new_game().
    """

    def __init__(self,
                 config: GameConfig,
                 selector: TargetSelector,
                 dictionary: FrozenSet[str] = DICTIONARY_SET,
                 challenge: Optional[str] = None,
                 seed: Optional[int] = None,
                 game_number=1,
                 game_id: Optional[str] = None):
        self.game_id = game_id or str(uuid.uuid4())
        self.config = config
        self.selector = selector
        self.dictionary = dictionary
        self.seed = seed
        self.max_guesses = config.max_guesses
        self.difficulty = Difficulty.parse(config.difficulty)
        self.game_number = parse_game_number(game_number)
        self.word_length = limit_length(config.word_length)

        self.guesses: List[str] = []
        self.current_guess = ""
        self.phase = GamePhase.PLAYING
        self.spoken_feedback = ""

        self.challenge, challenge_error = self._accept_challenge(challenge)
        if self.challenge:
            self.target = self.challenge
            self.word_length = len(self.challenge)
        else:
            self.target = self.selector.pick_target(self.word_length, self.seed, self.game_number)

        self.hint = INVALID_CHALLENGE_HINT if challenge_error else FIRST_GUESS_HINT

    def _accept_challenge(self, token: Optional[str]) -> Tuple[str, bool]:
        """Returns (challenge word or "", whether a token was given but rejected)."""
        if not token:
            return "", False

        try:
            word = decode_challenge(token)
        except ChallengeDecodeError as e:
            game_logger.logger.warning(f"Game {self.game_id}: rejected challenge token: {e}")
            return "", True

        if word not in self.dictionary:
            game_logger.logger.warning(f"Game {self.game_id}: challenge does not name a dictionary word")
            return "", True

        return word, False

    @property
    def is_over(self) -> bool:
        return self.phase != GamePhase.PLAYING

    def new_game(self, word_length: Optional[int] = None) -> None:
        """Starts the next game. Challenges are single-use, so a new game is always picked."""
        self.challenge = ""
        self.word_length = limit_length(self.word_length if word_length is None else word_length)
        self.game_number += 1
        self.target = self.selector.pick_target(self.word_length, self.seed, self.game_number)
        self.hint = ""
        self.spoken_feedback = ""
        self.guesses = []
        self.current_guess = ""
        self.phase = GamePhase.PLAYING

    def on_key(self, key: str) -> None:
        """Applies one keystroke from the presentation layer."""
        if self.is_over or len(self.guesses) == self.max_guesses:
            return

        if len(key) == 1 and key.isascii() and key.isalpha():
            self.current_guess = (self.current_guess + key.lower())[:self.word_length]
            self.hint = ""
        elif key == "Backspace":
            self.current_guess = self.current_guess[:-1]
            self.hint = ""
        elif key == "Enter":
            self.submit_guess(self.current_guess)

    def validate_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Checks a guess without changing the session.

        Returns:
            Tuple of (is_valid, reason)
        """
        if self.is_over:
            return False, "Game is already over"

        if len(guess) < self.word_length:
            return False, "Too short"

        if len(guess) > self.word_length:
            return False, "Too long"

        if guess not in self.dictionary:
            return False, "Not a valid word"

        reason = first_violation(self.difficulty, self.target, self.guesses, guess)
        if reason:
            return False, reason

        return True, ""

    def submit_guess(self, guess: str) -> Tuple[bool, str]:
        """
        Processes a guess and updates the session.

        Rejected guesses leave the guesses untouched and only set the hint.

        Returns:
            Tuple of (accepted, rejection_reason)
        """
        if not isinstance(guess, str):
            self.hint = "Guess must be a valid string"
            return False, self.hint

        guess = guess.strip().lower()
        is_valid, reason = self.validate_guess(guess)
        if not is_valid:
            self.hint = reason
            return False, reason

        self.guesses.append(guess)
        self.current_guess = ""

        if guess == self.target:
            self.phase = GamePhase.WON
            self.hint = self._game_over_message("won")
            self.spoken_feedback = ""
        elif len(self.guesses) == self.max_guesses:
            self.phase = GamePhase.LOST
            self.hint = self._game_over_message("lost")
            self.spoken_feedback = ""
        else:
            self.hint = ""
            self.spoken_feedback = describe_clue(compute_clue(guess, self.target))

        return True, ""

    def _game_over_message(self, verbed: str) -> str:
        return f"You {verbed}! The answer was {self.target.upper()}."

    def rows(self) -> List[List[CluedLetter]]:
        """Clue sequence for every locked-in guess."""
        return [compute_clue(guess, self.target) for guess in self.guesses]

    def letter_info(self) -> Dict[str, Clue]:
        return best_clues(self.target, self.guesses)

    def emoji_grid(self, color_blind: Optional[bool] = None) -> str:
        if color_blind is None:
            color_blind = self.config.color_blind
        return "\n".join(emoji_row(row, color_blind) for row in self.rows())

    def share_text(self, color_blind: Optional[bool] = None) -> str:
        score = "X" if self.phase == GamePhase.LOST else str(len(self.guesses))
        return f"{self.config.game_name} {score}/{self.max_guesses}\n" + self.emoji_grid(color_blind)

    def challenge_token(self) -> str:
        return encode_challenge(self.target)

    def share_url(self) -> str:
        """Seed link when a daily seed is active, otherwise a challenge link for this target."""
        if self.seed:
            params = {'seed': self.seed, 'length': self.word_length, 'game': self.game_number}
        else:
            params = {'challenge': self.challenge_token()}
        return f"{self.config.base_url}?{urlencode(params)}"

    def share(self, publish: Publisher, copied_hint: str, text: Optional[str] = None) -> PublishOutcome:
        """
        Hands the share link (plus optional text) to the platform publisher.

        The outcome only decides which hint is shown: nothing for a native
        share, copied_hint for a clipboard copy, the bare link on failure.
        """
        url = self.share_url()
        body = url + ("\n\n" + text if text else "")

        try:
            outcome = publish(body)
        except Exception as e:
            game_logger.logger.warning(f"Game {self.game_id}: publish failed: {e}")
            outcome = PublishOutcome.FAILED

        if outcome == PublishOutcome.COPIED:
            self.hint = copied_hint
        elif outcome == PublishOutcome.FAILED:
            self.hint = url
        return outcome

    def share_result(self, publish: Publisher) -> PublishOutcome:
        return self.share(publish, RESULT_COPIED_HINT, self.share_text())

    def share_challenge(self, publish: Publisher) -> PublishOutcome:
        return self.share(publish, LINK_COPIED_HINT)

    def to_state(self, include_emoji: bool = False) -> GameState:
        """Snapshot for the presentation layer; the answer is only revealed once the game is over."""
        return GameState(
            game_id=self.game_id,
            phase=self.phase.value,
            game_number=self.game_number,
            word_length=self.word_length,
            max_guesses=self.max_guesses,
            difficulty=self.difficulty.value,
            guesses=self.guesses.copy(),
            current_guess=self.current_guess,
            rows=[[(cl.letter, cl.clue.value if cl.clue else None) for cl in row] for row in self.rows()],
            letter_info={letter: clue.value for letter, clue in self.letter_info().items()},
            hint=self.hint,
            spoken_feedback=self.spoken_feedback,
            answer=self.target if self.is_over else None,
            seeded=bool(self.seed),
            challenge=bool(self.challenge),
            emoji_grid=self.emoji_grid() if include_emoji and self.is_over else None
        )


class GameService:
    """
    Registry of live game sessions keyed by game id.

    Sessions are independent; each one owns its own state.
    """

    def __init__(self, pool: List[str] = TARGET_POOL, dictionary: FrozenSet[str] = DICTIONARY_SET,
                 selector: Optional[TargetSelector] = None):
        self.games: Dict[str, GameSession] = {}
        self.dictionary = dictionary
        self.selector = selector or TargetSelector(pool)

    def create_game(self,
                    config: GameConfig,
                    challenge: Optional[str] = None,
                    seed: Optional[int] = None,
                    game_number=1) -> str:
        """
        Creates a new session.

        Args:
            config: Session settings
            challenge: Challenge token from a shared link, if any
            seed: Daily seed, if any
            game_number: Game number from a seeded link

        Returns:
            str: Unique game ID for this session
        """
        session = GameSession(config, self.selector, self.dictionary,
                              challenge=challenge, seed=seed, game_number=game_number)
        self.games[session.game_id] = session
        return session.game_id

    def get_session(self, game_id: str) -> Optional[GameSession]:
        return self.games.get(game_id)

    def get_game_state(self, game_id: str) -> Optional[GameState]:
        session = self.games.get(game_id)
        if session is None:
            return None
        return session.to_state()

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a session from memory.

        Returns:
            bool: True if the session was deleted, False if not found
        """
        if game_id in self.games:
            del self.games[game_id]
            return True
        return False


# Global service instance
_game_service = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def initialize_game_service(**kwargs) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    _game_service = GameService(**kwargs)
    return _game_service
