import os
import random
import tempfile

# Keep test log files out of the working tree; must run before wordl is imported
os.environ.setdefault('LOG_DIR', tempfile.mkdtemp(prefix='wordl-logs-'))

import pytest

from wordl import create_app
from wordl.config import TestingConfig
from wordl.models.game import Difficulty, GameConfig
from wordl.services.game_service import GameSession, initialize_game_service
from wordl.services.target_service import TargetSelector

TEST_DICTIONARY = frozenset([
    "apple", "adieu", "apply", "lapse", "crane", "cigar", "caret", "stone", "coast",
    "react", "slate", "sassy", "mushy", "sound", "paper",
    "word", "game", "play",
])


@pytest.fixture
def make_session():
    """Builds a session whose target is fixed by a one-word pool per length."""
    def _make(target="apple", challenge=None, seed=None, game_number=1, **config_kwargs):
        config_kwargs.setdefault('word_length', len(target))
        config = GameConfig(**config_kwargs)
        selector = TargetSelector([target, "word"], rng=random.Random(1))
        return GameSession(config, selector, TEST_DICTIONARY,
                           challenge=challenge, seed=seed, game_number=game_number)
    return _make


@pytest.fixture
def hard_session(make_session):
    return make_session("crane", difficulty=Difficulty.HARD)


@pytest.fixture
def app():
    initialize_game_service(pool=["apple", "word"], dictionary=TEST_DICTIONARY)
    app, socketio = create_app(TestingConfig)
    return app


@pytest.fixture
def client(app):
    return app.test_client()
