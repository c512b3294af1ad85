import pytest

from models.game import GameSession


class FakeChecker:
    """Dictionary checker that recognizes a fixed set of words and records calls."""

    def __init__(self, words=()):
        self.words = set(words)
        self.calls = []

    def __call__(self, word, language):
        self.calls.append((word, language))
        return word in self.words


class PickFirst:
    """Random source that always picks the first entry."""

    def choice(self, seq):
        return seq[0]


ENGLISH = {"silk", "worm", "worms", "milk", "skim", "silo", "owl", "cat", "act", "dog", "silkworm"}


@pytest.fixture
def checker():
    return FakeChecker(ENGLISH)


@pytest.fixture
def session(checker):
    game = GameSession(checker=checker, rng=PickFirst())
    game.start(["silkworm"])
    return game
