import random

import pytest

from models.game import GameNotStartedError, GameSession
from models.submission import RejectionReason
from tests.conftest import ENGLISH, FakeChecker, PickFirst


def test_submit_before_start_raises(checker):
    game = GameSession(checker=checker)
    assert not game.is_active
    with pytest.raises(GameNotStartedError):
        game.submit("silk")


@pytest.mark.parametrize("word_list", [[], None, ["", "   "]])
def test_start_falls_back_to_silkworm(checker, word_list):
    game = GameSession(checker=checker)
    assert game.start(word_list) == "silkworm"
    assert game.is_active


def test_start_skips_blank_entries(checker):
    game = GameSession(checker=checker, rng=PickFirst())
    assert game.start(["", "balloons", ""]) == "balloons"


def test_start_normalizes_root_word(checker):
    game = GameSession(checker=checker, rng=PickFirst())
    assert game.start(["  Silkworm\r"]) == "silkworm"


def test_start_is_deterministic_with_seeded_random(checker):
    words = ["silkworm", "balloons", "dinosaur", "elephant"]
    first = GameSession(checker=checker, rng=random.Random(42)).start(words)
    second = GameSession(checker=checker, rng=random.Random(42)).start(words)
    assert first == second
    assert first in words


def test_start_resets_used_words(session):
    session.submit("silk")
    session.start(["cat"])
    assert session.root_word == "cat"
    assert session.used_words == []


def test_accepts_spellable_word(session):
    result = session.submit("silk")
    assert result.accepted
    assert result.word == "silk"
    assert session.used_words == ["silk"]


def test_second_submission_is_already_used(session):
    session.submit("silk")
    result = session.submit("silk")
    assert result.reason == RejectionReason.ALREADY_USED
    assert session.used_words == ["silk"]


def test_resubmission_is_always_already_used(session):
    session.submit("worm")
    for raw in ["worm", "WORM", "  Worm ", "worm"]:
        assert session.submit(raw).reason == RejectionReason.ALREADY_USED
    assert session.used_words == ["worm"]


def test_worms_is_spellable_from_silkworm(session):
    assert session.submit("worms").accepted


def test_dog_not_spellable_from_cat(checker):
    game = GameSession(checker=checker, rng=PickFirst())
    game.start(["cat"])
    result = game.submit("dog")
    assert result.reason == RejectionReason.NOT_SPELLABLE
    assert game.used_words == []


@pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
def test_blank_submission_is_empty(session, raw):
    for _ in range(3):
        assert session.submit(raw).reason == RejectionReason.EMPTY
    assert session.used_words == []


def test_root_word_is_rejected(session):
    assert session.submit("Silkworm").reason == RejectionReason.SAME_AS_ROOT


def test_root_word_allowed_when_configured(checker):
    game = GameSession(checker=checker, rng=PickFirst(), allow_root_word=True)
    game.start(["silkworm"])
    assert game.submit("silkworm").accepted


def test_unrecognized_word_is_rejected(session, checker):
    result = session.submit("Wilk")
    assert result.reason == RejectionReason.NOT_RECOGNIZED
    assert checker.calls == [("wilk", "en")]
    assert session.used_words == []


def test_new_words_go_to_the_front(session):
    for raw in ["silk", "worm", "milk", "skim"]:
        before = list(session.used_words)
        assert session.submit(raw).accepted
        assert session.used_words[1:] == before
        assert session.used_words[0] == raw
    assert session.used_words == ["skim", "milk", "worm", "silk"]


def test_rejections_never_change_state(session):
    session.submit("silk")
    for raw in ["", "silk", "sill", "silkworm", "wilk"]:
        session.submit(raw)
    assert session.used_words == ["silk"]


def test_accepted_words_fit_the_root_letters(session):
    for raw in sorted(ENGLISH):
        session.submit(raw)
    pool = session.letter_counts
    for word in session.used_words:
        for letter in set(word):
            assert word.count(letter) <= pool[letter]


def test_to_dict(session):
    session.submit("silk")
    state = session.to_dict()
    assert state["root_word"] == "silkworm"
    assert state["used_words"] == ["silk"]
    assert state["used_words_count"] == 1
