"""
Game state for Word Scramble.
A GameSession holds the root word and the words accepted so far.
"""
import random
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, List, Sequence

from config import DEFAULT_LANGUAGE, DEFAULT_ROOT_WORD
from models.submission import RejectionReason, SubmissionResult
from services.word_validator import DictionaryChecker, normalize, letter_pool, validate


class GameNotStartedError(RuntimeError):
    """Raised when a word is submitted before the session has a root word."""


@dataclass
class GameSession:
    """
    Manages the state of a single Word Scramble session.

    The session starts without a root word; `start` picks one and makes the
    session active. Accepted words are kept most-recent-first.
    """
    checker: DictionaryChecker
    rng: random.Random = field(default_factory=random.Random)
    language: str = DEFAULT_LANGUAGE
    allow_root_word: bool = False

    root_word: Optional[str] = None
    used_words: List[str] = field(default_factory=list)

    started_at: Optional[datetime] = None

    @property
    def is_active(self) -> bool:
        """True once a root word has been chosen."""
        return self.root_word is not None

    @property
    def letter_counts(self) -> dict:
        """Letters available in the root word with their counts."""
        if not self.root_word:
            return {}
        return dict(letter_pool(self.root_word))

    def start(self, word_list: Optional[Sequence[str]]) -> str:
        """
        Pick a random root word and begin a fresh session.

        Blank entries are never picked. With no usable entry the root word
        falls back to DEFAULT_ROOT_WORD, so this never fails.
        """
        candidates = [normalize(w) for w in (word_list or [])]
        candidates = [w for w in candidates if w]

        self.root_word = self.rng.choice(candidates) if candidates else DEFAULT_ROOT_WORD
        self.used_words = []
        self.started_at = datetime.utcnow()
        return self.root_word

    def submit(self, raw: str) -> SubmissionResult:
        """
        Validate a raw player submission and record it if accepted.

        Raises:
            GameNotStartedError: if `start` has not been called
        """
        if not self.is_active:
            raise GameNotStartedError("submit() called before start()")

        word = normalize(raw)
        reason: Optional[RejectionReason] = validate(
            word,
            self.root_word,
            self.used_words,
            self.checker,
            self.language,
            self.allow_root_word,
        )
        if reason is None:
            self.used_words.insert(0, word)
        return SubmissionResult(word=word, reason=reason)

    def to_dict(self) -> dict:
        """Convert session state to dictionary for debugging/logging."""
        return {
            "root_word": self.root_word,
            "language": self.language,
            "allow_root_word": self.allow_root_word,
            "used_words": list(self.used_words),
            "used_words_count": len(self.used_words),
            "started_at": self.started_at.isoformat() if self.started_at else None,
        }
