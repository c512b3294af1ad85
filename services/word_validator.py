"""
Word validation rules for Word Scramble.

A candidate is checked in a fixed order and the first failing rule wins:

1. non-empty after normalization
2. not already used in the session
3. not the root word itself (unless the session allows it)
4. spellable from the root word's letters, each letter used at most as
   many times as it appears in the root
5. recognized by the dictionary checker for the configured language

The dictionary checker is only consulted when every local rule passes.
"""
from collections import Counter
from typing import Callable, Optional, Sequence

from config import DEFAULT_LANGUAGE
from models.submission import RejectionReason

# (word, language) -> is the word recognized
DictionaryChecker = Callable[[str, str], bool]


def normalize(raw: str) -> str:
    """Trim surrounding whitespace and lowercase."""
    return raw.strip().lower()


def letter_pool(word: str) -> Counter:
    """Multiset of the letters in a word."""
    return Counter(word)


def is_original(word: str, used_words: Sequence[str]) -> bool:
    """Check if a word has not been played yet in this session."""
    return word not in used_words


def is_possible(word: str, root_word: str) -> bool:
    """
    Check if a word can be spelled from the root word's letters.

    Every letter of the root can be consumed once. Letter order is
    irrelevant, only counts matter.
    """
    remaining = letter_pool(root_word)
    for letter in word:
        if remaining[letter] < 1:
            return False
        remaining[letter] -= 1
    return True


def validate(
    word: str,
    root_word: str,
    used_words: Sequence[str],
    checker: DictionaryChecker,
    language: str = DEFAULT_LANGUAGE,
    allow_root_word: bool = False
) -> Optional[RejectionReason]:
    """
    Run all rules against an already normalized candidate.

    Args:
        word: Normalized candidate word
        root_word: The session's letter pool
        used_words: Words accepted so far
        checker: Dictionary capability, called last
        language: Language tag passed to the checker
        allow_root_word: Accept the root word itself as a candidate

    Returns:
        The first RejectionReason hit, or None if the word is acceptable
    """
    if not word:
        return RejectionReason.EMPTY

    if not is_original(word, used_words):
        return RejectionReason.ALREADY_USED

    if not allow_root_word and word == root_word:
        return RejectionReason.SAME_AS_ROOT

    if not is_possible(word, root_word):
        return RejectionReason.NOT_SPELLABLE

    if not checker(word, language):
        return RejectionReason.NOT_RECOGNIZED

    return None
