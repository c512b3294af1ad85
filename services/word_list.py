"""
Start word loading for Word Scramble.
"""
import logging
from pathlib import Path
from typing import List

from config import LOGGER_NAME_GAME

logger = logging.getLogger(LOGGER_NAME_GAME)


class StartWordsUnavailableError(RuntimeError):
    """The start word file could not be read. No session can be played."""


def parse_word_list(text: str) -> List[str]:
    """Split newline separated text into lowercase words, dropping blank lines."""
    words = []
    for line in text.splitlines():
        word = line.strip().lower()
        if word:
            words.append(word)
    return words


def load_start_words(path: str | Path) -> List[str]:
    """
    Load the start word list from a text file (one word per line).

    An empty file is fine: sessions fall back to the default root word.

    Raises:
        StartWordsUnavailableError: if the file is missing or unreadable
    """
    path = Path(path)
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise StartWordsUnavailableError(f"Could not load start words from {path}: {e}") from e

    words = parse_word_list(text)
    logger.info(f"Loaded {len(words)} start words from {path}")
    return words
