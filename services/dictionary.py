"""
Dictionary checkers for Word Scramble.

A checker is any callable `(word, language) -> bool`. Two are provided:

- WordListDictionary: an in-memory word list, for offline play.
- FreeDictionaryChecker: the Free Dictionary API (https://dictionaryapi.dev/),
  no API key required, with verdicts cached in the database.
"""
import asyncio
import logging
import threading
from pathlib import Path
from typing import Iterable, Optional, Tuple

import aiohttp
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from config import SETTINGS, LOGGER_NAME_DICTIONARY, DEFAULT_LANGUAGE
from database import get_cached_verdict, save_verdict

logger = logging.getLogger(LOGGER_NAME_DICTIONARY)


class DictionaryUnavailableError(RuntimeError):
    """The dictionary word file could not be read."""


class WordListDictionary:
    """Recognizes words from a fixed list for a single language."""

    def __init__(self, words: Iterable[str], language: str = DEFAULT_LANGUAGE):
        self.language = language
        self.words = {w.strip().lower() for w in words if w.strip()}

    @classmethod
    def from_file(cls, path: str | Path, language: str = DEFAULT_LANGUAGE) -> "WordListDictionary":
        """
        Load one word per line from a UTF-8 file.

        Raises:
            DictionaryUnavailableError: if the file is missing, unreadable or not UTF-8
        """
        path = Path(path)
        try:
            text = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            raise DictionaryUnavailableError(f"Could not load dictionary words from {path}: {e}") from e

        dictionary = cls(text.splitlines(), language)
        logger.info(f"Loaded {len(dictionary.words)} dictionary words from {path}")
        return dictionary

    def __call__(self, word: str, language: str) -> bool:
        if language != self.language:
            logger.warning(f"No word list loaded for language '{language}'")
            return False
        return word in self.words


class FreeDictionaryChecker:
    """
    Checks words against the Free Dictionary API.

    Lookups are coroutines running on the bot's event loop. Calling the
    checker synchronously from a worker thread schedules the lookup on that
    loop and waits for the verdict.
    """

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        api_url: str = None,
        cache_expiry_days: int = None,
        timeout_seconds: float = None
    ):
        self._session_factory = session_factory
        self.api_url = (api_url or SETTINGS.dictionary_api_url).rstrip("/")
        self.cache_expiry_days = cache_expiry_days or SETTINGS.word_cache_expiry_days
        self.timeout_seconds = timeout_seconds or SETTINGS.dictionary_timeout_seconds

        self._http: Optional[aiohttp.ClientSession] = None
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._loop_thread: Optional[int] = None

    async def open(self) -> None:
        """Bind the checker to the running event loop."""
        self._loop = asyncio.get_running_loop()
        self._loop_thread = threading.get_ident()
        logger.info(f"Dictionary checker using {self.api_url}")

    async def _get_http(self) -> aiohttp.ClientSession:
        """Get or create aiohttp session."""
        if self._http is None or self._http.closed:
            self._http = aiohttp.ClientSession(
                timeout=aiohttp.ClientTimeout(total=self.timeout_seconds)
            )
        return self._http

    async def close(self) -> None:
        """Close the aiohttp session."""
        if self._http and not self._http.closed:
            await self._http.close()

    def __call__(self, word: str, language: str) -> bool:
        if self._loop is None:
            raise RuntimeError("Dictionary checker is not bound to an event loop; call open() first")
        if threading.get_ident() == self._loop_thread:
            raise RuntimeError("Dictionary checker called on its own event loop thread; use is_recognized()")

        future = asyncio.run_coroutine_threadsafe(self.is_recognized(word, language), self._loop)
        return future.result()

    async def is_recognized(self, word: str, language: str) -> bool:
        """Look a word up, using the cache when a fresh verdict exists."""
        async with self._session_factory() as session:
            cached = await get_cached_verdict(session, word, language, self.cache_expiry_days)
            if cached is not None:
                logger.debug(f"Cache hit for word: {word}")
                return cached

            logger.info(f"Looking up word with Dictionary API: {word}")
            recognized, status = await self._query_api(word, language)

            # Only cache definite answers
            if status in (200, 404):
                await save_verdict(session, word, language, recognized, status)

        return recognized

    async def _query_api(self, word: str, language: str) -> Tuple[bool, Optional[int]]:
        """
        Call the Free Dictionary API.

        Returns:
            Tuple of (recognized, HTTP status or None on connection failure)
        """
        url = f"{self.api_url}/{language}/{word}"
        try:
            http = await self._get_http()
            async with http.get(url) as response:
                if response.status == 200:
                    return True, 200
                if response.status == 404:
                    return False, 404
                logger.warning(f"Dictionary API returned status {response.status} for word '{word}'")
                return False, response.status
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Dictionary API connection error for '{word}': {e!r}")
            return False, None
