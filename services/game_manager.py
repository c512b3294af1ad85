"""
Game Manager Service for Word Scramble Bot.
Keeps one in-memory GameSession per channel.
"""
import asyncio
import logging
import random
from typing import Optional, Dict, Sequence

from config import SETTINGS, LOGGER_NAME_GAME
from models.game import GameSession
from models.submission import SubmissionResult
from services.word_validator import DictionaryChecker

logger = logging.getLogger(LOGGER_NAME_GAME)


class GameManager:
    """
    Manages all active games and their state.
    Provides methods for game lifecycle operations.
    """

    def __init__(
        self,
        word_list: Sequence[str],
        checker: DictionaryChecker,
        rng: Optional[random.Random] = None,
        language: str = None,
        allow_root_word: bool = None
    ):
        self.word_list = list(word_list)
        self.checker = checker
        self.rng = rng or random.Random()
        self.language = language or SETTINGS.dictionary_language
        self.allow_root_word = SETTINGS.allow_root_word if allow_root_word is None else allow_root_word

        # Active games in memory: channel_id -> GameSession
        self._active_games: Dict[int, GameSession] = {}
        # Submission locks: channel_id -> asyncio.Lock
        self._locks: Dict[int, asyncio.Lock] = {}

    def get_game(self, channel_id: int) -> Optional[GameSession]:
        """Get an active game by channel ID."""
        return self._active_games.get(channel_id)

    def has_active_game(self, channel_id: int) -> bool:
        """Check if a channel has an active game."""
        return channel_id in self._active_games

    def start_game(self, channel_id: int) -> GameSession:
        """
        Start a new session in a channel, replacing any running one.

        Returns:
            The started GameSession
        """
        game = GameSession(
            checker=self.checker,
            rng=self.rng,
            language=self.language,
            allow_root_word=self.allow_root_word
        )
        root_word = game.start(self.word_list)
        self._active_games[channel_id] = game
        self._locks.setdefault(channel_id, asyncio.Lock())

        logger.info(f"Game started: channel={channel_id}, root_word={root_word}")
        return game

    def end_game(self, channel_id: int) -> Optional[GameSession]:
        """Remove a channel's session. Returns it, or None if there was none."""
        game = self._active_games.pop(channel_id, None)
        self._locks.pop(channel_id, None)
        if game:
            logger.info(
                f"Game ended: channel={channel_id}, root_word={game.root_word}, "
                f"words={len(game.used_words)}"
            )
        return game

    async def submit(
        self,
        channel_id: int,
        raw: str,
        game: Optional[GameSession] = None
    ) -> Optional[SubmissionResult]:
        """
        Submit a word to a channel's session.

        The session runs in a worker thread so a dictionary lookup can await
        network I/O on the event loop. Submissions to one channel never overlap.

        Args:
            channel_id: Discord channel ID
            raw: Raw message content
            game: The session the word was meant for; defaults to the current one

        Returns:
            SubmissionResult from that same session, or None if the channel
            has no game or `game` is no longer its current session
        """
        current = self.get_game(channel_id)
        if game is None:
            game = current
        if game is None or game is not current:
            return None

        lock = self._locks.setdefault(channel_id, asyncio.Lock())
        async with lock:
            result = await asyncio.to_thread(game.submit, raw)

        if result.accepted:
            logger.info(f"Word accepted: channel={channel_id}, word={result.word}")
        else:
            logger.debug(f"Word rejected: channel={channel_id}, word={result.word!r}, reason={result.reason.value}")
        return result
