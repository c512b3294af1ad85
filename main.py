"""
Word Scramble Discord Bot - Main Entry Point

A Discord bot for playing Word Scramble: the bot picks a random start word
and players find words spelled from its letters.
Features:
- One game per channel
- Dictionary validation (Free Dictionary API or a local word list)
- Cached dictionary lookups
"""
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional, Sequence

import discord
from discord.ext import commands

from config import (
    SETTINGS,
    DictionaryBackend,
    LOGGER_NAME_MAIN,
    LOGGER_NAME_GAME,
    LOGGER_NAME_DICTIONARY,
    LOGGER_NAME_DB,
)
from database import async_session_factory, init_database, close_database
from services.dictionary import DictionaryUnavailableError, FreeDictionaryChecker, WordListDictionary
from services.game_manager import GameManager
from services.word_list import StartWordsUnavailableError, load_start_words

# Setup logging
def setup_logging():
    """Configure logging for the bot."""
    log_level = logging.DEBUG if SETTINGS.dev_mode else logging.INFO

    # Create formatter
    formatter = logging.Formatter(
        fmt="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S"
    )

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.setLevel(log_level)

    # File handler
    log_dir = Path("logs")
    log_dir.mkdir(exist_ok=True)
    file_handler = logging.FileHandler(
        log_dir / "bot.log",
        encoding="utf-8",
        mode="a"
    )
    file_handler.setFormatter(formatter)
    file_handler.setLevel(logging.DEBUG)

    # Setup loggers
    for logger_name in [LOGGER_NAME_MAIN, LOGGER_NAME_GAME, LOGGER_NAME_DICTIONARY, LOGGER_NAME_DB]:
        logger = logging.getLogger(logger_name)
        logger.setLevel(logging.DEBUG)
        logger.addHandler(console_handler)
        logger.addHandler(file_handler)

    # Discord.py logger
    discord_logger = logging.getLogger("discord")
    discord_logger.setLevel(logging.WARNING)
    discord_logger.addHandler(console_handler)

    return logging.getLogger(LOGGER_NAME_MAIN)


class WordScrambleBot(commands.Bot):
    """Main bot class for Word Scramble Discord Bot."""

    def __init__(self, start_words: Sequence[str], word_list_checker: Optional[WordListDictionary] = None):
        intents = discord.Intents.default()
        intents.message_content = True  # Required for reading messages
        intents.guilds = True

        super().__init__(
            command_prefix="!",  # Prefix for legacy commands (not used)
            intents=intents,
            help_command=None,  # Disable default help
            activity=discord.Activity(
                type=discord.ActivityType.playing,
                name="/scramble start"
            )
        )

        self.logger = logging.getLogger(LOGGER_NAME_MAIN)
        self.start_words = list(start_words)
        self.word_list_checker = word_list_checker
        self.api_checker: Optional[FreeDictionaryChecker] = None
        self.game_manager: Optional[GameManager] = None

    async def setup_hook(self):
        """Called when the bot is starting up."""
        self.logger.info("Setting up bot...")

        if self.word_list_checker is not None:
            checker = self.word_list_checker
        else:
            # Initialize database for the lookup cache
            await init_database()
            self.api_checker = FreeDictionaryChecker(async_session_factory)
            await self.api_checker.open()
            checker = self.api_checker

        self.game_manager = GameManager(self.start_words, checker)

        # Load cogs
        cogs = [
            "cogs.game_commands",
            "cogs.word_handler",
        ]

        for cog in cogs:
            try:
                await self.load_extension(cog)
                self.logger.info(f"Loaded cog: {cog}")
            except Exception as e:
                self.logger.error(f"Failed to load cog {cog}: {e}")
                raise

        # Sync slash commands
        self.logger.info("Syncing slash commands...")
        try:
            synced = await self.tree.sync()
            self.logger.info(f"Synced {len(synced)} slash commands")
        except discord.HTTPException as e:
            self.logger.error(f"Failed to sync commands: {e}")

    async def on_ready(self):
        """Called when the bot is ready."""
        self.logger.info(f"Bot is ready!")
        self.logger.info(f"Logged in as: {self.user.name} (ID: {self.user.id})")
        self.logger.info(f"Connected to {len(self.guilds)} guilds")
        self.logger.info(f"Dictionary backend: {SETTINGS.dictionary_backend} ({SETTINGS.dictionary_language})")
        self.logger.info(f"Dev mode: {SETTINGS.dev_mode}")

    async def on_command_error(self, ctx: commands.Context, error: commands.CommandError):
        """Global error handler for commands."""
        if isinstance(error, commands.CommandNotFound):
            return  # Ignore command not found

        self.logger.error(f"Command error: {error}")

    async def close(self):
        """Clean up before shutting down."""
        self.logger.info("Shutting down bot...")

        if self.api_checker:
            await self.api_checker.close()
            await close_database()

        await super().close()


async def main():
    """Main entry point."""
    # Setup logging
    logger = setup_logging()
    logger.info("Starting Word Scramble Bot...")

    # Validate configuration
    if not SETTINGS.discord_token:
        logger.error("DISCORD_TOKEN not set! Please set it in .env file.")
        sys.exit(1)

    if SETTINGS.dictionary_backend == DictionaryBackend.WORDLIST and not SETTINGS.dictionary_words_path:
        logger.error("DICTIONARY_WORDS_PATH not set! Required for the wordlist dictionary backend.")
        sys.exit(1)

    # Without start words there is no playable session
    try:
        start_words = load_start_words(SETTINGS.start_words_path)
    except StartWordsUnavailableError as e:
        logger.critical(str(e))
        sys.exit(1)

    word_list_checker = None
    if SETTINGS.dictionary_backend == DictionaryBackend.WORDLIST:
        try:
            word_list_checker = WordListDictionary.from_file(
                SETTINGS.dictionary_words_path,
                SETTINGS.dictionary_language
            )
        except DictionaryUnavailableError as e:
            logger.critical(str(e))
            sys.exit(1)

    # Create and run bot
    bot = WordScrambleBot(start_words, word_list_checker)

    try:
        async with bot:
            await bot.start(SETTINGS.discord_token)
    except KeyboardInterrupt:
        logger.info("Received keyboard interrupt")
    except Exception as e:
        logger.error(f"Bot crashed: {e}")
        raise
    finally:
        if not bot.is_closed():
            await bot.close()


if __name__ == "__main__":
    asyncio.run(main())
