"""
Word Handler Cog for Word Scramble Bot.
Handles message events for word submissions during active games.
"""
import logging

import discord
from discord.ext import commands

from config import LOGGER_NAME_GAME
from models.game import GameSession
from services.game_manager import GameManager
from views.game_ui import GameEmbed

logger = logging.getLogger(LOGGER_NAME_GAME)


def looks_like_submission(content: str) -> bool:
    """
    Only single-token messages are treated as guesses; chatter is ignored.

    Blank content (attachment-only posts, stickers) is not a guess either, so
    the bot never answers with the "Empty word" rejection. That rejection is
    still produced by GameSession for blank input from other callers.
    """
    return len(content.split()) == 1


class WordHandler(commands.Cog):
    """Cog for handling word submissions in active games."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @property
    def game_manager(self) -> GameManager:
        return self.bot.game_manager

    @commands.Cog.listener()
    async def on_message(self, message: discord.Message):
        """Handle incoming messages for word submissions."""
        # Ignore bots
        if message.author.bot:
            return

        game = self.game_manager.get_game(message.channel.id)
        if not game:
            return

        if not looks_like_submission(message.content):
            return

        await self._process_word(message, game)

    async def _process_word(self, message: discord.Message, game: GameSession):
        """Process a word submission against the session it was sent to."""
        channel = message.channel
        result = await self.game_manager.submit(channel.id, message.content, game)
        if result is None:
            return

        # The game was ended or restarted while the word was being checked
        if self.game_manager.get_game(channel.id) is not game:
            logger.debug(f"Dropping reply for replaced game in channel {channel.id}: {result.word!r}")
            return

        if not result.accepted:
            await channel.send(embed=GameEmbed.word_rejected(game, result.reason))
            return

        try:
            await message.add_reaction("✅")
        except discord.HTTPException:
            pass

        await channel.send(embed=GameEmbed.word_accepted(game, result.word))


async def setup(bot: commands.Bot):
    """Setup function for loading the cog."""
    await bot.add_cog(WordHandler(bot))
