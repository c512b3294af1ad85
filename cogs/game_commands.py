"""
Game Commands Cog for Word Scramble Bot.
Handles all slash commands related to game management.
"""
import logging

import discord
from discord import app_commands
from discord.ext import commands

from config import LOGGER_NAME_GAME
from services.game_manager import GameManager
from views.game_ui import GameEmbed

logger = logging.getLogger(LOGGER_NAME_GAME)


class GameCommands(commands.Cog):
    """Cog containing all game-related slash commands."""

    def __init__(self, bot: commands.Bot):
        self.bot = bot

    @property
    def game_manager(self) -> GameManager:
        return self.bot.game_manager

    scramble = app_commands.Group(
        name="scramble",
        description="Word Scramble game commands"
    )

    @scramble.command(name="start", description="Start a new game with a random word")
    async def start_game(self, interaction: discord.Interaction):
        """Start a new game, replacing the running one in this channel."""
        previous = self.game_manager.end_game(interaction.channel_id)
        if previous:
            logger.info(f"Restarting game in channel {interaction.channel_id}")

        game = self.game_manager.start_game(interaction.channel_id)
        await interaction.response.send_message(embed=GameEmbed.game_started(game))

    @scramble.command(name="words", description="Show the words found so far")
    async def show_words(self, interaction: discord.Interaction):
        """Show the current game's word list."""
        game = self.game_manager.get_game(interaction.channel_id)
        if not game:
            await interaction.response.send_message(embed=GameEmbed.no_game(), ephemeral=True)
            return

        await interaction.response.send_message(embed=GameEmbed.used_words(game))

    @scramble.command(name="end", description="End the game in this channel")
    async def end_game(self, interaction: discord.Interaction):
        """End the current game."""
        game = self.game_manager.end_game(interaction.channel_id)
        if not game:
            await interaction.response.send_message(embed=GameEmbed.no_game(), ephemeral=True)
            return

        await interaction.response.send_message(embed=GameEmbed.game_ended(game))


async def setup(bot: commands.Bot):
    """Setup function for loading the cog."""
    await bot.add_cog(GameCommands(bot))
