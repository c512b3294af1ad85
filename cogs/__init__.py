"""Cogs module for Word Scramble Bot."""
from cogs.game_commands import GameCommands
from cogs.word_handler import WordHandler

__all__ = [
    "GameCommands",
    "WordHandler",
]
