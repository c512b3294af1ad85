"""Views module for Word Scramble Bot."""
from views.game_ui import GameEmbed, REJECTION_MESSAGES, rejection_text

__all__ = [
    "GameEmbed",
    "REJECTION_MESSAGES",
    "rejection_text",
]
