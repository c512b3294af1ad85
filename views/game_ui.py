"""
Game UI components for Word Scramble Bot.
Provides embeds for game state and rejection messages.
"""
from typing import Dict, Tuple

import discord

from models.game import GameSession
from models.submission import RejectionReason

# reason -> (title, message); "{root}" is filled with the session's root word
REJECTION_MESSAGES: Dict[RejectionReason, Tuple[str, str]] = {
    RejectionReason.EMPTY: ("Empty word", "Actually enter a word"),
    RejectionReason.ALREADY_USED: ("Word used already", "Be more original"),
    RejectionReason.SAME_AS_ROOT: ("Word is the start word", "You can't just use '{root}'!"),
    RejectionReason.NOT_SPELLABLE: ("Word not possible", "You can't spell that word from '{root}'!"),
    RejectionReason.NOT_RECOGNIZED: ("Word not recognized", "You can't just make them up, you know!"),
}

# Most recent words shown in an embed
MAX_WORDS_SHOWN = 20


def rejection_text(reason: RejectionReason, root_word: str) -> Tuple[str, str]:
    """Title and message shown to the player for a rejection."""
    title, message = REJECTION_MESSAGES[reason]
    return title, message.format(root=root_word)


def format_used_words(game: GameSession) -> str:
    """One line per word, most recent first, with its letter count."""
    if not game.used_words:
        return "*No words yet*"
    lines = [f"`{len(word):>2}` {word}" for word in game.used_words[:MAX_WORDS_SHOWN]]
    hidden = len(game.used_words) - MAX_WORDS_SHOWN
    if hidden > 0:
        lines.append(f"*...and {hidden} more*")
    return "\n".join(lines)


class GameEmbed:
    """Factory for creating game-related embeds."""

    @staticmethod
    def game_started(game: GameSession) -> discord.Embed:
        """Create embed for game start announcement."""
        embed = discord.Embed(
            title=f"🔤 {game.root_word}",
            description=(
                "📝 **Rules:**\n"
                f"• Make words using only the letters of **{game.root_word}**\n"
                "• Each letter can be used as many times as it appears\n"
                "• No repeats, and it has to be a real word\n\n"
                "Just type a word in this channel!"
            ),
            color=discord.Color.green()
        )
        return embed

    @staticmethod
    def word_accepted(game: GameSession, word: str) -> discord.Embed:
        """Create embed for accepted word."""
        embed = discord.Embed(
            title=f"✅ {word}",
            description=format_used_words(game),
            color=discord.Color.green()
        )
        embed.set_footer(text=f"{game.root_word} • {len(game.used_words)} words found")
        return embed

    @staticmethod
    def word_rejected(game: GameSession, reason: RejectionReason) -> discord.Embed:
        """Create embed for rejected word."""
        title, message = rejection_text(reason, game.root_word)
        embed = discord.Embed(
            title=f"⚠️ {title}",
            description=message,
            color=discord.Color.orange()
        )
        return embed

    @staticmethod
    def used_words(game: GameSession) -> discord.Embed:
        """Create embed listing the words found so far."""
        embed = discord.Embed(
            title=f"🔤 {game.root_word}",
            description=format_used_words(game),
            color=discord.Color.blue()
        )
        embed.set_footer(text=f"{len(game.used_words)} words found")
        return embed

    @staticmethod
    def game_ended(game: GameSession) -> discord.Embed:
        """Create embed for game end."""
        embed = discord.Embed(
            title="🏁 Game over!",
            description=(
                f"Start word: **{game.root_word}**\n"
                f"Words found: **{len(game.used_words)}**"
            ),
            color=discord.Color.gold()
        )
        if game.used_words:
            longest = max(game.used_words, key=len)
            embed.add_field(name="📏 Longest word", value=longest, inline=False)
        return embed

    @staticmethod
    def no_game() -> discord.Embed:
        """Create embed for channels without a running game."""
        return discord.Embed(
            title="❌ No game running",
            description="Use `/scramble start` to start one.",
            color=discord.Color.red()
        )
