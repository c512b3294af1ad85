import asyncio
import threading

import pytest

from cogs.word_handler import WordHandler
from services.game_manager import GameManager
from tests.conftest import PickFirst


class FakeChannel:
    def __init__(self, channel_id):
        self.id = channel_id
        self.sent = []

    async def send(self, embed=None):
        self.sent.append(embed)


class FakeAuthor:
    bot = False


class FakeMessage:
    def __init__(self, channel, content):
        self.channel = channel
        self.content = content
        self.author = FakeAuthor()
        self.reactions = []

    async def add_reaction(self, emoji):
        self.reactions.append(emoji)


class FakeBot:
    def __init__(self, game_manager):
        self.game_manager = game_manager


class SlowChecker:
    """Blocks inside the lookup until released."""

    def __init__(self, words):
        self.words = set(words)
        self.entered = threading.Event()
        self.release = threading.Event()

    def __call__(self, word, language):
        self.entered.set()
        self.release.wait(timeout=5)
        return word in self.words


def make_handler(checker, word_list=("silkworm",)):
    manager = GameManager(list(word_list), checker, rng=PickFirst(), language="en", allow_root_word=False)
    return WordHandler(FakeBot(manager)), manager


def instant(words):
    checker = SlowChecker(words)
    checker.release.set()
    return checker


@pytest.mark.asyncio
async def test_accepted_word_gets_reaction_and_list():
    handler, manager = make_handler(instant({"silk"}))
    manager.start_game(1)
    channel = FakeChannel(1)
    message = FakeMessage(channel, "Silk")

    await handler.on_message(message)

    assert message.reactions == ["✅"]
    assert len(channel.sent) == 1
    assert channel.sent[0].title == "✅ silk"
    assert "silk" in channel.sent[0].description
    assert channel.sent[0].footer.text == "silkworm • 1 words found"


@pytest.mark.asyncio
async def test_rejection_quotes_the_root_word():
    handler, manager = make_handler(instant({"dog"}))
    manager.start_game(1)
    channel = FakeChannel(1)

    await handler.on_message(FakeMessage(channel, "dog"))

    assert channel.sent[0].title == "⚠️ Word not possible"
    assert channel.sent[0].description == "You can't spell that word from 'silkworm'!"


@pytest.mark.asyncio
async def test_chatter_and_other_channels_are_ignored():
    handler, manager = make_handler(instant({"silk"}))
    manager.start_game(1)
    chatty = FakeChannel(1)
    elsewhere = FakeChannel(2)

    await handler.on_message(FakeMessage(chatty, "nice one everyone"))
    await handler.on_message(FakeMessage(elsewhere, "silk"))

    assert chatty.sent == []
    assert elsewhere.sent == []
    assert manager.get_game(1).used_words == []


@pytest.mark.asyncio
async def test_restart_during_lookup_does_not_show_old_word_in_new_game():
    checker = SlowChecker({"silk"})
    handler, manager = make_handler(checker)
    old_game = manager.start_game(1)
    channel = FakeChannel(1)

    task = asyncio.create_task(handler.on_message(FakeMessage(channel, "silk")))
    assert await asyncio.to_thread(checker.entered.wait, 5)

    manager.word_list = ["cat"]
    new_game = manager.start_game(1)
    checker.release.set()
    await task

    assert old_game.used_words == ["silk"]
    assert new_game.root_word == "cat"
    assert new_game.used_words == []
    assert channel.sent == []


@pytest.mark.asyncio
async def test_submit_to_replaced_session_is_refused():
    handler, manager = make_handler(instant({"silk"}))
    old_game = manager.start_game(1)
    manager.start_game(1)

    assert await manager.submit(1, "silk", old_game) is None
    assert old_game.used_words == []


@pytest.mark.asyncio
async def test_message_without_text_gets_no_reply():
    handler, manager = make_handler(instant({"silk"}))
    manager.start_game(1)
    channel = FakeChannel(1)

    await handler.on_message(FakeMessage(channel, ""))

    assert channel.sent == []
    assert manager.get_game(1).used_words == []
