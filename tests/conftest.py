"""Shared fixtures: a throwaway config, a temp-backed store and Discord fakes."""

from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

from VouchBot.config import yamlHandler
from VouchBot.scripts.context import BotContext
from VouchBot.scripts.store import VouchStore

OWNER_ID = 4242
GUILD_ID = 1001
VOUCH_CHANNEL_ID = 2002

CONF = f"""
tokens:
  bot: ""
ids:
  CLIENT_ID: 3003
  GUILD_ID: {GUILD_ID}
  VOUCH_CHANNEL_ID: "{VOUCH_CHANNEL_ID}"
  OWNER_ID: {OWNER_ID}
behaviour:
  DATA_FILE: "test-information.json"
  LOG_ID: 0
  DEBUG: "true"
"""


@pytest.fixture(autouse=True)
def config(tmp_path: Path):
    path = tmp_path / "conf.yml"
    path.write_text(CONF, encoding="utf-8")
    yield yamlHandler.load_config(path)
    yamlHandler._config = None


@pytest.fixture
def store(tmp_path: Path) -> VouchStore:
    return VouchStore(tmp_path / "information.json")


@pytest.fixture
def channel() -> MagicMock:
    ch = MagicMock()
    ch.name = "vouches"
    ch.mention = f"<#{VOUCH_CHANNEL_ID}>"
    ch.send = AsyncMock()
    ch.edit = AsyncMock()
    return ch


@pytest.fixture
def client(channel: MagicMock) -> MagicMock:
    c = MagicMock()
    c.get_channel.side_effect = lambda cid: channel if cid == VOUCH_CHANNEL_ID else None
    return c


@pytest.fixture
def ctx(client: MagicMock, store: VouchStore) -> BotContext:
    return BotContext(
        client=client,
        store=store,
        guild_id=GUILD_ID,
        vouch_channel_id=VOUCH_CHANNEL_ID,
        owner_id=OWNER_ID,
    )


def make_interaction(user_id: int = 777, name: str = "tester", manage_channels: bool = True) -> MagicMock:
    interaction = MagicMock()
    interaction.user.id = user_id
    interaction.user.__str__.return_value = name
    interaction.user.display_avatar.url = f"https://cdn.example.com/avatars/{user_id}.png"
    interaction.guild.me.guild_permissions.manage_channels = manage_channels
    interaction.response.send_message = AsyncMock()
    interaction.response.defer = AsyncMock()
    interaction.edit_original_response = AsyncMock()
    return interaction


@pytest.fixture
def interaction() -> MagicMock:
    return make_interaction()


@pytest.fixture
def owner_interaction() -> MagicMock:
    return make_interaction(user_id=OWNER_ID, name="owner")
