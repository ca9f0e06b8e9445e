from dataclasses import dataclass

import discord

from VouchBot.config.yamlHandler import get_value, get_optional
from VouchBot.scripts.store import VouchStore, DATA_DIR, STORE_FILENAME


@dataclass
class BotContext:
    client: discord.Client | None
    store: VouchStore
    guild_id: int
    vouch_channel_id: int
    owner_id: int
    application_id: int | None = None

    @classmethod
    def from_config(cls, client: discord.Client | None = None) -> "BotContext":
        data_file = get_optional("behaviour", "DATA_FILE", default=STORE_FILENAME)
        return cls(
            client=client,
            store=VouchStore(DATA_DIR / str(data_file)),
            guild_id=int(get_value("ids", "GUILD_ID")),
            vouch_channel_id=int(get_value("ids", "VOUCH_CHANNEL_ID")),
            owner_id=int(get_value("ids", "OWNER_ID")),
            application_id=int(get_optional("ids", "CLIENT_ID", default=0)) or None,
        )

    @property
    def guild(self) -> discord.Object:
        return discord.Object(id=self.guild_id)

    def vouch_channel(self):
        return self.client.get_channel(self.vouch_channel_id)
