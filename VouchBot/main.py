# main
import asyncio
import signal
import traceback

import discord
from discord import app_commands
from discord.ext import commands

from VouchBot.config.yamlHandler import get_optional
from VouchBot.scripts.context import BotContext
from VouchBot.scripts.commands import register_commands, sync_commands
from VouchBot.scripts.log import log

intents = discord.Intents.default()
intents.members = True


class VouchClient(commands.Bot):
    def __init__(self, application_id: int | None = None):
        super().__init__(
            command_prefix=commands.when_mentioned,
            intents=intents,
            application_id=application_id
        )
        self.ctx: BotContext | None = None

    async def setup_hook(self):
        if self.ctx is not None:
            await sync_commands(self.tree, self.ctx)

    async def on_ready(self):
        log("main", f"Logged in as {self.user}")


def build_bot() -> VouchClient:
    ctx = BotContext.from_config()
    bot = VouchClient(application_id=ctx.application_id)
    ctx.client = bot
    bot.ctx = ctx
    register_commands(bot.tree, bot.ctx)

    @bot.tree.error
    async def on_app_command_error(interaction: discord.Interaction, error: app_commands.AppCommandError):
        name = interaction.command.name if interaction.command else "unknown"
        log("main", f"/{name} failed: {error}")
        traceback.print_exception(type(error), error, error.__traceback__)

    return bot


bot: VouchClient | None = None

async def main():
    global bot
    token = get_optional("tokens", "bot")
    if not token:
        log("main", "No bot token configured.")
        return
    bot = build_bot()
    async with bot:
        await bot.start(token)

async def shutdown():
    if bot is not None:
        await bot.close()

def signal_handler(sig, frame):
    asyncio.create_task(shutdown())

if __name__ == "__main__":
    signal.signal(signal.SIGTERM, signal_handler)
    try:
        asyncio.run(main())
    except KeyboardInterrupt:
        pass
