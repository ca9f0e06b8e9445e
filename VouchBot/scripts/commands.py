# commands.py

from typing import Optional

import discord
from discord import app_commands

from VouchBot.scripts.context import BotContext
from VouchBot.scripts.log import log
from VouchBot.scripts.payloads import Invocation, VouchInvocation, RestoreInvocation
from VouchBot.scripts.vouch import handle_vouch
from VouchBot.scripts.restore import handle_restore

STAR_CHOICES = [
    app_commands.Choice(name="5 stars", value=5),
    app_commands.Choice(name="4 stars", value=4),
    app_commands.Choice(name="3 stars", value=3),
    app_commands.Choice(name="2 stars", value=2),
    app_commands.Choice(name="1 star", value=1),
]


async def dispatch(ctx: BotContext, interaction: discord.Interaction, invocation: Invocation):
    if isinstance(invocation, VouchInvocation):
        return await handle_vouch(ctx, interaction, invocation)
    if isinstance(invocation, RestoreInvocation):
        return await handle_restore(ctx, interaction, invocation)
    raise TypeError(f"Unknown invocation: {invocation!r}")


def build_commands(ctx: BotContext) -> list[app_commands.Command]:
    @app_commands.command(name="vouch", description="Submit a vouch review")
    @app_commands.describe(review="Your review", stars="Rating in stars", attachment="Optional attachment")
    @app_commands.choices(stars=STAR_CHOICES)
    async def vouch(
        interaction: discord.Interaction,
        review: str,
        stars: app_commands.Choice[int],
        attachment: Optional[discord.Attachment] = None
    ):
        invocation = VouchInvocation(
            review=review,
            stars=stars.value,
            attachment_url=attachment.url if attachment else None
        )
        await dispatch(ctx, interaction, invocation)

    @app_commands.command(name="restore", description="Restore all vouches from information.json")
    async def restore(interaction: discord.Interaction):
        await dispatch(ctx, interaction, RestoreInvocation())

    return [vouch, restore]


def register_commands(tree: app_commands.CommandTree, ctx: BotContext):
    for command in build_commands(ctx):
        tree.add_command(command, guild=ctx.guild, override=True)


async def sync_commands(tree: app_commands.CommandTree, ctx: BotContext) -> bool:
    """Push the guild command set to Discord, replacing whatever was there."""
    try:
        synced = await tree.sync(guild=ctx.guild)
    except Exception as e:
        log("commands", f"Error registering application commands: {e}")
        return False
    log("commands", f"Successfully registered {len(synced)} application commands.")
    return True
