# vouch.py

import asyncio
import discord

from VouchBot.scripts.context import BotContext
from VouchBot.scripts.embeds import build_vouch_embed
from VouchBot.scripts.log import log, log_to_channel
from VouchBot.scripts.payloads import VouchInvocation
from VouchBot.scripts.store import VouchRecord
from VouchBot.scripts.timeouts import race

RENAME_TIMEOUT = 5.0


def channel_name_for(record_id: int) -> str:
    return f"{record_id}-vouches"


async def handle_vouch(ctx: BotContext, interaction: discord.Interaction, invocation: VouchInvocation) -> VouchRecord:
    user = interaction.user

    record_id = await asyncio.to_thread(ctx.store.next_id)

    created = discord.utils.utcnow()
    avatar = user.display_avatar.url
    record = VouchRecord(
        id=record_id,
        author=str(user),
        authorId=str(user.id),
        avatar=avatar,
        rating=invocation.stars,
        review=invocation.review,
        timestamp=created.isoformat(),
        attachment=invocation.attachment_url,
    )
    await asyncio.to_thread(ctx.store.append, record)

    embed = build_vouch_embed(
        user.id,
        invocation.stars,
        invocation.review,
        avatar,
        invocation.attachment_url,
        timestamp=created
    )
    await interaction.response.send_message(embed=embed)

    await rename_vouch_channel(ctx, interaction.guild, record_id)
    return record


async def rename_vouch_channel(ctx: BotContext, guild: discord.Guild | None, record_id: int) -> str:
    """Best-effort rename of the vouch channel. Returns the outcome, never raises."""
    channel = ctx.vouch_channel()
    if not channel:
        log("vouch", "Vouch channel not found.")
        return "not_found"
    log("vouch", f"Vouch channel found: {channel.name}")

    if guild is None or not guild.me.guild_permissions.manage_channels:
        log("vouch", "Bot does not have Manage Channels permission.")
        return "no_permission"

    name = channel_name_for(record_id)
    try:
        log("vouch", "Attempting to update channel name...")
        outcome = await race(channel.edit(name=name), RENAME_TIMEOUT)
    except Exception as e:
        log("vouch", f"Failed to update channel name: {e}")
        await log_to_channel(guild, f"❌ Failed to rename vouch channel to `{name}`: {e}", discord.Color.red(), "fail")
        return "failed"

    if outcome.timed_out:
        # channel renames are heavily rate limited, discord.py waits instead of failing
        log("vouch", "Updating channel name timed out.")
        await log_to_channel(guild, f"⏳ Renaming vouch channel to `{name}` timed out.", discord.Color.orange(), "fail")
        return "timeout"

    log("vouch", f"Updated channel name to {name}")
    return "renamed"
