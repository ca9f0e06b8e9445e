# restore.py

import asyncio
from asyncio import sleep

import discord

from VouchBot.scripts.context import BotContext
from VouchBot.scripts.embeds import embed_for_record
from VouchBot.scripts.log import log, log_to_channel
from VouchBot.scripts.payloads import RestoreInvocation

RESTORE_DELAY = 2.5


async def handle_restore(ctx: BotContext, interaction: discord.Interaction, invocation: RestoreInvocation) -> int:
    """Replay every stored vouch into the vouch channel, oldest first.

    Only the configured owner may run this. Each send is followed by a fixed
    delay to stay clear of Discord's rate limits. A failed send is not
    retried and ends the replay. Returns the number of vouches sent.
    """
    if interaction.user.id != ctx.owner_id:
        await interaction.response.send_message("You do not have permission to use this command.", ephemeral=True)
        return 0

    if not ctx.store.exists():
        await interaction.response.send_message("No vouch data found to restore.", ephemeral=True)
        return 0

    await interaction.response.defer(ephemeral=True, thinking=True)

    records = await asyncio.to_thread(ctx.store.load)

    channel = ctx.vouch_channel()
    if not channel:
        await interaction.edit_original_response(content="Vouch channel not found.")
        return 0

    sent = 0
    for record in records:
        await channel.send(embed=embed_for_record(record))
        sent += 1
        await sleep(RESTORE_DELAY)

    log("restore", f"Restored {sent} vouches to #{channel.name}")
    await log_to_channel(interaction.guild, f"♻️ Restored {sent} vouches to {channel.mention}", discord.Color.green(), "info")
    await interaction.edit_original_response(content="All vouches have been restored.")
    return sent
