import discord

from VouchBot.config.yamlHandler import get_optional

ICON_KEYS = {
    "info": "icon_info",
    "fail": "icon_fail",
}

def log(source: str, message: str):
    print(f"[{source}] {message}")

async def log_to_channel(
    guild: discord.Guild,
    message: str,
    color: discord.Color = discord.Color.greyple(),
    event_type: str = "info"
):
    try:
        log_channel_id = get_optional("behaviour", "LOG_ID", default=0)
        if not guild or not log_channel_id:
            return
        channel = guild.get_channel(int(log_channel_id))
        if not channel or not isinstance(channel, discord.TextChannel):
            return

        icon = get_optional("ICONS", ICON_KEYS.get(event_type.lower(), "icon_info"))

        embed = discord.Embed(
            description=message,
            color=color,
            timestamp=discord.utils.utcnow()
        )
        embed.set_author(name=guild.name, icon_url=guild.icon.url if guild.icon else None)
        if icon:
            embed.set_thumbnail(url=icon)

        await channel.send(embed=embed)

    except Exception as e:
        log("log", f"Logging failed: {e}")
