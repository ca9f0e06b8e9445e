#embeds.py

from datetime import datetime, timezone

import discord

from VouchBot.scripts.store import VouchRecord

STAR = "⭐"


def render_stars(rating: int) -> str:
    return STAR * rating


def parse_timestamp(value: str) -> datetime:
    # stored timestamps may carry a trailing "Z"
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def build_vouch_embed(
    author_id: int | str,
    rating: int,
    review: str,
    avatar: str | None,
    attachment: str | None = None,
    timestamp: datetime | None = None
) -> discord.Embed:
    embed = discord.Embed(
        title="New Vouch",
        description=(
            f"**Voucher:** <@{author_id}>\n"
            f"**Rating:** {render_stars(rating)}\n"
            f"**Review:**\n```{review}```"
        ),
        timestamp=timestamp or discord.utils.utcnow()
    )
    embed.set_thumbnail(url=avatar)
    if attachment:
        embed.set_image(url=attachment)
    return embed


def embed_for_record(record: VouchRecord) -> discord.Embed:
    """Replay rendering: the embed keeps the record's original creation time."""
    return build_vouch_embed(
        record.authorId,
        record.rating,
        record.review,
        record.avatar,
        record.attachment,
        timestamp=parse_timestamp(record.timestamp)
    )
