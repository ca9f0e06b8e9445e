from datetime import datetime, timezone

from VouchBot.scripts.embeds import render_stars, build_vouch_embed, embed_for_record, parse_timestamp
from VouchBot.scripts.store import VouchRecord


def test_render_stars():
    assert render_stars(3) == "⭐⭐⭐"
    assert render_stars(5) == "⭐" * 5
    assert render_stars(1).count("⭐") == 1


def test_vouch_embed_layout():
    when = datetime(2024, 6, 1, 10, 30, tzinfo=timezone.utc)
    embed = build_vouch_embed(123, 3, "solid trade", "https://cdn.example.com/a.png", timestamp=when)

    assert embed.title == "New Vouch"
    assert embed.description == "**Voucher:** <@123>\n**Rating:** ⭐⭐⭐\n**Review:**\n```solid trade```"
    assert embed.thumbnail.url == "https://cdn.example.com/a.png"
    assert embed.image.url is None
    assert embed.timestamp == when


def test_vouch_embed_with_attachment():
    embed = build_vouch_embed(1, 5, "pics", "https://cdn.example.com/a.png", "https://cdn.example.com/proof.png")
    assert embed.image.url == "https://cdn.example.com/proof.png"
    assert embed.timestamp is not None


def test_review_is_rendered_verbatim():
    review = "**not bold** <@999> `tick`"
    embed = build_vouch_embed(1, 2, review, None)
    assert f"```{review}```" in embed.description


def test_record_embed_uses_original_timestamp():
    record = VouchRecord(
        id=4,
        author="old",
        authorId="555",
        avatar="https://cdn.example.com/old.png",
        rating=2,
        review="from the archive",
        timestamp="2023-02-03T04:05:06.789Z",
        attachment="https://cdn.example.com/att.png",
    )

    embed = embed_for_record(record)

    assert embed.timestamp == datetime(2023, 2, 3, 4, 5, 6, 789000, tzinfo=timezone.utc)
    assert "<@555>" in embed.description
    assert "⭐⭐\n" in embed.description
    assert embed.thumbnail.url == "https://cdn.example.com/old.png"
    assert embed.image.url == "https://cdn.example.com/att.png"


def test_parse_timestamp_accepts_offsets():
    assert parse_timestamp("2024-01-01T00:00:00+00:00") == datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_parse_timestamp_without_offset_is_utc():
    parsed = parse_timestamp("2024-01-01T12:00:00")
    assert parsed.tzinfo is timezone.utc
    assert parsed == datetime(2024, 1, 1, 12, tzinfo=timezone.utc)
