"""Tests for the documentation embed builder."""

from unittest.mock import MagicMock

import discord

from docbot.configuration.doc_sources import DocSource
from docbot.datatypes.doc_datatypes import EMPTY_REPLY, FAILED_REPLY, DocumentationResult
from docbot.ui.docs_embed import (
    AUTHOR_NAME,
    EMBED_DESCRIPTION_LIMIT,
    TRUNCATION_MARKER,
    build_documentation_embed,
    truncate_for_embed,
)

PYTHON = DocSource(key="python", url="https://docs.python.org/3/", thumbnail="https://example.com/python.png")


def make_user() -> MagicMock:
    user = MagicMock(spec=discord.User)
    user.name = "alice"
    user.display_avatar.url = "https://cdn.example.com/alice.png"
    return user


def test_found_embed_layout():
    result = DocumentationResult.found("**From [Click here for more information](u):**\nasyncio.run\n\n")

    embed = build_documentation_embed(PYTHON, "asyncio", result, requested_by=make_user())

    assert embed.title == "📜 PYTHON Documentation"
    assert embed.description.startswith("**🔍 Search Term:** `asyncio`\n\n")
    assert "asyncio.run" in embed.description
    assert embed.color == discord.Color(0x0099FF)
    payload = embed.to_dict()
    assert payload["author"]["name"] == AUTHOR_NAME
    assert payload["thumbnail"]["url"] == PYTHON.thumbnail
    assert payload["image"]["url"] == PYTHON.thumbnail
    assert payload["footer"]["text"] == "Requested by alice"
    assert payload["footer"]["icon_url"] == "https://cdn.example.com/alice.png"


def test_empty_and_failed_embeds_show_sentinels():
    empty = build_documentation_embed(PYTHON, "x", DocumentationResult.empty())
    failed = build_documentation_embed(PYTHON, "x", DocumentationResult.failed())

    assert empty.description.endswith(EMPTY_REPLY)
    assert empty.color == discord.Color.orange()
    assert failed.description.endswith(FAILED_REPLY)
    assert failed.color == discord.Color.red()


def test_long_reply_is_truncated_to_description_limit():
    result = DocumentationResult.found("y" * 10_000)

    embed = build_documentation_embed(PYTHON, "query", result)

    assert len(embed.description) == EMBED_DESCRIPTION_LIMIT
    assert embed.description.endswith(TRUNCATION_MARKER)


def test_truncate_for_embed_leaves_short_text_alone():
    assert truncate_for_embed("short", limit=10) == "short"
    assert truncate_for_embed("x" * 30, limit=20) == "x" * 5 + TRUNCATION_MARKER


def test_source_without_thumbnail():
    source = DocSource(key="custom", url="https://example.com/docs")

    embed = build_documentation_embed(source, "q", DocumentationResult.empty())

    payload = embed.to_dict()
    assert "thumbnail" not in payload
    assert "image" not in payload
    assert "footer" not in payload
