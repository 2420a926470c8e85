"""Tests for the documentation slash command cog."""

from unittest.mock import AsyncMock, MagicMock

import discord
import pytest

from docbot.bot.cogs.docs_cmds import DocsCog, setup
from docbot.configuration.doc_sources import load_doc_catalog
from docbot.datatypes.doc_datatypes import DocumentationResult

PYTHON_CHANNEL = 111
REQUEST_CHANNEL = 222


@pytest.fixture
def catalog():
    return load_doc_catalog({"PYTHON_CHANNEL_ID": str(PYTHON_CHANNEL)})


@pytest.fixture
def fetcher():
    fake = MagicMock()
    fake.fetch = AsyncMock(return_value=DocumentationResult.found("**From [x](u):**\nsnippet\n\n"))
    return fake


@pytest.fixture
def bot():
    fake_bot = MagicMock()
    fake_bot.get_channel = MagicMock(return_value=None)
    fake_bot.fetch_channel = AsyncMock()
    return fake_bot


@pytest.fixture
def cog(bot, catalog, fetcher):
    return DocsCog(bot, catalog=catalog, fetcher=fetcher)


def make_context(channel_id: int = REQUEST_CHANNEL) -> MagicMock:
    ctx = MagicMock()
    ctx.channel_id = channel_id
    ctx.user = MagicMock(spec=discord.User)
    ctx.user.name = "bob"
    ctx.user.display_avatar.url = "https://cdn.example.com/bob.png"
    ctx.defer = AsyncMock()
    ctx.send_followup = AsyncMock()
    return ctx


@pytest.mark.asyncio
async def test_docs_command_replies_with_embed(cog, fetcher):
    ctx = make_context(channel_id=PYTHON_CHANNEL)

    await DocsCog.docs.callback(cog, ctx, "python", "asyncio")

    ctx.defer.assert_awaited_once()
    fetcher.fetch.assert_awaited_once_with("https://docs.python.org/3/", "asyncio")
    embed = ctx.send_followup.await_args.kwargs["embed"]
    assert embed.title == "📜 PYTHON Documentation"
    assert "snippet" in embed.description


@pytest.mark.asyncio
async def test_invalid_backend_language(cog, fetcher):
    ctx = make_context()

    await DocsCog.docs.callback(cog, ctx, "cobol", "anything")

    ctx.send_followup.assert_awaited_once_with(content="❌ Invalid backend language.")
    fetcher.fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_invalid_frontend_topic(cog, fetcher):
    ctx = make_context()

    await DocsCog.frontenddocs.callback(cog, ctx, "python", "anything")

    ctx.send_followup.assert_awaited_once_with(content="❌ Invalid frontend topic.")
    fetcher.fetch.assert_not_awaited()


@pytest.mark.asyncio
async def test_frontend_topic_without_channel_replies_in_place(cog, fetcher, bot):
    ctx = make_context()

    await DocsCog.frontenddocs.callback(cog, ctx, "react", "hooks")

    fetcher.fetch.assert_awaited_once_with("https://react.dev/docs/getting-started", "hooks")
    assert "embed" in ctx.send_followup.await_args.kwargs
    bot.fetch_channel.assert_not_awaited()


@pytest.mark.asyncio
async def test_off_topic_answer_is_forwarded(cog, bot):
    channel = MagicMock(spec=discord.TextChannel)
    channel.send = AsyncMock()
    bot.fetch_channel.return_value = channel
    ctx = make_context(channel_id=REQUEST_CHANNEL)

    await DocsCog.docs.callback(cog, ctx, "python", "asyncio")

    bot.fetch_channel.assert_awaited_once_with(PYTHON_CHANNEL)
    assert channel.send.await_args.kwargs["embed"].title == "📜 PYTHON Documentation"
    ctx.send_followup.assert_awaited_once_with(
        content=(
            "This question is off-topic for this channel. "
            f"The answer has been forwarded to <#{PYTHON_CHANNEL}>."
        )
    )


@pytest.mark.asyncio
async def test_cached_channel_is_used_before_fetching(cog, bot):
    channel = MagicMock(spec=discord.TextChannel)
    channel.send = AsyncMock()
    bot.get_channel.return_value = channel

    await DocsCog.docs.callback(cog, make_context(), "python", "asyncio")

    channel.send.assert_awaited_once()
    bot.fetch_channel.assert_not_awaited()


@pytest.mark.asyncio
async def test_forward_failure_falls_back_to_reply_in_place(cog, bot):
    response = MagicMock(status=403, reason="Forbidden")
    bot.fetch_channel.side_effect = discord.Forbidden(response, "Missing Access")
    ctx = make_context()

    await DocsCog.docs.callback(cog, ctx, "python", "asyncio")

    assert "embed" in ctx.send_followup.await_args.kwargs


@pytest.mark.asyncio
async def test_non_messageable_channel_is_not_used(cog, bot):
    bot.fetch_channel.return_value = MagicMock(spec=discord.CategoryChannel)

    assert await cog.forward_embed(PYTHON_CHANNEL, discord.Embed(title="t")) is False


@pytest.mark.asyncio
async def test_failed_lookup_is_still_shown_to_user(cog, fetcher, bot):
    fetcher.fetch.return_value = DocumentationResult.failed()
    ctx = make_context(channel_id=PYTHON_CHANNEL)

    await DocsCog.docs.callback(cog, ctx, "python", "asyncio")

    embed = ctx.send_followup.await_args.kwargs["embed"]
    assert embed.description.endswith("❌ Failed to retrieve documentation.")
    assert embed.color == discord.Color.red()


def test_setup_registers_cog():
    fake_bot = MagicMock()

    setup(fake_bot)

    fake_bot.add_cog.assert_called_once()
    assert isinstance(fake_bot.add_cog.call_args.args[0], DocsCog)
