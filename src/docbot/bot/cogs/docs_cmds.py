"""
Documentation cog: slash commands that search official documentation sites.

Commands
- ``/docs language query``: backend topics (python, cpp, clang, java, golang,
  databases, rust).
- ``/frontenddocs topic query``: frontend topics (javascript, react, nextjs,
  node, typescript).

Both commands defer their response, crawl the topic's documentation site with
the shared :class:`DocumentationFetcher`, and reply with an embed. When the
topic has a forward channel configured and the command was issued somewhere
else, the embed is posted in that channel and the invoker is told where to
find it. If forwarding fails the embed is posted in place.
"""

import discord
from discord import Option
from discord.ext import commands

from docbot.configuration.doc_sources import BACKEND_DOCS, FRONTEND_DOCS, DocCatalog, DocSource, load_doc_catalog
from docbot.scraper.documentation_fetcher import DocumentationFetcher, documentation_fetcher
from docbot.ui.docs_embed import build_documentation_embed
from docbot.util.logger import get_logger

logger = get_logger("docs_cog")

MAX_QUERY_LENGTH = 200

BACKEND_CHOICES = list(BACKEND_DOCS)
FRONTEND_CHOICES = list(FRONTEND_DOCS)


class DocsCog(commands.Cog):
    """Cog containing the documentation search slash commands."""

    def __init__(
        self,
        discord_bot_instance,
        catalog: DocCatalog | None = None,
        fetcher: DocumentationFetcher | None = None,
    ):
        """Store the bot and build the topic catalog.

        Parameters
        ----------
        discord_bot_instance:
            Active :class:`discord.Bot`, used to resolve forward channels.
        catalog:
            Topic tables; built from the environment when omitted.
        fetcher:
            Documentation fetcher; the process-wide one when omitted.
        """
        self.discord_bot_instance = discord_bot_instance
        self.catalog = catalog or load_doc_catalog()
        self.fetcher = fetcher or documentation_fetcher
        logger.info("Docs cog loaded")

    @discord.slash_command(name="docs", description="Fetches backend documentation.")
    async def docs(
        self,
        application_context: discord.ApplicationContext,
        language: Option(str, f"One of: {', '.join(BACKEND_CHOICES)}", choices=BACKEND_CHOICES),
        query: Option(str, "Search term for documentation", max_length=MAX_QUERY_LENGTH),
    ) -> None:
        await application_context.defer()
        source = self.catalog.get_backend(language)
        if source is None:
            await application_context.send_followup(content="❌ Invalid backend language.")
            return
        await self.answer_query(application_context, source, query)

    @discord.slash_command(name="frontenddocs", description="Fetches frontend documentation.")
    async def frontenddocs(
        self,
        application_context: discord.ApplicationContext,
        topic: Option(str, f"One of: {', '.join(FRONTEND_CHOICES)}", choices=FRONTEND_CHOICES),
        query: Option(str, "Search term for documentation", max_length=MAX_QUERY_LENGTH),
    ) -> None:
        await application_context.defer()
        source = self.catalog.get_frontend(topic)
        if source is None:
            await application_context.send_followup(content="❌ Invalid frontend topic.")
            return
        await self.answer_query(application_context, source, query)

    async def answer_query(
        self,
        application_context: discord.ApplicationContext,
        source: DocSource,
        query: str,
    ) -> None:
        """Run the lookup and deliver the embed, forwarding it when off-topic.

        Parameters
        ----------
        application_context:
            Deferred slash command context.
        source:
            Topic selected by the user.
        query:
            Search term.
        """
        logger.info("Lookup for %r in %s requested by %s", query, source.key, application_context.user)
        result = await self.fetcher.fetch(source.url, query)
        embed = build_documentation_embed(source, query, result, requested_by=application_context.user)

        expected_channel_id = source.channel_id
        if expected_channel_id and application_context.channel_id != expected_channel_id:
            if await self.forward_embed(expected_channel_id, embed):
                await application_context.send_followup(
                    content=(
                        "This question is off-topic for this channel. "
                        f"The answer has been forwarded to <#{expected_channel_id}>."
                    )
                )
                return

        await application_context.send_followup(embed=embed)

    async def forward_embed(self, channel_id: int, embed: discord.Embed) -> bool:
        """Post ``embed`` in the channel ``channel_id``.

        Returns
        -------
        bool
            ``True`` once sent; ``False`` if the channel could not be resolved
            or the message could not be delivered.
        """
        try:
            channel = self.discord_bot_instance.get_channel(channel_id)
            if channel is None:
                channel = await self.discord_bot_instance.fetch_channel(channel_id)
            if not isinstance(channel, discord.abc.Messageable):
                logger.error("Forward channel %s cannot receive messages", channel_id)
                return False
            await channel.send(embed=embed)
        except (discord.HTTPException, discord.InvalidData) as exc:
            logger.error("Error forwarding answer to channel %s: %s", channel_id, exc)
            return False

        logger.debug("Forwarded answer to channel %s", channel_id)
        return True


def setup(discord_bot_instance) -> None:
    """Register the docs cog with the bot."""
    discord_bot_instance.add_cog(DocsCog(discord_bot_instance))
