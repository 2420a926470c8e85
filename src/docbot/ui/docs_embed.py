"""
Embed creation utilities for documentation replies.

This module turns a DocumentationResult into the styled embed posted in reply
to the docs slash commands.
"""

import discord

from docbot.configuration.doc_sources import DocSource
from docbot.datatypes.doc_datatypes import DocumentationResult, LookupStatus

EMBED_DESCRIPTION_LIMIT = 4096
TRUNCATION_MARKER = "... [Truncated]"

AUTHOR_NAME = "Documentation Bot"
AUTHOR_ICON_URL = "https://cdn.discordapp.com/embed/avatars/0.png"

STATUS_COLORS = {
    LookupStatus.FOUND: discord.Color(0x0099FF),
    LookupStatus.EMPTY: discord.Color.orange(),
    LookupStatus.FAILED: discord.Color.red(),
}


def truncate_for_embed(text: str, limit: int = EMBED_DESCRIPTION_LIMIT) -> str:
    """Cut ``text`` so that, marker included, it is at most ``limit`` characters."""
    if len(text) <= limit:
        return text
    return text[: max(0, limit - len(TRUNCATION_MARKER))] + TRUNCATION_MARKER


def build_description(query: str, reply: str) -> str:
    header = f"**🔍 Search Term:** `{query}`\n\n"
    return header + truncate_for_embed(reply, EMBED_DESCRIPTION_LIMIT - len(header))


def build_documentation_embed(
    source: DocSource,
    query: str,
    result: DocumentationResult,
    requested_by: discord.abc.User | None = None,
) -> discord.Embed:
    """
    Create the reply embed for a documentation lookup.

    Args:
        source: Topic the lookup ran against
        query: Search term as typed by the user
        result: Outcome of the lookup
        requested_by: User shown in the footer, if known

    Returns:
        discord.Embed: Embed with search term, excerpt, topic thumbnail and requester footer
    """
    embed = discord.Embed(
        title=f"📜 {source.key.upper()} Documentation",
        description=build_description(query, result.to_reply()),
        color=STATUS_COLORS.get(result.status, discord.Color.red()),
    )
    embed.set_author(name=AUTHOR_NAME, icon_url=AUTHOR_ICON_URL)

    if source.thumbnail:
        embed.set_thumbnail(url=source.thumbnail)
        embed.set_image(url=source.thumbnail)

    if requested_by is not None:
        embed.set_footer(
            text=f"Requested by {requested_by.name}",
            icon_url=requested_by.display_avatar.url,
        )

    return embed
