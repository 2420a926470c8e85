"""
Documentation Bot
=================

A Discord bot that answers ``/docs`` and ``/frontenddocs`` slash commands by
crawling official documentation sites and replying with the most relevant
excerpts.
"""

import os
import sys
from dataclasses import dataclass
from pathlib import Path

def resolve_base_dir() -> Path:
    """Determine the base directory of the project. Designed for compiled/bundled execution.
    Resolution order:
    1. DOCBOT_HOME environment variable, if set.
    2. If running in a frozen/compiled context (e.g., PyInstaller, Nuitka), use the executable's directory.
    3. Otherwise, assume running from source and use the grandparent of this file's directory.
    """
    if env_home := os.getenv("DOCBOT_HOME"):
        return Path(env_home).resolve()

    if getattr(sys, "frozen", False) or getattr(sys, "compiled", False):
        return Path(sys.argv[0]).resolve().parent

    return Path(__file__).resolve().parents[2]

BASE_DIR = resolve_base_dir()
os.chdir(BASE_DIR)

import asyncio
import discord
from dotenv import load_dotenv

from docbot.scraper.documentation_fetcher import documentation_fetcher
from docbot.util.logger import get_logger, handle_exception


logger = get_logger("main")


@dataclass(frozen=True)
class BotEnvironment:
    """Secrets and identifiers read from the environment at startup."""
    token: str
    guild_id: int | None = None


def load_environment() -> BotEnvironment:
    """Load environment variables and return the bot credentials.

    Returns
    -------
    BotEnvironment
        Discord token plus the optional guild used to scope slash commands.

    Raises
    ------
    SystemExit
        If the required ``DISCORD_TOKEN`` variable is missing.
    """
    load_dotenv(dotenv_path=BASE_DIR / ".env")
    token = os.getenv("DISCORD_TOKEN")
    if not token:
        logger.critical("'DISCORD_TOKEN' environment variable not set. Bot cannot start.")
        sys.exit(1)

    guild_id = None
    raw_guild_id = os.getenv("GUILD_ID")
    if raw_guild_id:
        try:
            guild_id = int(raw_guild_id)
        except ValueError:
            logger.warning("Ignoring non-numeric GUILD_ID=%r; registering commands globally.", raw_guild_id)

    return BotEnvironment(token=token, guild_id=guild_id)


def build_intents() -> discord.Intents:
    """Construct the Discord intents needed for slash commands.

    Returns
    -------
    discord.Intents
        Intents limited to guild events; the bot never reads message content.
    """
    intents = discord.Intents.none()
    intents.guilds = True
    return intents


def load_cogs(discord_bot_instance: discord.Bot) -> None:
    """Register all operational cogs with the provided Discord bot instance.

    Parameters
    ----------
    discord_bot_instance:
        Py-Cord bot object that should receive the docbot cogs.
    """
    from docbot.bot.cogs import docs_cmds, events_listener

    events_listener.setup(discord_bot_instance)
    docs_cmds.setup(discord_bot_instance)

    logger.info("All cogs loaded successfully.")


def create_bot(guild_id: int | None = None) -> discord.Bot:
    """Instantiate the Discord bot and register all cogs.

    Commands are registered in ``guild_id`` only when it is given, which makes
    them available immediately instead of after global propagation.
    """
    debug_guilds = [guild_id] if guild_id else None
    bot = discord.Bot(intents=build_intents(), debug_guilds=debug_guilds)
    load_cogs(bot)
    return bot


async def start_bot(bot: discord.Bot, token: str) -> None:
    """Start the Discord bot and handle lifecycle logging around the connection.

    Parameters
    ----------
    bot:
        Discord client to start.
    token:
        Authentication token used to connect to Discord.
    """
    logger.info("Attempting to connect to Discord…")
    try:
        await bot.start(token)
    except asyncio.CancelledError:
        logger.info("Discord bot start cancelled; shutting down")
    finally:
        logger.info("Discord bot start routine finished.")


async def shutdown_runtime(bot: discord.Bot | None = None) -> None:
    """Gracefully stop the Discord bot and close the documentation HTTP client.

    Parameters
    ----------
    bot:
        Optional bot instance to close before shutting down subsystems.
    """
    if bot is not None and not bot.is_closed():
        try:
            await bot.close()
            logger.info("Discord bot connection closed.")
        except Exception as exc:
            logger.exception("Error while closing Discord bot: %s", exc)

    try:
        await documentation_fetcher.aclose()
    except Exception as exc:
        logger.exception("Error while closing documentation fetcher: %s", exc)

    logger.info("Shutdown complete.")


async def async_main() -> int:
    """Bootstrap the bot and run it until it disconnects, returning an exit code.

    Returns
    -------
    int
        Process exit code reflecting success or failure of initialization.
    """
    environment = load_environment()

    try:
        bot = create_bot(environment.guild_id)
    except Exception as exc:
        logger.critical("Failed to initialize Discord bot: %s", exc)
        return 1

    exit_code = 0
    try:
        await start_bot(bot, environment.token)
    except discord.LoginFailure as exc:
        logger.critical("Discord rejected the bot token: %s", exc)
        exit_code = 1
    except Exception as exc:
        logger.critical("Discord bot runtime error: %s", exc)
        exit_code = 1
    finally:
        await shutdown_runtime(bot)

    return exit_code


def main() -> int:
    """Entrypoint that orchestrates the async runtime and returns the process code.

    Returns
    -------
    int
        Exit code propagated to the operating system.
    """
    logger.info("Starting Documentation Bot…")
    try:
        return asyncio.run(async_main())
    except KeyboardInterrupt:
        logger.info("Shutdown requested by user.")
        return 0
    except SystemExit as exit_exc:
        code = exit_exc.code
        if isinstance(code, int):
            return code
        if code is None:
            return 1
        try:
            return int(code)
        except (ValueError, TypeError):
            logger.warning("SystemExit.code is not an int (%r); defaulting to 1", code)
            return 1
    except Exception as exc:
        logger.critical("An unexpected error occurred while running the bot: %s", exc)
        return 1


if __name__ == "__main__":
    sys.excepthook = handle_exception
    sys.exit(main())
