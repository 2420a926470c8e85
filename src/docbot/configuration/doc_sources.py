"""
Documentation source catalog.

Each supported topic maps to the documentation site that is crawled for it,
the thumbnail shown on the reply embed, and optionally the channel the reply
is forwarded to. The catalog is built once at import time from the built-in
tables below and the ``<TOPIC>_CHANNEL_ID`` environment variables, and is
read-only afterwards.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

from docbot.util.logger import get_logger

logger = get_logger("doc_sources")


@dataclass(frozen=True, slots=True)
class DocSource:
    """A documentation site that can be queried through a slash command."""

    key: str
    url: str
    thumbnail: str | None = None
    channel_id: int | None = None


BACKEND_DOCS = {
    "python": ("https://docs.python.org/3/", "https://www.python.org/static/community_logos/python-logo.png"),
    "cpp": ("https://en.cppreference.com/w/", "https://isocpp.org/assets/images/cpp_logo.png"),
    "clang": ("https://clang.llvm.org/docs/index.html", "https://clang.llvm.org/images/clang-logo.svg"),
    "java": (
        "https://docs.oracle.com/en/java/javase/17/docs/api/index.html",
        "https://www.oracle.com/a/ocom/img/cb71-java-logo.png",
    ),
    "golang": ("https://golang.org/doc/", "https://blog.golang.org/go-brand/Go-Logo/PNG/Go-Logo_Aqua.png"),
    "databases": (
        "https://www.mongodb.com/docs/manual/",
        "https://www.mongodb.com/assets/images/global/mongodb-logo-white.png",
    ),
    "rust": ("https://doc.rust-lang.org/std/", "https://www.rust-lang.org/logos/rust-logo-512x512.png"),
}

FRONTEND_DOCS = {
    "javascript": (
        "https://developer.mozilla.org/en-US/docs/Web/JavaScript",
        "https://upload.wikimedia.org/wikipedia/commons/6/6a/JavaScript-logo.png",
    ),
    "react": ("https://react.dev/docs/getting-started", "https://upload.wikimedia.org/wikipedia/commons/a/a7/React-icon.svg"),
    "nextjs": ("https://nextjs.org/docs", "https://nextjs.org/static/favicon/favicon-32x32.png"),
    "node": ("https://nodejs.org/en/docs", "https://nodejs.org/static/images/logo.svg"),
    "typescript": ("https://www.typescriptlang.org/docs/", "https://www.typescriptlang.org/icons/icon-48x48.png"),
}


def channel_env_var(key: str) -> str:
    """Return the environment variable holding the forward channel for ``key``."""
    return f"{key.upper()}_CHANNEL_ID"


def parse_channel_id(key: str, raw: str | None) -> int | None:
    """Parse a channel snowflake, logging and ignoring malformed values."""
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        logger.warning("Ignoring non-numeric %s=%r", channel_env_var(key), raw)
        return None


def build_sources(table: Mapping[str, tuple[str, str | None]], environ: Mapping[str, str]) -> Mapping[str, DocSource]:
    sources = {
        key: DocSource(
            key=key,
            url=url,
            thumbnail=thumbnail,
            channel_id=parse_channel_id(key, environ.get(channel_env_var(key))),
        )
        for key, (url, thumbnail) in table.items()
    }
    return MappingProxyType(sources)


@dataclass(frozen=True)
class DocCatalog:
    """Read-only topic tables for the backend and frontend command families."""

    backend: Mapping[str, DocSource]
    frontend: Mapping[str, DocSource]

    def get_backend(self, key: str | None) -> DocSource | None:
        return self.backend.get((key or "").strip().lower())

    def get_frontend(self, key: str | None) -> DocSource | None:
        return self.frontend.get((key or "").strip().lower())


def load_doc_catalog(environ: Mapping[str, str] | None = None) -> DocCatalog:
    """Build the catalog, reading forward channels from ``environ``.

    Args:
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        A catalog whose mappings cannot be mutated.
    """
    env = os.environ if environ is None else environ
    catalog = DocCatalog(
        backend=build_sources(BACKEND_DOCS, env),
        frontend=build_sources(FRONTEND_DOCS, env),
    )
    forwarded = sum(
        1 for source in (*catalog.backend.values(), *catalog.frontend.values()) if source.channel_id is not None
    )
    logger.debug(
        "Loaded %d backend and %d frontend doc sources (%d with forward channels)",
        len(catalog.backend), len(catalog.frontend), forwarded,
    )
    return catalog
