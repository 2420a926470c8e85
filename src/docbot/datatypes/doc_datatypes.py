"""
Data structures passed between the documentation crawler stages.

This module defines the Page scraped from a documentation site, the settled
FetchOutcome of a single fan-out request, and the tagged DocumentationResult
returned to the command layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

FAILED_REPLY = "❌ Failed to retrieve documentation."
EMPTY_REPLY = "❌ No relevant documentation found."


@dataclass(slots=True)
class Page:
    """A scraped documentation page.

    Attributes:
        url: Absolute URL, same origin as the crawl root
        text: Visible body text, whitespace-trimmed
        count: Case-insensitive occurrences of the query, set once during ranking
    """
    url: str
    text: str
    count: int = 0


@dataclass(slots=True)
class FetchOutcome:
    """Settled result of fetching one candidate page.

    Exactly one of ``page`` and ``error`` is set.
    """
    url: str
    page: Page | None = None
    error: BaseException | None = None

    @property
    def ok(self) -> bool:
        return self.error is None and self.page is not None


class LookupStatus(Enum):
    """Outcome of a documentation lookup."""

    FOUND = "found"
    EMPTY = "empty"
    FAILED = "failed"

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True, slots=True)
class DocumentationResult:
    """Tagged result of a documentation lookup.

    ``text`` carries the composed markdown only when ``status`` is FOUND.
    The user-facing sentinel messages are produced by :meth:`to_reply` and
    nowhere else, so scraped content can never be mistaken for one.
    """
    status: LookupStatus
    text: str = ""

    @classmethod
    def found(cls, text: str) -> "DocumentationResult":
        return cls(LookupStatus.FOUND, text)

    @classmethod
    def empty(cls) -> "DocumentationResult":
        return cls(LookupStatus.EMPTY)

    @classmethod
    def failed(cls) -> "DocumentationResult":
        return cls(LookupStatus.FAILED)

    def to_reply(self) -> str:
        if self.status is LookupStatus.FOUND:
            return self.text
        if self.status is LookupStatus.EMPTY:
            return EMPTY_REPLY
        return FAILED_REPLY
