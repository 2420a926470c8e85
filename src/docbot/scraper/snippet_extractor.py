"""
Snippet extraction for documentation search results.

A snippet is built from the lines of a page that mention the query, padded
with a few lines of context on either side so the excerpt reads naturally.
Navigation and theme-switcher boilerplate that documentation generators put
on every page is dropped before matching.
"""

import re
from typing import Iterable, List

MAX_SNIPPET_CHARS = 1000
CONTEXT_LINES = 2
READ_MORE_MARKER = "... [Read more]"

BOILERPLATE_PATTERNS = [
    re.compile(pattern, re.IGNORECASE)
    for pattern in (
        r"^theme$",
        r"^auto$",
        r"^light$",
        r"^dark$",
        r"^navigation$",
        r"^index$",
        r"^modules$",
        r"^previous topic$",
        r"^next topic$",
        r"^show source$",
        r"^report a bug$",
        r"^changelog$",
        r"^\s*$",
    )
]


def is_boilerplate(line: str) -> bool:
    return any(pattern.search(line) for pattern in BOILERPLATE_PATTERNS)


def filter_boilerplate_lines(lines: Iterable[str]) -> List[str]:
    """Trim every line and drop the ones matching a boilerplate pattern."""
    return [line for line in (raw.strip() for raw in lines) if not is_boilerplate(line)]


def context_indices(matches: Iterable[int], total: int, radius: int = CONTEXT_LINES) -> List[int]:
    """Return the sorted union of the windows around every matched index.

    Windows are clamped to ``[0, total)``; overlapping windows merge.
    """
    keep = set()
    for idx in matches:
        keep.update(range(max(0, idx - radius), min(total, idx + radius + 1)))
    return sorted(keep)


def extract_relevant_snippet(full_text: str, query: str) -> str:
    """Build a bounded excerpt of the lines in ``full_text`` that mention ``query``.

    Args:
        full_text: Visible text of one documentation page.
        query: Search term, matched case-insensitively as a substring.

    Returns:
        Matching lines with up to two lines of context each, in page order and
        joined by newlines. Longer than 1000 characters is cut and suffixed
        with ``"... [Read more]"``. Empty when nothing matched.
    """
    lines = filter_boilerplate_lines(full_text.split("\n"))
    needle = query.lower()
    matched = [idx for idx, line in enumerate(lines) if needle in line.lower()]
    if not matched:
        return ""

    snippet = "\n".join(lines[idx] for idx in context_indices(matched, len(lines)))
    if len(snippet) > MAX_SNIPPET_CHARS:
        snippet = snippet[:MAX_SNIPPET_CHARS] + READ_MORE_MARKER
    return snippet
