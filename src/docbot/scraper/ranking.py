import re
from typing import Iterable, List

from docbot.datatypes.doc_datatypes import Page

DEFAULT_TOP_PAGES = 5


def count_occurrences(text: str, query: str) -> int:
    """Count non-overlapping, case-insensitive occurrences of ``query`` in ``text``.

    The query is escaped, so user input such as ``print(`` or ``a+b`` is
    matched literally.
    """
    if not query:
        return 0
    return len(re.findall(re.escape(query), text, re.IGNORECASE))


def rank_pages(pages: Iterable[Page], query: str, limit: int = DEFAULT_TOP_PAGES) -> List[Page]:
    """Score pages by query occurrences and return the best ``limit`` of them.

    Sorting is stable, so pages with equal counts keep their discovery order.
    """
    scored = list(pages)
    for page in scored:
        page.count = count_occurrences(page.text, query)
    scored.sort(key=lambda page: page.count, reverse=True)
    return scored[:limit]
