"""
Link discovery for documentation pages.

Links are resolved with plain string rules rather than ``urljoin`` so that the
same-origin check stays a literal prefix test against the configured base URL.
"""

import re
from urllib.parse import urlsplit

from bs4 import BeautifulSoup

from docbot.util.logger import get_logger

logger = get_logger("link_extractor")

ABSOLUTE_URL = re.compile(r"^https?://", re.IGNORECASE)
# Any "scheme:" prefix, e.g. mailto:, javascript:, tel:, data:
URL_SCHEME = re.compile(r"^[a-z][a-z0-9+.\-]*:", re.IGNORECASE)


def resolve_href(href: str, base_url: str) -> str | None:
    """Turn an ``href`` into an absolute URL, or None when it cannot be followed.

    Args:
        href: Raw attribute value.
        base_url: Crawl root the link was found under.

    Returns:
        The absolute URL without its fragment, or None for empty, fragment-only
        and non-HTTP links.
    """
    href = href.strip()
    if not href or href.startswith("#"):
        return None

    if ABSOLUTE_URL.match(href):
        resolved = href
    elif href.startswith("//"):
        resolved = f"{urlsplit(base_url).scheme or 'https'}:{href}"
    elif href.startswith("/"):
        parts = urlsplit(base_url)
        resolved = f"{parts.scheme}://{parts.netloc}{href}"
    elif URL_SCHEME.match(href):
        return None
    else:
        resolved = base_url.rstrip("/") + "/" + href

    return resolved.split("#", 1)[0]


def extract_links(parsed_page: BeautifulSoup, base_url: str) -> list[str]:
    """Return same-origin links found on a parsed page.

    Every anchor with an ``href`` is resolved with :func:`resolve_href` and kept
    only when the result starts with ``base_url``. Order follows the document;
    duplicates are left for the caller to remove.
    """
    found_links = []
    for anchor in parsed_page.find_all("a", href=True):
        href = anchor.get("href")
        if not isinstance(href, str):
            continue
        resolved = resolve_href(href, base_url)
        if resolved and resolved.startswith(base_url):
            found_links.append(resolved)

    logger.debug("Found %d same-origin links under %s", len(found_links), base_url)
    return found_links
