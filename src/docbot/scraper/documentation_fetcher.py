"""
Documentation fetcher: crawl a documentation site one hop deep and answer a query.

The fetcher downloads the crawl root, follows every same-origin link on it,
keeps the pages that mention the query, ranks them by how often they mention
it, and stitches snippets of the best pages into one markdown reply.

Failure policy
- The crawl root failing (network error, timeout, non-2xx) fails the whole
  lookup with ``LookupStatus.FAILED``.
- A candidate page failing only drops that page. Candidate requests run
  concurrently behind a semaphore and are joined with
  ``asyncio.gather(..., return_exceptions=True)`` so no failure cancels its
  siblings.
- Nothing raises out of :meth:`DocumentationFetcher.fetch` or
  :func:`fetch_complete_documentation`.

Quick usage example
    fetcher = DocumentationFetcher()
    result = await fetcher.fetch("https://docs.python.org/3/", "asyncio")
    reply = result.to_reply()
"""

from __future__ import annotations

import asyncio
from typing import Iterable, List, Sequence

import httpx
from bs4 import BeautifulSoup

from docbot.configuration.app_configuration import app_config
from docbot.configuration.crawler_settings import CrawlerSettings
from docbot.datatypes.doc_datatypes import DocumentationResult, FetchOutcome, Page
from docbot.scraper.link_extractor import extract_links
from docbot.scraper.ranking import rank_pages
from docbot.scraper.snippet_extractor import extract_relevant_snippet
from docbot.util.logger import get_logger

logger = get_logger("documentation_fetcher")

HTML_PARSER = "html.parser"
INVISIBLE_TAGS = ["script", "style", "noscript", "template"]
SOURCE_HEADER = "**From [Click here for more information]({url}):**"


def parse_html(html: str) -> BeautifulSoup:
    return BeautifulSoup(html, HTML_PARSER)


def extract_page_text(parsed_page: BeautifulSoup) -> str:
    """Return the visible text of the page body, whitespace-trimmed.

    Text nodes are concatenated as they appear in the markup, so line breaks
    in the source survive and the snippet extractor can work line by line.
    """
    for tag in parsed_page.find_all(INVISIBLE_TAGS):
        tag.decompose()
    root = parsed_page.body or parsed_page
    return root.get_text().strip()


def contains_query(text: str, query: str) -> bool:
    return query.lower() in text.lower()


def unique_in_order(urls: Iterable[str]) -> List[str]:
    return list(dict.fromkeys(urls))


def compose_reply(pages: Sequence[Page], query: str) -> str:
    """Render one section per page that yields a snippet.

    Each section is the source header line, the snippet, and a blank line.
    Returns an empty string when no page produced a snippet.
    """
    sections = []
    for page in pages:
        snippet = extract_relevant_snippet(page.text, query)
        if snippet:
            sections.append(f"{SOURCE_HEADER.format(url=page.url)}\n{snippet}\n\n")
    return "".join(sections)


class DocumentationFetcher:
    """Crawl documentation sites and build ranked snippet replies.

    Parameters
    ----------
    settings:
        Crawler tuning. Defaults to the ``crawler`` block of the app config.
    client:
        Optional pre-built HTTP client. When omitted the fetcher lazily creates
        its own and closes it in :meth:`aclose`.
    """

    def __init__(self, settings: CrawlerSettings | None = None, client: httpx.AsyncClient | None = None) -> None:
        self.settings = settings or app_config.crawler_settings
        self._client = client
        self._owns_client = client is None

    def get_client(self) -> httpx.AsyncClient:
        if self._client is None or self._client.is_closed:
            self._client = httpx.AsyncClient(
                follow_redirects=True,
                timeout=httpx.Timeout(self.settings.request_timeout_seconds),
            )
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        """Close the HTTP client if this fetcher created it."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            logger.debug("HTTP client closed")

    async def fetch_parsed(self, url: str) -> BeautifulSoup:
        """GET ``url`` and parse it. Raises ``httpx.HTTPError`` on failure or non-2xx."""
        response = await self.get_client().get(url, timeout=self.settings.request_timeout_seconds)
        response.raise_for_status()
        return parse_html(response.text)

    async def fetch_page(self, url: str) -> Page:
        return Page(url=url, text=extract_page_text(await self.fetch_parsed(url)))

    async def fetch_candidate(self, url: str, gate: asyncio.Semaphore) -> FetchOutcome:
        async with gate:
            try:
                page = await self.fetch_page(url)
            except Exception as exc:
                logger.warning("Error fetching %s: %s", url, exc)
                return FetchOutcome(url=url, error=exc)
        return FetchOutcome(url=url, page=page)

    async def fetch_candidates(self, urls: Sequence[str]) -> List[FetchOutcome]:
        """Fetch every URL concurrently and return one settled outcome per URL, in order."""
        if not urls:
            return []
        gate = asyncio.Semaphore(self.settings.max_concurrency)
        settled = await asyncio.gather(
            *(self.fetch_candidate(url, gate) for url in urls),
            return_exceptions=True,
        )

        outcomes = []
        for url, item in zip(urls, settled):
            if isinstance(item, BaseException):
                logger.warning("Fetch task for %s ended abnormally: %r", url, item)
                item = FetchOutcome(url=url, error=item)
            outcomes.append(item)

        failed = sum(1 for outcome in outcomes if not outcome.ok)
        if failed:
            logger.info("%d of %d candidate pages could not be fetched", failed, len(outcomes))
        return outcomes

    async def fetch(self, base_url: str, query: str) -> DocumentationResult:
        """Answer ``query`` from the documentation rooted at ``base_url``.

        Parameters
        ----------
        base_url:
            Trusted crawl root; also the prefix every followed link must share.
        query:
            Raw user search term.

        Returns
        -------
        DocumentationResult
            FOUND with the composed markdown, EMPTY when no page had a usable
            match, FAILED when the crawl root could not be retrieved.
        """
        if not query or not query.strip():
            logger.info("Blank query for %s; nothing to search", base_url)
            return DocumentationResult.empty()

        try:
            main_page = await self.fetch_parsed(base_url)
        except Exception as exc:
            logger.error("Failed to retrieve documentation root %s: %s", base_url, exc)
            return DocumentationResult.failed()

        try:
            return await self.search_site(base_url, main_page, query)
        except Exception as exc:
            logger.exception("Unexpected error while searching %s for %r: %s", base_url, query, exc)
            return DocumentationResult.failed()

    async def search_site(self, base_url: str, main_page: BeautifulSoup, query: str) -> DocumentationResult:
        # Links must be read before extract_page_text strips invisible tags.
        links = extract_links(main_page, base_url)
        main_text = extract_page_text(main_page)

        candidate_urls = [url for url in unique_in_order([base_url, *links]) if url != base_url]
        logger.debug("Crawling %d candidate pages under %s", len(candidate_urls), base_url)
        outcomes = await self.fetch_candidates(candidate_urls)

        pages = [Page(url=base_url, text=main_text)]
        pages.extend(outcome.page for outcome in outcomes if outcome.ok)
        matched = [page for page in pages if contains_query(page.text, query)]
        if not matched:
            logger.info("No page under %s mentions %r", base_url, query)
            return DocumentationResult.empty()

        top_pages = rank_pages(matched, query, limit=self.settings.max_results)
        reply = compose_reply(top_pages, query)
        if not reply:
            logger.info("Pages under %s mention %r but produced no snippet", base_url, query)
            return DocumentationResult.empty()

        logger.debug(
            "Answered %r from %s with %d of %d matching pages",
            query, base_url, len(top_pages), len(matched),
        )
        return DocumentationResult.found(reply)


# Shared fetcher used by the slash commands; closed on shutdown
documentation_fetcher = DocumentationFetcher()


async def fetch_complete_documentation(
    base_url: str,
    query: str,
    fetcher: DocumentationFetcher | None = None,
) -> str:
    """Return the user-facing reply for ``query`` against ``base_url``.

    Uses a short-lived fetcher unless one is supplied.
    """
    if fetcher is not None:
        return (await fetcher.fetch(base_url, query)).to_reply()

    own_fetcher = DocumentationFetcher()
    try:
        return (await own_fetcher.fetch(base_url, query)).to_reply()
    finally:
        await own_fetcher.aclose()
