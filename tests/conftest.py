"""
Pytest configuration and fixtures for docbot tests.
"""

import sys
from pathlib import Path

import httpx
import pytest

# Add src directory to path so imports work
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


def build_html_page(*lines: str, links: tuple[str, ...] = ()) -> str:
    """Build a small HTML document with one text node per line."""
    anchors = "\n".join(f'<a href="{href}">link</a>' for href in links)
    body = "\n".join(f"<p>{line}</p>" for line in lines)
    return f"<html><head><title>Docs</title></head><body>\n{anchors}\n{body}\n</body></html>"


class FakeSite:
    """In-memory documentation site served through ``httpx.MockTransport``."""

    def __init__(self, pages: dict[str, str], failing: tuple[str, ...] = ()) -> None:
        self.pages = pages
        self.failing = set(failing)
        self.requested: list[str] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        url = str(request.url)
        self.requested.append(url)
        if url in self.failing:
            raise httpx.ConnectError("connection refused", request=request)
        if url in self.pages:
            return httpx.Response(200, text=self.pages[url], headers={"content-type": "text/html"})
        return httpx.Response(404, text="not found")

    def client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler))


@pytest.fixture
def make_site():
    return FakeSite


@pytest.fixture
def html_page():
    return build_html_page
