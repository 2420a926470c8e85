"""
Documentation scraping for docbot.

- **link_extractor.py**: Same-origin link discovery on a parsed page.
- **snippet_extractor.py**: Context-padded, boilerplate-free excerpts.
- **ranking.py**: Query occurrence counting and page ordering.
- **documentation_fetcher.py**: The one-hop crawl that ties them together.
"""
