# === FILE: gleam_finder/google.py ===
"""
Web search for pages mentioning the giveaway platform.

    async with Fetcher(config) as fetcher:
        for page in range(4):
            for url in await search(page, fetcher, config):
                ...
"""
from __future__ import annotations

from typing import List, Optional
from urllib.parse import urlencode

from gleam_finder.config import FinderConfig
from gleam_finder.crawler.fetcher import PageFetcher
from gleam_finder.logger import logger
from gleam_finder.parser.search_parser import parse_search_results

__all__ = ["build_search_url", "search"]

_SEARCH_HEADERS = {"Accept": "text/html,text/plain"}
# q="gleam.io"&tbs=qdr:h, quotes and colons unescaped
_SAFE_CHARS = '":'


def build_search_url(page: int, config: Optional[FinderConfig] = None) -> str:
    """URL of the zero-based results *page* for the configured query and recency filter."""
    if page < 0:
        raise ValueError(f"page index must be non-negative, got {page}")
    cfg = config or FinderConfig()
    params = {
        "q": cfg.query,
        "tbs": cfg.time_filter,
        "filter": 0,
        "start": page * cfg.results_per_page,
    }
    query = urlencode(params, safe=_SAFE_CHARS)
    return f"{cfg.search_url}?{query}"


async def search(
    page: int, fetcher: PageFetcher, config: Optional[FinderConfig] = None
) -> List[str]:
    """
    Load one results page and return the result URLs in provider order.

    Only one page is requested. A page index past the last result page gives
    an empty list. FetchError/ParseError propagate to the caller.
    """
    url = build_search_url(page, config)
    response = await fetcher.fetch(url, headers=_SEARCH_HEADERS)
    results = parse_search_results(response.content)
    logger.debug("Search page %d: %d results", page, len(results))
    return results
