# === FILE: gleam_finder/intermediary.py ===
"""
Resolution of intermediary pages (videos, blog posts, forum threads) into the
giveaway links they advertise.
"""
from __future__ import annotations

from typing import List, Optional

from gleam_finder.config import FinderConfig
from gleam_finder.crawler.fetcher import PageFetcher
from gleam_finder.crawler.link_extractor import extract_gleam_links
from gleam_finder.logger import logger

__all__ = ["resolve"]

_PAGE_HEADERS = {"Accept": "text/html,text/plain"}


async def resolve(
    url: str, fetcher: PageFetcher, config: Optional[FinderConfig] = None
) -> List[str]:
    """
    Fetch *url* and return the giveaway links it contains.

    Links are canonical (``https://gleam.io/<id>/-``), unique and in document
    order. FetchError propagates to the caller.
    """
    cfg = config or FinderConfig()
    page = await fetcher.fetch(url, headers=_PAGE_HEADERS)
    links = extract_gleam_links(page, cfg.giveaway_host)
    logger.debug("Resolved %s: %d giveaway links", url, len(links))
    return links
