# File: gleam_finder/engine.py
"""gleam_finder.engine: the search → resolve driver loop used by the CLI."""

from __future__ import annotations

from typing import List, Optional

from gleam_finder.config import FinderConfig
from gleam_finder.crawler.fetcher import Fetcher, PageFetcher
from gleam_finder.errors import GleamFinderError
from gleam_finder.gleam import Giveaway, fetch_giveaways
from gleam_finder.google import search
from gleam_finder.intermediary import resolve
from gleam_finder.logger import logger
from gleam_finder.utils import remove_duplicates

__all__ = ["find_gleam_links", "start_find"]


async def find_gleam_links(
    fetcher: PageFetcher, config: FinderConfig, pages: Optional[int] = None
) -> List[str]:
    """Walk the first *pages* result pages and resolve every result.

    A failing results page or intermediary is logged and skipped; an empty
    results page ends the walk.
    """
    total_pages = config.pages if pages is None else pages
    found: List[str] = []

    for page in range(total_pages):
        try:
            results = await search(page, fetcher, config)
        except GleamFinderError as exc:
            logger.warning("Search page %d failed: %s", page, exc)
            continue
        if not results:
            logger.info("No results on page %d, stopping", page)
            break

        for link in results:
            logger.info("Resolving %s", link)
            try:
                gleam_links = await resolve(link, fetcher, config)
            except GleamFinderError as exc:
                logger.warning("Could not resolve %s: %s", link, exc)
                continue
            for gleam_link in gleam_links:
                logger.info("Giveaway link found: %s", gleam_link)
            found.extend(gleam_links)

    return remove_duplicates(found)


async def start_find(
    config: FinderConfig, pages: Optional[int] = None, with_giveaways: bool = False
) -> List[str] | List[Giveaway]:
    """
    Open a fetcher, run :func:`find_gleam_links` and optionally load every giveaway found.
    """
    async with Fetcher(config) as fetcher:
        links = await find_gleam_links(fetcher, config, pages)
        if not with_giveaways:
            return links
        return await fetch_giveaways(links, fetcher, config)
