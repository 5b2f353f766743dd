# gleam_finder/crawler/link_extractor.py
"""
Extraction of giveaway links embedded in arbitrary pages.
"""
from __future__ import annotations

import html
import re
from functools import lru_cache
from typing import List
from urllib.parse import unquote

from gleam_finder.crawler.models import PageData
from gleam_finder.utils import DEFAULT_GIVEAWAY_HOST, canonical_gleam_url, get_gleam_id, remove_duplicates


@lru_cache(maxsize=8)
def _link_pattern(host: str) -> re.Pattern[str]:
    return re.compile(rf"https?://(?:www\.)?{re.escape(host)}/[A-Za-z0-9/_-]+", re.IGNORECASE)


def _decode(content: str) -> str:
    """Undo the encodings a link goes through on its way into a page."""
    text = html.unescape(content)
    # JSON blobs (video descriptions, ytInitialData) escape slashes
    text = text.replace("\\/", "/").replace("\\u002F", "/").replace("\\u002f", "/")
    # redirect wrappers such as /redirect?q=https%3A%2F%2Fgleam.io%2F...
    return unquote(text)


def extract_gleam_links(page: PageData, host: str = DEFAULT_GIVEAWAY_HOST) -> List[str]:
    """
    Return canonical giveaway links found anywhere in the page, in document order.

    Attributes, scripts and inline JSON are all scanned, not only <a href>.
    Candidates without a giveaway id (home page, assets) are ignored and each
    giveaway is reported once.
    """
    found: List[str] = []
    for match in _link_pattern(host.lower()).finditer(_decode(page.content)):
        gleam_id = get_gleam_id(match.group(0), host)
        if gleam_id is not None:
            found.append(canonical_gleam_url(gleam_id, host))
    return remove_duplicates(found)
