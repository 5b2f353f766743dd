# === FILE: gleam_finder/parser/search_parser.py ===
"""Parsing of a search provider's result listing.

Two Google layouts are understood:

* the full desktop page, where organic results are ``<a href="https://…">``
  carrying ``data-ved`` or an ``onmousedown="return rwt(…)"`` handler;
* the basic HTML page served to clients without JavaScript, where every
  result is a redirect ``<a href="/url?q=https://…&sa=U…">``.

Navigation, cache and "more results" links point back to the provider and
are dropped.
"""
from __future__ import annotations

import re
from collections.abc import Sequence
from typing import Optional
from urllib.parse import parse_qs, urlparse

from bs4 import BeautifulSoup
from bs4.element import Tag

from gleam_finder.errors import ParseError
from gleam_finder.utils import extract_domain, remove_duplicates

__all__: Sequence[str] = ("parse_search_results",)

# google.com, google.fr, google.co.uk, ... and the cache host
_PROVIDER_HOST_RE = re.compile(
    r"(?:^|\.)(?:google\.(?:[a-z]{2,3})(?:\.[a-z]{2})?|googleusercontent\.com)$"
)


def _is_provider_link(url: str) -> bool:
    return _PROVIDER_HOST_RE.search(extract_domain(url)) is not None


def _result_target(tag: Tag) -> Optional[str]:
    href_val = tag.get("href")
    if not isinstance(href_val, str):
        return None
    href = href_val.strip()

    if href.startswith("/url?"):
        params = parse_qs(urlparse(href).query)
        target = (params.get("q") or params.get("url") or [""])[0]
        return target if target.startswith(("http://", "https://")) else None

    if not href.startswith(("http://", "https://")):
        return None
    onmousedown = tag.get("onmousedown")
    if tag.has_attr("data-ved") or (isinstance(onmousedown, str) and "rwt(" in onmousedown):
        return href
    return None


def parse_search_results(html: str) -> list[str]:
    """Return organic result URLs of a results page in presentation order.

    A page without results (e.g. past the last page) gives an empty list.
    Raises :class:`ParseError` when *html* is not an HTML document at all.
    """
    soup = BeautifulSoup(html, "html.parser")
    if soup.find(["html", "body"]) is None:
        raise ParseError("search results page is not an HTML document")

    results: list[str] = []
    for tag in soup.find_all("a", href=True):
        if not isinstance(tag, Tag):
            continue
        target = _result_target(tag)
        if target is None or _is_provider_link(target):
            continue
        results.append(target)
    return remove_duplicates(results)
