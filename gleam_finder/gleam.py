# === FILE: gleam_finder/gleam.py ===
"""Giveaway records parsed from giveaway platform pages.

The canonical public interface is the :class:`Giveaway` dataclass. Every
extracted field is optional: a page that has the campaign block but lacks,
say, an entry counter still yields a record with ``entry_count=None``.
Only a page with no campaign block at all is rejected
(:class:`~gleam_finder.errors.TemplateMismatch`).
"""
from __future__ import annotations

import time
from collections.abc import Iterable, Sequence
from dataclasses import asdict, dataclass, field
from typing import Any, Optional

from gleam_finder.config import FinderConfig
from gleam_finder.crawler.fetcher import PageFetcher
from gleam_finder.errors import GleamFinderError, ParseError
from gleam_finder.logger import logger
from gleam_finder.parser.giveaway_parser import (
    clean_description,
    extract_campaign,
    extract_entry_count,
)
from gleam_finder.utils import canonical_gleam_url, get_gleam_id

__all__: Sequence[str] = ("Giveaway", "get_gleam_id", "fetch_giveaway", "fetch_giveaways")

_GIVEAWAY_HEADERS = {
    "Accept": "text/html",
    "DNT": "1",
    "Upgrade-Insecure-Requests": "1",
}


def _as_dict(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def _as_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        return int(value)
    if isinstance(value, str):
        try:
            return int(value.strip())
        except ValueError:
            return None
    return None


def _as_str(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


@dataclass(slots=True)
class Giveaway:
    """Information about one giveaway."""

    gleam_id: Optional[str]
    name: Optional[str] = None
    description: Optional[str] = None
    entry_count: Optional[int] = None
    entry_methods: list[tuple[str, int]] = field(default_factory=list)
    start_date: Optional[int] = None
    end_date: Optional[int] = None
    update_date: int = field(default_factory=lambda: int(time.time()))

    @classmethod
    def from_html(cls, html: str, gleam_id: Optional[str] = None) -> Giveaway:
        """Build a record from the HTML of a giveaway page.

        *gleam_id* is usually taken from the URL; without it the campaign's
        own ``key`` is used.
        """
        data = extract_campaign(html)
        campaign = _as_dict(data.get("campaign"))
        incentive = _as_dict(data.get("incentive"))

        methods: list[tuple[str, int]] = []
        raw_methods = data.get("entry_methods")
        for method in raw_methods if isinstance(raw_methods, list) else []:
            method = _as_dict(method)
            entry_type = _as_str(method.get("entry_type"))
            worth = _as_int(method.get("worth"))
            if entry_type is not None and worth is not None:
                methods.append((entry_type, worth))

        description = _as_str(incentive.get("description"))

        return cls(
            gleam_id=gleam_id or _as_str(campaign.get("key")),
            name=_as_str(campaign.get("name")),
            description=clean_description(description) if description is not None else None,
            entry_count=extract_entry_count(html),
            entry_methods=methods,
            start_date=_as_int(campaign.get("starts_at")),
            end_date=_as_int(campaign.get("ends_at")),
        )

    # Convenience helpers ---------------------------------------------------
    @property
    def url(self) -> Optional[str]:
        """Canonical link (``https://gleam.io/<id>/-``)."""
        return canonical_gleam_url(self.gleam_id) if self.gleam_id else None

    def is_running(self, now: Optional[float] = None) -> bool:
        """True while the end date is still ahead; unknown end dates count as running."""
        if self.end_date is None:
            return True
        return self.end_date > (time.time() if now is None else now)

    def max_entries_per_account(self) -> int:
        return sum(worth for _, worth in self.entry_methods)

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["entry_methods"] = [list(m) for m in self.entry_methods]
        data["url"] = self.url
        return data


async def fetch_giveaway(
    url: str, fetcher: PageFetcher, config: Optional[FinderConfig] = None
) -> Giveaway:
    """
    Load a giveaway page and parse it.

    The slug is dropped (``https://gleam.io/2zAsX/bitforex-speci`` is loaded as
    ``https://gleam.io/2zAsX/-``). Raises ParseError for URLs without a
    giveaway id, FetchError/TemplateMismatch/ParseError otherwise.
    """
    cfg = config or FinderConfig()
    gleam_id = get_gleam_id(url, cfg.giveaway_host)
    if gleam_id is None:
        raise ParseError(f"not a giveaway link: {url}")

    page = await fetcher.fetch(canonical_gleam_url(gleam_id, cfg.giveaway_host), headers=_GIVEAWAY_HEADERS)
    giveaway = Giveaway.from_html(page.content, gleam_id)
    logger.debug("Parsed giveaway %s (%s)", gleam_id, giveaway.name)
    return giveaway


async def fetch_giveaways(
    urls: Iterable[str], fetcher: PageFetcher, config: Optional[FinderConfig] = None
) -> list[Giveaway]:
    """Fetch *urls* one after another, skipping the ones that fail."""
    giveaways: list[Giveaway] = []
    for url in urls:
        try:
            giveaways.append(await fetch_giveaway(url, fetcher, config))
        except GleamFinderError as exc:
            logger.warning("Skipping giveaway %s: %s", url, exc)
    return giveaways
