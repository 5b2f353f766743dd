# File: gleam_finder/utils.py
"""gleam_finder.utils: URL helpers for giveaway links and result lists."""

from __future__ import annotations

import re
from functools import lru_cache
from typing import Collection, List, Optional, Sequence
from urllib.parse import urlparse

from gleam_finder.logger import logger

__all__: Sequence[str] = (
    "DEFAULT_GIVEAWAY_HOST",
    "get_gleam_id",
    "canonical_gleam_url",
    "extract_domain",
    "remove_duplicates",
)

DEFAULT_GIVEAWAY_HOST = "gleam.io"

# giveaway ids are five alphanumerics: /<id>/<slug> or /competitions/<id>-<slug>;
# a bare /<word> (/login, /terms) is a site page, not a giveaway
_ID = r"(?P<id>[A-Za-z0-9]{5})"


@lru_cache(maxsize=8)
def _id_patterns(host: str) -> tuple[re.Pattern[str], re.Pattern[str]]:
    base = rf"^https?://(?:www\.)?{re.escape(host)}/"
    return (
        re.compile(base + r"competitions/" + _ID + r"-", re.IGNORECASE),
        re.compile(base + _ID + r"/", re.IGNORECASE),
    )


def get_gleam_id(url: str, host: str = DEFAULT_GIVEAWAY_HOST) -> Optional[str]:
    """Return the giveaway id embedded in *url*, or None when it is not a giveaway link.

    >>> get_gleam_id("https://gleam.io/2zAsX/bitforex-speci")
    '2zAsX'
    >>> get_gleam_id("https://gleam.io/competitions/lSq1Q-s")
    'lSq1Q'
    """
    for pattern in _id_patterns(host.lower()):
        match = pattern.match(url)
        if match:
            return match.group("id")
    return None


def canonical_gleam_url(gleam_id: str, host: str = DEFAULT_GIVEAWAY_HOST) -> str:
    """Slug-free form of a giveaway link, so that spellings of one giveaway compare equal."""
    return f"https://{host}/{gleam_id}/-"


def extract_domain(url: str) -> str:
    """Return the lower-cased host of *url* without port."""
    return (urlparse(url).hostname or "").lower()


def remove_duplicates(urls: Collection[str]) -> List[str]:
    """Remove duplicate URLs while keeping the original order."""
    unique = list(dict.fromkeys(urls))
    removed = len(urls) - len(unique)
    if removed:
        logger.debug("Removed %d duplicate URLs", removed)
    return unique
