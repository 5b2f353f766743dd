# gleam_finder/__init__.py
"""
GleamFinder: tools to discover gleam.io giveaway links.

Search the web for pages mentioning gleam.io in the last hour with
:func:`gleam_finder.google.search`, load those pages and pull the giveaway
links out of them with :func:`gleam_finder.intermediary.resolve`, then parse
a giveaway page with :class:`gleam_finder.gleam.Giveaway`.
"""
__version__ = "0.1.0"

from gleam_finder.config import FinderConfig, load_config
from gleam_finder.crawler.fetcher import Fetcher
from gleam_finder.errors import FetchError, GleamFinderError, ParseError, TemplateMismatch
from gleam_finder.gleam import Giveaway, fetch_giveaway, fetch_giveaways, get_gleam_id
from gleam_finder.google import search
from gleam_finder.intermediary import resolve

__all__ = [
    "FinderConfig",
    "load_config",
    "Fetcher",
    "GleamFinderError",
    "FetchError",
    "ParseError",
    "TemplateMismatch",
    "Giveaway",
    "fetch_giveaway",
    "fetch_giveaways",
    "get_gleam_id",
    "search",
    "resolve",
]
