# gleam_finder/errors.py
"""
Exception hierarchy shared by search, resolver and giveaway parser.
"""
from __future__ import annotations

from typing import Optional

__all__ = ["GleamFinderError", "FetchError", "ParseError", "TemplateMismatch"]


class GleamFinderError(Exception):
    """Base class for every error raised by GleamFinder."""


class FetchError(GleamFinderError):
    """Network failure, timeout, non-2xx status or unreadable body."""

    def __init__(self, url: str, reason: str, status: Optional[int] = None) -> None:
        self.url = url
        self.reason = reason
        self.status = status
        super().__init__(f"{url}: {reason}")


class ParseError(GleamFinderError):
    """Malformed or unexpected HTML/JSON structure."""


class TemplateMismatch(ParseError):
    """The page carries none of the giveaway template markers."""
