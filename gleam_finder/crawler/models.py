# gleam_finder/crawler/models.py
"""
Data models for the GleamFinder fetch layer.
"""
from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class PageData:
    """Holds the final URL and decoded body of a fetched page."""

    url: str
    content: str
    status: int = 200
    content_type: str = "text/html"
