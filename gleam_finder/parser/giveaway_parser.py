# === FILE: gleam_finder/parser/giveaway_parser.py ===
"""Low-level extraction from a giveaway page.

A giveaway page embeds its whole campaign as JSON in the Angular bootstrap
attribute of the popup container::

    <div class='popup-blocks-container' ng-init='initCampaign({"campaign": …})'>

and the live entry counter in a separate ``initEntryCount(N)`` call.
"""
from __future__ import annotations

import json
import re
from collections.abc import Sequence
from typing import Any, Optional

from bs4 import BeautifulSoup

from gleam_finder.errors import ParseError, TemplateMismatch

__all__: Sequence[str] = ("extract_campaign", "extract_entry_count", "clean_description")

_INIT_CAMPAIGN_MARKER = re.compile(r"^\s*initCampaign\(")
_INIT_CAMPAIGN_RE = re.compile(r"^\s*initCampaign\((?P<json>.*)\)\s*;?\s*$", re.DOTALL)
_ENTRY_COUNT_RE = re.compile(r"initEntryCount\((?P<count>[^)]*)\)")


def extract_campaign(html: str) -> dict[str, Any]:
    """Return the decoded ``initCampaign(...)`` payload.

    Raises :class:`TemplateMismatch` when the page has no campaign block and
    :class:`ParseError` when the block is there but its JSON is unusable.
    """
    soup = BeautifulSoup(html, "html.parser")
    container = soup.find(attrs={"ng-init": _INIT_CAMPAIGN_MARKER})
    if container is None:
        raise TemplateMismatch("page has no initCampaign(...) block")

    init = container.get("ng-init")
    match = _INIT_CAMPAIGN_RE.match(init if isinstance(init, str) else "")
    if match is None:
        raise ParseError("initCampaign(...) call is not closed")
    try:
        data = json.loads(match.group("json"))
    except json.JSONDecodeError as exc:
        raise ParseError(f"invalid campaign JSON: {exc}") from exc
    if not isinstance(data, dict):
        raise ParseError(f"campaign JSON must be an object, got {type(data).__name__}")
    return data


def extract_entry_count(html: str) -> Optional[int]:
    match = _ENTRY_COUNT_RE.search(html)
    if match is None:
        return None
    try:
        return int(match.group("count").strip())
    except ValueError:
        return None


def clean_description(description: str) -> str:
    """Strip markup and entities from an incentive description."""
    text = BeautifulSoup(description, "html.parser").get_text()
    # gleam separates paragraphs with non-breaking spaces
    return text.replace("\xa0", "\n").strip()
