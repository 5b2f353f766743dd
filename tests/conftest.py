# File: tests/conftest.py
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

import pytest

from gleam_finder.config import FinderConfig
from gleam_finder.crawler.models import PageData
from gleam_finder.errors import FetchError

FIXTURES = Path(__file__).parent / "fixtures"


def load_fixture(name: str) -> str:
    return (FIXTURES / name).read_text(encoding="utf-8")


class FakeFetcher:
    """
    In-memory PageFetcher: serves fixture bodies by URL and records every request.
    Unknown URLs answer like a 404; an Exception value is raised as is.
    """

    def __init__(self, pages: Dict[str, Union[str, Exception]]) -> None:
        self.pages = pages
        self.requests: list[str] = []
        self.headers: list[Optional[Mapping[str, str]]] = []

    async def fetch(self, url: str, headers: Optional[Mapping[str, str]] = None) -> PageData:
        self.requests.append(url)
        self.headers.append(headers)
        if url not in self.pages:
            raise FetchError(url, "HTTP 404", 404)
        body = self.pages[url]
        if isinstance(body, Exception):
            raise body
        return PageData(url=url, content=body)


@pytest.fixture()
def config() -> FinderConfig:
    """
    Default configuration with a short timeout for tests.
    """
    return FinderConfig(timeout=2.0, user_agent="TestAgent/1.0")


@pytest.fixture()
def fixture_html():
    """
    Return the loader for files under tests/fixtures.
    """
    return load_fixture
