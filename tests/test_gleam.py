# File: tests/test_gleam.py
import pytest

from gleam_finder.errors import FetchError, ParseError, TemplateMismatch
from gleam_finder.gleam import Giveaway, fetch_giveaway, fetch_giveaways
from gleam_finder.intermediary import resolve
from gleam_finder.parser.giveaway_parser import clean_description, extract_entry_count

from conftest import FakeFetcher, load_fixture

STARTS_AT = 1700000000
ENDS_AT = 1700600000


def test_parse_full_giveaway():
    giveaway = Giveaway.from_html(load_fixture("gleam_giveaway.html"))

    assert giveaway.gleam_id == "8nTqy"
    assert giveaway.name == "AMD 5700XT GPU"
    assert giveaway.description == "Win a brand new GPU.\nWorldwide, it's free!"
    assert giveaway.entry_count == 4821
    assert giveaway.entry_methods == [("twitter_follow", 1), ("youtube_subscribe", 3)]
    assert giveaway.start_date == STARTS_AT
    assert giveaway.end_date == ENDS_AT
    assert giveaway.url == "https://gleam.io/8nTqy/-"


def test_explicit_id_wins_over_campaign_key():
    giveaway = Giveaway.from_html(load_fixture("gleam_giveaway.html"), gleam_id="abCD1")
    assert giveaway.gleam_id == "abCD1"


def test_missing_fields_are_left_empty():
    giveaway = Giveaway.from_html(load_fixture("gleam_partial.html"))

    assert giveaway.name == "Mystery box"
    assert giveaway.gleam_id is None
    assert giveaway.url is None
    assert giveaway.description is None
    assert giveaway.entry_count is None
    assert giveaway.entry_methods == []
    assert giveaway.start_date is None
    assert giveaway.end_date is None


def test_page_without_template_is_rejected():
    with pytest.raises(TemplateMismatch):
        Giveaway.from_html(load_fixture("not_a_giveaway.html"))


def test_broken_campaign_json_is_a_parse_error():
    html = "<div class='popup-blocks-container' ng-init='initCampaign({\"campaign\": )'></div>"
    with pytest.raises(ParseError) as excinfo:
        Giveaway.from_html(html)
    assert not isinstance(excinfo.value, TemplateMismatch)


def test_helpers():
    giveaway = Giveaway.from_html(load_fixture("gleam_giveaway.html"))

    assert giveaway.max_entries_per_account() == 4
    assert giveaway.is_running(now=STARTS_AT + 10)
    assert not giveaway.is_running(now=ENDS_AT + 10)
    assert Giveaway(gleam_id="abCD1").is_running()

    data = giveaway.to_dict()
    assert data["url"] == "https://gleam.io/8nTqy/-"
    assert data["entry_methods"] == [["twitter_follow", 1], ["youtube_subscribe", 3]]
    assert data["update_date"] >= STARTS_AT


@pytest.mark.parametrize(
    "html,expected",
    [
        ("<div ng-init='initEntryCount(12)'></div>", 12),
        ("<div ng-init='initEntryCount( 7 )'></div>", 7),
        ("<div ng-init='initEntryCount()'></div>", None),
        ("<div ng-init='initEntryCount(null)'></div>", None),
        ("<div></div>", None),
    ],
)
def test_extract_entry_count(html, expected):
    assert extract_entry_count(html) == expected


def test_clean_description():
    assert clean_description("<b>Hi</b>&nbsp;there &amp; you") == "Hi\nthere & you"


@pytest.mark.asyncio()
async def test_fetch_giveaway_loads_canonical_url(config):
    fetcher = FakeFetcher({"https://gleam.io/8nTqy/-": load_fixture("gleam_giveaway.html")})
    giveaway = await fetch_giveaway("https://gleam.io/8nTqy/amd-5700xt-gpu", fetcher, config)

    assert fetcher.requests == ["https://gleam.io/8nTqy/-"]
    assert giveaway.gleam_id == "8nTqy"
    assert giveaway.name == "AMD 5700XT GPU"


@pytest.mark.asyncio()
async def test_fetch_giveaway_rejects_foreign_url(config):
    fetcher = FakeFetcher({})
    with pytest.raises(ParseError):
        await fetch_giveaway("https://example.com/8nTqy/x", fetcher, config)
    assert fetcher.requests == []


@pytest.mark.asyncio()
async def test_fetch_giveaway_propagates_fetch_error(config):
    with pytest.raises(FetchError):
        await fetch_giveaway("https://gleam.io/8nTqy/-", FakeFetcher({}), config)


@pytest.mark.asyncio()
async def test_fetch_giveaways_skips_failures(config):
    fetcher = FakeFetcher(
        {
            "https://gleam.io/8nTqy/-": load_fixture("gleam_giveaway.html"),
            "https://gleam.io/OWMw8/-": load_fixture("not_a_giveaway.html"),
        }
    )
    urls = ["https://gleam.io/8nTqy/-", "https://gleam.io/OWMw8/-", "https://gleam.io/zzzzz/-"]
    giveaways = await fetch_giveaways(urls, fetcher, config)

    assert [g.gleam_id for g in giveaways] == ["8nTqy"]
    assert len(fetcher.requests) == 3


@pytest.mark.asyncio()
async def test_resolved_links_parse_as_giveaways(config):
    video = "https://www.youtube.com/watch?v=-DS1qgHjoJY"
    pages = {video: load_fixture("youtube_watch.html")}
    for gleam_id in ("abCD1", "lSq1Q", "XyZ12"):
        pages[f"https://gleam.io/{gleam_id}/-"] = load_fixture("gleam_giveaway.html")
    fetcher = FakeFetcher(pages)

    links = await resolve(video, fetcher, config)
    giveaways = [await fetch_giveaway(link, fetcher, config) for link in links]

    assert [g.gleam_id for g in giveaways] == ["abCD1", "lSq1Q", "XyZ12"]
    assert all(g.name == "AMD 5700XT GPU" for g in giveaways)
