"""Shared fixtures: an in-memory fetcher and HTML builders for directory pages."""

import pytest

from supplier_scraper.directories.gcloud import GCloudScraper
from supplier_scraper.fetcher import FetchError, Page, parse_page
from supplier_scraper.models import Selectors

BASE = "https://directory.test"


class FakeFetcher:
    """Serves canned HTML by URL and records every fetch."""

    def __init__(self, pages: dict[str, str] | None = None, failing: set[str] | None = None):
        self.pages = dict(pages or {})
        self.failing = set(failing or ())
        self.fetched: list[str] = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc_info):
        return None

    async def fetch(self, url: str) -> Page:
        self.fetched.append(url)
        if url in self.failing:
            raise FetchError(f"Failed to fetch {url}: HTTP 503")
        if url not in self.pages:
            raise FetchError(f"Failed to fetch {url}: HTTP 404")
        return parse_page(url, self.pages[url])


def nav_html(hrefs: list[str]) -> str:
    links = "".join(f'<li><a href="{href}">{i}</a></li>' for i, href in enumerate(hrefs))
    return f'<nav id="global-atoz-navigation"><ul>{links}</ul></nav>'


def listing_html(entity_hrefs: list[str], next_href: str | None = None, nav: list[str] | None = None) -> str:
    """A listing page with one search result per supplier and an optional next link."""
    results = "".join(
        f'<div class="search-result"><h2 class="search-result-title"><a href="{href}">{href}</a></h2></div>'
        for href in entity_hrefs
    )
    pagination = ""
    if next_href:
        pagination = f'<ul class="pagination"><li class="next"><a href="{next_href}">Next page</a></li></ul>'
    header = nav_html(nav) if nav is not None else ""
    return f"<html><body>{header}<main>{results}</main>{pagination}</body></html>"


def supplier_html(
    name: str | None,
    description: str | None = None,
    contact_name: str | None = None,
    contacts: list[tuple[str, str]] | None = None,
) -> str:
    """A supplier page; contacts are (itemprop, text) blocks after the label block."""
    heading = f"<header><h1>{name}</h1></header>" if name is not None else "<header></header>"
    desc = f'<p class="supplier-description">{description}</p>' if description is not None else ""
    meta = ""
    if contact_name is not None:
        meta = (
            '<div id="meta"><div>'
            "<p>Supplier details</p>"
            f"<p><span>Contact: <span>{contact_name}</span></span></p>"
            "</div></div>"
        )
    blocks = '<p class="contact-details-block"><span>Contact details</span></p>'
    for kind, text in contacts or []:
        blocks += f'<p class="contact-details-block"><span itemprop="{kind}">{text}</span></p>'
    return (
        f'<html><body><div id="content">{heading}{desc}{meta}'
        f'<div class="contact-details">{blocks}</div></div></body></html>'
    )


@pytest.fixture
def selectors() -> Selectors:
    return GCloudScraper.selectors


@pytest.fixture
def page_factory():
    """Build a Page from HTML at an optional URL."""

    def _make(html: str, url: str = f"{BASE}/page") -> Page:
        return parse_page(url, html)

    return _make
