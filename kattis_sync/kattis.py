from bs4 import BeautifulSoup, Tag

from .base import ParseError
from .models import ListingEntry

ROW_SELECTOR = "table.table2 > tbody > tr"
ANCHOR_SELECTOR = "td > a"


def problem_name(href: str) -> str:
    return href.split("/")[-1]


def _parse_row(index: int, tr: Tag) -> ListingEntry:
    a = tr.select_one(ANCHOR_SELECTOR)
    if a is None:
        raise ParseError(f"row {index}: no problem link")
    href_attr = a.get("href")
    if not isinstance(href_attr, str):
        raise ParseError(f"row {index}: problem link has no href")
    return ListingEntry(name=problem_name(href_attr), link=href_attr)


def parse_listing(html: str) -> list[ListingEntry]:
    """Extract the (name, link) rows of one solved-problems listing page.

    An empty list means the page has no rows, which callers treat as the end
    of the listing.
    """
    soup = BeautifulSoup(html, "html.parser")
    return [_parse_row(i, tr) for i, tr in enumerate(soup.select(ROW_SELECTOR))]
