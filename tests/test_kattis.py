import pytest

from kattis_sync.base import ParseError
from kattis_sync.kattis import parse_listing, problem_name
from kattis_sync.models import ListingEntry


def test_parse_listing(make_listing):
    html = make_listing(["/problems/hello", "/problems/twosum"])

    result = parse_listing(html)

    assert result == [
        ListingEntry(name="hello", link="/problems/hello"),
        ListingEntry(name="twosum", link="/problems/twosum"),
    ]


def test_parse_listing_empty_table(make_listing):
    assert parse_listing(make_listing([])) == []


def test_parse_listing_no_table():
    assert parse_listing("<html><body><p>Nothing here</p></body></html>") == []


def test_parse_listing_ignores_other_tables():
    html = """
    <table class="table-wide">
        <tbody><tr><td><a href="/problems/decoy">Decoy</a></td></tr></tbody>
    </table>
    """

    assert parse_listing(html) == []


def test_parse_listing_uses_first_anchor():
    html = """
    <table class="table2"><tbody>
        <tr>
            <td><a href="/problems/carrots">Solving for Carrots</a></td>
            <td><a href="/problems/carrots/statistics">Stats</a></td>
        </tr>
    </tbody></table>
    """

    result = parse_listing(html)

    assert result == [ListingEntry(name="carrots", link="/problems/carrots")]


def test_parse_listing_row_without_anchor():
    html = """
    <table class="table2"><tbody>
        <tr><td><a href="/problems/hello">Hello</a></td></tr>
        <tr><td>no link</td></tr>
    </tbody></table>
    """

    with pytest.raises(ParseError, match="row 1"):
        parse_listing(html)


def test_parse_listing_anchor_without_href():
    html = """
    <table class="table2"><tbody>
        <tr><td><a>Hello</a></td></tr>
    </tbody></table>
    """

    with pytest.raises(ParseError, match="href"):
        parse_listing(html)


def test_problem_name():
    assert problem_name("/problems/hello") == "hello"
    assert problem_name("https://open.kattis.com/problems/twosum") == "twosum"
    assert problem_name("hello") == "hello"
