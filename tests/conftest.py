from collections.abc import Sequence

import pytest


def listing_html(hrefs: Sequence[str]) -> str:
    rows = "\n".join(
        f"""
            <tr>
                <td><a href="{href}">{href.rsplit("/", 1)[-1].title()}</a></td>
                <td>1.5</td>
            </tr>"""
        for href in hrefs
    )
    return f"""
    <html>
        <body>
            <table class="table2">
                <thead>
                    <tr><th>Name</th><th>Difficulty</th></tr>
                </thead>
                <tbody>{rows}
                </tbody>
            </table>
        </body>
    </html>
    """


class FakePages:
    def __init__(self, pages: Sequence[Sequence[str]]):
        self.pages = [listing_html(hrefs) for hrefs in pages]
        self.requested: list[int] = []

    def __call__(self, page: int) -> str:
        self.requested.append(page)
        if page >= len(self.pages):
            raise AssertionError(f"page {page} fetched past the end of the listing")
        return self.pages[page]


@pytest.fixture
def make_listing():
    return listing_html


@pytest.fixture
def fake_pages():
    return FakePages
