"""Test fixtures."""

from tests.fixtures.pages import BARE_STYLED_PAGE, GOV_HOMEPAGE, MINIMAL_PAGE, page

__all__ = [
    "BARE_STYLED_PAGE",
    "GOV_HOMEPAGE",
    "MINIMAL_PAGE",
    "page",
]
