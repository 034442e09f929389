"""Parsed document helpers shared by the analyzers.

Pages are parsed with BeautifulSoup's ``html.parser`` backend, which
lower-cases attribute names. Element queries go through ``soup.select``
(soupsieve); attribute value matches that should ignore case carry the
``i`` selector flag.
"""

import re

from bs4 import BeautifulSoup, Doctype, Tag

HEADING_SELECTOR = "h1, h2, h3, h4, h5, h6"
IN_PAGE_LINK_SELECTOR = 'a[href^="#"]'

NO_DOCTYPE = "No DOCTYPE found"

_DOCTYPE_KEYWORD = re.compile(r"^doctype\b\s*", re.IGNORECASE)


def parse_html(html: str) -> BeautifulSoup:
    """Parse markup into a queryable document."""
    return BeautifulSoup(html, "html.parser")


def attribute(tag: Tag | None, name: str) -> str:
    """
    Get an attribute value as a stripped string.

    Missing tags and attributes read as an empty string; multi-valued
    attributes such as ``rel`` are joined with spaces.
    """
    if tag is None:
        return ""
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value).strip()
    return str(value).strip()


def element_text(tag: Tag) -> str:
    """Visible text of an element with whitespace collapsed.

    Every text node is separated by a space, inline siblings included, so
    ``<b>foo</b>bar`` reads as two words.
    """
    return " ".join(tag.get_text(separator=" ", strip=True).split())


def document_text(document: BeautifulSoup) -> str:
    """Rendered text of the whole document with whitespace collapsed."""
    return element_text(document)


def doctype_of(document: BeautifulSoup) -> str | None:
    """Return the declared doctype as ``<!DOCTYPE ...>``, or None."""
    for node in document.contents:
        if isinstance(node, Doctype):
            declaration = _DOCTYPE_KEYWORD.sub("", str(node).strip())
            return f"<!DOCTYPE {declaration}>" if declaration else "<!DOCTYPE>"
    return None


def has_skip_links(document: BeautifulSoup) -> bool:
    """Check for an in-page anchor whose text mentions skipping."""
    return any(
        "skip" in element_text(link).lower() for link in document.select(IN_PAGE_LINK_SELECTOR)
    )
