"""Document parsing and query helpers."""

from site_analysis.extraction.document import (
    HEADING_SELECTOR,
    NO_DOCTYPE,
    attribute,
    doctype_of,
    document_text,
    element_text,
    has_skip_links,
    parse_html,
)

__all__ = [
    "HEADING_SELECTOR",
    "NO_DOCTYPE",
    "attribute",
    "doctype_of",
    "document_text",
    "element_text",
    "has_skip_links",
    "parse_html",
]
