"""Content inventory for a page."""

from dataclasses import dataclass

from bs4 import BeautifulSoup

from site_analysis.extraction.document import (
    HEADING_SELECTOR,
    attribute,
    document_text,
    element_text,
)

SEARCH_SELECTOR = "input[type=search i], input[name*=search i], form[action*=search i]"


@dataclass(frozen=True)
class ContentAssessment:
    """What a page contains. Unscored."""

    title: str
    description: str
    heading_count: int
    link_count: int
    image_count: int
    word_count: int
    languages: tuple[str, ...] = ()
    has_search: bool = False

    def to_dict(self) -> dict:
        return {
            "title": self.title,
            "description": self.description,
            "heading_count": self.heading_count,
            "link_count": self.link_count,
            "image_count": self.image_count,
            "word_count": self.word_count,
            "languages": list(self.languages),
            "has_search": self.has_search,
        }


def _count_words(text: str) -> int:
    """Count whitespace-delimited tokens."""
    return len(text.split())


def analyze_content(document: BeautifulSoup) -> ContentAssessment:
    """Summarize the title, description, counts and language of a page."""
    title_tag = document.find("title")
    title = element_text(title_tag) if title_tag else ""

    description = attribute(document.select_one("meta[name=description i]"), "content")

    lang = attribute(document.find("html"), "lang")

    return ContentAssessment(
        title=title,
        description=description,
        heading_count=len(document.select(HEADING_SELECTOR)),
        link_count=len(document.select("a[href]")),
        image_count=len(document.select("img")),
        word_count=_count_words(document_text(document)),
        languages=(lang,) if lang else (),
        has_search=document.select_one(SEARCH_SELECTOR) is not None,
    )
