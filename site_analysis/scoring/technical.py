"""Technical profile of a page: doctype, transport, CSP, meta tags, stack.

Everything here is read from the markup and the requested URL. Response
headers are not consulted, so a CSP sent only as a header is not seen.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from bs4 import BeautifulSoup

from site_analysis.extraction.document import NO_DOCTYPE, attribute, doctype_of

CSP_SELECTOR = "meta[http-equiv=Content-Security-Policy i]"

# Technology -> selector whose presence indicates it
TECHNOLOGY_SIGNATURES = {
    "Drupal": "[data-drupal-selector]",
    "React": "[data-react-root]",
    "jQuery": "script[src*=jquery i]",
    "Bootstrap": "link[href*=bootstrap i]",
}


@dataclass(frozen=True)
class TechnicalAssessment:
    """Technical signals for a single page. Unscored."""

    doctype: str
    is_https: bool
    has_csp: bool
    # Would each need a separate fetch; always False
    has_robots_txt: bool = False
    has_sitemap: bool = False
    technologies: frozenset[str] = frozenset()
    meta_tags: Mapping[str, str] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "meta_tags", MappingProxyType(dict(self.meta_tags)))

    def to_dict(self) -> dict:
        return {
            "doctype": self.doctype,
            "is_https": self.is_https,
            "has_csp": self.has_csp,
            "has_robots_txt": self.has_robots_txt,
            "has_sitemap": self.has_sitemap,
            "technologies": sorted(self.technologies),
            "meta_tags": dict(self.meta_tags),
        }


def _extract_meta_tags(document: BeautifulSoup) -> dict[str, str]:
    """Map each meta tag's name (or property) to its content."""
    meta_tags: dict[str, str] = {}
    for meta in document.find_all("meta"):
        key = attribute(meta, "name") or attribute(meta, "property")
        if key:
            meta_tags[key] = attribute(meta, "content")
    return meta_tags


def detect_technologies(document: BeautifulSoup) -> frozenset[str]:
    """Detect front-end technologies from markup fingerprints."""
    return frozenset(
        name
        for name, selector in TECHNOLOGY_SIGNATURES.items()
        if document.select_one(selector) is not None
    )


def analyze_technical(document: BeautifulSoup, url: str) -> TechnicalAssessment:
    """
    Build the technical profile of a page.

    Args:
        document: Parsed page
        url: URL as requested (not the post-redirect URL)

    Returns:
        TechnicalAssessment
    """
    return TechnicalAssessment(
        doctype=doctype_of(document) or NO_DOCTYPE,
        is_https=url.startswith("https://"),
        has_csp=document.select_one(CSP_SELECTOR) is not None,
        technologies=detect_technologies(document),
        meta_tags=_extract_meta_tags(document),
    )
