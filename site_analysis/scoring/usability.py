"""Usability assessment: viewport, navigation, breadcrumbs, skip links."""

from dataclasses import dataclass

from bs4 import BeautifulSoup

from site_analysis.extraction.document import has_skip_links
from site_analysis.scoring.base import clamp_score

BASE_SCORE = 60
MOBILE_RESPONSIVE_BONUS = 15
NAVIGATION_BONUS = 10
BREADCRUMBS_BONUS = 5
SKIP_LINKS_BONUS = 10

# Reported whenever navigation links exist; not a measured depth
LINKED_NAVIGATION_DEPTH = 3

NAVIGATION_SELECTOR = "nav, [role=navigation i]"
NAVIGATION_LINK_SELECTOR = "nav a, [role=navigation i] a"
BREADCRUMB_SELECTOR = "[aria-label*=breadcrumb i], .breadcrumb, .breadcrumbs"


@dataclass(frozen=True)
class UsabilityAssessment:
    """Usability signals for a single page."""

    mobile_responsive: bool
    has_navigation: bool
    has_breadcrumbs: bool
    has_skip_links: bool
    navigation_depth: int
    score: int

    def to_dict(self) -> dict:
        return {
            "mobile_responsive": self.mobile_responsive,
            "has_navigation": self.has_navigation,
            "has_breadcrumbs": self.has_breadcrumbs,
            "has_skip_links": self.has_skip_links,
            "navigation_depth": self.navigation_depth,
            "score": self.score,
        }


def calculate_usability_score(
    mobile_responsive: bool,
    has_navigation: bool,
    has_breadcrumbs: bool,
    has_skip_links: bool,
) -> int:
    """Base score plus a fixed bonus for each signal present."""
    score = BASE_SCORE
    if mobile_responsive:
        score += MOBILE_RESPONSIVE_BONUS
    if has_navigation:
        score += NAVIGATION_BONUS
    if has_breadcrumbs:
        score += BREADCRUMBS_BONUS
    if has_skip_links:
        score += SKIP_LINKS_BONUS
    return clamp_score(score)


def analyze_usability(document: BeautifulSoup) -> UsabilityAssessment:
    """Check a page for the usability signals and score them."""
    mobile_responsive = document.select_one("meta[name=viewport i]") is not None
    has_navigation = document.select_one(NAVIGATION_SELECTOR) is not None
    has_breadcrumbs = document.select_one(BREADCRUMB_SELECTOR) is not None
    skip_links = has_skip_links(document)

    # TODO: replace the fixed depth with the nesting depth of nav link lists
    has_nav_links = document.select_one(NAVIGATION_LINK_SELECTOR) is not None
    navigation_depth = LINKED_NAVIGATION_DEPTH if has_nav_links else 0

    return UsabilityAssessment(
        mobile_responsive=mobile_responsive,
        has_navigation=has_navigation,
        has_breadcrumbs=has_breadcrumbs,
        has_skip_links=skip_links,
        navigation_depth=navigation_depth,
        score=calculate_usability_score(
            mobile_responsive=mobile_responsive,
            has_navigation=has_navigation,
            has_breadcrumbs=has_breadcrumbs,
            has_skip_links=skip_links,
        ),
    )
