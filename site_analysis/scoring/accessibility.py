"""Accessibility assessment.

Fixed heuristic checks: image alt text, heading presence, skip
navigation, form labels and an explicit body colour scheme. The score
starts at 100 and each failed check deducts a fixed number of points.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

import structlog
from bs4 import BeautifulSoup

from site_analysis.extraction.document import HEADING_SELECTOR, attribute, has_skip_links
from site_analysis.scoring.base import MAX_SCORE, clamp_score

logger = structlog.get_logger(__name__)

# Point deductions (fixed contract, not tunables)
ALT_TEXT_PENALTY_PER_IMAGE = 5
ALT_TEXT_PENALTY_MAX = 20
NO_HEADINGS_PENALTY = 15
NO_SKIP_LINKS_PENALTY = 10
LABEL_PENALTY_PER_INPUT = 3
LABEL_PENALTY_MAX = 15
NO_COLOR_SCHEME_PENALTY = 5

# WCAG conformance thresholds: level -> minimum score
WCAG_AA_THRESHOLD = 80
WCAG_A_THRESHOLD = 60

FORM_CONTROL_SELECTOR = (
    "input[type=text i], input[type=email i], input[type=password i], textarea, select"
)


@dataclass(frozen=True)
class AccessibilityAssessment:
    """Accessibility checks for a single page."""

    wcag_level: int  # 0 = none, 1 = A, 2 = AA
    issues: tuple[str, ...] = ()
    score: int = MAX_SCORE
    details: Mapping[str, Any] = field(default_factory=dict, hash=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "details", MappingProxyType(dict(self.details)))

    def to_dict(self) -> dict:
        return {
            "wcag_level": self.wcag_level,
            "issues": list(self.issues),
            "score": self.score,
            "details": dict(self.details),
        }


def wcag_level_for(score: int) -> int:
    """Map an accessibility score to the WCAG level it suggests."""
    if score >= WCAG_AA_THRESHOLD:
        return 2
    if score >= WCAG_A_THRESHOLD:
        return 1
    return 0


def _count_inputs_without_labels(document: BeautifulSoup) -> int:
    """Count form controls with no id or no label pointing at that id."""
    labelled_ids = {
        attribute(label, "for").lower() for label in document.select("label[for]")
    }
    count = 0
    for control in document.select(FORM_CONTROL_SELECTOR):
        control_id = attribute(control, "id")
        if not control_id or control_id.lower() not in labelled_ids:
            count += 1
    return count


def analyze_accessibility(document: BeautifulSoup) -> AccessibilityAssessment:
    """
    Run the accessibility checks over a parsed page.

    Args:
        document: Parsed page

    Returns:
        AccessibilityAssessment with issues for each failed check
    """
    issues: list[str] = []
    score = MAX_SCORE

    images = document.select("img")
    images_without_alt = sum(1 for img in images if not attribute(img, "alt"))
    if images_without_alt > 0:
        issues.append(f"{images_without_alt} images missing alt text")
        score -= min(ALT_TEXT_PENALTY_MAX, images_without_alt * ALT_TEXT_PENALTY_PER_IMAGE)

    headings = document.select(HEADING_SELECTOR)
    if not headings:
        issues.append("No heading elements found")
        score -= NO_HEADINGS_PENALTY

    skip_links = has_skip_links(document)
    if not skip_links:
        issues.append("No skip navigation links found")
        score -= NO_SKIP_LINKS_PENALTY

    inputs_without_labels = _count_inputs_without_labels(document)
    if inputs_without_labels > 0:
        issues.append(f"{inputs_without_labels} form inputs missing proper labels")
        score -= min(LABEL_PENALTY_MAX, inputs_without_labels * LABEL_PENALTY_PER_INPUT)

    # Crude contrast proxy: only looks at the body's inline style
    body_style = attribute(document.find("body"), "style")
    if "background" not in body_style and "color" not in body_style:
        issues.append("No explicit color scheme defined - may affect contrast")
        score -= NO_COLOR_SCHEME_PENALTY

    score = clamp_score(score)

    logger.debug(
        "accessibility_analyzed",
        score=score,
        issues=len(issues),
        images=len(images),
        headings=len(headings),
    )

    return AccessibilityAssessment(
        wcag_level=wcag_level_for(score),
        issues=tuple(issues),
        score=score,
        details={
            "total_images": len(images),
            "images_without_alt": images_without_alt,
            "total_headings": len(headings),
            "has_skip_links": skip_links,
            "inputs_without_labels": inputs_without_labels,
        },
    )
