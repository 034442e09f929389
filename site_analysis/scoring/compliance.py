"""Government web compliance assessment.

Looks for the pages and statements US federal sites are expected to
link to: Section 508, privacy policy, accessibility statement, FOIA and
contact details. Each signal found earns a fixed weight; each one
missing produces a recommendation.
"""

from dataclasses import dataclass

import structlog
from bs4 import BeautifulSoup

from site_analysis.extraction.document import document_text
from site_analysis.scoring.base import clamp_score

logger = structlog.get_logger(__name__)

# Component weights (total = 100)
COMPLIANCE_WEIGHTS = {
    "section508": 25,
    "privacy_policy": 20,
    "accessibility_statement": 20,
    "foia": 15,
    "contact": 20,
}

RECOMMENDATIONS = {
    "section508": "Add Section 508 accessibility compliance information",
    "privacy_policy": "Add privacy policy link",
    "accessibility_statement": "Add accessibility statement",
    "foia": "Add FOIA information",
    "contact": "Add clear contact information",
}


@dataclass(frozen=True)
class ComplianceAssessment:
    """Compliance signals for a single page."""

    section508_compliant: bool
    has_privacy_policy: bool
    has_accessibility_statement: bool
    has_foia: bool
    has_contact: bool
    compliance_score: int
    recommendations: tuple[str, ...] = ()

    def to_dict(self) -> dict:
        return {
            "section508_compliant": self.section508_compliant,
            "has_privacy_policy": self.has_privacy_policy,
            "has_accessibility_statement": self.has_accessibility_statement,
            "has_foia": self.has_foia,
            "has_contact": self.has_contact,
            "compliance_score": self.compliance_score,
            "recommendations": list(self.recommendations),
        }


def _mentions(text: str, *phrases: str) -> bool:
    return any(phrase in text for phrase in phrases)


def analyze_compliance(document: BeautifulSoup) -> ComplianceAssessment:
    """
    Check a page for government compliance signals.

    Args:
        document: Parsed page

    Returns:
        ComplianceAssessment with recommendations in weight-table order
    """
    text = document_text(document).lower()

    flags = {
        "section508": _mentions(text, "section 508", "accessibility"),
        "privacy_policy": (
            _mentions(text, "privacy policy")
            or document.select_one("a[href*=privacy i]") is not None
        ),
        "accessibility_statement": _mentions(
            text, "accessibility statement", "accessibility policy"
        ),
        "foia": _mentions(text, "foia", "freedom of information"),
        "contact": (
            _mentions(text, "contact")
            or document.select_one("a[href^=mailto i], a[href*=contact i]") is not None
        ),
    }

    score = 0
    recommendations: list[str] = []
    for key, weight in COMPLIANCE_WEIGHTS.items():
        if flags[key]:
            score += weight
        else:
            recommendations.append(RECOMMENDATIONS[key])

    logger.debug("compliance_analyzed", score=score, missing=len(recommendations))

    return ComplianceAssessment(
        section508_compliant=flags["section508"],
        has_privacy_policy=flags["privacy_policy"],
        has_accessibility_statement=flags["accessibility_statement"],
        has_foia=flags["foia"],
        has_contact=flags["contact"],
        compliance_score=clamp_score(score),
        recommendations=tuple(recommendations),
    )
