"""Tests for the government compliance assessment."""

from itertools import product

import pytest

from site_analysis.extraction.document import parse_html
from site_analysis.scoring.compliance import (
    COMPLIANCE_WEIGHTS,
    RECOMMENDATIONS,
    analyze_compliance,
)
from tests.fixtures.pages import GOV_HOMEPAGE, MINIMAL_PAGE, page

# One fragment per signal; none of them mentions another signal's keywords
# except that an accessibility statement necessarily says "accessibility"
SIGNAL_FRAGMENTS = {
    "section508": "<p>We follow Section 508.</p>",
    "privacy_policy": '<a href="/privacy">Your data</a>',
    "accessibility_statement": "<p>Read our accessibility statement.</p>",
    "foia": '<a href="/records">Freedom of Information</a>',
    "contact": '<a href="mailto:webmaster@agency.gov">Email the webmaster</a>',
}


class TestAnalyzeCompliance:
    """Tests for analyze_compliance."""

    def test_government_homepage_is_fully_compliant(self) -> None:
        result = analyze_compliance(parse_html(GOV_HOMEPAGE))

        assert result.section508_compliant is True
        assert result.has_privacy_policy is True
        assert result.has_accessibility_statement is True
        assert result.has_foia is True
        assert result.has_contact is True
        assert result.compliance_score == 100
        assert result.recommendations == ()

    def test_page_without_signals(self) -> None:
        result = analyze_compliance(parse_html(MINIMAL_PAGE))

        assert result.compliance_score == 0
        assert result.recommendations == (
            "Add Section 508 accessibility compliance information",
            "Add privacy policy link",
            "Add accessibility statement",
            "Add FOIA information",
            "Add clear contact information",
        )

    def test_accessibility_mention_counts_as_508(self) -> None:
        result = analyze_compliance(parse_html(page("<p>Accessibility help</p>")))

        assert result.section508_compliant is True
        assert result.has_accessibility_statement is False
        assert result.compliance_score == 25

    def test_accessibility_policy_counts_as_statement(self) -> None:
        result = analyze_compliance(parse_html(page("<p>Accessibility Policy</p>")))

        assert result.has_accessibility_statement is True
        assert result.compliance_score == 45

    def test_privacy_policy_text(self) -> None:
        result = analyze_compliance(parse_html(page("<p>See our Privacy Policy.</p>")))

        assert result.has_privacy_policy is True
        assert result.compliance_score == 20

    def test_foia_abbreviation(self) -> None:
        result = analyze_compliance(parse_html(page("<p>FOIA requests</p>")))

        assert result.has_foia is True
        assert result.compliance_score == 15

    @pytest.mark.parametrize(
        "markup",
        [
            "<p>Contact the agency</p>",
            '<a href="mailto:help@agency.gov">Help</a>',
            '<a href="/about/contact-us">Reach us</a>',
        ],
    )
    def test_contact_signals(self, markup: str) -> None:
        result = analyze_compliance(parse_html(page(markup)))

        assert result.has_contact is True
        assert result.compliance_score == 20

    def test_text_match_ignores_case_and_line_breaks(self) -> None:
        result = analyze_compliance(parse_html(page("<p>SECTION\n    508</p>")))

        assert result.section508_compliant is True

    @pytest.mark.parametrize("included", list(product([False, True], repeat=5)))
    def test_score_is_weighted_sum_of_flags(self, included: tuple[bool, ...]) -> None:
        fragments = [
            fragment
            for fragment, keep in zip(SIGNAL_FRAGMENTS.values(), included, strict=True)
            if keep
        ]
        result = analyze_compliance(parse_html(page("".join(fragments))))

        flags = {
            "section508": result.section508_compliant,
            "privacy_policy": result.has_privacy_policy,
            "accessibility_statement": result.has_accessibility_statement,
            "foia": result.has_foia,
            "contact": result.has_contact,
        }
        expected = sum(COMPLIANCE_WEIGHTS[key] for key, found in flags.items() if found)

        assert result.compliance_score == expected
        assert 0 <= result.compliance_score <= 100
        assert result.recommendations == tuple(
            RECOMMENDATIONS[key] for key, found in flags.items() if not found
        )
        for key, keep in zip(SIGNAL_FRAGMENTS, included, strict=True):
            if keep:
                assert flags[key] is True

    def test_weights_total_100(self) -> None:
        assert sum(COMPLIANCE_WEIGHTS.values()) == 100

    def test_is_idempotent(self) -> None:
        document = parse_html(GOV_HOMEPAGE)

        assert analyze_compliance(document) == analyze_compliance(document)
