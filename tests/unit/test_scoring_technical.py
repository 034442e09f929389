"""Tests for the technical assessment."""

import pytest

from site_analysis.extraction.document import parse_html
from site_analysis.scoring.technical import analyze_technical, detect_technologies
from tests.fixtures.pages import GOV_HOMEPAGE, MINIMAL_PAGE, page


class TestAnalyzeTechnical:
    """Tests for analyze_technical."""

    def test_government_homepage(self) -> None:
        result = analyze_technical(parse_html(GOV_HOMEPAGE), "https://www.ecfr.gov/")

        assert result.doctype == "<!DOCTYPE html>"
        assert result.is_https is True
        assert result.has_csp is True
        assert result.technologies == frozenset({"jQuery", "Bootstrap"})
        assert result.meta_tags == {
            "description": "The eCFR is a continuously updated online version of the CFR.",
            "viewport": "width=device-width, initial-scale=1",
            "og:title": "eCFR",
        }

    def test_missing_doctype(self) -> None:
        result = analyze_technical(parse_html(MINIMAL_PAGE), "https://example.gov/")

        assert result.doctype == "No DOCTYPE found"

    def test_lowercase_doctype(self) -> None:
        result = analyze_technical(parse_html("<!doctype html><html></html>"), "https://a.gov/")

        assert result.doctype == "<!DOCTYPE html>"

    def test_legacy_doctype(self) -> None:
        html = (
            '<!DOCTYPE html PUBLIC "-//W3C//DTD XHTML 1.0 Strict//EN" '
            '"http://www.w3.org/TR/xhtml1/DTD/xhtml1-strict.dtd"><html></html>'
        )
        result = analyze_technical(parse_html(html), "https://a.gov/")

        assert result.doctype.startswith("<!DOCTYPE html PUBLIC")

    def test_https_is_a_prefix_check(self) -> None:
        document = parse_html(MINIMAL_PAGE)

        assert analyze_technical(document, "http://example.gov/").is_https is False
        assert analyze_technical(document, "https://example.gov/").is_https is True

    def test_robots_and_sitemap_are_not_checked(self) -> None:
        html = page(head='<link rel="sitemap" href="/sitemap.xml">')
        result = analyze_technical(parse_html(html), "https://example.gov/")

        assert result.has_robots_txt is False
        assert result.has_sitemap is False

    def test_no_csp(self) -> None:
        result = analyze_technical(parse_html(MINIMAL_PAGE), "https://example.gov/")

        assert result.has_csp is False

    def test_meta_tags_prefer_name_and_last_wins(self) -> None:
        head = (
            '<meta name="author" content="First">'
            '<meta name="author" content="Second">'
            '<meta name="twitter:card" property="og:ignored" content="summary">'
            '<meta property="og:type" content="website">'
            '<meta name="robots">'
            '<meta charset="utf-8">'
        )
        result = analyze_technical(parse_html(page(head=head)), "https://example.gov/")

        assert result.meta_tags == {
            "author": "Second",
            "twitter:card": "summary",
            "og:type": "website",
            "robots": "",
        }

    def test_is_idempotent(self) -> None:
        document = parse_html(GOV_HOMEPAGE)
        url = "https://www.ecfr.gov/"

        assert analyze_technical(document, url) == analyze_technical(document, url)

    def test_to_dict_sorts_technologies(self) -> None:
        data = analyze_technical(parse_html(GOV_HOMEPAGE), "https://www.ecfr.gov/").to_dict()

        assert data["technologies"] == ["Bootstrap", "jQuery"]

    def test_meta_tags_are_read_only(self) -> None:
        result = analyze_technical(parse_html(GOV_HOMEPAGE), "https://www.ecfr.gov/")

        with pytest.raises(TypeError):
            result.meta_tags["viewport"] = "width=320"  # type: ignore[index]
        assert result.meta_tags["viewport"] == "width=device-width, initial-scale=1"
        assert type(result.to_dict()["meta_tags"]) is dict
        assert isinstance(hash(result), int)


class TestDetectTechnologies:
    """Tests for markup fingerprinting."""

    def test_none(self) -> None:
        assert detect_technologies(parse_html(MINIMAL_PAGE)) == frozenset()

    def test_drupal_and_react(self) -> None:
        html = page(
            '<form data-drupal-selector="search-form"></form><div data-react-root="true"></div>'
        )

        assert detect_technologies(parse_html(html)) == frozenset({"Drupal", "React"})

    def test_all(self) -> None:
        html = page(
            '<div data-drupal-selector="x"></div><div data-react-root></div>',
            head=(
                '<script src="https://code.jquery.com/jquery.min.js"></script>'
                '<link rel="stylesheet" href="https://cdn.example.com/bootstrap/5.3/bootstrap.css">'
            ),
        )

        assert detect_technologies(parse_html(html)) == frozenset(
            {"Drupal", "React", "jQuery", "Bootstrap"}
        )
