#!/usr/bin/env python
"""Run a site analysis on a real page.

Fetches the page once and prints the six assessments:
1. Accessibility (alt text, headings, skip links, labels, colour scheme)
2. Performance (load time, requests, page weight)
3. Content (title, description, counts, language, search)
4. Technical (doctype, HTTPS, CSP, meta tags, technologies)
5. Usability (viewport, navigation, breadcrumbs, skip links)
6. Government compliance (508, privacy, accessibility statement, FOIA, contact)

Usage:
    python scripts/run_site_analysis.py https://www.ecfr.gov/
    python scripts/run_site_analysis.py --html-file page.html --json
"""

import argparse
import json
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, ".")


def print_summary(result) -> None:
    """Print a human-readable report."""
    print(f"\n{'='*60}")
    print("Site Analysis")
    print(f"URL: {result.url}")
    print(f"Analyzed: {result.analyzed_at.strftime('%Y-%m-%d %H:%M:%S')} UTC")
    print(f"Status: {result.status_code}  Response time: {result.response_time_ms}ms")
    print(f"{'='*60}\n")

    a11y = result.accessibility
    print(f"[1/6] Accessibility: {a11y.score}/100 (WCAG level {a11y.wcag_level})")
    for issue in a11y.issues:
        print(f"      - {issue}")

    perf = result.performance
    print(f"\n[2/6] Performance: {perf.score}/100")
    print(f"      - Load time: {perf.load_time_ms}ms")
    print(f"      - Page size: {perf.page_size_bytes:,} chars")
    print(
        f"      - Requests: {perf.request_count} "
        f"({perf.image_count} images, {perf.script_count} scripts, "
        f"{perf.stylesheet_count} stylesheets)"
    )

    content = result.content
    print("\n[3/6] Content")
    print(f"      - Title: {content.title or '(none)'}")
    print(f"      - Words: {content.word_count:,}  Headings: {content.heading_count}")
    print(f"      - Links: {content.link_count}  Images: {content.image_count}")
    print(f"      - Languages: {', '.join(content.languages) or '(none declared)'}")
    print(f"      - Search: {'Yes' if content.has_search else 'No'}")

    tech = result.technical
    print("\n[4/6] Technical")
    print(f"      - DOCTYPE: {tech.doctype}")
    print(f"      - HTTPS: {'Yes' if tech.is_https else 'No'}")
    print(f"      - CSP (meta): {'Yes' if tech.has_csp else 'No'}")
    print(f"      - Technologies: {', '.join(sorted(tech.technologies)) or 'None detected'}")
    print(f"      - Meta tags: {len(tech.meta_tags)}")

    usability = result.usability
    print(f"\n[5/6] Usability: {usability.score}/100")
    print(f"      - Mobile viewport: {'Yes' if usability.mobile_responsive else 'No'}")
    print(f"      - Navigation: {'Yes' if usability.has_navigation else 'No'}")
    print(f"      - Breadcrumbs: {'Yes' if usability.has_breadcrumbs else 'No'}")
    print(f"      - Skip links: {'Yes' if usability.has_skip_links else 'No'}")

    compliance = result.compliance
    print(f"\n[6/6] Government compliance: {compliance.compliance_score}/100")
    for recommendation in compliance.recommendations:
        print(f"      - {recommendation}")
    print()


def main() -> int:
    from site_analysis.config import get_settings
    from site_analysis.crawler.fetcher import Fetcher
    from site_analysis.exceptions import AnalysisError
    from site_analysis.extraction.document import parse_html
    from site_analysis.logging import setup_logging
    from site_analysis.tasks.analysis import analyze, analyze_document

    settings = get_settings()

    parser = argparse.ArgumentParser(description="Analyze a web page")
    parser.add_argument("url", nargs="?", default=settings.default_url, help="URL to analyze")
    parser.add_argument(
        "--html-file",
        type=Path,
        help="Analyze local markup instead of fetching (url is still used for HTTPS checks)",
    )
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")
    parser.add_argument(
        "--timeout-ms",
        type=int,
        default=settings.fetch_timeout_ms,
        help="Fetch timeout in milliseconds",
    )
    args = parser.parse_args()

    setup_logging()

    if args.html_file:
        document = parse_html(args.html_file.read_text(encoding="utf-8"))
        result = analyze_document(document, url=args.url, response_time_ms=0, status_code=200)
    else:
        fetcher_kwargs = settings.fetcher_kwargs()
        fetcher_kwargs["timeout_ms"] = args.timeout_ms
        try:
            result = analyze(args.url, fetcher=Fetcher(**fetcher_kwargs))
        except AnalysisError as e:
            print(f"Error: {e.message}", file=sys.stderr)
            return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
    else:
        print_summary(result)
    return 0


if __name__ == "__main__":
    sys.exit(main())
