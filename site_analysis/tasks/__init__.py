"""Analysis task definitions."""

from site_analysis.tasks.analysis import (
    AnalysisResult,
    analyze,
    analyze_async,
    analyze_document,
    analyze_many,
)

__all__ = [
    "AnalysisResult",
    "analyze",
    "analyze_async",
    "analyze_document",
    "analyze_many",
]
