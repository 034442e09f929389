"""Page assessments.

Each module exposes one pure ``analyze_*`` function over a parsed page.
None of them reads another's output.
"""

from site_analysis.scoring.accessibility import AccessibilityAssessment, analyze_accessibility
from site_analysis.scoring.base import clamp_score
from site_analysis.scoring.compliance import ComplianceAssessment, analyze_compliance
from site_analysis.scoring.content import ContentAssessment, analyze_content
from site_analysis.scoring.performance import PerformanceAssessment, analyze_performance
from site_analysis.scoring.technical import TechnicalAssessment, analyze_technical
from site_analysis.scoring.usability import UsabilityAssessment, analyze_usability

__all__ = [
    "AccessibilityAssessment",
    "ComplianceAssessment",
    "ContentAssessment",
    "PerformanceAssessment",
    "TechnicalAssessment",
    "UsabilityAssessment",
    "analyze_accessibility",
    "analyze_compliance",
    "analyze_content",
    "analyze_performance",
    "analyze_technical",
    "analyze_usability",
    "clamp_score",
]
