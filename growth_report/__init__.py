"""Growth intelligence report for merchant websites."""

from .main import AnalysisPipeline, AnalysisResult, analyze_website, analyze_website_sync
from .models import AnalysisReport

__all__ = [
    "AnalysisPipeline",
    "AnalysisReport",
    "AnalysisResult",
    "analyze_website",
    "analyze_website_sync",
]
