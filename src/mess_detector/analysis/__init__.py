"""Analysis orchestration and result types."""

from .engine import CodeAnalyzer, aggregate, analyze_file, fan_out
from .models import AnalysisResult, FileAnalysisResult, FileFailure, weighted_score

__all__ = [
    "AnalysisResult",
    "CodeAnalyzer",
    "FileAnalysisResult",
    "FileFailure",
    "aggregate",
    "analyze_file",
    "fan_out",
    "weighted_score",
]
