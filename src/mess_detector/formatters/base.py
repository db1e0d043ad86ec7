"""Base formatter interface for Legacy Mess Detector reports."""

from abc import ABC, abstractmethod
from dataclasses import dataclass

from ..analysis.models import AnalysisResult


@dataclass(frozen=True)
class ReportOptions:
    """What a report shows.

    Attributes:
        top_files: How many of the worst files to list
        max_issues: Issues shown per listed file
        summary_only: Only the score and the conclusion
        verbose: List every file, plus statistics and metric descriptions
    """

    top_files: int = 5
    max_issues: int = 5
    summary_only: bool = False
    verbose: bool = False


class BaseFormatter(ABC):
    """Abstract base class for output formatters."""

    @abstractmethod
    def render(self, result: AnalysisResult, options: ReportOptions = ReportOptions()) -> None:
        """Write the report to stdout."""

    @abstractmethod
    def format(self, result: AnalysisResult, options: ReportOptions = ReportOptions()) -> str:
        """Return the report as a string."""
