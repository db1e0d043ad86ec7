"""Result types of an analysis run."""

from __future__ import annotations

from dataclasses import dataclass, field
from math import fsum
from typing import Dict, List, Mapping

from ..metrics.base import Issue, MetricResult


def weighted_score(metrics: Mapping[str, MetricResult]) -> float:
    """Weighted mean of metric scores; 0.0 when the weights sum to zero."""
    total_weight = fsum(m.weight for m in metrics.values())
    if total_weight <= 0:
        return 0.0
    return fsum(m.score * m.weight for m in metrics.values()) / total_weight


@dataclass
class FileAnalysisResult:
    """Per-file outcome: metric scores, their issues and the weighted file score."""

    file_path: str
    file_score: float
    issues: List[Issue]
    metrics: Dict[str, MetricResult]
    language: str
    total_lines: int


@dataclass
class FileFailure:
    """A file that could not be analyzed, and why."""

    file_path: str
    reason: str


@dataclass
class AnalysisResult:
    """Project-level outcome.

    ``metrics`` holds per-metric scores averaged over the analyzed files;
    their ``issues`` are always empty, per-file issues live in
    ``files_analyzed``. ``files_analyzed`` is ordered worst file first.
    """

    code_quality_score: float
    metrics: Dict[str, MetricResult]
    files_analyzed: List[FileAnalysisResult]
    total_files: int
    total_lines: int
    is_empty: bool = False
    failures: List[FileFailure] = field(default_factory=list)

    @classmethod
    def empty(cls) -> "AnalysisResult":
        """Result for a tree with no analyzable files."""
        return cls(
            code_quality_score=0.0,
            metrics={},
            files_analyzed=[],
            total_files=0,
            total_lines=0,
            is_empty=True,
        )
