"""Metric result types and the metric interface.

Scores are on a badness scale: 0.0 is excellent, 1.0 is the worst.
Issues are structured records; their wording lives in the formatters.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple, Union

from ..models import UnitModel

Number = Union[int, float]


def clamp(score: float, low: float = 0.0, high: float = 1.0) -> float:
    """Clamp to [low, high]; NaN collapses to ``low``."""
    if score != score:
        return low
    return max(low, min(high, score))


class IssueKind(str, Enum):
    """What a metric found wrong."""

    # cyclomatic_complexity
    COMPLEXITY_VERY_HIGH = "complexity_very_high"
    COMPLEXITY_HIGH = "complexity_high"
    # function_length
    LENGTH_EXTREME = "length_extreme"
    LENGTH_VERY_LONG = "length_very_long"
    LENGTH_LONG = "length_long"
    FUNCTION_COMPLEXITY_SEVERE = "function_complexity_severe"
    FUNCTION_COMPLEXITY_HIGH = "function_complexity_high"
    PARAMETERS_EXCESSIVE = "parameters_excessive"
    PARAMETERS_MANY = "parameters_many"
    # comment_ratio
    COMMENT_RATIO_VERY_LOW = "comment_ratio_very_low"
    COMMENT_RATIO_LOW = "comment_ratio_low"
    # error_handling
    ERROR_HANDLING_MISSING = "error_handling_missing"
    ERROR_HANDLING_WEAK = "error_handling_weak"
    # naming_convention
    BAD_NAME = "bad_name"
    # code_duplication
    DUPLICATE_HIGHLY_SIMILAR = "duplicate_highly_similar"
    DUPLICATE_SIMILAR = "duplicate_similar"
    DUPLICATE_NAMING_PATTERN = "duplicate_naming_pattern"
    DUPLICATE_PARAMETER_SIGNATURE = "duplicate_parameter_signature"
    # structure_analysis
    NESTING_VERY_DEEP = "nesting_very_deep"
    NESTING_DEEP = "nesting_deep"


@dataclass(frozen=True)
class Issue:
    """One finding of a metric.

    Attributes:
        kind: What was found
        subject: Unit name, comma-joined group of names, or None for file-wide issues
        observed_value: The measured quantity (complexity, line count, ratio, ...)
        threshold: The limit the observed value crossed
    """

    kind: IssueKind
    subject: Optional[str] = None
    observed_value: Optional[Number] = None
    threshold: Optional[Number] = None


@dataclass(frozen=True)
class MetricResult:
    """Outcome of one metric on one file (or averaged over a project).

    ``score`` is clamped to [0, 1] on construction.
    """

    score: float
    weight: float
    description: str
    issues: Tuple[Issue, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        object.__setattr__(self, "score", clamp(float(self.score)))
        object.__setattr__(self, "issues", tuple(self.issues))
        if self.weight <= 0:
            raise ValueError(f"weight must be positive, got {self.weight}")


class BaseMetric(ABC):
    """A pure function from UnitModel to MetricResult.

    Metrics never look at each other's results.
    """

    name: str
    weight: float
    description: str

    def __init__(self, weight: Optional[float] = None) -> None:
        if weight is not None:
            self.weight = weight

    @abstractmethod
    def analyze(self, model: UnitModel) -> MetricResult:
        """Score the given unit model."""

    def result(self, score: float, issues=()) -> MetricResult:
        return MetricResult(
            score=score, weight=self.weight, description=self.description, issues=tuple(issues)
        )
