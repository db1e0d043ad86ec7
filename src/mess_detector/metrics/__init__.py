"""Metric engine: seven independent, weighted quality metrics.

Every metric maps a UnitModel to a MetricResult. ``run_metrics`` applies
all of them, so each per-file mapping carries the same seven keys in
METRIC_NAMES order.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Sequence

from ..config import AnalysisConfig
from ..models import METRIC_NAMES, UnitModel
from .base import BaseMetric, Issue, IssueKind, MetricResult, clamp
from .comment_ratio import CommentRatioMetric
from .complexity import CyclomaticComplexityMetric
from .duplication import CodeDuplicationMetric
from .error_handling import ErrorHandlingMetric
from .function_length import FunctionLengthMetric
from .naming import NamingConventionMetric
from .structure import StructureAnalysisMetric

_METRIC_CLASSES = (
    CyclomaticComplexityMetric,
    FunctionLengthMetric,
    CommentRatioMetric,
    ErrorHandlingMetric,
    NamingConventionMetric,
    CodeDuplicationMetric,
    StructureAnalysisMetric,
)


def default_metrics(config: Optional[AnalysisConfig] = None) -> List[BaseMetric]:
    """The seven metrics in canonical order, with config weight overrides applied."""
    weights = config.metric_weights if config is not None else {}
    metrics: List[BaseMetric] = []
    for cls in _METRIC_CLASSES:
        weight = weights.get(cls.name)
        if cls is CodeDuplicationMetric and config is not None:
            metrics.append(cls(weight, thresholds=config.duplication))
        else:
            metrics.append(cls(weight))
    return metrics


def run_metrics(
    model: UnitModel, metrics: Optional[Sequence[BaseMetric]] = None
) -> Dict[str, MetricResult]:
    """Apply each metric to ``model``; keys follow the metrics' order."""
    if metrics is None:
        metrics = default_metrics()
    return {metric.name: metric.analyze(model) for metric in metrics}


__all__ = [
    "METRIC_NAMES",
    "BaseMetric",
    "CodeDuplicationMetric",
    "CommentRatioMetric",
    "CyclomaticComplexityMetric",
    "ErrorHandlingMetric",
    "FunctionLengthMetric",
    "Issue",
    "IssueKind",
    "MetricResult",
    "NamingConventionMetric",
    "StructureAnalysisMetric",
    "clamp",
    "default_metrics",
    "run_metrics",
]
