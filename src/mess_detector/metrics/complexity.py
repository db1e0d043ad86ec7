"""Cyclomatic complexity (approximate, from token counts)."""

from math import fsum

from ..models import UnitModel
from .base import BaseMetric, Issue, IssueKind, MetricResult

VERY_HIGH = 15
HIGH = 10


class CyclomaticComplexityMetric(BaseMetric):
    name = "cyclomatic_complexity"
    weight = 0.30
    description = "Average control-flow complexity of functions; tangled logic is hard to change safely."

    def analyze(self, model: UnitModel) -> MetricResult:
        issues = []
        for unit in model.functions:
            if unit.complexity > VERY_HIGH:
                issues.append(Issue(IssueKind.COMPLEXITY_VERY_HIGH, unit.name, unit.complexity, VERY_HIGH))
            elif unit.complexity > HIGH:
                issues.append(Issue(IssueKind.COMPLEXITY_HIGH, unit.name, unit.complexity, HIGH))

        average = (
            fsum(unit.complexity for unit in model.functions) / len(model.functions)
            if model.functions
            else 0.0
        )
        return self.result(min(0.4 + 0.1 * average, 1.0), issues)
