"""Structure analysis: nesting depth estimated from complexity."""

import math

from ..models import UnitModel
from .base import BaseMetric, Issue, IssueKind, MetricResult

VERY_DEEP = 5
DEEP = 3


def estimated_depth(complexity: int) -> int:
    return math.ceil(complexity / 3)


class StructureAnalysisMetric(BaseMetric):
    name = "structure_analysis"
    weight = 0.15
    description = "Deepest estimated nesting of any function in the file."

    def analyze(self, model: UnitModel) -> MetricResult:
        issues = []
        max_depth = 0
        for unit in model.functions:
            depth = estimated_depth(unit.complexity)
            max_depth = max(max_depth, depth)
            if depth > VERY_DEEP:
                issues.append(Issue(IssueKind.NESTING_VERY_DEEP, unit.name, depth, VERY_DEEP))
            elif depth > DEEP:
                issues.append(Issue(IssueKind.NESTING_DEEP, unit.name, depth, DEEP))

        score = 0.4 + 0.15 * (max_depth - 1) if max_depth > 1 else 0.4
        return self.result(score, issues)
