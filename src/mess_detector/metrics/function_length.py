"""Function length, with per-function complexity and parameter-count checks."""

from ..models import UnitModel
from .base import BaseMetric, Issue, IssueKind, MetricResult

# (line limit, issue kind, score factor), most severe first
LENGTH_BUCKETS = (
    (120, IssueKind.LENGTH_EXTREME, 0.8),
    (70, IssueKind.LENGTH_VERY_LONG, 0.5),
    (40, IssueKind.LENGTH_LONG, 0.3),
)
COMPLEXITY_SEVERE = 18
COMPLEXITY_HIGH = 12
PARAMETERS_EXCESSIVE = 8
PARAMETERS_MANY = 6


class FunctionLengthMetric(BaseMetric):
    """Score is the weighted share of over-long functions.

    A function lands in exactly one length bucket (its most severe), so
    ``0.3·r40 + 0.5·r70 + 0.8·r120`` never double counts.
    """

    name = "function_length"
    weight = 0.20
    description = "Share of functions that are too long to hold in your head."

    def analyze(self, model: UnitModel) -> MetricResult:
        if not model.functions:
            return self.result(0.0)

        issues = []
        penalty = 0.0
        for unit in model.functions:
            lines = unit.line_count
            for limit, kind, factor in LENGTH_BUCKETS:
                if lines > limit:
                    issues.append(Issue(kind, unit.name, lines, limit))
                    penalty += factor
                    break

            if unit.complexity > COMPLEXITY_SEVERE:
                issues.append(
                    Issue(IssueKind.FUNCTION_COMPLEXITY_SEVERE, unit.name, unit.complexity, COMPLEXITY_SEVERE)
                )
            elif unit.complexity > COMPLEXITY_HIGH:
                issues.append(
                    Issue(IssueKind.FUNCTION_COMPLEXITY_HIGH, unit.name, unit.complexity, COMPLEXITY_HIGH)
                )

            if unit.parameters > PARAMETERS_EXCESSIVE:
                issues.append(
                    Issue(IssueKind.PARAMETERS_EXCESSIVE, unit.name, unit.parameters, PARAMETERS_EXCESSIVE)
                )
            elif unit.parameters > PARAMETERS_MANY:
                issues.append(Issue(IssueKind.PARAMETERS_MANY, unit.name, unit.parameters, PARAMETERS_MANY))

        return self.result(min(penalty / len(model.functions), 1.0), issues)
