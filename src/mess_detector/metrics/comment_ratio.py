"""Comment ratio: fewer comment lines means a worse score."""

from ..models import UnitModel
from .base import BaseMetric, Issue, IssueKind, MetricResult

BASE_SCORE = 0.9
# Each percentage point of comment lines takes this much off the base score
REDUCTION_PER_PERCENT = 0.05
VERY_LOW = 0.05
LOW = 0.10


class CommentRatioMetric(BaseMetric):
    name = "comment_ratio"
    weight = 0.15
    description = "Share of lines that are comments; undocumented code relies on luck."

    def analyze(self, model: UnitModel) -> MetricResult:
        ratio = model.comment_lines / model.total_lines if model.total_lines > 0 else 0.0

        issues = []
        if ratio < VERY_LOW:
            issues.append(Issue(IssueKind.COMMENT_RATIO_VERY_LOW, None, ratio, VERY_LOW))
        elif ratio < LOW:
            issues.append(Issue(IssueKind.COMMENT_RATIO_LOW, None, ratio, LOW))

        score = max(BASE_SCORE - REDUCTION_PER_PERCENT * (ratio * 100), 0.0)
        return self.result(score, issues)
