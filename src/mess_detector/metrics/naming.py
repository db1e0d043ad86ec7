"""Naming convention: placeholder and too-short function names."""

from ..models import UnitModel
from .base import BaseMetric, Issue, IssueKind, MetricResult

STOPLIST = frozenset({"tmp", "temp", "xxx", "foo", "bar", "test"})
MAX_SHORT_LENGTH = 2


def is_bad_name(name: str) -> bool:
    """Too short, a known placeholder, or nothing but x/y/z."""
    return (
        len(name) <= MAX_SHORT_LENGTH
        or name in STOPLIST
        or all(ch in "xyz" for ch in name)
    )


class NamingConventionMetric(BaseMetric):
    name = "naming_convention"
    weight = 0.08
    description = "Share of functions with meaningless names."

    def analyze(self, model: UnitModel) -> MetricResult:
        issues = [
            Issue(IssueKind.BAD_NAME, unit.name, len(unit.name), MAX_SHORT_LENGTH)
            for unit in model.functions
            if is_bad_name(unit.name)
        ]
        ratio = len(issues) / len(model.functions) if model.functions else 0.0
        return self.result(min(0.4 + 10.0 * ratio, 1.0), issues)
