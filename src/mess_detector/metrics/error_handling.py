"""Error handling heuristics per language family.

Without reading function bodies we can only guess: complexity stands in
for branches that check errors, and a few name fragments hint at
fallible work (I/O, allocation, network).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict

from ..languages import LanguageTag
from ..models import FunctionUnit, UnitModel
from .base import BaseMetric, Issue, IssueKind, MetricResult

WEAK_QUALITY = 0.3


@dataclass(frozen=True)
class HandlingEstimate:
    """Guess for one unit: can it fail, does it handle failure, and how well."""

    potential: bool
    handled: bool
    quality: float


def _name_has(unit: FunctionUnit, *fragments: str) -> bool:
    return any(fragment in unit.name for fragment in fragments)


def _rust(unit: FunctionUnit) -> HandlingEstimate:
    returns_result = _name_has(unit, "Result") or unit.complexity > 5
    handled = unit.complexity > 3
    quality = 0.8 if handled else 0.5 if returns_result else 0.3
    return HandlingEstimate(returns_result or unit.complexity > 8, handled, quality)


def _go(unit: FunctionUnit) -> HandlingEstimate:
    potential = unit.complexity > 5
    handled = unit.complexity > 7
    quality = 0.7 if handled else 0.3 if potential else 0.5
    return HandlingEstimate(potential, handled, quality)


def _javascript(unit: FunctionUnit) -> HandlingEstimate:
    is_async = _name_has(unit, "async", "fetch", "request")
    handled = unit.complexity > 8
    quality = 0.6 if handled else 0.2 if is_async else 0.4
    return HandlingEstimate(is_async or unit.complexity > 6, handled, quality)


def _python(unit: FunctionUnit) -> HandlingEstimate:
    does_io = _name_has(unit, "read", "write", "open", "request")
    handled = unit.complexity > 7
    quality = 0.65 if handled else 0.15 if does_io else 0.4
    return HandlingEstimate(does_io or unit.complexity > 6, handled, quality)


def _java(unit: FunctionUnit) -> HandlingEstimate:
    potential = unit.complexity > 5
    handled = unit.complexity > 8
    quality = 0.75 if handled else 0.35 if potential else 0.5
    return HandlingEstimate(potential, handled, quality)


def _c(unit: FunctionUnit) -> HandlingEstimate:
    risky = _name_has(unit, "alloc", "open", "read", "write")
    handled = unit.complexity > 7
    quality = 0.5 if handled else 0.1 if risky else 0.3
    return HandlingEstimate(risky or unit.complexity > 6, handled, quality)


def _neutral(unit: FunctionUnit) -> HandlingEstimate:
    return HandlingEstimate(False, False, 0.5)


_ESTIMATORS: Dict[LanguageTag, Callable[[FunctionUnit], HandlingEstimate]] = {
    LanguageTag.RUST: _rust,
    LanguageTag.GO: _go,
    LanguageTag.JAVASCRIPT: _javascript,
    LanguageTag.TYPESCRIPT: _javascript,
    LanguageTag.PYTHON: _python,
    LanguageTag.JAVA: _java,
    LanguageTag.CSHARP: _java,
    LanguageTag.C: _c,
    LanguageTag.CPP: _c,
}


def estimate(unit: FunctionUnit, language: LanguageTag) -> HandlingEstimate:
    return _ESTIMATORS.get(language, _neutral)(unit)


class ErrorHandlingMetric(BaseMetric):
    name = "error_handling"
    weight = 0.10
    description = "Functions that look fallible but show no sign of handling failure."

    def analyze(self, model: UnitModel) -> MetricResult:
        if not model.functions:
            return self.result(0.0)

        issues = []
        missing = 0
        total_quality = 0.0
        for unit in model.functions:
            guess = estimate(unit, model.language)
            if guess.potential and not guess.handled:
                missing += 1
                issues.append(Issue(IssueKind.ERROR_HANDLING_MISSING, unit.name))
            elif guess.potential and guess.quality < WEAK_QUALITY:
                issues.append(Issue(IssueKind.ERROR_HANDLING_WEAK, unit.name, guess.quality, WEAK_QUALITY))
            total_quality += guess.quality

        n = len(model.functions)
        score = 0.6 * (1.0 - total_quality / n) + 0.4 * (missing / n)
        return self.result(score, issues)
