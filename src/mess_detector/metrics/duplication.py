"""Code duplication estimated from structural signatures.

Function bodies are never compared. Two functions are "similar" when
they share a signature: size bucket, complexity bucket, parameter bucket,
exact line count and naming style. On top of that, numbered or
suffixed name variants (``handle1``, ``handle2``, ``parse_old``) and
repeated ``(parameters, complexity)`` pairs add to the penalty.
"""

from __future__ import annotations

from collections import Counter, defaultdict
from typing import Dict, List, Optional

from ..config import DEFAULT_DUPLICATION, DuplicationThresholds
from ..models import FunctionUnit, UnitModel
from .base import BaseMetric, Issue, IssueKind, MetricResult

NAME_PREFIXES = (
    "get", "set", "handle", "process", "check", "validate", "init", "create", "update", "delete",
)
VARIANT_SUFFIXES = ("_v2", "_v3", "_new", "_old", "_temp", "_tmp", "_copy", "_backup")
MIN_BASE_LENGTH = 3


def _size_bucket(lines: int) -> str:
    if lines <= 10:
        return "tiny"
    if lines <= 30:
        return "small"
    if lines <= 60:
        return "medium"
    if lines <= 100:
        return "large"
    return "huge"


def _complexity_bucket(complexity: int) -> str:
    if complexity <= 3:
        return "trivial"
    if complexity <= 7:
        return "simple"
    if complexity <= 12:
        return "moderate"
    if complexity <= 20:
        return "complex"
    return "very_complex"


def _parameter_bucket(parameters: int) -> str:
    if parameters == 0:
        return "no_params"
    if parameters == 1:
        return "single_param"
    if parameters <= 3:
        return "few_params"
    if parameters <= 5:
        return "several_params"
    return "many_params"


def name_pattern(name: str) -> str:
    """Known verb prefix (if any) plus naming style: camel, snake or flat."""
    prefix = next((p + "_" for p in NAME_PREFIXES if name.startswith(p)), "")
    if any(ch.isupper() for ch in name):
        style = "camel"
    elif "_" in name:
        style = "snake"
    else:
        style = "flat"
    return prefix + style


def signature(unit: FunctionUnit) -> str:
    lines = unit.line_count
    return ":".join(
        (
            _size_bucket(lines),
            _complexity_bucket(unit.complexity),
            _parameter_bucket(unit.parameters),
            str(lines),
            name_pattern(unit.name),
        )
    )


def similarity(sig: str) -> float:
    """How likely functions sharing ``sig`` are copies of each other, in [0, 1]."""
    parts = sig.split(":")
    if len(parts) < 4:
        return 0.0
    size, complexity, parameters, lines = parts[:4]

    score = {"tiny": 0.2, "small": 0.2, "medium": 0.3}.get(size, 0.4)
    score += {
        "trivial": 0.1,
        "simple": 0.2,
        "moderate": 0.3,
        "complex": 0.4,
        "very_complex": 0.4,
    }.get(complexity, 0.0)
    if parameters != "no_params":
        score += 0.2
    if lines.isdigit():
        if int(lines) > 20:
            score += 0.2
        elif int(lines) > 10:
            score += 0.1
    return min(score, 1.0)


def _strip_variant_suffix(name: str) -> Optional[str]:
    for suffix in VARIANT_SUFFIXES:
        if name.endswith(suffix):
            return name[: -len(suffix)]
    return None


def base_name(name: str) -> str:
    """Name with a variant suffix or trailing digits removed.

    Suffixes are tried on the raw name first so ``_v2`` survives digit
    stripping. Returns "" when the base is shorter than three characters.
    """
    base = _strip_variant_suffix(name)
    if base is None:
        base = name.rstrip("0123456789")
        stripped = _strip_variant_suffix(base)
        if stripped is not None:
            base = stripped
    return base if len(base) >= MIN_BASE_LENGTH else ""


def naming_groups(functions) -> Dict[str, List[FunctionUnit]]:
    """Units grouped by base name, keeping groups with more than one member."""
    groups: Dict[str, List[FunctionUnit]] = defaultdict(list)
    for unit in functions:
        base = base_name(unit.name)
        if base and base != unit.name:
            groups[base].append(unit)
    return {base: units for base, units in groups.items() if len(units) > 1}


def shared_parameter_signatures(functions) -> int:
    """Number of units whose (parameters, complexity) pair occurs more than once."""
    counts = Counter((unit.parameters, unit.complexity) for unit in functions)
    return sum(count for count in counts.values() if count > 1)


class CodeDuplicationMetric(BaseMetric):
    name = "code_duplication"
    weight = 0.15
    description = "Functions that look like copies of each other."

    def __init__(
        self,
        weight: Optional[float] = None,
        thresholds: DuplicationThresholds = DEFAULT_DUPLICATION,
    ) -> None:
        super().__init__(weight)
        self.thresholds = thresholds

    def analyze(self, model: UnitModel) -> MetricResult:
        functions = model.functions
        if len(functions) < 2:
            return self.result(0.0)

        t = self.thresholds
        issues = []
        penalty = 0.0
        duplicated_lines = 0
        total_lines = sum(unit.line_count for unit in functions)

        groups: Dict[str, List[FunctionUnit]] = defaultdict(list)
        for unit in functions:
            groups[signature(unit)].append(unit)

        for sig in sorted(groups):
            group = groups[sig]
            if len(group) < 2:
                continue
            group = sorted(group, key=lambda unit: unit.name)
            names = ", ".join(unit.name for unit in group)
            sim = similarity(sig)

            if sim > t.highly_similar:
                # The first member is the original, the rest are copies
                duplicated_lines += sum(unit.line_count for unit in group[1:])
                issues.append(Issue(IssueKind.DUPLICATE_HIGHLY_SIMILAR, names, sim, t.highly_similar))
                penalty += sim * len(group)
            elif sim > t.moderately_similar:
                issues.append(Issue(IssueKind.DUPLICATE_SIMILAR, names, sim, t.moderately_similar))
                penalty += sim * t.moderate_weight * len(group)

        named = naming_groups(functions)
        for base in sorted(named):
            members = named[base]
            if len(members) > t.naming_group_min:
                issues.append(
                    Issue(IssueKind.DUPLICATE_NAMING_PATTERN, base, len(members), t.naming_group_min)
                )
                penalty += t.naming_penalty * len(members)

        shared = shared_parameter_signatures(functions)
        if shared > t.param_duplicate_min:
            issues.append(
                Issue(IssueKind.DUPLICATE_PARAMETER_SIGNATURE, None, shared, t.param_duplicate_min)
            )
            penalty += t.param_penalty * shared

        line_ratio = duplicated_lines / total_lines if total_lines > 0 else 0.0
        normalized = min(penalty / len(functions), 1.0)
        score = t.line_ratio_weight * line_ratio + t.group_penalty_weight * normalized
        return self.result(min(score, 1.0), issues)
