"""Human-readable wording for scores and issues.

Metrics emit structured Issue records; this module is the only place
that turns them into sentences.
"""

from __future__ import annotations

from typing import Dict, NamedTuple

from ..metrics.base import Issue, IssueKind

METRIC_LABELS: Dict[str, str] = {
    "cyclomatic_complexity": "Cyclomatic Complexity",
    "function_length": "Function Length",
    "comment_ratio": "Comment Ratio",
    "error_handling": "Error Handling",
    "naming_convention": "Naming Convention",
    "code_duplication": "Code Duplication",
    "structure_analysis": "Code Structure",
}

_METRIC_COMMENTS: Dict[str, tuple] = {
    "cyclomatic_complexity": (
        "Clear control flow",
        "Winding logic in places",
        "Functions read like labyrinths",
    ),
    "function_length": (
        "Functions are a reasonable size",
        "Some functions run long",
        "Many functions are far too long",
    ),
    "comment_ratio": (
        "Well commented",
        "Sparse comments",
        "Almost no comments",
    ),
    "error_handling": (
        "Failures look handled",
        "Error handling exists but is thin",
        "Errors are mostly ignored",
    ),
    "naming_convention": (
        "Clear naming",
        "Some names need guesswork",
        "Names like x, tmp and foo everywhere",
    ),
    "code_duplication": (
        "Little repetition",
        "Some repetition, consider extracting helpers",
        "Copy-paste all over the place",
    ),
    "structure_analysis": (
        "Flat, easy to follow structure",
        "Nesting is getting deep",
        "Deeply nested, hard to read",
    ),
}


class QualityLevel(NamedTuple):
    key: str
    label: str
    description: str


# (upper bound on score*100, level), checked in order
_LEVELS = (
    (5.0, QualityLevel("clean", "Fresh as spring breeze", "A joy to read.")),
    (15.0, QualityLevel("mild", "A whiff of trouble", "Mostly fine, a few rough edges.")),
    (25.0, QualityLevel("moderate", "Slightly stinky", "Open a window and keep going.")),
    (40.0, QualityLevel("bad", "Code reeks", "Approach with caution.")),
    (55.0, QualityLevel("terrible", "Medium legacy mess", "Obvious smells in many places.")),
    (65.0, QualityLevel("disaster", "Hidden toxic tumor", "Changes here are risky.")),
    (75.0, QualityLevel("severe", "Severe legacy mess", "Most of it needs rework.")),
    (85.0, QualityLevel("very_bad", "Code graveyard", "Nobody touches this willingly.")),
    (95.0, QualityLevel("extreme", "Nuclear disaster zone", "Rewrite territory.")),
    (100.0, QualityLevel("worst", "Generational legacy mess", "Handed down, never fixed.")),
)
_ULTIMATE = QualityLevel("ultimate", "Ultimate King of Mess", "Every metric maxed out.")


def quality_level(score: float) -> QualityLevel:
    """Map a [0, 1] badness score to its quality level."""
    adjusted = score * 100
    for bound, level in _LEVELS:
        if adjusted < bound:
            return level
    return _ULTIMATE


def advice(score: float) -> str:
    """One-line overall verdict: good below 0.3, moderate below 0.6, else bad."""
    if score < 0.3:
        return "Keep going, this codebase is in good shape."
    if score < 0.6:
        return "Needs some tough love: refactor the worst files first."
    return "Serious cleanup required before adding anything new."


def advice_level(score: float) -> str:
    if score < 0.3:
        return "good"
    if score < 0.6:
        return "moderate"
    return "bad"


def metric_label(name: str) -> str:
    return METRIC_LABELS.get(name, name.replace("_", " ").title())


def metric_comment(name: str, score: float) -> str:
    """Short verdict for one metric: good below 20, medium below 60, else bad."""
    comments = _METRIC_COMMENTS.get(name)
    if comments is None:
        return ""
    percent = score * 100
    if percent < 20:
        return comments[0]
    if percent < 60:
        return comments[1]
    return comments[2]


def status_symbol(score: float) -> str:
    percent = score * 100
    for bound, symbol in ((20, "✓✓"), (35, "✓"), (50, "○"), (60, "•"), (70, "⚠"), (80, "!"), (90, "!!")):
        if percent < bound:
            return symbol
    return "✗"


def score_style(score: float) -> str:
    """Rich style for a [0, 1] score."""
    for bound, style in (
        (0.2, "bold green"),
        (0.35, "green"),
        (0.5, "cyan"),
        (0.6, "blue"),
        (0.7, "bright_yellow"),
        (0.8, "yellow"),
        (0.9, "bright_red"),
    ):
        if score < bound:
            return style
    return "red"


def shorten_path(path: str) -> str:
    """Keep the last three components of deep paths."""
    parts = path.replace("\\", "/").split("/")
    if len(parts) <= 4:
        return path
    return "./" + "/".join(parts[-3:])


def _num(value) -> str:
    if isinstance(value, float) and not value.is_integer():
        return f"{value:.2f}"
    return str(int(value)) if value is not None else "?"


def _pct(value) -> str:
    return f"{value * 100:.0f}%" if value is not None else "?"


def describe_issue(issue: Issue) -> str:
    """English sentence for a structured issue."""
    kind = issue.kind
    subject = issue.subject
    observed = _num(issue.observed_value)
    limit = _num(issue.threshold)

    if kind == IssueKind.COMPLEXITY_VERY_HIGH:
        return f"Function '{subject}' has very high cyclomatic complexity ({observed}, limit {limit})"
    if kind == IssueKind.COMPLEXITY_HIGH:
        return f"Function '{subject}' has high cyclomatic complexity ({observed}, limit {limit})"
    if kind == IssueKind.LENGTH_EXTREME:
        return f"Function '{subject}' is extremely long ({observed} lines, over {limit})"
    if kind == IssueKind.LENGTH_VERY_LONG:
        return f"Function '{subject}' is very long ({observed} lines, over {limit})"
    if kind == IssueKind.LENGTH_LONG:
        return f"Function '{subject}' is long ({observed} lines, over {limit})"
    if kind == IssueKind.FUNCTION_COMPLEXITY_SEVERE:
        return f"Function '{subject}' is severely complex ({observed}, limit {limit})"
    if kind == IssueKind.FUNCTION_COMPLEXITY_HIGH:
        return f"Function '{subject}' is quite complex ({observed}, limit {limit})"
    if kind == IssueKind.PARAMETERS_EXCESSIVE:
        return f"Function '{subject}' takes far too many parameters ({observed}, limit {limit})"
    if kind == IssueKind.PARAMETERS_MANY:
        return f"Function '{subject}' takes many parameters ({observed}, limit {limit})"
    if kind == IssueKind.COMMENT_RATIO_VERY_LOW:
        return f"Very few comments ({_pct(issue.observed_value)} of lines, below {_pct(issue.threshold)})"
    if kind == IssueKind.COMMENT_RATIO_LOW:
        return f"Few comments ({_pct(issue.observed_value)} of lines, below {_pct(issue.threshold)})"
    if kind == IssueKind.ERROR_HANDLING_MISSING:
        return f"Function '{subject}' may fail but shows no error handling"
    if kind == IssueKind.ERROR_HANDLING_WEAK:
        return f"Function '{subject}' handles errors poorly"
    if kind == IssueKind.BAD_NAME:
        return f"Function name '{subject}' is not meaningful"
    if kind == IssueKind.DUPLICATE_HIGHLY_SIMILAR:
        return f"Highly similar functions ({_pct(issue.observed_value)} similar): {subject}"
    if kind == IssueKind.DUPLICATE_SIMILAR:
        return f"Similar function structure: {subject}"
    if kind == IssueKind.DUPLICATE_NAMING_PATTERN:
        return f"Repeated naming pattern '{subject}*': {observed} variants of the same function"
    if kind == IssueKind.DUPLICATE_PARAMETER_SIGNATURE:
        return f"{observed} functions share the same parameter count and complexity"
    if kind == IssueKind.NESTING_VERY_DEEP:
        return f"Function '{subject}' is nested very deeply (about {observed} levels)"
    if kind == IssueKind.NESTING_DEEP:
        return f"Function '{subject}' is nested deeply (about {observed} levels)"
    return f"{kind.value}: {subject}"
