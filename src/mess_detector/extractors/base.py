"""Base extractor and the boundary/complexity helpers shared by all languages.

Extractors are line-oriented heuristics, not parsers. They never raise on
malformed source: unbalanced braces run a unit to end of file, and a
signature that cannot be closed is simply dropped.

Line indexes inside this package are 0-based; FunctionUnit lines are 1-based.
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..languages import LanguageTag
from ..logging_config import get_logger
from ..models import FunctionUnit, UnitModel
from .comments import count_c_style_comments

logger = get_logger(__name__)


# ── Boundary detection ─────────────────────────────────────────────


def find_brace_end(lines: Sequence[str], start: int) -> int:
    """End of a brace-delimited unit whose first ``{`` may come later.

    Depth tracking starts at the first ``{`` at or after ``start``; the unit
    ends on the line where depth returns to zero. Without a balancing brace
    the unit runs to the last line.
    """
    depth = 0
    found_first = False
    for i in range(start, len(lines)):
        for ch in lines[i]:
            if ch == "{":
                depth += 1
                found_first = True
            elif ch == "}":
                depth -= 1
                if found_first and depth == 0:
                    return i
    return len(lines) - 1


def find_brace_end_after_open(lines: Sequence[str], start: int) -> int:
    """End of a unit whose signature line already ends with the opening ``{``.

    Counting begins on the line after the signature with depth 1.
    """
    depth = 1
    for i in range(start + 1, len(lines)):
        for ch in lines[i]:
            if ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return i
    return len(lines) - 1


def indent_width(line: str) -> int:
    """Leading indentation, spaces count 1 and tabs count 4."""
    width = 0
    for ch in line:
        if ch == " ":
            width += 1
        elif ch == "\t":
            width += 4
        else:
            break
    return width


def find_indent_end(lines: Sequence[str], start: int) -> int:
    """End of an indentation-delimited unit.

    The unit ends on the line before the first non-blank, non-comment line
    indented no deeper than the line at ``start``.
    """
    if start >= len(lines):
        return len(lines) - 1

    base = indent_width(lines[start])
    for i in range(start + 1, len(lines)):
        stripped = lines[i].strip()
        if not stripped or stripped.startswith("#"):
            continue
        if indent_width(lines[i]) <= base:
            return i - 1
    return len(lines) - 1


def find_statement_end(lines: Sequence[str], start: int, terminator: str = ";") -> int:
    """End of an expression-bodied member: first line holding ``terminator``."""
    for i in range(start, len(lines)):
        if terminator in lines[i]:
            return i
    return start


# ── Complexity and parameters ──────────────────────────────────────


def count_tokens(lines: Sequence[str], tokens: Sequence[str]) -> int:
    """Sum of non-overlapping substring occurrences of every token on every line.

    Keyword tokens are usually padded with spaces (``" if "``). This is a
    plain substring count, so keywords inside string literals count too.
    """
    return sum(line.count(token) for line in lines for token in tokens)


def token_complexity(lines: Sequence[str], tokens: Sequence[str]) -> int:
    return 1 + count_tokens(lines, tokens)


def count_parameters(params: str, void_means_empty: bool = False) -> int:
    """Number of comma-separated entries in a parameter list."""
    params = params.strip()
    if not params or (void_means_empty and params == "void"):
        return 0
    return len(params.split(","))


# ── Extractor base classes ─────────────────────────────────────────


class BaseExtractor(ABC):
    """Turns the text of one file into a UnitModel."""

    language: LanguageTag = LanguageTag.UNSUPPORTED

    def __init__(self, language: Optional[LanguageTag] = None) -> None:
        if language is not None:
            self.language = language

    def extract(self, content: str, path: str = "") -> UnitModel:
        """Extract units, comment count and line count from file content.

        Args:
            content: Decoded file text
            path: File path, used for logging only

        Returns:
            UnitModel (possibly with zero units)
        """
        lines = content.splitlines()
        functions = tuple(self.find_units(lines))
        comment_lines = self.count_comment_lines(lines)

        logger.debug(
            f"{type(self).__name__}: {len(functions)} units, "
            f"{comment_lines}/{len(lines)} comment lines in {path or '<memory>'}"
        )
        return UnitModel(
            functions=functions,
            comment_lines=comment_lines,
            total_lines=len(lines),
            language=self.language,
        )

    @abstractmethod
    def find_units(self, lines: Sequence[str]) -> list[FunctionUnit]:
        """Detect functions or pseudo-units in the given lines."""

    @abstractmethod
    def count_comment_lines(self, lines: Sequence[str]) -> int:
        """Count the physical lines that are comments."""

    @staticmethod
    def make_unit(
        name: str, start: int, end: int, complexity: int, parameters: int = 0
    ) -> Optional[FunctionUnit]:
        """Build a unit from 0-based line indexes, or None if the span is inverted."""
        if end < start or start < 0:
            return None
        return FunctionUnit(
            name=name,
            start_line=start + 1,
            end_line=end + 1,
            complexity=max(complexity, 1),
            parameters=parameters,
        )


class SignatureExtractor(BaseExtractor):
    """Line-by-line signature matching for C-like languages.

    Subclasses set the signature regex, the capture groups holding the name
    and the parameter list, and the complexity tokens. Every line matching
    ``signature`` opens a unit; its end comes from ``find_end``.
    """

    signature: re.Pattern[str]
    name_group: int = 1
    params_group: Optional[int] = 2
    complexity_tokens: tuple[str, ...] = ()
    void_means_empty: bool = False

    def find_units(self, lines: Sequence[str]) -> list[FunctionUnit]:
        units: list[FunctionUnit] = []
        for i, line in enumerate(lines):
            if not self.is_candidate(line):
                continue
            match = self.signature.search(line)
            if match is None:
                continue

            end = self.find_end(lines, i)
            unit = self.make_unit(
                match.group(self.name_group),
                i,
                end,
                self.complexity(lines[i : end + 1]),
                self.parameters(match),
            )
            if unit is not None:
                units.append(unit)
        return units

    def is_candidate(self, line: str) -> bool:
        return True

    def find_end(self, lines: Sequence[str], start: int) -> int:
        return find_brace_end(lines, start)

    def parameters(self, match: re.Match[str]) -> int:
        if self.params_group is None:
            return 0
        return count_parameters(match.group(self.params_group) or "", self.void_means_empty)

    def complexity(self, body: Sequence[str]) -> int:
        return token_complexity(body, self.complexity_tokens)

    def count_comment_lines(self, lines: Sequence[str]) -> int:
        return count_c_style_comments(lines)
