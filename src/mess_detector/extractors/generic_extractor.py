"""Generic fallback extractor for languages without a dedicated extractor.

Picks a permissive signature pattern by language family and reuses the
brace or indentation end-finding. Never fails: an unrecognised file simply
yields no units.
"""

from __future__ import annotations

import re
from typing import Sequence

from ..languages import LanguageTag
from ..models import FunctionUnit
from .base import BaseExtractor, count_tokens, find_brace_end, find_indent_end
from .comments import count_c_style_comments, count_python_comments

_PATTERNS: dict[LanguageTag, re.Pattern[str]] = {
    LanguageTag.JAVASCRIPT: re.compile(
        r"(?:function\s+([a-zA-Z_$][a-zA-Z0-9_$]*)"
        r"|([a-zA-Z_$][a-zA-Z0-9_$]*)\s*=\s*function"
        r"|([a-zA-Z_$][a-zA-Z0-9_$]*)\s*:\s*function"
        r"|(?:const|let|var)\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*=\s*\([^)]*\)\s*=>)"
    ),
    LanguageTag.PYTHON: re.compile(r"^\s*def\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\(([^)]*)\)"),
    LanguageTag.JAVA: re.compile(
        r"(?:public|private|protected|static|\s)+[\w<>\[\]]+\s+(\w+)\s*\(([^)]*)\)\s*(?:\{|throws)"
    ),
    LanguageTag.GO: re.compile(r"func\s+(?:\([^)]*\)\s+)?([a-zA-Z_][a-zA-Z0-9_]*)\s*\(([^)]*)\)"),
}
_PATTERNS[LanguageTag.TYPESCRIPT] = _PATTERNS[LanguageTag.JAVASCRIPT]

_DEFAULT_PATTERN = re.compile(
    r"(?:function|def|void|int|bool|string|double|float)\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\("
)

# Raw substrings without padding, so "elif" also counts as an "if"
_TOKENS = (
    "if",
    "else",
    "for",
    "while",
    "switch",
    "case",
    "catch",
    "match",
    "loop",
    "elif",
    "except",
    "finally",
    "&&",
    "||",
    "?",
)


class GenericExtractor(BaseExtractor):
    """Fallback for ``LanguageTag.UNSUPPORTED`` (or any tag passed explicitly)."""

    language = LanguageTag.UNSUPPORTED

    def find_units(self, lines: Sequence[str]) -> list[FunctionUnit]:
        pattern = _PATTERNS.get(self.language, _DEFAULT_PATTERN)
        units: list[FunctionUnit] = []

        for i, line in enumerate(lines):
            match = pattern.search(line)
            if match is None:
                continue

            name = next((g for g in match.groups() if g), "anonymous")
            end = self._find_end(lines, i)
            unit = self.make_unit(name, i, end, 1 + count_tokens(lines[i : end + 1], _TOKENS))
            if unit is not None:
                units.append(unit)

        return units

    def count_comment_lines(self, lines: Sequence[str]) -> int:
        if self.language is LanguageTag.PYTHON:
            return count_python_comments(lines)
        return count_c_style_comments(lines)

    def _find_end(self, lines: Sequence[str], start: int) -> int:
        if self.language is LanguageTag.PYTHON:
            return find_indent_end(lines, start)
        return find_brace_end(lines, start)
