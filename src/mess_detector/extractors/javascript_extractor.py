"""JavaScript / TypeScript extractor"""

from __future__ import annotations

import re
from typing import Sequence

from ..languages import LanguageTag
from ..models import FunctionUnit
from .base import BaseExtractor, count_tokens, find_brace_end
from .comments import count_c_style_comments

_FUNCTION_DECLARATION = re.compile(r"function\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*\(")
_FUNCTION_EXPRESSIONS = (
    re.compile(r"(?:const|let|var)\s+([a-zA-Z_$][a-zA-Z0-9_$]*)\s*=\s*\([^)]*\)\s*=>"),
    re.compile(r"([a-zA-Z_$][a-zA-Z0-9_$]*)\s*=\s*function\s*\("),
)
_CLASS_METHOD = re.compile(r"^\s*([a-zA-Z_$][a-zA-Z0-9_$]*)\s*\([^)]*\)\s*\{")

_KEYWORDS = (" if ", " else ", " for ", " while ", " switch ", " case ", " catch ")
# Names the method pattern also matches that are never methods
_NOT_METHODS = frozenset({"constructor", "if", "for", "while", "switch", "catch", "function"})
_OPERATORS = ("&&", "||", "?")


class JavaScriptExtractor(BaseExtractor):
    """Function declarations, function expressions/arrows, and class methods.

    The three detections run independently and are merged by start line.
    Parameter lists are not counted (always 0): destructuring and defaults
    make a comma count meaningless here.
    """

    language = LanguageTag.JAVASCRIPT

    def find_units(self, lines: Sequence[str]) -> list[FunctionUnit]:
        units: list[FunctionUnit] = []
        units.extend(self._match_each_line(lines, (_FUNCTION_DECLARATION,)))
        units.extend(self._match_each_line(lines, _FUNCTION_EXPRESSIONS))
        units.extend(self._class_methods(lines))
        units.sort(key=lambda u: u.start_line)
        return units

    def count_comment_lines(self, lines: Sequence[str]) -> int:
        return count_c_style_comments(lines)

    def _match_each_line(
        self, lines: Sequence[str], patterns: Sequence[re.Pattern[str]]
    ) -> list[FunctionUnit]:
        units: list[FunctionUnit] = []
        for pattern in patterns:
            for i, line in enumerate(lines):
                match = pattern.search(line)
                if match is not None:
                    self._append(units, lines, match.group(1), i)
        return units

    def _class_methods(self, lines: Sequence[str]) -> list[FunctionUnit]:
        units: list[FunctionUnit] = []
        in_class = False
        for i, line in enumerate(lines):
            if "class " in line and "{" in line:
                in_class = True
                continue
            # A bare closing brace ends the class body
            if in_class and line.strip() == "}":
                in_class = False
                continue
            if not in_class:
                continue

            match = _CLASS_METHOD.match(line)
            if match is not None and match.group(1) not in _NOT_METHODS:
                self._append(units, lines, match.group(1), i)
        return units

    def _append(self, units: list[FunctionUnit], lines: Sequence[str], name: str, start: int) -> None:
        end = find_brace_end(lines, start)
        unit = self.make_unit(name, start, end, self._complexity(lines[start : end + 1]))
        if unit is not None:
            units.append(unit)

    @staticmethod
    def _complexity(body: Sequence[str]) -> int:
        return 1 + count_tokens(body, _KEYWORDS) + count_tokens(body, _OPERATORS)
