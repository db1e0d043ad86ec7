"""PHP extractor"""

from __future__ import annotations

import re
from typing import Optional, Sequence

from ..languages import LanguageTag
from ..models import FunctionUnit
from .base import BaseExtractor, count_parameters, count_tokens
from .comments import count_c_style_comments

_FUNCTION = re.compile(
    r"^\s*(public|private|protected)?\s*(static)?\s*function\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\(([^)]*)\)"
)
_METHOD = re.compile(
    r"^\s*(public|private|protected)\s+(static\s+)?(function\s+)?([a-zA-Z_][a-zA-Z0-9_]*)\s*\(([^)]*)\)"
)

_KEYWORDS = (
    " if ",
    " else ",
    " elseif ",
    " for ",
    " foreach ",
    " while ",
    " do ",
    " switch ",
    " case ",
    " catch ",
    " try ",
)
_LOGICAL = (" && ", " || ", " and ", " or ")
_SHORTHANDS = ("??", "?:", " ? ")


class PHPExtractor(BaseExtractor):
    """Functions and class methods.

    Abstract and interface declarations (``;`` on the signature line before
    any body opens) are skipped. Scanning resumes at the end of each unit,
    so closures inside a method are not reported separately.
    """

    language = LanguageTag.PHP

    def find_units(self, lines: Sequence[str]) -> list[FunctionUnit]:
        units: list[FunctionUnit] = []
        i = 0
        while i < len(lines):
            unit, end = self._try_unit(lines, i)
            if unit is None:
                i += 1
                continue
            units.append(unit)
            # Resume on the closing line; always move forward
            i = max(end, i + 1)
        return units

    def count_comment_lines(self, lines: Sequence[str]) -> int:
        return count_c_style_comments(lines, hash_comments=True)

    def _try_unit(self, lines: Sequence[str], start: int) -> tuple[Optional[FunctionUnit], int]:
        line = lines[start]
        match = _FUNCTION.search(line)
        if match is not None:
            name, params = match.group(3), match.group(4)
        else:
            match = _METHOD.search(line)
            if match is None:
                return None, start
            name, params = match.group(4), match.group(5)

        end = self._find_end(lines, start)
        if end is None:
            return None, start

        unit = self.make_unit(
            name, start, end, self._complexity(lines[start : end + 1]), count_parameters(params)
        )
        return unit, end

    @staticmethod
    def _find_end(lines: Sequence[str], start: int) -> Optional[int]:
        """Line closing the body, or None for a bodiless declaration."""
        depth = 0
        found_first = False
        for i in range(start, len(lines)):
            opens = lines[i].count("{")
            depth += opens
            if opens:
                found_first = True
            depth -= lines[i].count("}")

            if found_first and depth == 0:
                return i
            if i == start and ";" in lines[i]:
                return None
        return len(lines) - 1 if found_first else None

    @staticmethod
    def _complexity(body: Sequence[str]) -> int:
        return (
            1
            + count_tokens(body, _KEYWORDS)
            + count_tokens(body, _LOGICAL)
            + count_tokens(body, _SHORTHANDS)
        )
