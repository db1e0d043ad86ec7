"""CSS / SCSS / LESS extractor: style rules as pseudo-units."""

from __future__ import annotations

from typing import Sequence

from ..languages import LanguageTag
from ..models import FunctionUnit
from .base import BaseExtractor
from .comments import count_delimited_comments

MAX_RULE_NAME = 50

_SELECTOR_WEIGHTS = {" ": 1, ">": 1, "+": 1, "~": 1, ".": 1, "#": 2, "[": 1, ":": 1, ",": 1}
_HEAVY_PROPERTIES = (
    "transform",
    "animation",
    "transition",
    "background",
    "border",
    "box-shadow",
    "text-shadow",
    "filter",
)


def selector_complexity(selector: str) -> int:
    """Combinators, classes, attributes and pseudo-classes; ids weigh double."""
    return sum(selector.count(ch) * weight for ch, weight in _SELECTOR_WEIGHTS.items())


def properties_complexity(body: str) -> int:
    complexity = body.count(":")
    complexity += sum(body.count(prop) * 2 for prop in _HEAVY_PROPERTIES)
    complexity += body.count("calc(") * 2
    complexity += body.count("@media") * 3
    complexity += body.count("{")
    return complexity


def rule_name(selector: str) -> str:
    cleaned = selector.strip().replace("\n", " ").replace("\r", "")
    if not cleaned:
        return "css_rule"
    if len(cleaned) > MAX_RULE_NAME:
        return cleaned[: MAX_RULE_NAME - 3] + "..."
    return cleaned


class CSSExtractor(BaseExtractor):
    """Each balanced ``{ }`` block at the top level is one rule.

    A rule opens on a line containing ``{``, or on a selector line whose
    following line opens the block. Nested blocks (``@media``, SCSS nesting)
    stay inside their outer rule and add to its complexity.
    """

    language = LanguageTag.CSS

    def find_units(self, lines: Sequence[str]) -> list[FunctionUnit]:
        units: list[FunctionUnit] = []
        in_rule = False
        opened = False
        depth = 0
        start = 0
        selector = ""
        body: list[str] = []

        for i, line in enumerate(lines):
            trimmed = line.strip()
            if trimmed.startswith("/*") or not trimmed:
                continue

            if not in_rule and self._opens_rule(lines, i, trimmed):
                in_rule = True
                opened = False
                depth = 0
                start = i
                body = []
                selector = trimmed.split("{", 1)[0].strip() if "{" in trimmed else trimmed

            if not in_rule:
                continue

            body.append(line)
            opens = line.count("{")
            if opens:
                opened = True
            depth += opens - line.count("}")

            if opened and depth <= 0:
                in_rule = False
                complexity = 1 + selector_complexity(selector) + properties_complexity("\n".join(body))
                unit = self.make_unit(rule_name(selector), start, i, complexity)
                if unit is not None:
                    units.append(unit)

        return units

    def count_comment_lines(self, lines: Sequence[str]) -> int:
        return count_delimited_comments(lines, "/*", "*/")

    @staticmethod
    def _opens_rule(lines: Sequence[str], i: int, trimmed: str) -> bool:
        if "{" in trimmed:
            return True
        return ":" in trimmed and i + 1 < len(lines) and "{" in lines[i + 1]
