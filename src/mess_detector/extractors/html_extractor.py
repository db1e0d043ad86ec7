"""HTML extractor: embedded blocks and overall markup density as pseudo-units."""

from __future__ import annotations

from typing import Callable, Sequence

from ..languages import LanguageTag
from ..models import FunctionUnit
from .base import BaseExtractor, count_tokens
from .comments import count_delimited_comments

# Pages with more structural tags than this get a whole-file unit
STRUCTURE_THRESHOLD = 50

_SCRIPT_TOKENS = (" if ", " for ", " while ", " switch ", " case ", " && ", " || ", " ? ")
_STYLE_TOKENS = (" ", ">", "+", "~", ".", "#", "[", ":")
_FORM_CONTROLS = ("<input", "<select", "<textarea", "<button")
_STRUCTURE_TAGS = ("<div", "<span", "<table", "<ul", "<ol")


class HTMLExtractor(BaseExtractor):
    """Four independent passes:

    * ``script_block_N`` for each multi-line ``<script>`` element
    * ``style_block_N`` for each multi-line ``<style>`` element
    * ``form_block_N`` for each ``<form>`` element, weighted by its controls
    * ``html_structure``, spanning the whole file, when the page as a whole
      is over-structured even though no single block dominates
    """

    language = LanguageTag.HTML

    def find_units(self, lines: Sequence[str]) -> list[FunctionUnit]:
        units: list[FunctionUnit] = []
        units.extend(self._tag_blocks(lines, "script", _script_complexity))
        units.extend(self._tag_blocks(lines, "style", _style_complexity))
        units.extend(self._form_blocks(lines))
        units.extend(self._structure(lines))
        return units

    def count_comment_lines(self, lines: Sequence[str]) -> int:
        return count_delimited_comments(lines, "<!--", "-->")

    def _tag_blocks(
        self, lines: Sequence[str], tag: str, complexity: Callable[[Sequence[str]], int]
    ) -> list[FunctionUnit]:
        """Elements opened on one line and closed on a later one.

        Elements opened and closed on the same line (inline scripts, external
        ``<script src=...></script>``) are not units.
        """
        opener, closer = f"<{tag}", f"</{tag}>"
        blocks: list[FunctionUnit] = []
        start = None

        for i, line in enumerate(lines):
            if opener in line and closer not in line:
                start = i
            elif start is not None and closer in line:
                unit = self.make_unit(
                    f"{tag}_block_{len(blocks) + 1}", start, i, complexity(lines[start : i + 1])
                )
                if unit is not None:
                    blocks.append(unit)
                start = None

        return blocks

    def _form_blocks(self, lines: Sequence[str]) -> list[FunctionUnit]:
        blocks: list[FunctionUnit] = []
        start = None
        complexity = 1

        for i, line in enumerate(lines):
            if "<form" in line:
                start = i
                complexity = 1
            elif start is not None:
                complexity += sum(line.count(control) for control in _FORM_CONTROLS)
                if "</form>" in line:
                    unit = self.make_unit(f"form_block_{len(blocks) + 1}", start, i, complexity)
                    if unit is not None:
                        blocks.append(unit)
                    start = None

        return blocks

    def _structure(self, lines: Sequence[str]) -> list[FunctionUnit]:
        total = 1 + count_tokens(lines, _STRUCTURE_TAGS)
        if total <= STRUCTURE_THRESHOLD:
            return []
        unit = self.make_unit("html_structure", 0, len(lines) - 1, total // 10)
        return [unit] if unit is not None else []


def _script_complexity(block: Sequence[str]) -> int:
    return 1 + count_tokens(block, _SCRIPT_TOKENS)


def _style_complexity(block: Sequence[str]) -> int:
    return 1 + count_tokens(block, _STYLE_TOKENS)
