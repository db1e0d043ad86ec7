"""Python extractor"""

import re
from typing import Sequence

from ..languages import LanguageTag
from .base import SignatureExtractor, find_indent_end
from .comments import count_python_comments


class PythonExtractor(SignatureExtractor):
    """``def`` blocks delimited by indentation.

    Nested functions and methods are reported as units of their own, and
    their lines also count toward the enclosing function.
    """

    language = LanguageTag.PYTHON
    signature = re.compile(r"^\s*def\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\(([^)]*)\)")
    complexity_tokens = (
        " if ",
        " elif ",
        " else:",
        " for ",
        " while ",
        " except ",
        " finally:",
        " and ",
        " or ",
    )

    def find_end(self, lines: Sequence[str], start: int) -> int:
        return find_indent_end(lines, start)

    def count_comment_lines(self, lines: Sequence[str]) -> int:
        return count_python_comments(lines)
