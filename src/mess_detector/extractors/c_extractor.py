"""C / C++ extractor"""

import re
from typing import Sequence

from ..languages import LanguageTag
from .base import SignatureExtractor, find_brace_end_after_open


class CExtractor(SignatureExtractor):
    """Functions whose signature line ends with the opening brace.

    Shared by C and C++; the dispatcher passes the concrete tag.
    """

    language = LanguageTag.C
    # Anchored: the return type starts the line, so each line is tried from one position
    signature = re.compile(r"^\s*([\w\*]+\s+)+([a-zA-Z_][a-zA-Z0-9_]*)\s*\(([^;]*)\)\s*\{")
    name_group = 2
    params_group = 3
    void_means_empty = True
    complexity_tokens = (
        " if ",
        " else ",
        " for ",
        " while ",
        " do ",
        " switch ",
        " case ",
        " && ",
        " || ",
        " ? ",
    )

    def is_candidate(self, line: str) -> bool:
        # K&R style only: "int main(void) {"; a bare "{" line is a body, not a signature
        trimmed = line.strip()
        if not trimmed.endswith("{") or trimmed.startswith("{"):
            return False
        return "(" in trimmed and ")" in trimmed

    def find_end(self, lines: Sequence[str], start: int) -> int:
        return find_brace_end_after_open(lines, start)
