"""C# extractor"""

import re
from typing import Sequence

from ..languages import LanguageTag
from .base import SignatureExtractor, find_brace_end, find_statement_end


class CSharpExtractor(SignatureExtractor):
    """Methods with block bodies or ``=>`` expression bodies."""

    language = LanguageTag.CSHARP
    signature = re.compile(
        r"^\s*(?:(?:public|private|protected|internal|static|virtual|override|abstract|sealed|async)\s+)*"
        r"([a-zA-Z_][a-zA-Z0-9_<>\[\]]*(?:\?)?)\s+([a-zA-Z_][a-zA-Z0-9_]*)\s*\(([^)]*)\)\s*(?:\{|=>)"
    )
    name_group = 2
    params_group = 3
    complexity_tokens = (
        " if ",
        " else ",
        " for ",
        " foreach ",
        " while ",
        " do ",
        " switch ",
        " case ",
        " catch ",
        " && ",
        " || ",
        " ?? ",
        " ? ",
    )

    def find_end(self, lines: Sequence[str], start: int) -> int:
        if "=>" in lines[start]:
            return find_statement_end(lines, start)
        return find_brace_end(lines, start)
